"""PointOfInterest Entity."""

from __future__ import annotations

from dataclasses import dataclass, field

from store_finder.domain.value_objects import Coordinates

ADDRESS_TAG_PREFIX = "addr:"


@dataclass(frozen=True)
class PointOfInterest:
    """지오데이터 서비스가 반환한 POI 엔티티.

    node는 직접 좌표(latitude/longitude)를, way/area는 center 좌표를 가집니다.
    외부 응답 단위로 생성되어 응답 변환 후 폐기됩니다.
    """

    osm_id: int
    osm_type: str = "node"
    latitude: float | None = None
    longitude: float | None = None
    center: Coordinates | None = None
    tags: dict[str, str] = field(default_factory=dict)

    @property
    def name(self) -> str | None:
        """name 태그 원문 (비어 있으면 None). 공백도 그대로 유지합니다."""
        value = self.tags.get("name")
        if isinstance(value, str) and value:
            return value
        return None

    def has_address(self) -> bool:
        """addr:* 태그가 하나라도 있는지 확인합니다."""
        return any(key.startswith(ADDRESS_TAG_PREFIX) for key in self.tags)

    def coordinates(self) -> Coordinates | None:
        """center 좌표를 우선하고, 없으면 직접 좌표를 반환합니다."""
        if self.center is not None:
            return self.center
        if self.latitude is None or self.longitude is None:
            return None
        return Coordinates(latitude=self.latitude, longitude=self.longitude)
