"""Store Result Builder Service.

PointOfInterest 엔티티를 StoreResultDTO로 변환합니다.
Port 의존성이 없는 순수 로직입니다.
"""

from __future__ import annotations

from typing import Mapping

from store_finder.application.stores.dto import StoreResultDTO
from store_finder.domain.entities import PointOfInterest
from store_finder.domain.services import haversine_km
from store_finder.domain.value_objects import Coordinates


class StoreResultBuilder:
    """매장 결과 빌더 서비스."""

    UNKNOWN_STREET = "Street unknown"
    ADDRESS_SEPARATOR = ", "
    DISTANCE_DECIMALS = 2

    @classmethod
    def build(
        cls,
        poi: PointOfInterest,
        origin: Coordinates,
        fallback_name: str,
    ) -> StoreResultDTO | None:
        """POI를 StoreResultDTO로 변환합니다.

        좌표가 없는 POI는 None을 반환합니다.
        """
        coordinates = poi.coordinates()
        if coordinates is None:
            return None

        distance_km = round(haversine_km(origin, coordinates), cls.DISTANCE_DECIMALS)
        return StoreResultDTO(
            name=poi.name or fallback_name,
            distance_km=distance_km,
            address=cls.format_address(poi.tags),
            coordinates=coordinates,
        )

    @classmethod
    def format_address(cls, tags: Mapping[str, str]) -> str:
        """addr:* 태그로 표시용 주소를 만듭니다.

        "{housenumber} {street}", subdistrict, city, province 순서로
        비어 있지 않은 조각만 이어 붙이고, 없으면 addr:full, 그것도 없으면
        "Street unknown"을 반환합니다.
        """
        street_line = f"{cls._tag(tags, 'addr:housenumber')} {cls._tag(tags, 'addr:street')}"
        fragments = (
            street_line,
            cls._tag(tags, "addr:subdistrict"),
            cls._tag(tags, "addr:city"),
            cls._tag(tags, "addr:province"),
        )
        joined = cls.ADDRESS_SEPARATOR.join(f.strip() for f in fragments if f.strip())
        if joined:
            return joined

        full = cls._tag(tags, "addr:full").strip()
        return full or cls.UNKNOWN_STREET

    @staticmethod
    def _tag(tags: Mapping[str, str], key: str) -> str:
        value = tags.get(key)
        return value if isinstance(value, str) else ""
