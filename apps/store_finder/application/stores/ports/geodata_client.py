"""Geodata Client Port.

편의점 POI 조회를 위한 포트 인터페이스.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from store_finder.domain.entities import PointOfInterest
from store_finder.domain.value_objects import Coordinates


class GeodataClientPort(ABC):
    """지오데이터 조회 포트.

    Infrastructure Layer에서 구현합니다.
    """

    @abstractmethod
    async def fetch_convenience_stores(
        self,
        center: Coordinates,
        radius_m: int = 5000,
    ) -> list[PointOfInterest]:
        """중심 좌표 반경 내 편의점 POI를 조회합니다.

        Args:
            center: 중심 좌표
            radius_m: 반경 (미터)

        Returns:
            PointOfInterest 목록 (업스트림이 반환한 순서)

        Raises:
            GeodataUnavailableError: 업스트림 호출/파싱 실패 시
        """
        ...

    @abstractmethod
    async def close(self) -> None:
        """리소스 정리."""
        ...
