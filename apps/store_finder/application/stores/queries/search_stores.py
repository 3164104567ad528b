"""Search Stores Query.

브랜드별 주변 편의점을 조회하는 Query(지휘자)입니다.
Port를 통해 Infrastructure와 통신하고, Service에 순수 로직을 위임합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from store_finder.application.common.exceptions import GeodataUnavailableError
from store_finder.application.stores.dto import StoreResponseDTO, StoreResultDTO
from store_finder.application.stores.services import (
    BrandClassifierService,
    StoreResultBuilder,
)
from store_finder.domain.entities import PointOfInterest
from store_finder.domain.enums import StoreBrand
from store_finder.domain.value_objects import Coordinates

if TYPE_CHECKING:
    from store_finder.application.stores.ports import GeodataClientPort

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_RADIUS_M = 5000


class SearchStoresQuery:
    """브랜드별 주변 편의점 조회 Query.

    Workflow:
        1. 반경 내 편의점 POI 조회 (Port)
        2. 브랜드/주소 필터링 (Service)
        3. 거리 계산 및 DTO 변환 (Service)
        4. 거리순 정렬
    """

    def __init__(
        self,
        geodata_client: "GeodataClientPort",
        radius_m: int = DEFAULT_SEARCH_RADIUS_M,
    ) -> None:
        self._geodata = geodata_client
        self._radius_m = radius_m

    @property
    def radius_label(self) -> str:
        """응답 메시지에 쓰는 반경 표기 (예: 5km)."""
        km = self._radius_m / 1000
        return f"{km:g}km"

    async def execute(self, center: Coordinates, brand: StoreBrand) -> StoreResponseDTO:
        """주변 매장을 조회합니다.

        Args:
            center: 요청자 좌표
            brand: 조회할 브랜드

        Returns:
            StoreResponseDTO (거리 오름차순)
        """
        display_name = brand.display_name
        logger.info(
            "Store search started",
            extra={
                "brand": brand.value,
                "lat": center.latitude,
                "lon": center.longitude,
                "radius_m": self._radius_m,
            },
        )

        candidates = await self._fetch_candidates(center)
        matched = [poi for poi in candidates if self._is_match(poi, brand)]

        results: list[StoreResultDTO] = []
        for poi in matched:
            result = StoreResultBuilder.build(poi, origin=center, fallback_name=display_name)
            if result is not None:
                results.append(result)

        if not results:
            logger.info(
                "No stores matched",
                extra={"brand": brand.value, "candidates_count": len(candidates)},
            )
            return StoreResponseDTO(
                brand=display_name,
                message=f"None found in {self.radius_label}",
            )

        # sorted()는 stable sort: 같은 거리는 입력 순서 유지
        ordered = tuple(sorted(results, key=lambda r: r.distance_km))

        logger.info(
            "Store search completed",
            extra={
                "brand": brand.value,
                "candidates_count": len(candidates),
                "results_count": len(ordered),
            },
        )
        return StoreResponseDTO(
            brand=display_name,
            message=f"Found {len(ordered)} stores within {self.radius_label}",
            stores=ordered,
        )

    async def _fetch_candidates(self, center: Coordinates) -> list[PointOfInterest]:
        try:
            return await self._geodata.fetch_convenience_stores(center, radius_m=self._radius_m)
        except GeodataUnavailableError as e:
            # 응답은 "결과 없음"과 동일하지만 로그에서는 장애로 구분
            logger.error(
                "Geodata fetch failed",
                extra={"upstream_error": True, "service": e.service, "error": e.reason},
            )
            return []

    @staticmethod
    def _is_match(poi: PointOfInterest, brand: StoreBrand) -> bool:
        return BrandClassifierService.is_brand(poi.name, brand) and poi.has_address()
