"""Get Current Location Query.

요청자 좌표를 사람이 읽을 수 있는 주소로 변환합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from store_finder.application.common.exceptions import GeocodingUnavailableError
from store_finder.application.stores.dto import AddressLookupDTO, CurrentLocationDTO
from store_finder.domain.value_objects import Coordinates

if TYPE_CHECKING:
    from store_finder.application.stores.ports import GeocodingClientPort

logger = logging.getLogger(__name__)


class GetCurrentLocationQuery:
    """요청자 위치 조회 Query.

    역지오코딩 실패는 "Unknown Location"으로 대체되며 예외를 전파하지 않습니다.
    """

    def __init__(self, geocoding_client: "GeocodingClientPort") -> None:
        self._geocoding = geocoding_client

    async def execute(self, coordinates: Coordinates) -> CurrentLocationDTO:
        lookup = await self.reverse_geocode(coordinates)
        return CurrentLocationDTO(
            coordinates=coordinates,
            formatted_address=lookup.display_name,
        )

    async def reverse_geocode(self, coordinates: Coordinates) -> AddressLookupDTO:
        """좌표를 주소로 변환합니다. 실패 시 sentinel을 반환합니다."""
        try:
            return await self._geocoding.reverse_geocode(coordinates)
        except GeocodingUnavailableError as e:
            logger.warning(
                "Reverse geocoding failed",
                extra={
                    "upstream_error": True,
                    "lat": coordinates.latitude,
                    "lon": coordinates.longitude,
                    "error": e.reason,
                },
            )
            return AddressLookupDTO.unknown()
