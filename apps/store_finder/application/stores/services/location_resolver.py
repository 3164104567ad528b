"""Requester Location Resolver.

요청 메타데이터(엣지 플랫폼의 위치 헤더)에서 요청자 좌표를 추출합니다.
"""

from __future__ import annotations

import logging
from typing import Mapping

from store_finder.domain.value_objects import Coordinates

logger = logging.getLogger(__name__)

# 위치 메타데이터가 없을 때 사용하는 기본 좌표 (호치민시 1군)
DEFAULT_COORDINATES = Coordinates(latitude=10.7769, longitude=106.7009)

DEFAULT_LATITUDE_KEY = "cf-iplatitude"
DEFAULT_LONGITUDE_KEY = "cf-iplongitude"


class RequesterLocationResolver:
    """요청자 좌표 결정 서비스.

    메타데이터가 없거나 해석할 수 없으면 예외 없이 기본 좌표를 반환합니다.
    """

    def __init__(
        self,
        default: Coordinates = DEFAULT_COORDINATES,
        latitude_key: str = DEFAULT_LATITUDE_KEY,
        longitude_key: str = DEFAULT_LONGITUDE_KEY,
    ) -> None:
        self._default = default
        self._latitude_key = latitude_key
        self._longitude_key = longitude_key

    def resolve(self, metadata: Mapping[str, str] | None) -> Coordinates:
        """메타데이터에서 좌표를 읽습니다."""
        if not metadata:
            return self._default

        raw_lat = metadata.get(self._latitude_key)
        raw_lon = metadata.get(self._longitude_key)
        if raw_lat is None or raw_lon is None:
            return self._default

        try:
            return Coordinates.parse(raw_lat, raw_lon)
        except ValueError:
            logger.debug(
                "Invalid geolocation metadata, using default",
                extra={"latitude": raw_lat, "longitude": raw_lon},
            )
            return self._default
