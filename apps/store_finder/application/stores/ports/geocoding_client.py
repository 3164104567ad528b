"""Geocoding Client Port."""

from __future__ import annotations

from abc import ABC, abstractmethod

from store_finder.application.stores.dto import AddressLookupDTO
from store_finder.domain.value_objects import Coordinates


class GeocodingClientPort(ABC):
    """역지오코딩 포트."""

    @abstractmethod
    async def reverse_geocode(self, coordinates: Coordinates) -> AddressLookupDTO:
        """좌표를 주소로 변환합니다.

        Raises:
            GeocodingUnavailableError: 업스트림 호출/파싱 실패 시
        """
        ...

    @abstractmethod
    async def close(self) -> None:
        """리소스 정리."""
        ...
