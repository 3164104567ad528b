"""Nominatim HTTP 클라이언트.

OpenStreetMap Nominatim 역지오코딩 API의 HTTP 구현체.
- 역지오코딩: GET /reverse?format=json&lat=..&lon=..&zoom=18&addressdetails=1
- 사용 정책상 식별 가능한 User-Agent 헤더가 필수입니다.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx

from store_finder.application.common.exceptions import GeocodingUnavailableError
from store_finder.application.stores.dto import AddressLookupDTO
from store_finder.application.stores.ports import GeocodingClientPort
from store_finder.domain.value_objects import Coordinates

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://nominatim.openstreetmap.org"
DEFAULT_USER_AGENT = "StoreFinderAPI/1.0"
DEFAULT_TIMEOUT = 10.0
REVERSE_ZOOM = 18


class NominatimHttpClient(GeocodingClientPort):
    """Nominatim HTTP 클라이언트."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._user_agent = user_agent
        self._timeout = timeout
        self._client: httpx.AsyncClient | None = None
        self._lock = asyncio.Lock()

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            async with self._lock:
                if self._client is None:
                    self._client = httpx.AsyncClient(
                        base_url=self._base_url,
                        headers={"User-Agent": self._user_agent},
                        timeout=self._timeout,
                    )
        return self._client

    async def reverse_geocode(self, coordinates: Coordinates) -> AddressLookupDTO:
        """좌표를 주소로 변환합니다."""
        client = await self._get_client()

        params: dict[str, Any] = {
            "format": "json",
            "lat": str(coordinates.latitude),
            "lon": str(coordinates.longitude),
            "zoom": REVERSE_ZOOM,
            "addressdetails": 1,
        }

        try:
            response = await client.get("/reverse", params=params)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            raise GeocodingUnavailableError(f"HTTP {e.response.status_code}") from e
        except httpx.TimeoutException as e:
            raise GeocodingUnavailableError("timeout") from e
        except httpx.HTTPError as e:
            raise GeocodingUnavailableError(str(e) or type(e).__name__) from e
        except ValueError as e:
            raise GeocodingUnavailableError("invalid JSON response") from e

        return self._parse_response(data)

    @staticmethod
    def _parse_response(data: Any) -> AddressLookupDTO:
        if not isinstance(data, dict):
            raise GeocodingUnavailableError("unexpected response shape")
        if "error" in data:
            raise GeocodingUnavailableError(str(data["error"]))

        display_name = data.get("display_name")
        if not isinstance(display_name, str) or not display_name:
            raise GeocodingUnavailableError("missing display_name")

        address = data.get("address")
        return AddressLookupDTO(
            display_name=display_name,
            address_parts=dict(address) if isinstance(address, dict) else {},
        )

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None
