"""Overpass HTTP 클라이언트.

OpenStreetMap Overpass API의 HTTP 구현체.
- 쿼리: GET /api/interpreter?data={Overpass QL}
- node/way 모두 조회하며 way는 `out center`로 중심 좌표를 받습니다.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx

from store_finder.application.common.exceptions import GeodataUnavailableError
from store_finder.application.stores.ports import GeodataClientPort
from store_finder.domain.entities import PointOfInterest
from store_finder.domain.value_objects import Coordinates

logger = logging.getLogger(__name__)

DEFAULT_URL = "https://overpass-api.de/api/interpreter"
DEFAULT_TIMEOUT = 20.0
DEFAULT_QUERY_TIMEOUT = 15


def build_convenience_query(
    center: Coordinates,
    radius_m: int,
    query_timeout: int = DEFAULT_QUERY_TIMEOUT,
) -> str:
    """반경 내 shop=convenience node/way를 조회하는 Overpass QL을 만듭니다."""
    around = f"(around:{radius_m},{center.latitude},{center.longitude})"
    return (
        f"[out:json][timeout:{query_timeout}];\n"
        "(\n"
        f'  node["shop"="convenience"]{around};\n'
        f'  way["shop"="convenience"]{around};\n'
        ");\n"
        "out center;"
    )


class OverpassHttpClient(GeodataClientPort):
    """Overpass HTTP 클라이언트."""

    def __init__(
        self,
        url: str = DEFAULT_URL,
        timeout: float = DEFAULT_TIMEOUT,
        query_timeout: int = DEFAULT_QUERY_TIMEOUT,
        user_agent: str | None = None,
    ) -> None:
        self._url = url
        self._timeout = timeout
        self._query_timeout = query_timeout
        self._user_agent = user_agent
        self._client: httpx.AsyncClient | None = None
        self._lock = asyncio.Lock()

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            async with self._lock:
                if self._client is None:
                    headers = {"User-Agent": self._user_agent} if self._user_agent else None
                    self._client = httpx.AsyncClient(headers=headers, timeout=self._timeout)
        return self._client

    async def fetch_convenience_stores(
        self,
        center: Coordinates,
        radius_m: int = 5000,
    ) -> list[PointOfInterest]:
        """반경 내 편의점 POI를 조회합니다."""
        client = await self._get_client()
        query = build_convenience_query(center, radius_m, self._query_timeout)

        try:
            response = await client.get(self._url, params={"data": query})
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(
                "Overpass API HTTP error",
                extra={"status_code": e.response.status_code},
            )
            raise GeodataUnavailableError(f"HTTP {e.response.status_code}") from e
        except httpx.TimeoutException as e:
            logger.error("Overpass API timeout", extra={"timeout": self._timeout})
            raise GeodataUnavailableError("timeout") from e
        except httpx.HTTPError as e:
            logger.error("Overpass API request failed", extra={"error": str(e)})
            raise GeodataUnavailableError(str(e)) from e
        except ValueError as e:
            logger.error("Overpass API returned invalid JSON", extra={"error": str(e)})
            raise GeodataUnavailableError("invalid JSON response") from e

        if not isinstance(data, dict):
            raise GeodataUnavailableError("unexpected response shape")

        remark = data.get("remark")
        if remark:
            # 서버측 timeout 등은 200 + remark로 전달됨
            logger.warning("Overpass API remark", extra={"remark": remark})

        elements = data.get("elements") or []
        if not isinstance(elements, list):
            raise GeodataUnavailableError("unexpected elements shape")
        return self._parse_elements(elements)

    def _parse_elements(self, elements: list[Any]) -> list[PointOfInterest]:
        pois: list[PointOfInterest] = []
        for element in elements:
            if not isinstance(element, dict):
                continue
            poi = self._parse_element(element)
            if poi is not None:
                pois.append(poi)
        return pois

    @staticmethod
    def _parse_element(element: dict[str, Any]) -> PointOfInterest | None:
        try:
            osm_id = int(element.get("id") or 0)
        except (TypeError, ValueError):
            logger.debug("Skipping element with invalid id", extra={"id": element.get("id")})
            return None

        raw_tags = element.get("tags") or {}
        tags = {str(k): str(v) for k, v in raw_tags.items()} if isinstance(raw_tags, dict) else {}

        center: Coordinates | None = None
        raw_center = element.get("center")
        if isinstance(raw_center, dict):
            try:
                center = Coordinates.parse(raw_center.get("lat"), raw_center.get("lon"))
            except ValueError:
                center = None

        latitude: float | None = None
        longitude: float | None = None
        if center is None:
            try:
                point = Coordinates.parse(element.get("lat"), element.get("lon"))
            except ValueError:
                return None
            latitude, longitude = point.latitude, point.longitude

        return PointOfInterest(
            osm_id=osm_id,
            osm_type=str(element.get("type") or "node"),
            latitude=latitude,
            longitude=longitude,
            center=center,
            tags=tags,
        )

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None
