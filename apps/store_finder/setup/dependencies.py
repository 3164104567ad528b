"""Dependency Injection for FastAPI."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import Depends, Request

from store_finder.application.stores import (
    GetCurrentLocationQuery,
    RequesterLocationResolver,
    SearchStoresQuery,
)
from store_finder.application.stores.ports import GeocodingClientPort, GeodataClientPort
from store_finder.domain.value_objects import Coordinates
from store_finder.infrastructure.integrations.nominatim import NominatimHttpClient
from store_finder.infrastructure.integrations.overpass import OverpassHttpClient
from store_finder.setup.config import get_settings

logger = logging.getLogger(__name__)

_geodata_client: GeodataClientPort | None = None
_geocoding_client: GeocodingClientPort | None = None


def get_geodata_client() -> GeodataClientPort:
    """Overpass Client 싱글톤을 반환합니다."""
    global _geodata_client  # noqa: PLW0603
    if _geodata_client is None:
        settings = get_settings()
        _geodata_client = OverpassHttpClient(
            url=settings.overpass_url,
            timeout=settings.overpass_timeout,
            query_timeout=settings.overpass_query_timeout,
            user_agent=settings.user_agent,
        )
        logger.info("Overpass HTTP client created")
    return _geodata_client


def get_geocoding_client() -> GeocodingClientPort:
    """Nominatim Client 싱글톤을 반환합니다."""
    global _geocoding_client  # noqa: PLW0603
    if _geocoding_client is None:
        settings = get_settings()
        _geocoding_client = NominatimHttpClient(
            base_url=settings.nominatim_base_url,
            user_agent=settings.user_agent,
            timeout=settings.nominatim_timeout,
        )
        logger.info("Nominatim HTTP client created")
    return _geocoding_client


async def close_clients() -> None:
    """외부 HTTP 클라이언트를 정리합니다."""
    global _geodata_client, _geocoding_client  # noqa: PLW0603
    if _geodata_client is not None:
        await _geodata_client.close()
        _geodata_client = None
    if _geocoding_client is not None:
        await _geocoding_client.close()
        _geocoding_client = None


def get_location_resolver() -> RequesterLocationResolver:
    """RequesterLocationResolver를 주입합니다."""
    settings = get_settings()
    return RequesterLocationResolver(
        default=Coordinates(
            latitude=settings.default_latitude,
            longitude=settings.default_longitude,
        ),
        latitude_key=settings.latitude_header,
        longitude_key=settings.longitude_header,
    )


def get_requester_coordinates(
    request: Request,
    resolver: Annotated[RequesterLocationResolver, Depends(get_location_resolver)],
) -> Coordinates:
    """요청 헤더에서 요청자 좌표를 결정합니다."""
    return resolver.resolve(request.headers)


def get_search_stores_query(
    geodata: Annotated[GeodataClientPort, Depends(get_geodata_client)],
) -> SearchStoresQuery:
    """SearchStoresQuery를 주입합니다."""
    return SearchStoresQuery(geodata, radius_m=get_settings().search_radius_m)


def get_current_location_query(
    geocoding: Annotated[GeocodingClientPort, Depends(get_geocoding_client)],
) -> GetCurrentLocationQuery:
    """GetCurrentLocationQuery를 주입합니다."""
    return GetCurrentLocationQuery(geocoding)
