"""Test fixtures for store finder tests."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from store_finder.application.stores.dto import AddressLookupDTO
from store_finder.domain.entities import PointOfInterest
from store_finder.domain.value_objects import Coordinates


@pytest.fixture
def origin() -> Coordinates:
    """요청자 좌표 (기본 좌표와 동일)."""
    return Coordinates(latitude=10.7769, longitude=106.7009)


@pytest.fixture
def mock_geodata_client() -> AsyncMock:
    """GeodataClientPort mock."""
    client = AsyncMock()
    client.fetch_convenience_stores = AsyncMock(return_value=[])
    return client


@pytest.fixture
def mock_geocoding_client() -> AsyncMock:
    """GeocodingClientPort mock."""
    client = AsyncMock()
    client.reverse_geocode = AsyncMock(
        return_value=AddressLookupDTO(
            display_name="Nhà hát Thành phố, Công trường Lam Sơn, Quận 1, Hồ Chí Minh",
            address_parts={"city": "Hồ Chí Minh", "country": "Việt Nam"},
        )
    )
    return client


@pytest.fixture
def circle_k_poi() -> PointOfInterest:
    """위도 +0.01° 위치의 Circle K (addr:street만 있음)."""
    return PointOfInterest(
        osm_id=1001,
        osm_type="node",
        latitude=10.7869,
        longitude=106.7009,
        tags={
            "shop": "convenience",
            "name": "Circle K Thao Dien",
            "addr:street": "Nguyen Van Huong",
        },
    )


@pytest.fixture
def family_mart_way() -> PointOfInterest:
    """center 좌표를 가진 FamilyMart way."""
    return PointOfInterest(
        osm_id=2002,
        osm_type="way",
        center=Coordinates(latitude=10.7780, longitude=106.7020),
        tags={
            "shop": "convenience",
            "name": "FamilyMart Le Loi",
            "addr:housenumber": "12",
            "addr:street": "Le Loi",
            "addr:city": "Ho Chi Minh City",
        },
    )


@pytest.fixture
def other_store_poi() -> PointOfInterest:
    """브랜드 패턴에 해당하지 않는 편의점."""
    return PointOfInterest(
        osm_id=3003,
        osm_type="node",
        latitude=10.7800,
        longitude=106.7050,
        tags={
            "shop": "convenience",
            "name": "Ministop",
            "addr:full": "45 Pasteur, Ben Nghe, District 1",
        },
    )


@pytest.fixture
def no_address_poi() -> PointOfInterest:
    """addr:* 태그가 없는 Circle K."""
    return PointOfInterest(
        osm_id=4004,
        osm_type="node",
        latitude=10.7770,
        longitude=106.7010,
        tags={"shop": "convenience", "name": "Circle K", "opening_hours": "24/7"},
    )
