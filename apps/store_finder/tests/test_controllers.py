"""HTTP Controllers 단위 테스트."""

from __future__ import annotations

from typing import Iterator
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from store_finder.application.common.exceptions import (
    ApplicationError,
    GeocodingUnavailableError,
    GeodataUnavailableError,
)
from store_finder.application.stores.queries import SearchStoresQuery
from store_finder.domain.entities import PointOfInterest
from store_finder.domain.value_objects import Coordinates
from store_finder.main import app
from store_finder.setup.dependencies import (
    get_geocoding_client,
    get_geodata_client,
    get_search_stores_query,
)

HANOI_HEADERS = {"cf-iplatitude": "21.0285", "cf-iplongitude": "105.8542"}


@pytest.fixture
def client(
    mock_geodata_client: AsyncMock, mock_geocoding_client: AsyncMock
) -> Iterator[TestClient]:
    """외부 클라이언트를 mock으로 대체한 TestClient."""
    app.dependency_overrides[get_geodata_client] = lambda: mock_geodata_client
    app.dependency_overrides[get_geocoding_client] = lambda: mock_geocoding_client
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestHealthController:
    """Health Controller 테스트."""

    def test_health_check(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "service": "store-finder-api"}

    def test_ping(self, client: TestClient) -> None:
        response = client.get("/ping")
        assert response.status_code == 200
        assert response.json()["pong"] is True


class TestLocationController:
    """Location Controller 테스트."""

    def test_default_location(self, client: TestClient, mock_geocoding_client: AsyncMock) -> None:
        """위치 헤더가 없으면 기본 좌표."""
        response = client.get("/")

        assert response.status_code == 200
        data = response.json()
        assert data["coordinates"] == {"lat": 10.7769, "lon": 106.7009}
        assert data["formatted_address"].startswith("Nhà hát Thành phố")
        mock_geocoding_client.reverse_geocode.assert_awaited_once_with(
            Coordinates(latitude=10.7769, longitude=106.7009)
        )

    def test_location_from_headers(self, client: TestClient) -> None:
        response = client.get("/", headers=HANOI_HEADERS)

        assert response.status_code == 200
        assert response.json()["coordinates"] == {"lat": 21.0285, "lon": 105.8542}

    def test_malformed_headers_fall_back(self, client: TestClient) -> None:
        response = client.get("/", headers={"cf-iplatitude": "north", "cf-iplongitude": "east"})

        assert response.status_code == 200
        assert response.json()["coordinates"] == {"lat": 10.7769, "lon": 106.7009}

    def test_geocoding_failure(self, client: TestClient, mock_geocoding_client: AsyncMock) -> None:
        """역지오코딩 실패도 200 + Unknown Location."""
        mock_geocoding_client.reverse_geocode.side_effect = GeocodingUnavailableError("timeout")

        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["formatted_address"] == "Unknown Location"


class TestStoresController:
    """Stores Controller 테스트."""

    @pytest.fixture
    def all_stores(
        self,
        mock_geodata_client: AsyncMock,
        circle_k_poi: PointOfInterest,
        family_mart_way: PointOfInterest,
        other_store_poi: PointOfInterest,
        no_address_poi: PointOfInterest,
    ) -> AsyncMock:
        mock_geodata_client.fetch_convenience_stores.return_value = [
            no_address_poi,
            other_store_poi,
            family_mart_way,
            circle_k_poi,
        ]
        return mock_geodata_client

    def test_circle_k(self, client: TestClient, all_stores: AsyncMock) -> None:
        response = client.get("/stores/circle-k")

        assert response.status_code == 200
        data = response.json()
        assert data == {
            "brand": "Circle K",
            "found": True,
            "count": 1,
            "stores": [
                {
                    "name": "Circle K Thao Dien",
                    "distance_km": 1.11,
                    "address": "Nguyen Van Huong",
                    "coordinates": {"lat": 10.7869, "lon": 106.7009},
                }
            ],
            "message": "Found 1 stores within 5km",
        }

    def test_family_mart(self, client: TestClient, all_stores: AsyncMock) -> None:
        response = client.get("/stores/family-mart")

        data = response.json()
        assert data["brand"] == "FamilyMart"
        assert data["count"] == 1
        assert data["stores"][0]["address"] == "12 Le Loi, Ho Chi Minh City"
        assert data["stores"][0]["coordinates"] == {"lat": 10.778, "lon": 106.702}

    def test_others(self, client: TestClient, all_stores: AsyncMock) -> None:
        response = client.get("/stores/others")

        data = response.json()
        assert data["brand"] == "Other Stores"
        assert [s["name"] for s in data["stores"]] == ["Ministop"]
        assert data["stores"][0]["address"] == "45 Pasteur, Ben Nghe, District 1"

    def test_uses_requester_coordinates(
        self, client: TestClient, mock_geodata_client: AsyncMock
    ) -> None:
        client.get("/stores/circle-k", headers=HANOI_HEADERS)

        mock_geodata_client.fetch_convenience_stores.assert_awaited_once_with(
            Coordinates(latitude=21.0285, longitude=105.8542), radius_m=5000
        )

    def test_none_found(self, client: TestClient) -> None:
        response = client.get("/stores/family-mart")

        assert response.status_code == 200
        assert response.json() == {
            "brand": "FamilyMart",
            "found": False,
            "count": 0,
            "stores": [],
            "message": "None found in 5km",
        }

    def test_upstream_failure_is_not_http_error(
        self, client: TestClient, mock_geodata_client: AsyncMock
    ) -> None:
        """Overpass 장애도 200 + found=False."""
        mock_geodata_client.fetch_convenience_stores.side_effect = GeodataUnavailableError(
            "HTTP 504"
        )

        response = client.get("/stores/others")

        assert response.status_code == 200
        assert response.json()["found"] is False

    def test_cors_allows_any_origin(self, client: TestClient) -> None:
        response = client.get("/stores/others", headers={"Origin": "https://example.com"})
        assert response.headers["access-control-allow-origin"] == "*"


class TestExceptionHandlers:
    """예외 핸들러 테스트."""

    def test_application_error_maps_to_503(self, client: TestClient) -> None:
        failing_query = AsyncMock(spec=SearchStoresQuery)
        failing_query.execute.side_effect = ApplicationError("Service not available")
        app.dependency_overrides[get_search_stores_query] = lambda: failing_query

        response = client.get("/stores/circle-k")

        assert response.status_code == 503
        assert response.json() == {"detail": "Service not available", "code": "SERVICE_UNAVAILABLE"}
