"""Setup (설정/의존성 조립) 단위 테스트."""

from __future__ import annotations

from typing import Iterator

import pytest
from fastapi import FastAPI

from store_finder.application.common.exceptions import ApplicationError
from store_finder.presentation.http.errors import register_exception_handlers
from store_finder.setup import dependencies
from store_finder.setup.config import get_settings


@pytest.fixture
def fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """환경변수 변경이 반영되도록 설정 캐시와 클라이언트 싱글톤을 초기화."""
    monkeypatch.setenv("STORE_FINDER_USER_AGENT", "StoreFinderTest/2.0")
    monkeypatch.setattr(dependencies, "_geodata_client", None)
    monkeypatch.setattr(dependencies, "_geocoding_client", None)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestDependencies:
    """외부 클라이언트 조립 테스트."""

    def test_user_agent_shared_by_both_clients(self, fresh_settings: None) -> None:
        assert get_settings().user_agent == "StoreFinderTest/2.0"

        overpass = dependencies.get_geodata_client()
        nominatim = dependencies.get_geocoding_client()

        assert overpass._user_agent == "StoreFinderTest/2.0"
        assert nominatim._user_agent == "StoreFinderTest/2.0"

    def test_clients_are_singletons(self, fresh_settings: None) -> None:
        assert dependencies.get_geodata_client() is dependencies.get_geodata_client()
        assert dependencies.get_geocoding_client() is dependencies.get_geocoding_client()


class TestExceptionHandlerRegistration:
    def test_only_application_error_is_mapped(self) -> None:
        app = FastAPI()
        register_exception_handlers(app)

        custom = set(app.exception_handlers) - set(FastAPI().exception_handlers)

        assert custom == {ApplicationError}
