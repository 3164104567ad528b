"""Store Finder API - FastAPI application entry point.

분산 트레이싱 통합 (STORE_FINDER_OTEL_ENABLED=true):
- FastAPI 자동 계측 (HTTP 요청/응답)
- HTTPX 자동 계측 (Overpass/Nominatim 호출)
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from store_finder.infrastructure.observability import (
    instrument_fastapi,
    instrument_httpx,
    setup_tracing,
    shutdown_tracing,
)
from store_finder.presentation.http.controllers import (
    health_router,
    location_router,
    stores_router,
)
from store_finder.presentation.http.errors import register_exception_handlers
from store_finder.setup.config import get_settings
from store_finder.setup.dependencies import close_clients
from store_finder.setup.logging import setup_logging

logger = logging.getLogger(__name__)
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """애플리케이션 라이프사이클 관리."""
    logger.info(f"Starting {settings.service_name}")

    if settings.otel_enabled:
        setup_tracing(
            settings.service_name,
            settings.otel_exporter_otlp_endpoint,
            service_version=settings.service_version,
            environment=settings.environment,
            sampling_rate=settings.otel_sampling_rate,
        )
        instrument_httpx()

    yield

    logger.info(f"Shutting down {settings.service_name}")
    await close_clients()
    shutdown_tracing()


def create_app() -> FastAPI:
    """FastAPI 애플리케이션을 생성합니다."""
    setup_logging(settings.log_level)

    app = FastAPI(
        title="Store Finder API",
        description="Nearby convenience stores by brand",
        version=settings.service_version,
        lifespan=lifespan,
    )

    # 공개 API: 모든 origin 허용
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if settings.otel_enabled:
        instrument_fastapi(app)

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(location_router)
    app.include_router(stores_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "store_finder.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.environment == "development",
    )
