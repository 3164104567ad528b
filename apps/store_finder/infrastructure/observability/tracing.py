"""OpenTelemetry Tracing - Store Finder Service.

OpenTelemetry 패키지는 선택 의존성(tracing extra)입니다.
설치되어 있지 않으면 경고만 남기고 트레이싱을 비활성화합니다.
"""

from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)

_tracer_provider: Any = None


def setup_tracing(
    service_name: str,
    endpoint: str,
    *,
    service_version: str = "1.0.0",
    environment: str = "development",
    sampling_rate: float = 1.0,
) -> bool:
    """OpenTelemetry 트레이싱 설정.

    Args:
        service_name: 서비스 이름
        endpoint: OTLP gRPC exporter 엔드포인트

    Returns:
        설정 성공 여부
    """
    global _tracer_provider  # noqa: PLW0603

    try:
        from opentelemetry import trace
        from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import (
            OTLPSpanExporter,
        )
        from opentelemetry.sdk.resources import Resource
        from opentelemetry.sdk.trace import TracerProvider
        from opentelemetry.sdk.trace.export import BatchSpanProcessor
        from opentelemetry.sdk.trace.sampling import TraceIdRatioBased
    except ImportError as e:
        logger.warning(f"OpenTelemetry not available: {e}")
        return False

    try:
        resource = Resource.create(
            {
                "service.name": service_name,
                "service.version": service_version,
                "deployment.environment": environment,
            }
        )
        provider = TracerProvider(resource=resource, sampler=TraceIdRatioBased(sampling_rate))
        provider.add_span_processor(
            BatchSpanProcessor(OTLPSpanExporter(endpoint=endpoint, insecure=True))
        )
        trace.set_tracer_provider(provider)
        _tracer_provider = provider
    except Exception as e:
        logger.error(f"Failed to configure tracing: {e}")
        return False

    logger.info(
        "OpenTelemetry tracing configured",
        extra={"service": service_name, "endpoint": endpoint, "sampling_rate": sampling_rate},
    )
    return True


def instrument_fastapi(app) -> None:
    """FastAPI 자동 계측."""
    try:
        from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
    except ImportError:
        logger.warning("FastAPIInstrumentor not available")
        return

    FastAPIInstrumentor.instrument_app(app, excluded_urls="health,ping")
    logger.info("FastAPI instrumentation enabled")


def instrument_httpx() -> None:
    """HTTPX 자동 계측 (Overpass/Nominatim 호출)."""
    try:
        from opentelemetry.instrumentation.httpx import HTTPXClientInstrumentor
    except ImportError:
        logger.warning("HTTPXClientInstrumentor not available")
        return

    HTTPXClientInstrumentor().instrument()
    logger.info("HTTPX instrumentation enabled")


def shutdown_tracing() -> None:
    """트레이싱 종료 (남은 span flush)."""
    global _tracer_provider  # noqa: PLW0603
    if _tracer_provider is None:
        return
    _tracer_provider.shutdown()
    _tracer_provider = None
