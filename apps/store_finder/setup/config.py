"""Store Finder Service Configuration."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Store Finder 서비스 설정."""

    # Service
    service_name: str = "store-finder-api"
    service_version: str = "1.0.0"
    environment: str = "development"
    log_level: str = "INFO"

    # Requester location (엣지 플랫폼 위치 헤더)
    default_latitude: float = Field(10.7769, ge=-90, le=90)
    default_longitude: float = Field(106.7009, ge=-180, le=180)
    latitude_header: str = "cf-iplatitude"
    longitude_header: str = "cf-iplongitude"

    # OSM 공용 서비스 (Nominatim, Overpass) 공통 식별 헤더
    user_agent: str = Field(
        "StoreFinderAPI/1.0",
        description="Nominatim 사용 정책상 필수, Overpass에도 동일하게 전송",
    )

    # Nominatim (역지오코딩)
    nominatim_base_url: str = "https://nominatim.openstreetmap.org"
    nominatim_timeout: float = 10.0

    # Overpass (편의점 POI 조회)
    overpass_url: str = "https://overpass-api.de/api/interpreter"
    overpass_timeout: float = Field(20.0, description="클라이언트측 HTTP timeout (초)")
    overpass_query_timeout: int = Field(15, description="Overpass QL [timeout:] 힌트 (초)")
    search_radius_m: int = Field(5000, ge=100, le=50000)

    # OpenTelemetry
    otel_enabled: bool = False
    otel_exporter_otlp_endpoint: str = "http://localhost:4317"
    otel_sampling_rate: float = Field(1.0, ge=0.0, le=1.0)

    model_config = SettingsConfigDict(
        env_prefix="STORE_FINDER_",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )


@lru_cache
def get_settings() -> Settings:
    """설정 싱글톤을 반환합니다."""
    return Settings()
