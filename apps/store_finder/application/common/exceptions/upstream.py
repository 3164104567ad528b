"""외부 서비스 관련 예외.

어댑터가 발생시키고 Query에서 흡수합니다.
"결과 없음"과 "업스트림 장애"를 로그에서 구분하기 위한 용도입니다.
"""

from store_finder.application.common.exceptions.base import ApplicationError


class UpstreamUnavailableError(ApplicationError):
    """외부 서비스를 사용할 수 없음."""

    def __init__(self, service: str, reason: str) -> None:
        self.service = service
        self.reason = reason
        super().__init__(f"{service} unavailable: {reason}")


class GeodataUnavailableError(UpstreamUnavailableError):
    """지오데이터(Overpass) 조회 실패."""

    def __init__(self, reason: str) -> None:
        super().__init__("overpass", reason)


class GeocodingUnavailableError(UpstreamUnavailableError):
    """역지오코딩(Nominatim) 조회 실패."""

    def __init__(self, reason: str) -> None:
        super().__init__("nominatim", reason)
