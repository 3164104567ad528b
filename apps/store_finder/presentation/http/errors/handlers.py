"""Exception Handlers.

애플리케이션 예외를 HTTP 응답으로 변환합니다.
업스트림 장애는 Query에서 흡수되므로 정상 경로에서는 발생하지 않습니다.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from store_finder.application.common.exceptions.base import ApplicationError


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        return JSONResponse(
            status_code=503,
            content={"detail": exc.message, "code": "SERVICE_UNAVAILABLE"},
        )
