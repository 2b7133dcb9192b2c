"""Exception Handlers.

도메인/애플리케이션 예외를 HTTP 응답으로 변환합니다.
백엔드 실패(BackendFailure)는 Resolver 내부에서 흡수되므로 여기까지 오지 않습니다.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from apps.identify.application.common.exceptions.auth import UnauthorizedError
from apps.identify.application.common.exceptions.base import ApplicationError
from apps.identify.application.common.exceptions.storage import HistoryStoreError
from apps.identify.domain.exceptions.base import DomainError
from apps.identify.domain.exceptions.identification import (
    EmptyImageError,
    EmptyQueryError,
)


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(UnauthorizedError)
    async def unauthorized_handler(request: Request, exc: UnauthorizedError):
        return JSONResponse(
            status_code=401,
            content={"detail": exc.message, "code": "UNAUTHORIZED"},
        )

    @app.exception_handler(EmptyImageError)
    async def empty_image_handler(request: Request, exc: EmptyImageError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "IMAGE_REQUIRED"},
        )

    @app.exception_handler(EmptyQueryError)
    async def empty_query_handler(request: Request, exc: EmptyQueryError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "QUERY_REQUIRED"},
        )

    @app.exception_handler(HistoryStoreError)
    async def history_store_handler(request: Request, exc: HistoryStoreError):
        return JSONResponse(
            status_code=503,
            content={"detail": exc.message, "code": "HISTORY_UNAVAILABLE"},
        )

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "DOMAIN_ERROR"},
        )

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "APPLICATION_ERROR"},
        )
