"""Identify API Main Application.

재활용 품목 식별 서비스:
- 로컬 이미지 분류 모델 (confidence gate, multi-host)
- 원격 생성형 AI fallback
- 정적 배출 가이드 카탈로그
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from apps.identify.metrics import register_metrics
from apps.identify.presentation.http.controllers import (
    health_router,
    identify_router,
    stats_router,
)
from apps.identify.presentation.http.errors.handlers import register_exception_handlers
from apps.identify.setup.config import get_settings
from apps.identify.setup.dependencies import close_resources
from apps.identify.setup.logging import configure_logging

logger = logging.getLogger(__name__)
settings = get_settings()

configure_logging(
    service_name=settings.service_name,
    service_version=settings.service_version,
    environment=settings.environment,
    log_level=settings.log_level,
    json_format=settings.log_format == "json",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """FastAPI 라이프스팬 이벤트."""
    logger.info(
        "identify_api_starting",
        extra={
            "version": settings.service_version,
            "primary_backend": settings.primary_backend.value,
            "fallback_enabled": settings.fallback_enabled,
        },
    )
    yield
    await close_resources()
    logger.info("identify_api_shutdown")


def create_app() -> FastAPI:
    """FastAPI 애플리케이션 생성."""
    app = FastAPI(
        title="Identify API",
        description="Recyclable item identification with local model and generative AI fallback",
        version=settings.service_version,
        docs_url="/api/v1/identify/docs",
        redoc_url="/api/v1/identify/redoc",
        openapi_url="/api/v1/identify/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    register_metrics(app)

    # Routers
    app.include_router(health_router)
    app.include_router(identify_router, prefix="/api/v1")
    app.include_router(stats_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
