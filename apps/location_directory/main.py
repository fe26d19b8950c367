"""Location Directory API - FastAPI application entry point.

분산 트레이싱 통합 (LOCATION_DIRECTORY_OTEL_ENABLED=true):
- FastAPI 자동 계측 (HTTP 요청/응답)
- SQLAlchemy 자동 계측 (장소 스캔/조회)
- Redis 자동 계측 (클라이언트별 요청 제한)
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from location_directory.infrastructure.observability import (
    instrument_fastapi,
    instrument_redis,
    instrument_sqlalchemy,
    setup_tracing,
    shutdown_tracing,
)
from location_directory.presentation.http.controllers import health_router, location_router
from location_directory.presentation.http.errors import register_exception_handlers
from location_directory.setup.config import get_settings
from location_directory.setup.database import engine
from location_directory.setup.dependencies import close_redis
from location_directory.setup.logging import setup_logging

logger = logging.getLogger(__name__)
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """애플리케이션 라이프사이클 관리."""
    setup_logging(settings.log_level)
    logger.info(f"Starting {settings.service_name} ({settings.environment})")

    if settings.otel_enabled:
        setup_tracing(
            settings.service_name,
            endpoint=settings.otel_exporter_otlp_endpoint,
            sampling_rate=settings.otel_sampling_rate,
            environment=settings.environment,
        )
        instrument_sqlalchemy(engine)
        instrument_redis()

    yield

    logger.info(f"Shutting down {settings.service_name}")
    await close_redis()
    shutdown_tracing()
    await engine.dispose()


def create_app() -> FastAPI:
    """FastAPI 애플리케이션을 생성합니다."""
    app = FastAPI(
        title="Location Directory API",
        description="Map directory of locations with status filtering and proximity search",
        version="1.0.0",
        docs_url="/api/v1/locations/docs",
        openapi_url="/api/v1/locations/openapi.json",
        redoc_url="/api/v1/locations/redoc",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    if settings.otel_enabled:
        instrument_fastapi(app)

    register_exception_handlers(app)

    # 라우터 등록
    app.include_router(health_router)
    app.include_router(location_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "location_directory.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.environment == "development",
    )
