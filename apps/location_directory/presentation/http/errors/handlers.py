"""Exception Handlers.

도메인/애플리케이션 예외를 HTTP 응답으로 변환합니다.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from location_directory.application.common.exceptions import (
    ApplicationError,
    InvalidStatusError,
    RateLimitExceededError,
    StoreUnavailableError,
    ValidationError,
)
from location_directory.domain.exceptions import DomainError, LocationNotFoundError

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(LocationNotFoundError)
    async def location_not_found_handler(request: Request, exc: LocationNotFoundError):
        return JSONResponse(
            status_code=404,
            content={"detail": exc.message, "code": "LOCATION_NOT_FOUND"},
        )

    @app.exception_handler(InvalidStatusError)
    async def invalid_status_handler(request: Request, exc: InvalidStatusError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "INVALID_STATUS"},
        )

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "VALIDATION_ERROR"},
        )

    @app.exception_handler(StoreUnavailableError)
    async def store_unavailable_handler(request: Request, exc: StoreUnavailableError):
        logger.error("Location store unavailable", extra={"reason": exc.reason})
        return JSONResponse(
            status_code=503,
            content={"detail": exc.message, "code": "STORE_UNAVAILABLE"},
        )

    @app.exception_handler(RateLimitExceededError)
    async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceededError):
        return JSONResponse(
            status_code=429,
            content={"detail": exc.message, "code": "RATE_LIMITED"},
            headers={
                "Retry-After": str(exc.retry_after),
                "X-RateLimit-Limit": str(exc.limit),
                "X-RateLimit-Remaining": "0",
            },
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
