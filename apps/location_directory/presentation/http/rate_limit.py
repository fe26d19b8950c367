"""Client Rate Limiting.

장소 API 라우터에 적용되는 클라이언트별 요청 제한 의존성.
"""

from __future__ import annotations

import time
from typing import Annotated

from fastapi import Depends, Request, Response

from location_directory.application.common.exceptions import RateLimitExceededError
from location_directory.application.common.ports import RateLimiterPort
from location_directory.setup.dependencies import get_rate_limiter


def get_client_ip(request: Request) -> str:
    """클라이언트 IP 추출 (X-Forwarded-For 첫 번째 값 우선)."""
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


async def enforce_rate_limit(
    request: Request,
    response: Response,
    limiter: Annotated[RateLimiterPort | None, Depends(get_rate_limiter)],
) -> None:
    """요청 한도를 확인하고 X-RateLimit-* 헤더를 설정합니다.

    Raises:
        RateLimitExceededError: 윈도우 내 요청 한도 초과
    """
    if limiter is None:
        return

    status = await limiter.check_and_consume(get_client_ip(request))
    if not status.is_allowed:
        retry_after = max(1, status.reset_at - int(time.time()))
        raise RateLimitExceededError(limit=status.limit, retry_after=retry_after)

    response.headers["X-RateLimit-Limit"] = str(status.limit)
    response.headers["X-RateLimit-Remaining"] = str(status.remaining)
