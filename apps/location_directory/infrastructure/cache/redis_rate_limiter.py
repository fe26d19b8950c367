"""Redis Rate Limiter Implementation.

Fixed Window Counter 알고리즘을 사용한 클라이언트별 Rate Limiter.

데이터 구조:
- rate_limit:locations:{client}:{window_id} → String (요청 카운트)
"""

from __future__ import annotations

import logging
import time

from redis.asyncio import Redis
from redis.exceptions import RedisError

from location_directory.application.common.ports import RateLimiterPort, RateLimitStatus

logger = logging.getLogger(__name__)

COUNTER_KEY_PREFIX = "rate_limit:locations:"

# 카운터 확인과 증가를 원자적으로 수행
_CHECK_AND_CONSUME_SCRIPT = """
local counter_key = KEYS[1]
local limit = tonumber(ARGV[1])
local window_seconds = tonumber(ARGV[2])

local current = tonumber(redis.call('GET', counter_key) or '0')

if current >= limit then
    return {0, current, 0}
end

local new_count = redis.call('INCR', counter_key)
if new_count == 1 then
    redis.call('EXPIRE', counter_key, window_seconds)
end

return {1, new_count, limit - new_count}
"""


class RedisRateLimiter(RateLimiterPort):
    """Redis 기반 Rate Limiter.

    Redis에 접근할 수 없으면 요청을 허용합니다 (fail open).
    """

    def __init__(self, redis: Redis, *, limit: int, window_seconds: int) -> None:
        """초기화.

        Args:
            redis: Redis 클라이언트
            limit: 윈도우당 최대 요청 수
            window_seconds: 윈도우 크기 (초)
        """
        self._redis = redis
        self._limit = limit
        self._window_seconds = window_seconds

    def _counter_key(self, key: str, window_id: int) -> str:
        """카운터 키 생성."""
        return f"{COUNTER_KEY_PREFIX}{key}:{window_id}"

    async def check_and_consume(self, key: str) -> RateLimitStatus:
        """요청 허용 여부 확인 및 카운터 증가."""
        window_id = int(time.time()) // self._window_seconds
        reset_at = (window_id + 1) * self._window_seconds
        counter_key = self._counter_key(key, window_id)

        try:
            is_allowed, current, remaining = await self._redis.eval(
                _CHECK_AND_CONSUME_SCRIPT,
                1,
                counter_key,
                self._limit,
                self._window_seconds,
            )
        except RedisError as e:
            logger.warning(
                "Rate limiter unavailable, allowing request",
                extra={"client": key, "error": str(e)},
            )
            return RateLimitStatus(
                key=key,
                limit=self._limit,
                remaining=self._limit,
                reset_at=reset_at,
                is_allowed=True,
            )

        if not is_allowed:
            logger.warning(
                "Rate limit exceeded",
                extra={"client": key, "current": current, "limit": self._limit},
            )

        return RateLimitStatus(
            key=key,
            limit=self._limit,
            remaining=int(remaining),
            reset_at=reset_at,
            is_allowed=bool(is_allowed),
        )
