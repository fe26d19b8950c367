"""Dependency Injection for FastAPI."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from redis.asyncio import Redis
from sqlalchemy.ext.asyncio import AsyncSession

from location_directory.application.common.ports import RateLimiterPort
from location_directory.application.search import (
    GetLocationDetailQuery,
    GetLocationQuery,
    ListLocationsQuery,
    LocationReader,
    SearchLocationsQuery,
)
from location_directory.infrastructure.cache import RedisRateLimiter
from location_directory.infrastructure.persistence_postgres import SqlaLocationReader
from location_directory.setup.config import get_settings
from location_directory.setup.database import get_db_session

_redis: Redis | None = None


async def get_redis() -> Redis:
    """Redis client (싱글톤)."""
    global _redis
    if _redis is None:
        _redis = Redis.from_url(get_settings().redis_url, decode_responses=True)
    return _redis


async def close_redis() -> None:
    """Redis 연결 정리."""
    global _redis
    if _redis is not None:
        await _redis.aclose()
        _redis = None


async def get_rate_limiter() -> RateLimiterPort | None:
    """Rate Limiter를 주입합니다 (비활성화 시 None)."""
    settings = get_settings()
    if not settings.rate_limit_enabled:
        return None
    return RedisRateLimiter(
        await get_redis(),
        limit=settings.rate_limit_requests,
        window_seconds=settings.rate_limit_window_seconds,
    )


async def get_location_reader(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> LocationReader:
    """Location Reader를 주입합니다."""
    return SqlaLocationReader(session)


async def get_list_locations_query(
    reader: Annotated[LocationReader, Depends(get_location_reader)],
) -> ListLocationsQuery:
    """ListLocationsQuery를 주입합니다."""
    return ListLocationsQuery(reader)


async def get_search_locations_query(
    reader: Annotated[LocationReader, Depends(get_location_reader)],
) -> SearchLocationsQuery:
    """SearchLocationsQuery를 주입합니다."""
    return SearchLocationsQuery(reader, result_limit=get_settings().proximity_result_limit)


async def get_location_query(
    reader: Annotated[LocationReader, Depends(get_location_reader)],
) -> GetLocationQuery:
    """GetLocationQuery를 주입합니다."""
    return GetLocationQuery(reader)


async def get_location_detail_query(
    reader: Annotated[LocationReader, Depends(get_location_reader)],
) -> GetLocationDetailQuery:
    """GetLocationDetailQuery를 주입합니다."""
    return GetLocationDetailQuery(reader)
