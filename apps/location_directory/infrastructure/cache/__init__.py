"""Redis Infrastructure."""

from location_directory.infrastructure.cache.redis_rate_limiter import RedisRateLimiter

__all__ = ["RedisRateLimiter"]
