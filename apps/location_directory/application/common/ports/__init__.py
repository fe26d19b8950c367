"""Application Common Ports."""

from location_directory.application.common.ports.rate_limiter import (
    RateLimiterPort,
    RateLimitStatus,
)

__all__ = ["RateLimiterPort", "RateLimitStatus"]
