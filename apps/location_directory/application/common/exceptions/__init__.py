"""Application Exceptions."""

from location_directory.application.common.exceptions.base import ApplicationError
from location_directory.application.common.exceptions.store import StoreUnavailableError
from location_directory.application.common.exceptions.throttle import RateLimitExceededError
from location_directory.application.common.exceptions.validation import (
    InvalidCoordinatesError,
    InvalidRadiusError,
    InvalidStatusError,
    SearchTextTooLongError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "InvalidCoordinatesError",
    "InvalidRadiusError",
    "InvalidStatusError",
    "RateLimitExceededError",
    "SearchTextTooLongError",
    "StoreUnavailableError",
    "ValidationError",
]
