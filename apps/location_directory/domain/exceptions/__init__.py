"""도메인 예외."""

from location_directory.domain.exceptions.base import DomainError
from location_directory.domain.exceptions.location import LocationNotFoundError

__all__ = [
    "DomainError",
    "LocationNotFoundError",
]
