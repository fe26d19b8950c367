"""Domain Enums."""

from location_directory.domain.enums.location_status import (
    STATUS_FILTER_ALL,
    LocationStatus,
)

__all__ = ["LocationStatus", "STATUS_FILTER_ALL"]
