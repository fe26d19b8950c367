"""Setup Module."""

from location_directory.setup.config import Settings, get_settings
from location_directory.setup.dependencies import (
    close_redis,
    get_list_locations_query,
    get_location_detail_query,
    get_location_query,
    get_location_reader,
    get_rate_limiter,
    get_redis,
    get_search_locations_query,
)

__all__ = [
    "Settings",
    "get_settings",
    "close_redis",
    "get_list_locations_query",
    "get_location_detail_query",
    "get_location_query",
    "get_location_reader",
    "get_rate_limiter",
    "get_redis",
    "get_search_locations_query",
]
