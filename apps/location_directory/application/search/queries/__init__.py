"""Application Queries."""

from location_directory.application.search.queries.get_location import (
    GetLocationDetailQuery,
    GetLocationQuery,
)
from location_directory.application.search.queries.list_locations import ListLocationsQuery
from location_directory.application.search.queries.search_locations import (
    PROXIMITY_RESULT_LIMIT,
    SearchLocationsQuery,
)

__all__ = [
    "GetLocationDetailQuery",
    "GetLocationQuery",
    "ListLocationsQuery",
    "PROXIMITY_RESULT_LIMIT",
    "SearchLocationsQuery",
]
