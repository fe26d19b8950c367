"""Location Search Application Layer."""

from location_directory.application.search.dto import (
    GeoFilter,
    LocationMatch,
    QueryResult,
    QuerySpec,
)
from location_directory.application.search.ports import LocationReader
from location_directory.application.search.queries import (
    GetLocationDetailQuery,
    GetLocationQuery,
    ListLocationsQuery,
    SearchLocationsQuery,
)
from location_directory.application.search.services import (
    LocationProjectionBuilder,
    LocationQueryEngine,
    QuerySpecBuilder,
)

__all__ = [
    "GeoFilter",
    "GetLocationDetailQuery",
    "GetLocationQuery",
    "ListLocationsQuery",
    "LocationMatch",
    "LocationProjectionBuilder",
    "LocationQueryEngine",
    "LocationReader",
    "QueryResult",
    "QuerySpec",
    "QuerySpecBuilder",
    "SearchLocationsQuery",
]
