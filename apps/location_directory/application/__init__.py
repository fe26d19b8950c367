"""Location Directory Application Layer."""

from location_directory.application.search import (
    GeoFilter,
    LocationMatch,
    LocationQueryEngine,
    LocationReader,
    QueryResult,
    QuerySpec,
)

__all__ = [
    "GeoFilter",
    "LocationMatch",
    "LocationQueryEngine",
    "LocationReader",
    "QueryResult",
    "QuerySpec",
]
