"""Application DTOs."""

from location_directory.application.search.dto.location_detail import (
    LocationDetailDTO,
    LocationRecordDTO,
)
from location_directory.application.search.dto.location_summary import LocationSummaryDTO
from location_directory.application.search.dto.query_result import (
    LocationListResult,
    LocationMatch,
    LocationSearchResult,
    QueryResult,
)
from location_directory.application.search.dto.query_spec import (
    DEFAULT_RADIUS_KM,
    GeoFilter,
    QuerySpec,
)

__all__ = [
    "DEFAULT_RADIUS_KM",
    "GeoFilter",
    "LocationDetailDTO",
    "LocationListResult",
    "LocationMatch",
    "LocationRecordDTO",
    "LocationSearchResult",
    "LocationSummaryDTO",
    "QueryResult",
    "QuerySpec",
]
