"""HTTP Schemas."""

from location_directory.presentation.http.schemas.location import (
    LocationDetail,
    LocationListResponse,
    LocationRecord,
    LocationSearchResponse,
    LocationSummary,
)

__all__ = [
    "LocationDetail",
    "LocationListResponse",
    "LocationRecord",
    "LocationSearchResponse",
    "LocationSummary",
]
