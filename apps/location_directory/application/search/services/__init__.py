"""Application Services."""

from location_directory.application.search.services.location_projection import (
    LocationProjectionBuilder,
)
from location_directory.application.search.services.location_query_engine import (
    LocationQueryEngine,
)
from location_directory.application.search.services.query_spec_builder import (
    QuerySpecBuilder,
)

__all__ = ["LocationProjectionBuilder", "LocationQueryEngine", "QuerySpecBuilder"]
