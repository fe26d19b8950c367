"""PostgreSQL Infrastructure."""

from location_directory.infrastructure.persistence_postgres.location_reader_sqla import (
    SqlaLocationReader,
)
from location_directory.infrastructure.persistence_postgres.models import (
    Base,
    LocationModel,
)

__all__ = ["SqlaLocationReader", "Base", "LocationModel"]
