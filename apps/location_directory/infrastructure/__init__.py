"""Location Directory Infrastructure Layer."""

from location_directory.infrastructure.persistence_postgres import (
    Base,
    LocationModel,
    SqlaLocationReader,
)

__all__ = ["SqlaLocationReader", "Base", "LocationModel"]
