"""Domain Value Objects."""

from location_directory.domain.value_objects.coordinates import (
    COORDINATE_PRECISION,
    Coordinates,
)

__all__ = ["Coordinates", "COORDINATE_PRECISION"]
