"""Location Directory Domain Layer."""

from location_directory.domain.entities import Location
from location_directory.domain.enums import LocationStatus
from location_directory.domain.value_objects import Coordinates

__all__ = ["Location", "Coordinates", "LocationStatus"]
