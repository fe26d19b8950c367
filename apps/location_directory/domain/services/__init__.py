"""Domain Services."""

from location_directory.domain.services.distance import EARTH_RADIUS_KM, haversine_km
from location_directory.domain.services.status_display import (
    StatusDisplay,
    status_display,
)

__all__ = ["EARTH_RADIUS_KM", "haversine_km", "StatusDisplay", "status_display"]
