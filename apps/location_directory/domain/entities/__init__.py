"""Domain Entities."""

from location_directory.domain.entities.location import Location

__all__ = ["Location"]
