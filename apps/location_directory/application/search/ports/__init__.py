"""Application Ports."""

from location_directory.application.search.ports.location_reader import LocationReader

__all__ = ["LocationReader"]
