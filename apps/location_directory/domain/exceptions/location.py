"""Location 도메인 예외."""

from location_directory.domain.exceptions.base import DomainError


class LocationNotFoundError(DomainError):
    """장소를 찾을 수 없음."""

    def __init__(self, location_id: int) -> None:
        self.location_id = location_id
        super().__init__(f"Location {location_id} not found")
