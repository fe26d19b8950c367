"""Location Entity."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from location_directory.domain.enums import LocationStatus
from location_directory.domain.value_objects import Coordinates


@dataclass(frozen=True)
class Location:
    """지도에 표시되는 장소 엔티티.

    저장소가 생성/수정하며 조회 엔진은 읽기만 합니다.
    """

    id: int
    title: str
    status: LocationStatus
    address: str = ""
    description: str | None = None
    latitude: Decimal | None = None
    longitude: Decimal | None = None
    opening_hours: str | None = None
    ticket_price: str | None = None
    website: str | None = None
    phone: str | None = None
    visitor_notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        if not self.title:
            raise ValueError("Location title must not be empty")
        if not isinstance(self.status, LocationStatus):
            object.__setattr__(self, "status", LocationStatus(self.status))
        coordinates = self.coordinates()
        if coordinates is not None:
            object.__setattr__(self, "latitude", coordinates.latitude)
            object.__setattr__(self, "longitude", coordinates.longitude)

    def coordinates(self) -> Coordinates | None:
        """좌표 Value Object를 반환합니다. 위도/경도 중 하나라도 없으면 None."""
        if self.latitude is None or self.longitude is None:
            return None
        return Coordinates(latitude=self.latitude, longitude=self.longitude)
