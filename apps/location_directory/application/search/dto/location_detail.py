"""Location Detail DTOs."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass
class LocationRecordDTO:
    """저장된 장소 레코드 전체 DTO."""

    id: int
    title: str
    description: str | None
    address: str
    latitude: Decimal | None
    longitude: Decimal | None
    status: str
    opening_hours: str | None = None
    ticket_price: str | None = None
    website: str | None = None
    phone: str | None = None
    visitor_notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class LocationDetailDTO(LocationRecordDTO):
    """장소 상세 DTO. 상태 표시용 라벨/색상을 포함합니다."""

    status_label: str = "Unknown"
    status_color: str = "gray"
