"""Location Summary DTO."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass
class LocationSummaryDTO:
    """목록/지도 렌더링용 요약 DTO."""

    id: int
    title: str
    address: str
    latitude: Decimal | None
    longitude: Decimal | None
    status: str
