"""Location HTTP Schemas."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, PlainSerializer


def _format_coordinate(value: Decimal | None) -> str | None:
    """지수 표기 없이 고정 소수점 문자열로 변환 (0 → "0.00000000")."""
    if value is None:
        return None
    return format(value, "f")


CoordinateValue = Annotated[
    Decimal | None, PlainSerializer(_format_coordinate, return_type=str | None, when_used="json")
]


class LocationSummary(BaseModel):
    """장소 요약 응답 스키마 (좌표는 소수점 8자리 문자열로 직렬화)."""

    id: int
    title: str
    address: str
    latitude: CoordinateValue
    longitude: CoordinateValue
    status: str

    model_config = {"from_attributes": True}


class LocationListResponse(BaseModel):
    """장소 목록 응답 스키마."""

    locations: list[LocationSummary]
    total_count: int
    filtered_count: int


class LocationSearchResponse(BaseModel):
    """근접 검색 응답 스키마."""

    locations: list[LocationSummary]
    count: int


class LocationRecord(BaseModel):
    """장소 레코드 응답 스키마."""

    id: int
    title: str
    description: str | None
    address: str
    latitude: CoordinateValue
    longitude: CoordinateValue
    status: str
    opening_hours: str | None = None
    ticket_price: str | None = None
    website: str | None = None
    phone: str | None = None
    visitor_notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = {"from_attributes": True}


class LocationDetail(LocationRecord):
    """장소 상세 응답 스키마."""

    status_label: str
    status_color: str
