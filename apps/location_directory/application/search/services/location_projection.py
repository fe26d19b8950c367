"""Location Projection Builder.

Location 엔티티를 소비자별 출력 형태(요약/레코드/상세)로 변환합니다.
"""

from __future__ import annotations

from location_directory.application.search.dto import (
    LocationDetailDTO,
    LocationRecordDTO,
    LocationSummaryDTO,
)
from location_directory.domain.entities import Location
from location_directory.domain.services import status_display


class LocationProjectionBuilder:
    """장소 프로젝션 빌더 서비스."""

    @staticmethod
    def summary(location: Location) -> LocationSummaryDTO:
        """목록/지도용 요약 (무거운 텍스트 필드 제외)."""
        return LocationSummaryDTO(
            id=location.id,
            title=location.title,
            address=location.address,
            latitude=location.latitude,
            longitude=location.longitude,
            status=location.status.value,
        )

    @staticmethod
    def record(location: Location) -> LocationRecordDTO:
        return LocationRecordDTO(**_record_fields(location))

    @staticmethod
    def detail(location: Location) -> LocationDetailDTO:
        """전체 필드 + 상태 라벨/색상."""
        display = status_display(location.status)
        return LocationDetailDTO(
            **_record_fields(location),
            status_label=display.label,
            status_color=display.color,
        )


def _record_fields(location: Location) -> dict:
    return {
        "id": location.id,
        "title": location.title,
        "description": location.description,
        "address": location.address,
        "latitude": location.latitude,
        "longitude": location.longitude,
        "status": location.status.value,
        "opening_hours": location.opening_hours,
        "ticket_price": location.ticket_price,
        "website": location.website,
        "phone": location.phone,
        "visitor_notes": location.visitor_notes,
        "created_at": location.created_at,
        "updated_at": location.updated_at,
    }
