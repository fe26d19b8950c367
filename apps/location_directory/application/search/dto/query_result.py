"""Query Result DTOs."""

from __future__ import annotations

from dataclasses import dataclass, field

from location_directory.application.search.dto.location_summary import LocationSummaryDTO
from location_directory.domain.entities import Location


@dataclass(frozen=True)
class LocationMatch:
    """매칭된 장소와 기준점까지의 거리 (근접 검색이 아니면 None)."""

    location: Location
    distance_km: float | None = None


@dataclass
class QueryResult:
    """조회 엔진 결과.

    matched_count는 limit 적용 전 매칭 수입니다.
    """

    matches: list[LocationMatch] = field(default_factory=list)
    matched_count: int = 0

    @property
    def locations(self) -> list[Location]:
        return [match.location for match in self.matches]


@dataclass
class LocationListResult:
    """목록 조회 결과 DTO."""

    locations: list[LocationSummaryDTO]
    total_count: int
    filtered_count: int


@dataclass
class LocationSearchResult:
    """근접 검색 결과 DTO."""

    locations: list[LocationSummaryDTO]
    count: int
