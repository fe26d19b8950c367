"""Search Locations Query.

검색어/상태/근접 조건으로 장소를 검색합니다. 근접 검색이면 가까운 순으로 정렬됩니다.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import TYPE_CHECKING

from location_directory.application.search.dto import LocationSearchResult, QuerySpec
from location_directory.application.search.services import (
    LocationProjectionBuilder,
    LocationQueryEngine,
)

if TYPE_CHECKING:
    from location_directory.application.search.ports import LocationReader

logger = logging.getLogger(__name__)

PROXIMITY_RESULT_LIMIT = 20


class SearchLocationsQuery:
    """장소 근접 검색 Query."""

    def __init__(
        self,
        location_reader: "LocationReader",
        result_limit: int = PROXIMITY_RESULT_LIMIT,
    ) -> None:
        self._reader = location_reader
        self._result_limit = result_limit

    async def execute(self, spec: QuerySpec) -> LocationSearchResult:
        """최대 result_limit개의 장소를 반환합니다.

        Args:
            spec: 조회 조건 (limit은 result_limit으로 대체)

        Returns:
            요약 DTO 목록과 반환 개수
        """
        spec = dataclasses.replace(spec, limit=self._result_limit)
        geo = spec.geo_filter

        logger.info(
            "Location search started",
            extra={
                "text": spec.text_filter,
                "status": spec.status_filter.value if spec.status_filter else None,
                "lat": geo.latitude if geo else None,
                "lng": geo.longitude if geo else None,
                "radius_km": geo.radius_km if geo else None,
            },
        )

        locations = await self._reader.scan()
        result = LocationQueryEngine.run(locations, spec)
        summaries = [LocationProjectionBuilder.summary(m.location) for m in result.matches]

        logger.info(
            "Location search completed",
            extra={"matched_count": result.matched_count, "results_count": len(summaries)},
        )
        return LocationSearchResult(locations=summaries, count=len(summaries))
