"""List Locations Query.

검색어/상태 필터를 적용한 전체 장소 목록을 조회하는 Query(지휘자)입니다.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import TYPE_CHECKING

from location_directory.application.search.dto import LocationListResult, QuerySpec
from location_directory.application.search.services import (
    LocationProjectionBuilder,
    LocationQueryEngine,
)

if TYPE_CHECKING:
    from location_directory.application.search.ports import LocationReader

logger = logging.getLogger(__name__)


class ListLocationsQuery:
    """장소 목록 조회 Query.

    Workflow:
        1. 장소 스냅샷 조회 (Port)
        2. 필터링 및 정렬 (Engine, limit 없음)
        3. 요약 DTO 변환 (Service)
    """

    def __init__(self, location_reader: "LocationReader") -> None:
        self._reader = location_reader

    async def execute(self, spec: QuerySpec) -> LocationListResult:
        """필터에 맞는 모든 장소와 전체/필터 개수를 반환합니다."""
        spec = dataclasses.replace(spec, limit=None)

        locations = await self._reader.scan()
        result = LocationQueryEngine.run(locations, spec)

        logger.info(
            "Location list completed",
            extra={
                "text": spec.text_filter,
                "status": spec.status_filter.value if spec.status_filter else None,
                "total_count": len(locations),
                "filtered_count": result.matched_count,
            },
        )
        return LocationListResult(
            locations=[LocationProjectionBuilder.summary(m.location) for m in result.matches],
            total_count=len(locations),
            filtered_count=result.matched_count,
        )
