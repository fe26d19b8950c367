"""Location Query Engine.

검색어/상태/근접 조건을 AND로 결합해 장소 스냅샷을 필터링합니다.
Port 의존성이 없는 순수 로직입니다.
"""

from __future__ import annotations

from typing import Iterable

from location_directory.application.search.dto import LocationMatch, QueryResult, QuerySpec
from location_directory.application.search.services.predicates import (
    proximity_predicate,
    status_predicate,
    text_predicate,
)
from location_directory.domain.entities import Location


class LocationQueryEngine:
    """장소 조회 엔진.

    Workflow:
        1. 검색어 필터 (title/description/address OR)
        2. 상태 필터
        3. 근접 필터 (Haversine 거리 < radius_km)
        4. 정렬: 근접 검색이면 (거리, id), 아니면 id 오름차순
        5. limit 적용 (matched_count는 적용 전 개수)
    """

    @staticmethod
    def run(locations: Iterable[Location], spec: QuerySpec) -> QueryResult:
        """조회 조건에 맞는 장소를 정렬하여 반환합니다."""
        filters = (text_predicate(spec.text_filter), status_predicate(spec.status_filter))
        proximity = proximity_predicate(spec.geo_filter) if spec.geo_filter else None

        matches: list[LocationMatch] = []
        for location in locations:
            if not all(predicate(location) for predicate in filters):
                continue
            distance = None
            if proximity is not None:
                within, distance = proximity(location)
                if not within:
                    continue
            matches.append(LocationMatch(location=location, distance_km=distance))

        if proximity is not None:
            matches.sort(key=lambda m: (m.distance_km, m.location.id))
        else:
            matches.sort(key=lambda m: m.location.id)

        matched_count = len(matches)
        if spec.limit is not None:
            matches = matches[: spec.limit]

        return QueryResult(matches=matches, matched_count=matched_count)
