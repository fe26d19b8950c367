"""Location filter predicates.

각 필터는 Location -> bool 순수 함수이며, 근접 필터만 거리를 함께 반환합니다.
"""

from __future__ import annotations

from typing import Callable

from location_directory.application.search.dto import GeoFilter
from location_directory.domain.entities import Location
from location_directory.domain.enums import LocationStatus
from location_directory.domain.services import haversine_km

LocationPredicate = Callable[[Location], bool]
ProximityPredicate = Callable[[Location], "tuple[bool, float | None]"]


def match_all(location: Location) -> bool:
    return True


def text_predicate(text: str | None) -> LocationPredicate:
    """제목/설명/주소 중 하나에 검색어가 포함되면 매칭 (대소문자 무시)."""
    if not text:
        return match_all
    needle = text.casefold()

    def predicate(location: Location) -> bool:
        for haystack in (location.title, location.description, location.address):
            if haystack and needle in haystack.casefold():
                return True
        return False

    return predicate


def status_predicate(status: LocationStatus | None) -> LocationPredicate:
    """상태 일치 여부. status가 None이면 모든 장소 매칭."""
    if status is None:
        return match_all

    def predicate(location: Location) -> bool:
        return location.status == status

    return predicate


def proximity_predicate(geo_filter: GeoFilter) -> ProximityPredicate:
    """기준점으로부터 radius_km 미만(strict)이면 매칭. 좌표 없는 장소는 제외."""
    origin_lat = float(geo_filter.latitude)
    origin_lon = float(geo_filter.longitude)
    radius_km = float(geo_filter.radius_km)

    def predicate(location: Location) -> tuple[bool, float | None]:
        if location.latitude is None or location.longitude is None:
            return False, None
        distance = haversine_km(
            origin_lat,
            origin_lon,
            float(location.latitude),
            float(location.longitude),
        )
        return distance < radius_km, distance

    return predicate
