"""Query Spec Builder.

요청 파라미터를 검증하여 QuerySpec으로 변환합니다.
검증 실패는 ValidationError 계열 예외로 조회 엔진에 도달하기 전에 거부됩니다.
"""

from __future__ import annotations

import math

from location_directory.application.common.exceptions import (
    InvalidCoordinatesError,
    InvalidRadiusError,
    InvalidStatusError,
    SearchTextTooLongError,
)
from location_directory.application.search.dto import DEFAULT_RADIUS_KM, GeoFilter, QuerySpec
from location_directory.domain.enums import LocationStatus
from location_directory.domain.value_objects import Coordinates

MAX_TEXT_LENGTH = 255


class QuerySpecBuilder:
    """요청 파라미터 → QuerySpec 변환 서비스."""

    @classmethod
    def build(
        cls,
        *,
        text: str | None = None,
        status: str | None = None,
        latitude: float | str | None = None,
        longitude: float | str | None = None,
        radius: float | str | None = None,
        limit: int | None = None,
        max_text_length: int = MAX_TEXT_LENGTH,
    ) -> QuerySpec:
        return QuerySpec(
            text_filter=cls.parse_text(text, max_text_length=max_text_length),
            status_filter=cls.parse_status(status),
            geo_filter=cls.parse_geo(latitude, longitude, radius),
            limit=limit,
        )

    @staticmethod
    def parse_text(raw: str | None, *, max_text_length: int = MAX_TEXT_LENGTH) -> str | None:
        if raw is None:
            return None
        if len(raw) > max_text_length:
            raise SearchTextTooLongError(max_text_length)
        text = raw.strip()
        return text or None

    @staticmethod
    def parse_status(raw: str | None) -> LocationStatus | None:
        try:
            return LocationStatus.parse_filter(raw)
        except ValueError:
            raise InvalidStatusError(value=str(raw), allowed=LocationStatus.values())

    @classmethod
    def parse_geo(
        cls,
        latitude: float | str | None,
        longitude: float | str | None,
        radius: float | str | None,
    ) -> GeoFilter | None:
        # 위도/경도가 모두 있어야 근접 검색 활성화
        if cls._is_blank(latitude) or cls._is_blank(longitude):
            return None
        try:
            coordinates = Coordinates(latitude=latitude, longitude=longitude)
        except ValueError:
            raise InvalidCoordinatesError(latitude, longitude)
        return GeoFilter(
            latitude=float(coordinates.latitude),
            longitude=float(coordinates.longitude),
            radius_km=cls.parse_radius(radius),
        )

    @classmethod
    def parse_radius(cls, raw: float | str | None) -> float:
        if cls._is_blank(raw):
            return DEFAULT_RADIUS_KM
        try:
            radius = float(raw)
        except (TypeError, ValueError):
            raise InvalidRadiusError(raw)
        if math.isnan(radius) or radius < 0:
            raise InvalidRadiusError(raw)
        return radius

    @staticmethod
    def _is_blank(value: object) -> bool:
        return value is None or (isinstance(value, str) and not value.strip())
