"""Coordinates Value Object."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

# 소수점 이하 8자리 고정 정밀도
COORDINATE_PRECISION = Decimal("0.00000001")


def to_coordinate(value: Decimal | float | int | str) -> Decimal:
    """좌표값을 8자리 고정 정밀도 Decimal로 변환합니다."""
    if isinstance(value, float):
        value = repr(value)
    try:
        return Decimal(value).quantize(COORDINATE_PRECISION)
    except (InvalidOperation, TypeError, ValueError) as e:
        raise ValueError(f"Invalid coordinate value: {value!r}") from e


@dataclass(frozen=True)
class Coordinates:
    """위도/경도 좌표.

    생성 시 범위를 검증하고 소수점 8자리로 정규화합니다.
    """

    latitude: Decimal
    longitude: Decimal

    def __post_init__(self) -> None:
        latitude = to_coordinate(self.latitude)
        longitude = to_coordinate(self.longitude)
        if not latitude.is_finite() or not -90 <= latitude <= 90:
            raise ValueError(f"Invalid latitude: {self.latitude}")
        if not longitude.is_finite() or not -180 <= longitude <= 180:
            raise ValueError(f"Invalid longitude: {self.longitude}")
        object.__setattr__(self, "latitude", latitude)
        object.__setattr__(self, "longitude", longitude)
