"""Location Status Enum."""

from __future__ import annotations

from enum import Enum

# 상태 필터 비활성화 sentinel (실제 상태값과 겹치지 않음)
STATUS_FILTER_ALL = "all"


class LocationStatus(str, Enum):
    """장소 운영 상태."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    ALARMED = "alarmed"

    @classmethod
    def values(cls) -> list[str]:
        return [status.value for status in cls]

    @classmethod
    def parse_filter(cls, raw: str | None) -> LocationStatus | None:
        """상태 필터 문자열을 파싱합니다.

        대소문자를 구분하지 않으며, 빈 값 또는 'all'이면 None(필터 없음)을 반환합니다.

        Raises:
            ValueError: 허용되지 않은 상태값
        """
        if raw is None:
            return None
        value = raw.strip().lower()
        if not value or value == STATUS_FILTER_ALL:
            return None
        return cls(value)
