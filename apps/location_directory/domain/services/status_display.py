"""Status display mapping."""

from __future__ import annotations

from dataclasses import dataclass

from location_directory.domain.enums import LocationStatus


@dataclass(frozen=True)
class StatusDisplay:
    label: str
    color: str


UNKNOWN_STATUS_DISPLAY = StatusDisplay(label="Unknown", color="gray")

_STATUS_DISPLAYS: dict[str, StatusDisplay] = {
    LocationStatus.ACTIVE.value: StatusDisplay(label="Active", color="green"),
    LocationStatus.INACTIVE.value: StatusDisplay(label="Inactive", color="gray"),
    LocationStatus.ALARMED.value: StatusDisplay(label="In Alarm", color="red"),
}


def status_display(status: LocationStatus | str | None) -> StatusDisplay:
    """상태값에 대한 표시용 라벨/색상을 반환합니다. 알 수 없는 값은 Unknown."""
    key = status.value if isinstance(status, LocationStatus) else status
    return _STATUS_DISPLAYS.get(key, UNKNOWN_STATUS_DISPLAY)
