"""저장소 관련 예외."""

from location_directory.application.common.exceptions.base import ApplicationError


class StoreUnavailableError(ApplicationError):
    """장소 저장소에 접근할 수 없음."""

    def __init__(self, reason: str | None = None) -> None:
        self.reason = reason
        super().__init__("Location store unavailable")
