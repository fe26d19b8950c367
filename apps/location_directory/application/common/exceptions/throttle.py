"""요청 제한 관련 예외."""

from location_directory.application.common.exceptions.base import ApplicationError


class RateLimitExceededError(ApplicationError):
    """클라이언트 요청 한도 초과."""

    def __init__(self, limit: int, retry_after: int) -> None:
        self.limit = limit
        self.retry_after = retry_after
        super().__init__(f"Too many requests. Try again in {retry_after} seconds.")
