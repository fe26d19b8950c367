"""검증 관련 예외."""

from location_directory.application.common.exceptions.base import ApplicationError


class ValidationError(ApplicationError):
    """클라이언트 입력 검증 실패."""


class InvalidStatusError(ValidationError):
    """유효하지 않은 status 값."""

    def __init__(self, value: str, allowed: list[str]) -> None:
        super().__init__(f"Invalid status '{value}'. Allowed values: {allowed} or 'all'.")


class InvalidCoordinatesError(ValidationError):
    """유효하지 않은 위도/경도."""

    def __init__(self, latitude: object, longitude: object) -> None:
        super().__init__(f"Invalid coordinates (lat={latitude}, lng={longitude})")


class InvalidRadiusError(ValidationError):
    """유효하지 않은 검색 반경."""

    def __init__(self, radius: object) -> None:
        super().__init__(f"Invalid radius '{radius}'. Radius must be a number >= 0.")


class SearchTextTooLongError(ValidationError):
    """검색어 길이 초과."""

    def __init__(self, max_length: int) -> None:
        super().__init__(f"Search text must be at most {max_length} characters")
