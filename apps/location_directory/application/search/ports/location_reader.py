"""Location Reader Port."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from location_directory.domain.entities import Location


class LocationReader(ABC):
    """장소 데이터 조회 포트.

    Infrastructure Layer에서 구현합니다.
    """

    @abstractmethod
    async def scan(self) -> Sequence[Location]:
        """전체 장소의 스냅샷을 ID 오름차순으로 반환합니다.

        Raises:
            StoreUnavailableError: 저장소 접근 실패
        """
        ...

    @abstractmethod
    async def find_by_id(self, location_id: int) -> Location | None:
        """ID로 장소를 조회합니다.

        Args:
            location_id: 장소 ID

        Returns:
            Location 또는 None (미발견 시)
        """
        ...
