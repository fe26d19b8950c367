"""Get Location Queries.

ID로 단일 장소를 조회합니다. 미발견 시 LocationNotFoundError.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from location_directory.application.search.dto import LocationDetailDTO, LocationRecordDTO
from location_directory.application.search.services import LocationProjectionBuilder
from location_directory.domain.entities import Location
from location_directory.domain.exceptions import LocationNotFoundError

if TYPE_CHECKING:
    from location_directory.application.search.ports import LocationReader


class _LocationLookup:
    def __init__(self, location_reader: "LocationReader") -> None:
        self._reader = location_reader

    async def _load(self, location_id: int) -> Location:
        location = await self._reader.find_by_id(location_id)
        if location is None:
            raise LocationNotFoundError(location_id)
        return location


class GetLocationQuery(_LocationLookup):
    """저장된 장소 레코드 조회 Query."""

    async def execute(self, location_id: int) -> LocationRecordDTO:
        return LocationProjectionBuilder.record(await self._load(location_id))


class GetLocationDetailQuery(_LocationLookup):
    """장소 상세 조회 Query (상태 라벨/색상 포함)."""

    async def execute(self, location_id: int) -> LocationDetailDTO:
        """장소 상세 정보를 조회합니다.

        Raises:
            LocationNotFoundError: 해당 ID의 장소가 없음
        """
        return LocationProjectionBuilder.detail(await self._load(location_id))
