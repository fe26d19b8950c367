"""Application Queries 단위 테스트."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from location_directory.application.common.exceptions import StoreUnavailableError
from location_directory.application.search.dto import GeoFilter, QuerySpec
from location_directory.application.search.queries import (
    PROXIMITY_RESULT_LIMIT,
    GetLocationDetailQuery,
    GetLocationQuery,
    ListLocationsQuery,
    SearchLocationsQuery,
)
from location_directory.domain.entities import Location
from location_directory.domain.enums import LocationStatus
from location_directory.domain.exceptions import LocationNotFoundError

pytestmark = pytest.mark.asyncio


def _many_locations(count: int) -> list[Location]:
    return [
        Location(
            id=i,
            title=f"Fontana {i}",
            address="Roma",
            latitude=41.9 + i * 0.001,
            longitude=12.5,
            status=LocationStatus.ACTIVE,
        )
        for i in range(count, 0, -1)
    ]


class TestListLocationsQuery:
    """ListLocationsQuery 테스트."""

    async def test_execute_returns_all(self, mock_location_reader: AsyncMock) -> None:
        """필터 없으면 모든 장소와 개수 반환."""
        query = ListLocationsQuery(mock_location_reader)
        result = await query.execute(QuerySpec())

        assert [e.id for e in result.locations] == [1, 2, 3]
        assert result.total_count == 3
        assert result.filtered_count == 3
        mock_location_reader.scan.assert_awaited_once()

    async def test_execute_with_filters(self, mock_location_reader: AsyncMock) -> None:
        """필터 적용 시 total_count는 전체, filtered_count는 매칭 수."""
        query = ListLocationsQuery(mock_location_reader)
        result = await query.execute(
            QuerySpec(text_filter="roma", status_filter=LocationStatus.ACTIVE)
        )

        assert [e.id for e in result.locations] == [1]
        assert result.total_count == 3
        assert result.filtered_count == 1

    async def test_execute_ignores_limit(self) -> None:
        """목록 조회는 limit 없이 전체 반환."""
        reader = AsyncMock()
        reader.scan = AsyncMock(return_value=_many_locations(30))

        result = await ListLocationsQuery(reader).execute(QuerySpec(limit=5))

        assert len(result.locations) == 30
        assert result.filtered_count == 30

    async def test_execute_empty_store(self) -> None:
        reader = AsyncMock()
        reader.scan = AsyncMock(return_value=[])

        result = await ListLocationsQuery(reader).execute(QuerySpec(text_filter="x"))

        assert result.locations == []
        assert result.total_count == 0
        assert result.filtered_count == 0

    async def test_store_failure_propagates(self) -> None:
        reader = AsyncMock()
        reader.scan = AsyncMock(side_effect=StoreUnavailableError("connection refused"))

        with pytest.raises(StoreUnavailableError):
            await ListLocationsQuery(reader).execute(QuerySpec())


class TestSearchLocationsQuery:
    """SearchLocationsQuery 테스트."""

    async def test_execute_geo_scenario(self, mock_location_reader: AsyncMock) -> None:
        """A 좌표 기준 반경 5km → A, C."""
        query = SearchLocationsQuery(mock_location_reader)
        result = await query.execute(
            QuerySpec(geo_filter=GeoFilter(latitude=41.9, longitude=12.5, radius_km=5))
        )

        assert [e.id for e in result.locations] == [1, 3]
        assert result.count == 2

    async def test_execute_without_geo(self, mock_location_reader: AsyncMock) -> None:
        query = SearchLocationsQuery(mock_location_reader)
        result = await query.execute(QuerySpec(text_filter="Colosseo"))

        assert [e.title for e in result.locations] == ["Colosseo"]
        assert result.count == 1

    async def test_execute_caps_results(self) -> None:
        """최대 20개, 가까운 순."""
        reader = AsyncMock()
        reader.scan = AsyncMock(return_value=_many_locations(30))

        result = await SearchLocationsQuery(reader).execute(
            QuerySpec(geo_filter=GeoFilter(latitude=41.9, longitude=12.5, radius_km=50))
        )

        assert PROXIMITY_RESULT_LIMIT == 20
        assert result.count == 20
        assert [e.id for e in result.locations] == list(range(1, 21))

    async def test_execute_custom_limit(self) -> None:
        reader = AsyncMock()
        reader.scan = AsyncMock(return_value=_many_locations(10))

        result = await SearchLocationsQuery(reader, result_limit=3).execute(QuerySpec(limit=50))

        assert result.count == 3

    async def test_execute_no_match(self, mock_location_reader: AsyncMock) -> None:
        result = await SearchLocationsQuery(mock_location_reader).execute(
            QuerySpec(geo_filter=GeoFilter(latitude=0.0, longitude=0.0, radius_km=10))
        )

        assert result.locations == []
        assert result.count == 0


class TestGetLocationQueries:
    """GetLocationQuery / GetLocationDetailQuery 테스트."""

    async def test_detail_found(self, mock_location_reader: AsyncMock) -> None:
        result = await GetLocationDetailQuery(mock_location_reader).execute(2)

        assert result.id == 2
        assert result.status == "alarmed"
        assert result.status_label == "In Alarm"
        assert result.status_color == "red"
        mock_location_reader.find_by_id.assert_awaited_once_with(2)

    async def test_detail_not_found(self, mock_location_reader: AsyncMock) -> None:
        """없는 ID면 LocationNotFoundError (빈 레코드 반환 금지)."""
        with pytest.raises(LocationNotFoundError) as exc_info:
            await GetLocationDetailQuery(mock_location_reader).execute(999)
        assert exc_info.value.location_id == 999

    async def test_record_found(self, mock_location_reader: AsyncMock) -> None:
        result = await GetLocationQuery(mock_location_reader).execute(3)

        assert result.title == "Colosseo"
        assert result.ticket_price == "18 EUR"
        assert not hasattr(result, "status_color")

    async def test_record_not_found(self, mock_location_reader: AsyncMock) -> None:
        with pytest.raises(LocationNotFoundError):
            await GetLocationQuery(mock_location_reader).execute(999)
