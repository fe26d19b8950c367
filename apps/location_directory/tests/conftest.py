"""Test fixtures for location directory tests."""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from location_directory.domain.entities import Location
from location_directory.domain.enums import LocationStatus


@pytest.fixture
def rome_active() -> Location:
    """로마 - 활성 장소 (A)."""
    return Location(
        id=1,
        title="Fontana di Trevi",
        description="Fontana barocca nel rione Trevi",
        address="Piazza di Trevi, Roma",
        latitude=Decimal("41.9"),
        longitude=Decimal("12.5"),
        status=LocationStatus.ACTIVE,
    )


@pytest.fixture
def milan_alarmed() -> Location:
    """밀라노 - 경보 상태 장소 (B)."""
    return Location(
        id=2,
        title="Duomo di Milano",
        description="Cattedrale gotica",
        address="Piazza del Duomo, Milano",
        latitude=Decimal("45.4"),
        longitude=Decimal("9.2"),
        status=LocationStatus.ALARMED,
    )


@pytest.fixture
def rome_inactive() -> Location:
    """로마 - 비활성 장소 (C), A와 같은 좌표."""
    return Location(
        id=3,
        title="Colosseo",
        description="Anfiteatro Flavio",
        address="Piazza del Colosseo, Roma",
        latitude=Decimal("41.9"),
        longitude=Decimal("12.5"),
        status=LocationStatus.INACTIVE,
        opening_hours="08:30 - 19:15",
        ticket_price="18 EUR",
        website="https://colosseo.it",
        phone="+39 06 3996 7700",
        visitor_notes="Prenotazione consigliata",
        created_at=datetime(2025, 8, 25, 18, 39, tzinfo=timezone.utc),
        updated_at=datetime(2025, 8, 26, 9, 0, tzinfo=timezone.utc),
    )


@pytest.fixture
def unlocated() -> Location:
    """좌표가 없는 장소."""
    return Location(
        id=4,
        title="Museo senza mappa",
        address="Roma",
        latitude=Decimal("41.9"),
        longitude=None,
        status=LocationStatus.ACTIVE,
    )


@pytest.fixture
def sample_locations(
    rome_active: Location, milan_alarmed: Location, rome_inactive: Location
) -> list[Location]:
    """시나리오 A/B/C (저장소 순서와 무관하도록 섞어서 반환)."""
    return [rome_inactive, rome_active, milan_alarmed]


@pytest.fixture
def mock_location_reader(sample_locations: list[Location]) -> AsyncMock:
    """LocationReader mock."""
    by_id = {location.id: location for location in sample_locations}
    reader = AsyncMock()
    reader.scan = AsyncMock(return_value=sample_locations)
    reader.find_by_id = AsyncMock(side_effect=lambda location_id: by_id.get(location_id))
    return reader
