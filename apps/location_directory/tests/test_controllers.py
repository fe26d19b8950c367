"""HTTP Controllers 단위 테스트."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterator
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from location_directory.application.common.exceptions import StoreUnavailableError
from location_directory.domain.entities import Location
from location_directory.domain.enums import LocationStatus
from location_directory.infrastructure.cache import RedisRateLimiter
from location_directory.main import app
from location_directory.setup.dependencies import get_location_reader, get_rate_limiter


@pytest.fixture
def client(mock_location_reader: AsyncMock) -> Iterator[TestClient]:
    """LocationReader를 mock으로 대체한 TestClient."""
    app.dependency_overrides[get_location_reader] = lambda: mock_location_reader
    app.dependency_overrides[get_rate_limiter] = lambda: None
    yield TestClient(app)
    app.dependency_overrides.clear()


def _counting_redis() -> AsyncMock:
    """클라이언트별 카운터를 흉내 내는 Redis mock (윈도우 경계 무시)."""
    counters: dict[str, int] = {}

    async def _eval(script: str, numkeys: int, key: str, limit: int, window: int) -> list[int]:
        client_key = key.rsplit(":", 1)[0]
        current = counters.get(client_key, 0)
        if current >= limit:
            return [0, current, 0]
        counters[client_key] = current + 1
        return [1, current + 1, limit - current - 1]

    redis = AsyncMock()
    redis.eval = AsyncMock(side_effect=_eval)
    return redis


def _limited_client(mock_location_reader: AsyncMock, limit: int) -> TestClient:
    limiter = RedisRateLimiter(_counting_redis(), limit=limit, window_seconds=60)
    app.dependency_overrides[get_location_reader] = lambda: mock_location_reader
    app.dependency_overrides[get_rate_limiter] = lambda: limiter
    return TestClient(app)


class TestHealth:
    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_ping(self, client: TestClient) -> None:
        assert client.get("/ping").json() == "pong"


class TestListLocations:
    """GET /api/v1/locations 테스트."""

    def test_list_all(self, client: TestClient) -> None:
        response = client.get("/api/v1/locations")

        assert response.status_code == 200
        body = response.json()
        assert [loc["id"] for loc in body["locations"]] == [1, 2, 3]
        assert body["total_count"] == 3
        assert body["filtered_count"] == 3

    def test_summary_shape_and_precision(self, client: TestClient) -> None:
        """요약 필드만 반환하고 좌표는 소수점 8자리 문자열."""
        body = client.get("/api/v1/locations").json()
        first = body["locations"][0]

        assert set(first) == {"id", "title", "address", "latitude", "longitude", "status"}
        assert first["latitude"] == "41.90000000"
        assert first["longitude"] == "12.50000000"

    def test_coordinates_near_zero_fixed_point(
        self, client: TestClient, mock_location_reader: AsyncMock
    ) -> None:
        """적도/본초자오선 근처 좌표도 지수 표기 없이 8자리 문자열."""
        mock_location_reader.scan.return_value = [
            Location(
                id=10,
                title="Null Island",
                address="Golfo di Guinea",
                latitude=Decimal("0"),
                longitude=Decimal("0.00000001"),
                status=LocationStatus.ACTIVE,
            )
        ]

        first = client.get("/api/v1/locations").json()["locations"][0]

        assert first["latitude"] == "0.00000000"
        assert first["longitude"] == "0.00000001"

    def test_status_filter(self, client: TestClient) -> None:
        body = client.get("/api/v1/locations", params={"status": "active"}).json()
        assert [loc["id"] for loc in body["locations"]] == [1]
        assert body["total_count"] == 3
        assert body["filtered_count"] == 1

    def test_status_all(self, client: TestClient) -> None:
        body = client.get("/api/v1/locations", params={"status": "all"}).json()
        assert body["filtered_count"] == 3

    def test_status_case_insensitive(self, client: TestClient) -> None:
        body = client.get("/api/v1/locations", params={"status": "Active"}).json()
        assert [loc["id"] for loc in body["locations"]] == [1]

    def test_search_filter(self, client: TestClient) -> None:
        body = client.get("/api/v1/locations", params={"search": "colosseo"}).json()
        assert [loc["title"] for loc in body["locations"]] == ["Colosseo"]

    def test_invalid_status(self, client: TestClient) -> None:
        response = client.get("/api/v1/locations", params={"status": "attivo"})
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_STATUS"

    def test_search_too_long(self, client: TestClient) -> None:
        response = client.get("/api/v1/locations", params={"search": "x" * 256})
        assert response.status_code == 422

    def test_store_unavailable(self, client: TestClient, mock_location_reader: AsyncMock) -> None:
        mock_location_reader.scan.side_effect = StoreUnavailableError("connection refused")

        response = client.get("/api/v1/locations")

        assert response.status_code == 503
        assert response.json()["code"] == "STORE_UNAVAILABLE"


class TestSearchLocations:
    """GET /api/v1/locations/search 테스트."""

    def test_geo_search(self, client: TestClient) -> None:
        response = client.get(
            "/api/v1/locations/search", params={"lat": 41.9, "lng": 12.5, "radius": 5}
        )

        assert response.status_code == 200
        body = response.json()
        assert [loc["id"] for loc in body["locations"]] == [1, 3]
        assert body["count"] == 2

    def test_geo_search_default_radius(self, client: TestClient) -> None:
        """radius 생략 시 10km."""
        body = client.get("/api/v1/locations/search", params={"lat": 45.4, "lng": 9.2}).json()
        assert [loc["id"] for loc in body["locations"]] == [2]

    def test_geo_search_zero_radius(self, client: TestClient) -> None:
        body = client.get(
            "/api/v1/locations/search", params={"lat": 41.9, "lng": 12.5, "radius": 0}
        ).json()
        assert body == {"locations": [], "count": 0}

    def test_single_coordinate_ignored(self, client: TestClient) -> None:
        """lat만 있으면 근접 검색 비활성."""
        body = client.get("/api/v1/locations/search", params={"lat": 41.9}).json()
        assert [loc["id"] for loc in body["locations"]] == [1, 2, 3]

    def test_text_and_status(self, client: TestClient) -> None:
        body = client.get(
            "/api/v1/locations/search", params={"q": "roma", "status": "inactive"}
        ).json()
        assert [loc["id"] for loc in body["locations"]] == [3]
        assert body["count"] == 1

    @pytest.mark.parametrize(
        "params",
        [
            {"lat": "abc", "lng": 12.5},
            {"lat": 91, "lng": 12.5},
            {"lat": 41.9, "lng": 181},
            {"lat": 41.9, "lng": 12.5, "radius": -1},
            {"lat": 41.9, "lng": 12.5, "radius": "far"},
            {"q": "x" * 256},
        ],
    )
    def test_invalid_input(self, client: TestClient, params: dict) -> None:
        response = client.get("/api/v1/locations/search", params=params)
        assert response.status_code == 422

    def test_invalid_status(self, client: TestClient) -> None:
        response = client.get("/api/v1/locations/search", params={"status": "closed"})
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_STATUS"


class TestGetLocation:
    """GET /api/v1/locations/{id}[/details] 테스트."""

    def test_get_location(self, client: TestClient) -> None:
        response = client.get("/api/v1/locations/3")

        assert response.status_code == 200
        body = response.json()
        assert body["title"] == "Colosseo"
        assert body["latitude"] == "41.90000000"
        assert "status_label" not in body

    def test_get_location_detail(self, client: TestClient) -> None:
        response = client.get("/api/v1/locations/3/details")

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == 3
        assert body["description"] == "Anfiteatro Flavio"
        assert body["opening_hours"] == "08:30 - 19:15"
        assert body["ticket_price"] == "18 EUR"
        assert body["website"] == "https://colosseo.it"
        assert body["visitor_notes"] == "Prenotazione consigliata"
        assert body["status"] == "inactive"
        assert body["status_label"] == "Inactive"
        assert body["status_color"] == "gray"
        assert body["created_at"].startswith("2025-08-25T18:39:00")

    def test_detail_not_found(self, client: TestClient) -> None:
        response = client.get("/api/v1/locations/999/details")

        assert response.status_code == 404
        assert response.json()["code"] == "LOCATION_NOT_FOUND"

    def test_get_location_not_found(self, client: TestClient) -> None:
        response = client.get("/api/v1/locations/999")
        assert response.status_code == 404

    def test_non_integer_id(self, client: TestClient) -> None:
        response = client.get("/api/v1/locations/abc")
        assert response.status_code == 422


class TestRateLimiting:
    """클라이언트별 분당 요청 제한 테스트."""

    @pytest.fixture(autouse=True)
    def _clear_overrides(self) -> Iterator[None]:
        yield
        app.dependency_overrides.clear()

    def test_61st_request_rejected(self, mock_location_reader: AsyncMock) -> None:
        """분당 60회 초과 시 429."""
        client = _limited_client(mock_location_reader, limit=60)

        for _ in range(60):
            assert client.get("/api/v1/locations").status_code == 200
        response = client.get("/api/v1/locations/search")

        assert response.status_code == 429
        assert response.json()["code"] == "RATE_LIMITED"
        assert int(response.headers["Retry-After"]) >= 1
        assert response.headers["X-RateLimit-Limit"] == "60"
        assert response.headers["X-RateLimit-Remaining"] == "0"

    def test_rate_limit_headers(self, mock_location_reader: AsyncMock) -> None:
        client = _limited_client(mock_location_reader, limit=60)

        response = client.get("/api/v1/locations/1")

        assert response.status_code == 200
        assert response.headers["X-RateLimit-Limit"] == "60"
        assert response.headers["X-RateLimit-Remaining"] == "59"

    def test_limit_is_per_client(self, mock_location_reader: AsyncMock) -> None:
        client = _limited_client(mock_location_reader, limit=2)
        first = {"X-Forwarded-For": "198.51.100.1"}
        second = {"X-Forwarded-For": "198.51.100.2, 10.0.0.1"}

        assert client.get("/api/v1/locations", headers=first).status_code == 200
        assert client.get("/api/v1/locations", headers=first).status_code == 200
        assert client.get("/api/v1/locations", headers=first).status_code == 429
        assert client.get("/api/v1/locations", headers=second).status_code == 200

    def test_health_not_limited(self, mock_location_reader: AsyncMock) -> None:
        client = _limited_client(mock_location_reader, limit=1)

        assert client.get("/health").status_code == 200
        assert client.get("/health").status_code == 200
        assert client.get("/ping").status_code == 200
