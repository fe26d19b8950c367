"""Location Controller."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from location_directory.application.search import (
    GetLocationDetailQuery,
    GetLocationQuery,
    ListLocationsQuery,
    QuerySpecBuilder,
    SearchLocationsQuery,
)
from location_directory.presentation.http.rate_limit import enforce_rate_limit
from location_directory.presentation.http.schemas import (
    LocationDetail,
    LocationListResponse,
    LocationRecord,
    LocationSearchResponse,
    LocationSummary,
)
from location_directory.setup.config import get_settings
from location_directory.setup.dependencies import (
    get_list_locations_query,
    get_location_detail_query,
    get_location_query,
    get_search_locations_query,
)

router = APIRouter(
    prefix="/locations",
    tags=["locations"],
    dependencies=[Depends(enforce_rate_limit)],
)

MAX_TEXT_LENGTH = get_settings().search_max_text_length
STATUS_DESCRIPTION = "One of active, inactive, alarmed. Use 'all' (default) for no filtering."


@router.get("", response_model=LocationListResponse, summary="List locations")
async def list_locations(
    query: Annotated[ListLocationsQuery, Depends(get_list_locations_query)],
    search: str | None = Query(None, max_length=MAX_TEXT_LENGTH, description="검색어"),
    status: str | None = Query(None, description=STATUS_DESCRIPTION),
) -> LocationListResponse:
    """검색어/상태 필터를 적용한 전체 장소 목록을 조회합니다."""
    spec = QuerySpecBuilder.build(text=search, status=status, max_text_length=MAX_TEXT_LENGTH)
    result = await query.execute(spec)

    return LocationListResponse(
        locations=[LocationSummary.model_validate(e) for e in result.locations],
        total_count=result.total_count,
        filtered_count=result.filtered_count,
    )


@router.get("/search", response_model=LocationSearchResponse, summary="Search nearby locations")
async def search_locations(
    query: Annotated[SearchLocationsQuery, Depends(get_search_locations_query)],
    q: str | None = Query(None, max_length=MAX_TEXT_LENGTH, description="검색어"),
    status: str | None = Query(None, description=STATUS_DESCRIPTION),
    lat: float | None = Query(None, ge=-90, le=90, description="기준 위도"),
    lng: float | None = Query(None, ge=-180, le=180, description="기준 경도"),
    radius: float | None = Query(
        None,
        ge=0,
        description="Radius in km (default 10). Used only when both lat and lng are given.",
    ),
) -> LocationSearchResponse:
    """검색어/상태/근접 조건으로 장소를 검색합니다 (가까운 순, 최대 20개)."""
    spec = QuerySpecBuilder.build(
        text=q,
        status=status,
        latitude=lat,
        longitude=lng,
        radius=radius,
        max_text_length=MAX_TEXT_LENGTH,
    )
    result = await query.execute(spec)

    return LocationSearchResponse(
        locations=[LocationSummary.model_validate(e) for e in result.locations],
        count=result.count,
    )


@router.get("/{location_id}", response_model=LocationRecord, summary="Get location")
async def get_location(
    location_id: int,
    query: Annotated[GetLocationQuery, Depends(get_location_query)],
) -> LocationRecord:
    """저장된 장소 레코드를 조회합니다."""
    result = await query.execute(location_id)
    return LocationRecord.model_validate(result)


@router.get(
    "/{location_id}/details", response_model=LocationDetail, summary="Get location detail"
)
async def get_location_detail(
    location_id: int,
    query: Annotated[GetLocationDetailQuery, Depends(get_location_detail_query)],
) -> LocationDetail:
    """장소 상세 정보를 조회합니다 (상태 라벨/색상 포함)."""
    result = await query.execute(location_id)
    return LocationDetail.model_validate(result)
