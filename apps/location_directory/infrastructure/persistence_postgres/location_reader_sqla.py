"""SQLAlchemy Location Reader Implementation."""

from __future__ import annotations

import logging
from typing import Sequence

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from location_directory.application.common.exceptions import StoreUnavailableError
from location_directory.application.search.ports import LocationReader
from location_directory.domain.entities import Location
from location_directory.domain.enums import LocationStatus
from location_directory.infrastructure.persistence_postgres.models import LocationModel

logger = logging.getLogger(__name__)


class SqlaLocationReader(LocationReader):
    """SQLAlchemy 기반 장소 Reader.

    LocationReader Port를 구현합니다.
    DB 오류와 연결 실패(asyncpg의 OSError)는 StoreUnavailableError로 변환합니다.
    거리 계산은 DB가 아닌 조회 엔진에서 수행하므로 단순 스캔만 제공합니다.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize.

        Args:
            session: SQLAlchemy 비동기 세션
        """
        self._session = session

    async def scan(self) -> Sequence[Location]:
        """전체 장소를 ID 오름차순으로 조회합니다."""
        query = select(LocationModel).order_by(LocationModel.id.asc())
        try:
            result = await self._session.execute(query)
        except (SQLAlchemyError, OSError) as e:
            logger.error("Location scan failed", extra={"error": str(e)})
            raise StoreUnavailableError(str(e)) from e
        return [self._to_domain(row) for row in result.scalars().all()]

    async def find_by_id(self, location_id: int) -> Location | None:
        """ID로 장소를 조회합니다."""
        query = select(LocationModel).where(LocationModel.id == location_id)
        try:
            result = await self._session.execute(query)
        except (SQLAlchemyError, OSError) as e:
            logger.error(
                "Location lookup failed",
                extra={"location_id": location_id, "error": str(e)},
            )
            raise StoreUnavailableError(str(e)) from e
        row = result.scalar_one_or_none()
        if row is None:
            return None
        return self._to_domain(row)

    @staticmethod
    def _to_domain(row: LocationModel) -> Location:
        """ORM 모델을 도메인 엔티티로 변환합니다."""
        return Location(
            id=int(row.id),
            title=row.title,
            description=row.description,
            address=row.address or "",
            latitude=row.latitude,
            longitude=row.longitude,
            status=LocationStatus(row.status),
            opening_hours=row.opening_hours,
            ticket_price=row.ticket_price,
            website=row.website,
            phone=row.phone,
            visitor_notes=row.visitor_notes,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )
