"""Initial location directory schema.

Revision ID: 0001
Revises: None
Create Date: 2026-01-10

Schema: location_directory.*

- location_directory.locations (좌표 NUMERIC 소수점 8자리, 방문 정보 컬럼 포함)
"""

from typing import Sequence

from alembic import op

revision: str = "0001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create location directory tables.

    Note: IF NOT EXISTS로 기존 테이블 보존
    """
    op.execute("CREATE SCHEMA IF NOT EXISTS location_directory")

    op.execute("""
        CREATE TABLE IF NOT EXISTS location_directory.locations (
            id BIGSERIAL PRIMARY KEY,
            title VARCHAR(255) NOT NULL,
            description TEXT,
            address VARCHAR(255) NOT NULL DEFAULT '',
            latitude NUMERIC(10, 8),
            longitude NUMERIC(11, 8),
            status VARCHAR(16) NOT NULL DEFAULT 'active',
            opening_hours TEXT,
            ticket_price VARCHAR(255),
            website VARCHAR(255),
            phone VARCHAR(255),
            visitor_notes TEXT,
            created_at TIMESTAMPTZ DEFAULT NOW(),
            updated_at TIMESTAMPTZ DEFAULT NOW(),

            CONSTRAINT ck_locations_status
                CHECK (status IN ('active', 'inactive', 'alarmed')),
            CONSTRAINT ck_locations_latitude
                CHECK (latitude IS NULL OR latitude BETWEEN -90 AND 90),
            CONSTRAINT ck_locations_longitude
                CHECK (longitude IS NULL OR longitude BETWEEN -180 AND 180)
        )
    """)

    op.execute("""
        CREATE INDEX IF NOT EXISTS ix_locations_status
        ON location_directory.locations(status)
    """)


def downgrade() -> None:
    """Drop location directory tables."""
    op.execute("DROP TABLE IF EXISTS location_directory.locations")
