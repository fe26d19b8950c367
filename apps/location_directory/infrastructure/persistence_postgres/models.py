"""SQLAlchemy ORM models."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import BigInteger, CheckConstraint, DateTime, Numeric, String, Text, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

SCHEMA = "location_directory"


class Base(DeclarativeBase):
    pass


class LocationModel(Base):
    """ORM model for map directory locations."""

    __tablename__ = "locations"
    __table_args__ = (
        CheckConstraint(
            "status IN ('active', 'inactive', 'alarmed')",
            name="ck_locations_status",
        ),
        CheckConstraint(
            "latitude IS NULL OR latitude BETWEEN -90 AND 90",
            name="ck_locations_latitude",
        ),
        CheckConstraint(
            "longitude IS NULL OR longitude BETWEEN -180 AND 180",
            name="ck_locations_longitude",
        ),
        {"schema": SCHEMA},
    )

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text)
    address: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    latitude: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 8, asdecimal=True))
    longitude: Mapped[Optional[Decimal]] = mapped_column(Numeric(11, 8, asdecimal=True))
    status: Mapped[str] = mapped_column(String(16), nullable=False, default="active", index=True)
    opening_hours: Mapped[Optional[str]] = mapped_column(Text)
    ticket_price: Mapped[Optional[str]] = mapped_column(String(255))
    website: Mapped[Optional[str]] = mapped_column(String(255))
    phone: Mapped[Optional[str]] = mapped_column(String(255))
    visitor_notes: Mapped[Optional[str]] = mapped_column(Text)
    created_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )
