"""MeterReading database model - the cumulative water meter ledger."""

from datetime import UTC, datetime
from decimal import Decimal

from sqlalchemy import Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base
from app.models.enums import Confidence


class MeterReading(Base):
    """A single cumulative meter value in cubic meters."""

    __tablename__ = "meter_readings"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        default=lambda: datetime.now(UTC),
    )  # When added to database
    reading_timestamp: Mapped[datetime] = mapped_column(index=True)  # When reading was taken

    # Cumulative total in m³ (using Decimal for precision)
    value: Mapped[Decimal] = mapped_column(Numeric(precision=12, scale=3))

    # Capture metadata, passed through untouched
    confidence: Mapped[Confidence | None] = mapped_column(String(16), nullable=True)
    notes: Mapped[str | None] = mapped_column(String(500), nullable=True)
    image: Mapped[str | None] = mapped_column(String(255), nullable=True)  # File name in IMAGES_DIR
