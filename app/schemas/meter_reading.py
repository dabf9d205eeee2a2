"""MeterReading Pydantic schemas for request/response validation."""

from datetime import UTC, datetime
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from app.schemas.statistics import StatsResult


def to_utc(timestamp: datetime) -> datetime:
    """Convert an offset-aware timestamp to UTC; naive ones are already UTC.

    SQLite keeps only the wall-clock part of a datetime, so every stored
    timestamp has to be in UTC.
    """
    if timestamp.tzinfo is None:
        return timestamp
    return timestamp.astimezone(UTC)


class MeterReadingCreate(BaseModel):
    """Schema for recording a reading by hand.

    The timestamp defaults to the time of the request.
    """

    value: Decimal = Field(ge=0, description="Cumulative meter total in m³")
    reading_timestamp: datetime | None = None

    @field_validator("reading_timestamp")
    @classmethod
    def normalize_timestamp(cls, v: datetime | None) -> datetime | None:
        """Store readings taken in any timezone as UTC."""
        return to_utc(v) if v is not None else None


class MeterReadingResponse(BaseModel):
    """Schema for meter reading response."""

    id: int
    reading_timestamp: datetime
    value: Decimal
    confidence: str | None
    notes: str | None
    image: str | None
    created_at: datetime

    model_config = {"from_attributes": True}


class ReadingsWithStats(BaseModel):
    """All stored readings together with their derived statistics."""

    readings: list[MeterReadingResponse]
    stats: StatsResult


class ReadingCreatedResponse(BaseModel):
    """Response after a reading was stored."""

    success: bool = True
    reading: MeterReadingResponse
    stats: StatsResult


class ReadingDeletedResponse(BaseModel):
    """Response after a reading was removed."""

    success: bool = True
    stats: StatsResult
