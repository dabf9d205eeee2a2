"""MeterReading routes for the ledger and its statistics."""

from datetime import datetime

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.api.dependencies import require_auth
from app.core.database import get_db
from app.schemas.meter_reading import (
    MeterReadingCreate,
    MeterReadingResponse,
    ReadingCreatedResponse,
    ReadingDeletedResponse,
    ReadingsWithStats,
)
from app.schemas.statistics import StatsResult
from app.services import meter_reading as reading_service

router = APIRouter(tags=["meter-readings"], dependencies=[Depends(require_auth)])


@router.get("/data", response_model=ReadingsWithStats)
def get_data(db: Session = Depends(get_db)):
    """Get all readings together with their statistics."""
    readings = reading_service.list_readings(db)
    return ReadingsWithStats(
        readings=[MeterReadingResponse.model_validate(r) for r in readings],
        stats=reading_service.get_statistics(db, readings=readings),
    )


@router.get("/readings", response_model=list[MeterReadingResponse])
def get_readings(db: Session = Depends(get_db)):
    """Get all readings in the order they were stored."""
    return reading_service.list_readings(db)


@router.get("/stats", response_model=StatsResult)
def get_stats(
    now: datetime | None = Query(None, description="Reference time, defaults to the current time"),
    db: Session = Depends(get_db),
):
    """
    Get consumption statistics.

    Rates are in liters per day, derived from the cumulative m³ readings.
    """
    return reading_service.get_statistics(db, now)


@router.post(
    "/reading/manual",
    response_model=ReadingCreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_manual_reading(
    reading_data: MeterReadingCreate,
    db: Session = Depends(get_db),
):
    """Record a reading typed in by hand."""
    reading = reading_service.create_reading(db, reading_data)
    return ReadingCreatedResponse(
        reading=MeterReadingResponse.model_validate(reading),
        stats=reading_service.get_statistics(db),
    )


@router.delete("/reading/{reading_id}", response_model=ReadingDeletedResponse)
def delete_reading(
    reading_id: int,
    db: Session = Depends(get_db),
):
    """Delete a reading and its photo."""
    reading_service.delete_reading(db, reading_id)
    return ReadingDeletedResponse(stats=reading_service.get_statistics(db))
