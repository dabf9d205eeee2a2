"""MeterReading service - storage operations around the statistics engine."""

import logging
from datetime import UTC, datetime

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from app.core.config import settings
from app.models.enums import Confidence
from app.models.meter_reading import MeterReading
from app.schemas.meter_reading import MeterReadingCreate
from app.schemas.statistics import StatsResult
from app.services.statistics import ReadingSeries, compute_statistics, find_decreasing_pairs

logger = logging.getLogger(__name__)


def list_readings(db: Session) -> list[MeterReading]:
    """Get all readings in the order they were stored."""
    return db.query(MeterReading).order_by(MeterReading.id).all()


def get_reading(db: Session, reading_id: int) -> MeterReading:
    """Get a reading by ID or raise 404."""
    reading = db.query(MeterReading).filter(MeterReading.id == reading_id).first()
    if not reading:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Reading not found",
        )
    return reading


def create_reading(
    db: Session,
    reading_data: MeterReadingCreate,
    confidence: Confidence | None = Confidence.MANUAL,
    notes: str | None = "Manually entered",
    image: str | None = None,
) -> MeterReading:
    """Store a new reading. Defaults describe a hand-typed value."""
    db_reading = MeterReading(
        reading_timestamp=reading_data.reading_timestamp or datetime.now(UTC),
        value=reading_data.value,
        confidence=confidence,
        notes=notes,
        image=image,
    )
    db.add(db_reading)
    db.commit()
    db.refresh(db_reading)
    logger.info(
        "Stored reading %s: %s m³ at %s",
        db_reading.id,
        db_reading.value,
        db_reading.reading_timestamp.isoformat(),
    )
    return db_reading


def delete_reading(db: Session, reading_id: int) -> None:
    """Delete a reading and its photo, if one was kept."""
    reading = get_reading(db, reading_id)

    if reading.image:
        # Only plain file names are stored; never follow a path out of the image dir
        image_path = settings.IMAGES_DIR / reading.image
        if image_path.parent == settings.IMAGES_DIR and image_path.is_file():
            image_path.unlink()
            logger.info("Removed image %s of reading %s", reading.image, reading_id)

    db.delete(reading)
    db.commit()
    logger.info("Deleted reading %s", reading_id)


def get_statistics(
    db: Session,
    now: datetime | None = None,
    readings: list[MeterReading] | None = None,
) -> StatsResult:
    """Compute statistics over every stored reading.

    Pass ``readings`` when they were already loaded by the caller.
    """
    if readings is None:
        readings = list_readings(db)

    for earlier, later in find_decreasing_pairs(ReadingSeries(readings)):
        logger.warning(
            "Meter value decreased from %s (reading %s) to %s (reading %s)",
            earlier.value,
            earlier.id,
            later.value,
            later.id,
        )

    return compute_statistics(readings, now)
