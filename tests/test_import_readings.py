"""Tests for importing a JSON reading export."""

import json
from datetime import UTC, datetime
from decimal import Decimal

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import Base
from app.models.meter_reading import MeterReading
from app.services.statistics import compute_statistics
from scripts.import_readings import parse_export


def test_parse_export(tmp_path):
    """Test exported readings become MeterReading rows in export order."""
    export = tmp_path / "data.json"
    export.write_text(
        json.dumps(
            {
                "readings": [
                    {
                        "id": "1704096000000",
                        "date": "2024-01-01T08:00:00.000Z",
                        "value": 100.0,
                        "confidence": "high",
                        "notes": "Clear digits",
                        "image": "photo_2024-01-01_08-00-00.jpg",
                    },
                    {
                        "id": "1706774400000",
                        "date": "2024-02-01T08:00:00.000Z",
                        "value": 103,
                        "confidence": "manual",
                        "notes": "Manually entered",
                        "image": None,
                    },
                ]
            }
        ),
        encoding="utf-8",
    )

    readings = parse_export(export)

    assert [r.value for r in readings] == [Decimal("100.0"), Decimal("103")]
    assert readings[0].image == "photo_2024-01-01_08-00-00.jpg"
    assert readings[1].confidence == "manual"
    assert readings[0].reading_timestamp.tzinfo is not None

    stats = compute_statistics(readings)
    assert stats.last_interval is not None
    assert stats.last_interval.liters_per_day == 96.8


def test_parse_empty_export(tmp_path):
    """Test an export without readings."""
    export = tmp_path / "data.json"
    export.write_text("{}", encoding="utf-8")

    assert parse_export(export) == []


def test_offset_timestamps_stored_as_utc(tmp_path):
    """Test exported readings with an offset keep their instant once stored."""
    export = tmp_path / "data.json"
    export.write_text(
        json.dumps(
            {
                "readings": [
                    {"date": "2024-01-02T00:30:00Z", "value": 100.0},
                    {"date": "2024-01-01T23:00:00-02:00", "value": 100.1},
                ]
            }
        ),
        encoding="utf-8",
    )

    readings = parse_export(export)
    assert readings[1].reading_timestamp == datetime(2024, 1, 2, 1, 0, tzinfo=UTC)

    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    with sessionmaker(bind=engine)() as db:
        db.add_all(readings)
        db.commit()
        stored = db.query(MeterReading).order_by(MeterReading.id).all()

        assert stored[1].reading_timestamp == datetime(2024, 1, 2, 1, 0)

        stats = compute_statistics(stored)
        assert stats.last_interval is not None
        assert stats.last_interval.liters == 100.0
        assert stats.last_interval.liters_per_day == 4800.0
