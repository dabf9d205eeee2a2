"""Import readings from a JSON export into the database.

The export looks like ``{"readings": [{"id", "date", "value", "confidence",
"notes", "image"}, ...]}``. Image files are expected to be copied into
IMAGES_DIR separately.
"""

import argparse
import json
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from app.core.database import Base, SessionLocal, engine
from app.models.meter_reading import MeterReading
from app.schemas.meter_reading import to_utc


def parse_export(path: Path) -> list[MeterReading]:
    """Turn exported reading dicts into unsaved MeterReading rows."""
    data = json.loads(path.read_text(encoding="utf-8"))

    readings: list[MeterReading] = []
    for entry in data.get("readings", []):
        readings.append(
            MeterReading(
                reading_timestamp=to_utc(datetime.fromisoformat(entry["date"])),
                value=Decimal(str(entry["value"])),
                confidence=entry.get("confidence"),
                notes=entry.get("notes"),
                image=entry.get("image"),
            )
        )

    # Export order becomes id order, which decides ties between equal timestamps
    return readings


def import_readings(path: Path) -> None:
    """Import an export file unless the database already has readings."""
    Base.metadata.create_all(bind=engine)

    with SessionLocal() as db:
        if db.query(MeterReading).first():
            print("Database already has data. Skipping import.")
            return

        readings = parse_export(path)
        db.add_all(readings)
        db.commit()

        print(f"Imported {len(readings)} readings from {path}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("export", type=Path, help="Path to the JSON export (data.json)")
    args = parser.parse_args()
    import_readings(args.export)
