"""Seed script to populate the database with sample water meter readings."""

from datetime import UTC, datetime, timedelta
from decimal import Decimal

from app.core.database import Base, SessionLocal, engine
from app.models.enums import Confidence
from app.models.meter_reading import MeterReading


def seed_database() -> None:
    """Seed the database with roughly monthly readings for the past 14 months."""
    Base.metadata.create_all(bind=engine)

    with SessionLocal() as db:
        # Check if data already exists
        if db.query(MeterReading).first():
            print("Database already has data. Skipping seed.")
            return

        print("Seeding database...")

        base_date = datetime.now(UTC) - timedelta(days=14 * 30)
        value = Decimal("412.350")

        for month in range(15):
            # Photos are taken every 26-34 days
            reading_date = base_date + timedelta(days=month * 30 + (month % 5) * 2 - 4)

            # Simulate 110-150 liters per day
            daily_liters = Decimal(110 + (month * 7) % 40)
            value += daily_liters * 30 / 1000

            db.add(
                MeterReading(
                    reading_timestamp=reading_date,
                    value=value.quantize(Decimal("0.001")),
                    confidence=Confidence.HIGH if month % 3 else Confidence.MEDIUM,
                    notes=f"Sample reading {month + 1}",
                )
            )

        db.commit()

        print("Created 15 readings")
        print("\nSeed data created successfully!")


if __name__ == "__main__":
    seed_database()
