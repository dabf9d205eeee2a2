"""Consumption statistics derived from cumulative meter readings.

Readings are sparse (typically a photo every few weeks), so rates are never
summed inside a window. Instead every window is bracketed by the nearest
readings at or before its boundaries and the average daily rate across those
two readings is reported. Neighbouring windows without a reading in between
therefore show the same rate.

Everything here is a pure function of the readings and an injected ``now``.
"""

import calendar
from bisect import bisect_left, bisect_right
from collections.abc import Iterable, Sequence
from datetime import UTC, datetime, timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import NamedTuple, Protocol

from app.schemas.statistics import (
    LastInterval,
    MonthlyRate,
    StatsResult,
    WeeklyRate,
    YearStats,
)

LITERS_PER_CUBIC_METER = Decimal("1000")
SECONDS_PER_DAY = Decimal("86400")
MONTHS_IN_TABLE = 12
WEEKS_IN_SERIES = 52

ONE_DECIMAL = Decimal("0.1")
WHOLE = Decimal("1")


class ReadingLike(Protocol):
    """Anything with a timestamp and a cumulative value in m³."""

    reading_timestamp: datetime
    value: Decimal | float | int


class Bucket(NamedTuple):
    """A reporting window, closed on both ends."""

    label: str
    start: datetime
    end: datetime


def _as_aware(timestamp: datetime) -> datetime:
    """Treat naive timestamps (as returned by SQLite) as UTC."""
    if timestamp.tzinfo is None:
        return timestamp.replace(tzinfo=UTC)
    return timestamp


def _to_decimal(value: Decimal | float | int) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def _round(value: Decimal, exp: Decimal = ONE_DECIMAL) -> Decimal:
    """Round half away from zero."""
    return value.quantize(exp, rounding=ROUND_HALF_UP)


def _days_between(start: datetime, end: datetime) -> Decimal:
    """Fractional days from ``start`` to ``end`` (negative if inverted)."""
    delta = end - start
    seconds = (
        Decimal(delta.days) * SECONDS_PER_DAY
        + Decimal(delta.seconds)
        + Decimal(delta.microseconds) / Decimal(1_000_000)
    )
    return seconds / SECONDS_PER_DAY


def normalize_readings(readings: Iterable[ReadingLike]) -> list[ReadingLike]:
    """Sort readings by timestamp.

    The sort is stable: readings sharing a timestamp keep their input order, so
    the one supplied last is the one picked by bracket lookups.
    """
    return sorted(readings, key=lambda r: _as_aware(r.reading_timestamp))


class ReadingSeries:
    """Normalized readings with parallel timestamp/value lists for lookups."""

    def __init__(self, readings: Iterable[ReadingLike]) -> None:
        self.readings: list[ReadingLike] = normalize_readings(readings)
        self.timestamps: list[datetime] = [_as_aware(r.reading_timestamp) for r in self.readings]
        self.values: list[Decimal] = [_to_decimal(r.value) for r in self.readings]

    def __len__(self) -> int:
        return len(self.readings)

    def count_through(self, boundary: datetime) -> int:
        """Number of readings with a timestamp at or before ``boundary``."""
        return bisect_right(self.timestamps, boundary)

    def first_index_from(self, boundary: datetime) -> int:
        """Index of the first reading at or after ``boundary``."""
        return bisect_left(self.timestamps, boundary)

    def liters_between(self, start: int, end: int) -> Decimal:
        """Consumption in liters between two positions of the series."""
        return (self.values[end] - self.values[start]) * LITERS_PER_CUBIC_METER

    def days_between(self, start: int, end: int) -> Decimal:
        return _days_between(self.timestamps[start], self.timestamps[end])


def find_decreasing_pairs(series: ReadingSeries) -> list[tuple[ReadingLike, ReadingLike]]:
    """Return consecutive reading pairs where the cumulative value goes down.

    Such pairs produce negative consumption. They are not corrected here;
    callers decide whether to report them.
    """
    return [
        (series.readings[i - 1], series.readings[i])
        for i in range(1, len(series))
        if series.values[i] < series.values[i - 1]
    ]


def compute_last_interval(series: ReadingSeries) -> LastInterval | None:
    """Rate across the gap between the two most recent readings."""
    if len(series) < 2:
        return None

    days = series.days_between(-2, -1)
    liters = series.liters_between(-2, -1)
    liters_per_day = liters / days if days > 0 else Decimal("0")

    return LastInterval(
        days=float(_round(days)),
        liters=float(_round(liters)),
        liters_per_day=float(_round(liters_per_day)),
        start_date=series.readings[-2].reading_timestamp,
        end_date=series.readings[-1].reading_timestamp,
    )


def compute_year_stats(series: ReadingSeries, now: datetime) -> YearStats | None:
    """Average rate between the first and last reading of the current year.

    Only the two endpoints matter; intermediate readings do not change the
    result.
    """
    now = _as_aware(now)
    year_start = now.replace(month=1, day=1, hour=0, minute=0, second=0, microsecond=0)
    first = series.first_index_from(year_start)
    last = len(series) - 1

    if last - first < 1:
        return None

    days = series.days_between(first, last)
    liters = series.liters_between(first, last)
    avg = liters / days if days > 0 else Decimal("0")

    return YearStats(
        total_liters=int(_round(liters, WHOLE)),
        avg_liters_per_day=float(_round(avg)),
        days=int(_round(days, WHOLE)),
    )


def _shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def month_buckets(now: datetime, count: int = MONTHS_IN_TABLE) -> list[Bucket]:
    """Trailing calendar months, oldest first, ending with the month of ``now``.

    A month runs from its first instant to the first instant of the next month.
    """
    now = _as_aware(now)
    buckets: list[Bucket] = []
    for offset in range(count - 1, -1, -1):
        year, month = _shift_month(now.year, now.month, -offset)
        next_year, next_month = _shift_month(year, month, 1)
        buckets.append(
            Bucket(
                label=f"{calendar.month_abbr[month]} {year % 100:02d}",
                start=datetime(year, month, 1, tzinfo=now.tzinfo),
                end=datetime(next_year, next_month, 1, tzinfo=now.tzinfo),
            )
        )
    return buckets


def week_buckets(now: datetime, count: int = WEEKS_IN_SERIES) -> list[Bucket]:
    """Trailing 7-day buckets, oldest first, the newest ending exactly at ``now``."""
    now = _as_aware(now)
    buckets: list[Bucket] = []
    for offset in range(count - 1, -1, -1):
        start = now - timedelta(weeks=offset + 1)
        buckets.append(
            Bucket(
                label=f"{start:%d.%m.}",
                start=start,
                end=now - timedelta(weeks=offset),
            )
        )
    return buckets


def bracket_rate(series: ReadingSeries, bucket: Bucket) -> Decimal | None:
    """Average daily rate across the readings bracketing ``bucket``.

    ``before`` is the latest reading at or before the bucket start and
    ``through`` the latest at or before its end. The elapsed days are measured
    between those readings, not between the bucket boundaries.
    """
    before_count = series.count_through(bucket.start)
    through_count = series.count_through(bucket.end)

    # Needs an anchor before the bucket and at least one newer reading
    if before_count == 0 or through_count <= before_count:
        return None

    before = before_count - 1
    through = through_count - 1
    days = series.days_between(before, through)
    if days <= 0:
        return None

    return _round(series.liters_between(before, through) / days)


def compute_window_rates(series: ReadingSeries, buckets: Sequence[Bucket]) -> list[Decimal | None]:
    """Bracketed rate for every bucket, in bucket order."""
    return [bracket_rate(series, bucket) for bucket in buckets]


def _as_float(rate: Decimal | None) -> float | None:
    return float(rate) if rate is not None else None


def compute_monthly_rates(series: ReadingSeries, now: datetime) -> list[MonthlyRate]:
    buckets = month_buckets(now)
    return [
        MonthlyRate(month=bucket.label, month_start=bucket.start, liters_per_day=_as_float(rate))
        for bucket, rate in zip(buckets, compute_window_rates(series, buckets), strict=True)
    ]


def compute_weekly_rates(series: ReadingSeries, now: datetime) -> list[WeeklyRate]:
    buckets = week_buckets(now)
    return [
        WeeklyRate(week=bucket.label, week_start=bucket.start, liters_per_day=_as_float(rate))
        for bucket, rate in zip(buckets, compute_window_rates(series, buckets), strict=True)
    ]


def compute_statistics(
    readings: Iterable[ReadingLike],
    now: datetime | None = None,
) -> StatsResult:
    """Compute all consumption statistics for a collection of readings.

    ``readings`` may be empty, unsorted or contain duplicate timestamps. The
    result is always complete: missing data shows up as ``None`` values, never
    as an exception.
    """
    if now is None:
        now = datetime.now(UTC)
    series = ReadingSeries(readings)

    return StatsResult(
        last_interval=compute_last_interval(series),
        year_stats=compute_year_stats(series, now),
        monthly_data=compute_monthly_rates(series, now),
        weekly_data=compute_weekly_rates(series, now),
    )
