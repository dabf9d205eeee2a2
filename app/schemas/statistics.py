"""Consumption statistics schemas.

Field names are snake_case in Python; the JSON aliases keep the display
format used by the dashboard (``litersPerDay`` and friends).
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class LastInterval(BaseModel):
    """Consumption between the two most recent readings."""

    model_config = ConfigDict(populate_by_name=True)

    days: float
    liters: float
    liters_per_day: float = Field(alias="litersPerDay")
    start_date: datetime = Field(alias="startDate")
    end_date: datetime = Field(alias="endDate")


class YearStats(BaseModel):
    """Consumption since the first reading of the current calendar year."""

    model_config = ConfigDict(populate_by_name=True)

    total_liters: int = Field(alias="totalLiters")
    avg_liters_per_day: float = Field(alias="avgLitersPerDay")
    days: int


class MonthlyRate(BaseModel):
    """Average daily rate for one calendar month, ``None`` when there is no data."""

    model_config = ConfigDict(populate_by_name=True)

    month: str
    month_start: datetime = Field(alias="monthStart")
    liters_per_day: float | None = Field(alias="litersPerDay")


class WeeklyRate(BaseModel):
    """Average daily rate for one 7-day bucket, ``None`` when there is no data."""

    model_config = ConfigDict(populate_by_name=True)

    week: str
    week_start: datetime = Field(alias="weekStart")
    liters_per_day: float | None = Field(alias="litersPerDay")


class StatsResult(BaseModel):
    """Complete statistics for a set of readings."""

    model_config = ConfigDict(populate_by_name=True)

    last_interval: LastInterval | None = Field(alias="lastInterval")
    year_stats: YearStats | None = Field(alias="yearStats")
    monthly_data: list[MonthlyRate] = Field(alias="monthlyData")
    weekly_data: list[WeeklyRate] = Field(alias="weeklyData")
