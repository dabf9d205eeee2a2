"""Enum definitions for meter readings."""

from enum import Enum


class Confidence(str, Enum):
    """Quality tag attached to a reading when it was captured."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    MANUAL = "manual"  # Typed in by hand
