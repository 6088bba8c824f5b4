"""
Health statistics entity: resting vitals, sleep, hydration and stress.
"""

from datetime import date, datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, field_validator


class HydrationLevel(str, Enum):
    """Self-reported hydration. Unrecognized values read as UNKNOWN."""

    POOR = "poor"
    FAIR = "fair"
    GOOD = "good"
    EXCELLENT = "excellent"
    UNKNOWN = "unknown"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            for member in cls:
                if member.value == value.strip().lower():
                    return member
        return cls.UNKNOWN

    @property
    def color(self) -> str:
        return {
            HydrationLevel.POOR: "red",
            HydrationLevel.FAIR: "yellow",
            HydrationLevel.GOOD: "green",
            HydrationLevel.EXCELLENT: "blue",
        }.get(self, "slate")


class StressBand(str, Enum):
    """Coarse band for the 1-10 stress scale."""

    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"

    @classmethod
    def from_level(cls, level: int) -> "StressBand":
        if level <= 3:
            return cls.LOW
        if level <= 6:
            return cls.MODERATE
        return cls.HIGH

    @property
    def color(self) -> str:
        return {
            StressBand.LOW: "green",
            StressBand.MODERATE: "yellow",
            StressBand.HIGH: "red",
        }[self]


class HealthStat(BaseModel):
    """
    One day's health reading for an athlete.

    Vitals default to 0 when not captured, matching what the entry form
    stores for blank fields.
    """

    id: str
    athlete_id: str
    heart_rate: int = 0
    blood_pressure_systolic: int = 0
    blood_pressure_diastolic: int = 0
    sleep_hours: float = 0.0
    hydration_level: HydrationLevel = HydrationLevel.FAIR
    stress_level: int = 5
    recorded_date: date
    notes: Optional[str] = ""
    created_at: Optional[datetime] = None

    @field_validator("hydration_level", mode="before")
    @classmethod
    def coerce_hydration_level(cls, v):
        """Map unrecognized stored values to HydrationLevel.UNKNOWN."""
        return HydrationLevel(v)

    @property
    def stress_band(self) -> StressBand:
        return StressBand.from_level(self.stress_level)

    model_config = {
        "frozen": True,
        "extra": "ignore",
    }
