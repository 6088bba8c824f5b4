"""
Workout entity and intensity levels.
"""

from datetime import date, datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class Intensity(str, Enum):
    """Perceived workout intensity. Unrecognized values read as UNKNOWN."""

    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
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
            Intensity.LOW: "green",
            Intensity.MODERATE: "yellow",
            Intensity.HIGH: "red",
        }.get(self, "slate")


class Workout(BaseModel):
    """
    A logged training session for one athlete.

    Examples:
        >>> workout = Workout(
        ...     id="w1", athlete_id="a1", workout_type="Running",
        ...     duration_minutes=45, intensity="high", workout_date="2024-03-01",
        ... )
        >>> workout.intensity.color
        'red'
    """

    id: str
    athlete_id: str
    workout_type: str
    duration_minutes: int = Field(..., ge=0, description="Session length in minutes")
    intensity: Intensity = Intensity.MODERATE
    workout_date: date
    notes: Optional[str] = ""
    created_at: Optional[datetime] = None

    @field_validator("intensity", mode="before")
    @classmethod
    def coerce_intensity(cls, v):
        """Map unrecognized stored values to Intensity.UNKNOWN."""
        return Intensity(v)

    model_config = {
        "frozen": True,
        "extra": "ignore",
    }
