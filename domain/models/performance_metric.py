"""
Performance metric entity and metric categories.

metric_type is stored as an open string. The closed MetricType enumeration
is how the rest of the code reads it; labels it does not recognize fall back
to MetricType.OTHER while the raw label is kept for grouping.
"""

from datetime import date, datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class MetricType(str, Enum):
    """
    Known metric categories.

    - SPEED: sprint times, velocities
    - STRENGTH: lifts, forces
    - ENDURANCE: distances, durations, VO2
    - AGILITY: change-of-direction drills
    - OTHER: anything else (forward compatible)
    """

    SPEED = "speed"
    STRENGTH = "strength"
    ENDURANCE = "endurance"
    AGILITY = "agility"
    OTHER = "other"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            for member in cls:
                if member.value == value.strip().lower():
                    return member
        return cls.OTHER

    @property
    def badge_color(self) -> str:
        """Color used for the category badge in record lists."""
        return _BADGE_COLORS.get(self, "slate")

    @property
    def chart_color(self) -> str:
        """Color used for chart bars; unknown categories share one default."""
        return _CHART_COLORS.get(self, "cyan")


_BADGE_COLORS = {
    MetricType.SPEED: "blue",
    MetricType.STRENGTH: "green",
    MetricType.ENDURANCE: "orange",
    MetricType.AGILITY: "cyan",
}

_CHART_COLORS = {
    MetricType.SPEED: "blue",
    MetricType.STRENGTH: "green",
    MetricType.ENDURANCE: "orange",
}


class PerformanceMetric(BaseModel):
    """
    A single performance reading for one athlete.

    recorded_date need not be unique; several readings of the same category
    can share a day.

    Examples:
        >>> metric = PerformanceMetric(
        ...     id="m1", athlete_id="a1", metric_type="speed",
        ...     value=9.8, unit="m/s", recorded_date="2024-03-01",
        ... )
        >>> metric.category
        <MetricType.SPEED: 'speed'>
    """

    id: str
    athlete_id: str
    metric_type: str = Field(..., description="Category label, e.g. speed or strength")
    value: float = Field(..., allow_inf_nan=False, description="Reading in the given unit")
    unit: Optional[str] = ""
    recorded_date: date
    notes: Optional[str] = ""
    created_at: Optional[datetime] = None

    @property
    def category(self) -> MetricType:
        return MetricType(self.metric_type)

    model_config = {
        "frozen": True,
        "extra": "ignore",
    }
