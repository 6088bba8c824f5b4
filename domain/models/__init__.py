"""
Domain models for the Athlete Monitor API.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).

These models represent the core concepts:
- Athlete: profile that owns every other record
- PerformanceMetric: a categorized numeric reading (speed, strength, ...)
- Workout: a logged training session
- HealthStat: daily vitals, sleep, hydration and stress

Open string categories are read through closed enumerations with a
fallback member for values they do not recognize.

Usage:
    >>> from domain.models import Workout, parse_records

    >>> workouts = parse_records(Workout, rows)
"""

from domain.models.athlete import Athlete
from domain.models.health_stat import HealthStat, HydrationLevel, StressBand
from domain.models.parsing import parse_records
from domain.models.performance_metric import MetricType, PerformanceMetric
from domain.models.workout import Intensity, Workout

__all__ = [
    # Entities
    "Athlete",
    "PerformanceMetric",
    "Workout",
    "HealthStat",
    # Enums
    "MetricType",
    "Intensity",
    "HydrationLevel",
    "StressBand",
    # Helpers
    "parse_records",
]
