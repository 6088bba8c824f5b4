"""
Domain layer for the Athlete Monitor API.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).
"""

from domain.models import (
    Athlete,
    HealthStat,
    HydrationLevel,
    Intensity,
    MetricType,
    PerformanceMetric,
    StressBand,
    Workout,
    parse_records,
)

__all__ = [
    "Athlete",
    "HealthStat",
    "HydrationLevel",
    "Intensity",
    "MetricType",
    "PerformanceMetric",
    "StressBand",
    "Workout",
    "parse_records",
]
