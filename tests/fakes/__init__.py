"""
Fake Repository Implementations for Testing.

This package provides in-memory fake implementations of repository interfaces
for fast, isolated testing. No database or external dependencies required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Supports fail_with() to simulate data store errors
- Factory functions for common test scenarios

Usage:
    from tests.fakes import FakeWorkoutRepository, create_workout_repo

    # Direct instantiation
    repo = FakeWorkoutRepository()
    repo.seed([{"id": "w1", "athlete_id": "a1", "workout_date": "2024-03-01"}])

    # Factory function with pre-populated data
    repo = create_workout_repo(athlete_id="a1", num_workouts=5)
"""
from typing import Optional, Sequence
import uuid
from datetime import date, timedelta

from tests.fakes.athlete_repository import FakeAthleteRepository
from tests.fakes.athlete_record_repository import (
    FakeAthleteRecordRepository,
    FakePerformanceMetricRepository,
    FakeWorkoutRepository,
    FakeHealthStatRepository,
)


# =============================================================================
# Factory Functions
# =============================================================================


def create_athlete_repo(*, names: Sequence[str] = ()) -> FakeAthleteRepository:
    """
    Create a FakeAthleteRepository with one athlete per name.

    Athlete IDs are "a1", "a2", ... in the order given.
    """
    repo = FakeAthleteRepository()
    repo.seed([
        {"id": f"a{i + 1}", "name": name, "sport": "Track", "team": ""}
        for i, name in enumerate(names)
    ])
    return repo


def create_metric_repo(
    *,
    athlete_id: str = "a1",
    values: Sequence[float] = (),
    metric_type: str = "speed",
    unit: str = "m/s",
    start: Optional[date] = None,
) -> FakePerformanceMetricRepository:
    """
    Create a FakePerformanceMetricRepository with one metric per value.

    Metrics are recorded on consecutive days from `start` (default
    2024-03-01), so their date order matches the order of `values`.

    Args:
        athlete_id: Owning athlete
        values: Metric values, oldest first
        metric_type: Metric type for every generated row
        unit: Unit for every generated row
        start: Date of the first metric

    Returns:
        Pre-populated FakePerformanceMetricRepository
    """
    repo = FakePerformanceMetricRepository()
    first = start or date(2024, 3, 1)
    repo.seed([
        {
            "id": str(uuid.uuid4()),
            "athlete_id": athlete_id,
            "metric_type": metric_type,
            "value": value,
            "unit": unit,
            "recorded_date": (first + timedelta(days=i)).isoformat(),
        }
        for i, value in enumerate(values)
    ])
    return repo


def create_workout_repo(
    *,
    athlete_id: str = "a1",
    num_workouts: int = 0,
    duration_minutes: int = 45,
    start: Optional[date] = None,
) -> FakeWorkoutRepository:
    """
    Create a FakeWorkoutRepository with optional pre-populated workouts.

    Workouts fall on consecutive days from `start` (default 2024-03-01)
    and cycle through the intensities.

    Args:
        athlete_id: Owning athlete
        num_workouts: Number of sample workouts to create
        duration_minutes: Duration for every generated workout
        start: Date of the first workout

    Returns:
        Pre-populated FakeWorkoutRepository
    """
    repo = FakeWorkoutRepository()
    first = start or date(2024, 3, 1)
    intensities = ("low", "moderate", "high")
    repo.seed([
        {
            "id": str(uuid.uuid4()),
            "athlete_id": athlete_id,
            "workout_type": f"Session {i + 1}",
            "duration_minutes": duration_minutes,
            "intensity": intensities[i % len(intensities)],
            "workout_date": (first + timedelta(days=i)).isoformat(),
        }
        for i in range(num_workouts)
    ])
    return repo


def create_health_stat_repo(
    *,
    athlete_id: str = "a1",
    num_stats: int = 0,
    start: Optional[date] = None,
) -> FakeHealthStatRepository:
    """Create a FakeHealthStatRepository with daily health stats."""
    repo = FakeHealthStatRepository()
    first = start or date(2024, 3, 1)
    repo.seed([
        {
            "id": str(uuid.uuid4()),
            "athlete_id": athlete_id,
            "heart_rate": 60 + i,
            "blood_pressure_systolic": 120,
            "blood_pressure_diastolic": 80,
            "sleep_hours": 7.5,
            "hydration_level": "good",
            "stress_level": 3 + i % 5,
            "recorded_date": (first + timedelta(days=i)).isoformat(),
        }
        for i in range(num_stats)
    ])
    return repo


__all__ = [
    # Fakes
    "FakeAthleteRepository",
    "FakeAthleteRecordRepository",
    "FakePerformanceMetricRepository",
    "FakeWorkoutRepository",
    "FakeHealthStatRepository",
    # Factories
    "create_athlete_repo",
    "create_metric_repo",
    "create_workout_repo",
    "create_health_stat_repo",
]
