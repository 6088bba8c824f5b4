"""
Repository Interfaces (Ports) for the Athlete Monitor API.

This package defines abstract interfaces that decouple domain logic from
infrastructure (database, external services). Implementations are provided
in the infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the domain needs)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import WorkoutRepository

    class ProgressService:
        def __init__(self, workout_repo: WorkoutRepository):
            self.workout_repo = workout_repo

        def load(self, athlete_id):
            return self.workout_repo.list_for_athlete(athlete_id, ascending=True)
"""

# Athlete profiles
from application.ports.athlete_repository import AthleteRepository

# Per-athlete record collections
from application.ports.athlete_record_repository import (
    AthleteRecordRepository,
    PerformanceMetricRepository,
    WorkoutRepository,
    HealthStatRepository,
)

__all__ = [
    # Athletes
    "AthleteRepository",
    # Records
    "AthleteRecordRepository",
    "PerformanceMetricRepository",
    "WorkoutRepository",
    "HealthStatRepository",
]
