"""
Infrastructure Database Layer.

This package provides Supabase-backed implementations of the repository interfaces
defined in application.ports. These implementations can be injected into services
and routers for clean separation of concerns and testability.

Usage:
    from supabase import create_client
    from infrastructure.db import (
        SupabaseAthleteRepository,
        SupabasePerformanceMetricRepository,
        SupabaseWorkoutRepository,
        SupabaseHealthStatRepository,
    )

    # Create Supabase client
    client = create_client(SUPABASE_URL, SUPABASE_KEY)

    # Instantiate repositories with injected client
    athlete_repo = SupabaseAthleteRepository(client)
    metric_repo = SupabasePerformanceMetricRepository(client)
    workout_repo = SupabaseWorkoutRepository(client)
    health_stat_repo = SupabaseHealthStatRepository(client)
"""

from infrastructure.db.athlete_repository import SupabaseAthleteRepository
from infrastructure.db.athlete_record_repository import (
    SupabaseAthleteRecordRepository,
    SupabasePerformanceMetricRepository,
    SupabaseWorkoutRepository,
    SupabaseHealthStatRepository,
)

__all__ = [
    # Athlete profiles
    "SupabaseAthleteRepository",

    # Per-athlete records
    "SupabaseAthleteRecordRepository",
    "SupabasePerformanceMetricRepository",
    "SupabaseWorkoutRepository",
    "SupabaseHealthStatRepository",
]
