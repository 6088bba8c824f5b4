"""
Infrastructure Layer for the Athlete Monitor API.

This package contains concrete implementations of repository interfaces:
- db/: Supabase database implementations
"""

# Re-export database repositories for convenient access
from infrastructure.db import (
    SupabaseAthleteRepository,
    SupabasePerformanceMetricRepository,
    SupabaseWorkoutRepository,
    SupabaseHealthStatRepository,
)

__all__ = [
    "SupabaseAthleteRepository",
    "SupabasePerformanceMetricRepository",
    "SupabaseWorkoutRepository",
    "SupabaseHealthStatRepository",
]
