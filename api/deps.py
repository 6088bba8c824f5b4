"""
FastAPI Dependency Providers for the Athlete Monitor API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with fake implementations.

Architecture:
- Settings and Supabase client are cached per-process (lru_cache)
- Repository providers create new instances per-request

Usage in routers:
    from api.deps import get_workout_repo
    from application.ports import WorkoutRepository

    @router.get("/athletes/{athlete_id}/workouts")
    def list_workouts(
        athlete_id: str,
        workout_repo: WorkoutRepository = Depends(get_workout_repo),
    ):
        return workout_repo.list_for_athlete(athlete_id)

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_workout_repo] = lambda: FakeWorkoutRepository()
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, HTTPException
from supabase import Client, create_client

# Protocol types (interfaces)
from application.ports import (
    AthleteRepository,
    PerformanceMetricRepository,
    WorkoutRepository,
    HealthStatRepository,
)

# Concrete implementations
from infrastructure import (
    SupabaseAthleteRepository,
    SupabasePerformanceMetricRepository,
    SupabaseWorkoutRepository,
    SupabaseHealthStatRepository,
)

from backend.core.progress_service import ProgressService
from backend.settings import Settings, get_settings as _get_settings


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    Use this as a FastAPI dependency for settings access.
    """
    return _get_settings()


# =============================================================================
# Supabase Client Provider
# =============================================================================


@lru_cache
def get_supabase_client() -> Optional[Client]:
    """
    Get Supabase client instance (cached).

    Creates a Supabase client using credentials from settings.
    Returns None if credentials are not configured.

    Returns:
        Client: Supabase client instance, or None if not configured
    """
    settings = _get_settings()

    if not settings.supabase_url or not settings.supabase_key:
        return None

    return create_client(settings.supabase_url, settings.supabase_key)


def get_supabase_client_required() -> Client:
    """
    Get Supabase client instance, raising if not configured.

    Use this dependency when the endpoint requires database access.

    Raises:
        HTTPException: 503 if Supabase is not configured
    """
    client = get_supabase_client()
    if client is None:
        raise HTTPException(
            status_code=503,
            detail="Database not available. Supabase credentials not configured.",
        )
    return client


# =============================================================================
# Repository Providers
# =============================================================================


def get_athlete_repo(
    client: Client = Depends(get_supabase_client_required),
) -> AthleteRepository:
    """
    Get AthleteRepository implementation.

    The return type is the Protocol to enable easy faking.
    """
    return SupabaseAthleteRepository(client)


def get_metric_repo(
    client: Client = Depends(get_supabase_client_required),
) -> PerformanceMetricRepository:
    """Get PerformanceMetricRepository implementation."""
    return SupabasePerformanceMetricRepository(client)


def get_workout_repo(
    client: Client = Depends(get_supabase_client_required),
) -> WorkoutRepository:
    """Get WorkoutRepository implementation."""
    return SupabaseWorkoutRepository(client)


def get_health_stat_repo(
    client: Client = Depends(get_supabase_client_required),
) -> HealthStatRepository:
    """Get HealthStatRepository implementation."""
    return SupabaseHealthStatRepository(client)


# =============================================================================
# Service Providers
# =============================================================================


def get_progress_service(
    metric_repo: PerformanceMetricRepository = Depends(get_metric_repo),
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
    settings: Settings = Depends(get_settings),
) -> ProgressService:
    """
    Get ProgressService with injected repositories.

    Args:
        metric_repo: Performance metric repository (injected)
        workout_repo: Workout repository (injected)
        settings: Application settings (injected)
    """
    return ProgressService(
        metric_repo,
        workout_repo,
        recent_window_days=settings.recent_window_days,
    )


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Settings
    "get_settings",
    # Database
    "get_supabase_client",
    "get_supabase_client_required",
    # Repositories
    "get_athlete_repo",
    "get_metric_repo",
    "get_workout_repo",
    "get_health_stat_repo",
    # Services
    "get_progress_service",
]
