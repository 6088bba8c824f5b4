"""
API package for the Athlete Monitor API.

This package contains:
- deps.py: FastAPI dependency providers for DI
- exception_handlers.py: application error to HTTP response mapping
- routers/: API route handlers
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_supabase_client,
    get_supabase_client_required,
    get_athlete_repo,
    get_metric_repo,
    get_workout_repo,
    get_health_stat_repo,
    get_progress_service,
)

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
