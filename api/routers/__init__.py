"""
Router package for the Athlete Monitor API.

This package contains all API routers organized by domain:
- health: Health check endpoint
- athletes: Athlete profile listing and creation
- metrics: Performance metric records
- workouts: Workout records
- health_stats: Health stat records
- progress: Progress view (summary, chart, trends)
"""

from api.routers.health import router as health_router
from api.routers.athletes import router as athletes_router
from api.routers.metrics import router as metrics_router
from api.routers.workouts import router as workouts_router
from api.routers.health_stats import router as health_stats_router
from api.routers.progress import router as progress_router

__all__ = [
    "health_router",
    "athletes_router",
    "metrics_router",
    "workouts_router",
    "health_stats_router",
    "progress_router",
]
