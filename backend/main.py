"""
Application factory for FastAPI.

This module provides a factory function for creating FastAPI application instances.
The factory pattern allows for:
- Easy testing with custom settings
- Multiple app instances with different configurations
- Clear separation of app creation from route definitions

Usage:
    from backend.main import create_app
    from backend.settings import Settings

    # Default app (uses get_settings())
    app = create_app()

    # Test app with custom settings
    test_settings = Settings(environment="test", _env_file=None)
    test_app = create_app(settings=test_settings)
"""

import logging
from typing import Optional

import sentry_sdk
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.exception_handlers import register_exception_handlers
from backend.settings import Settings, get_settings

logger = logging.getLogger(__name__)

# Local dashboard dev servers
DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:5173",
]


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure a FastAPI application instance.

    Args:
        settings: Optional Settings instance. If not provided, uses get_settings()
                  which loads from environment variables.

    Returns:
        Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    # Initialize Sentry for error tracking
    _init_sentry(settings)

    # Create FastAPI app
    app = FastAPI(
        title="Athlete Monitor API",
        description="Athlete profiles, workouts, performance metrics and health stats",
        version="1.0.0",
    )

    # Configure CORS middleware
    _configure_cors(app, settings)

    # Map application errors to HTTP responses
    register_exception_handlers(app)

    # Include API routers
    _include_routers(app)

    _log_startup(settings)

    return app


def _init_sentry(settings: Settings) -> None:
    """Initialize Sentry SDK if DSN is configured."""
    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.environment,
            traces_sample_rate=0.1,  # 10% of transactions for performance monitoring
        )
        logger.info("Sentry initialized for athlete-monitor-api")


def _configure_cors(app: FastAPI, settings: Settings) -> None:
    """Configure CORS middleware for the application."""
    trusted_origins = DEFAULT_CORS_ORIGINS + settings.cors_origins_list

    app.add_middleware(
        CORSMiddleware,
        allow_origins=trusted_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def _include_routers(app: FastAPI) -> None:
    """Include all API routers in the application."""
    from api.routers import (
        health_router,
        athletes_router,
        metrics_router,
        workouts_router,
        health_stats_router,
        progress_router,
    )

    # Health router (no prefix - /health at root)
    app.include_router(health_router)

    app.include_router(athletes_router)
    app.include_router(metrics_router)
    app.include_router(workouts_router)
    app.include_router(health_stats_router)
    app.include_router(progress_router)


def _log_startup(settings: Settings) -> None:
    """Log configuration that affects behavior at startup."""
    if not settings.supabase_url or not settings.supabase_key:
        logger.warning("Supabase credentials not configured; data endpoints will return 503")
    elif not settings.supabase_service_role_key:
        logger.info("Using Supabase anon key; row-level security policies apply")

    logger.info(f"Recent workout window: {settings.recent_window_days} days")


# Default app instance for uvicorn
# This allows: uvicorn backend.main:app --reload
app = create_app()
