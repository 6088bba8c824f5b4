"""
Test Fixtures and Helpers for Fake Repositories.

This module provides pytest fixtures and helper functions for overriding
FastAPI dependencies with fake repository implementations.

Usage:
    from tests.fakes.conftest import override_dependency

    def test_something(app):
        repo = FakeWorkoutRepository()
        override_dependency(app, get_workout_repo, repo)

        client = TestClient(app)
        response = client.get("/athletes/a1/workouts")
        assert response.status_code == 200
"""

from typing import Any, Callable, Dict, Type

import pytest
from fastapi import FastAPI

from api import deps
from backend.main import create_app
from backend.settings import Settings


# Type for repository dependency getters
RepoGetter = Callable[..., Any]


# =============================================================================
# Override Functions
# =============================================================================


def override_dependency(
    app: FastAPI,
    getter: RepoGetter,
    implementation: Any,
) -> None:
    """
    Override a FastAPI dependency with a fake implementation.

    Args:
        app: Application whose dependencies to override
        getter: The dependency getter function (e.g., get_workout_repo)
        implementation: The fake implementation instance or factory

    Example:
        repo = FakeWorkoutRepository()
        override_dependency(app, get_workout_repo, repo)
    """
    # Handle both direct instances and factory functions
    if callable(implementation) and not isinstance(implementation, type):
        app.dependency_overrides[getter] = implementation
    else:
        app.dependency_overrides[getter] = lambda: implementation


def override_with_fake(
    app: FastAPI,
    getter: RepoGetter,
    fake_class: Type,
    **kwargs,
) -> Any:
    """
    Create and override with a fake repository instance.

    Returns:
        The created fake instance (for seeding data etc.)
    """
    fake_instance = fake_class(**kwargs)
    override_dependency(app, getter, fake_instance)
    return fake_instance


# =============================================================================
# pytest Fixtures
# =============================================================================


@pytest.fixture
def app_settings() -> Settings:
    """Settings for tests: no .env file, no Sentry, test environment."""
    return Settings(
        environment="test",
        supabase_url=None,
        supabase_service_role_key=None,
        supabase_anon_key=None,
        sentry_dsn=None,
        _env_file=None,
    )


@pytest.fixture
def app(app_settings: Settings) -> FastAPI:
    """Fresh application instance; overrides are cleared afterwards."""
    app = create_app(settings=app_settings)
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def app_with_fake_repos(app: FastAPI, app_settings: Settings) -> Dict[str, Any]:
    """
    Fixture that overrides all repository dependencies with fakes.

    Returns a dict with the app and the fake instances for seeding test data.

    Usage:
        def test_full_flow(app_with_fake_repos):
            app_with_fake_repos["workout_repo"].seed([...])
            client = TestClient(app_with_fake_repos["app"])
    """
    from tests.fakes import (
        FakeAthleteRepository,
        FakePerformanceMetricRepository,
        FakeWorkoutRepository,
        FakeHealthStatRepository,
    )

    fakes = {
        "athlete_repo": FakeAthleteRepository(),
        "metric_repo": FakePerformanceMetricRepository(),
        "workout_repo": FakeWorkoutRepository(),
        "health_stat_repo": FakeHealthStatRepository(),
    }

    override_dependency(app, deps.get_settings, app_settings)
    override_dependency(app, deps.get_athlete_repo, fakes["athlete_repo"])
    override_dependency(app, deps.get_metric_repo, fakes["metric_repo"])
    override_dependency(app, deps.get_workout_repo, fakes["workout_repo"])
    override_dependency(app, deps.get_health_stat_repo, fakes["health_stat_repo"])

    yield {"app": app, **fakes}
