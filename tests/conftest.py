"""Shared fixtures for the test suite."""

from tests.fakes.conftest import app, app_settings, app_with_fake_repos  # noqa: F401
