"""
Shared pytest fixtures for the Fitness Tracker API tests.
"""

from typing import Generator

import pytest
from fastapi.testclient import TestClient

from backend.core.workout_service import WorkoutService
from backend.main import create_app
from backend.settings import Settings
from infrastructure.db import InMemoryExerciseCatalog, InMemoryWorkoutRepository


# ---------------------------------------------------------------------------
# Stores and Services
# ---------------------------------------------------------------------------


@pytest.fixture
def workout_repo() -> InMemoryWorkoutRepository:
    """Fresh, empty in-memory workout store."""
    return InMemoryWorkoutRepository()


@pytest.fixture
def catalog() -> InMemoryExerciseCatalog:
    """Exercise catalog with the default exercise list."""
    return InMemoryExerciseCatalog()


@pytest.fixture
def bench_press(catalog):
    return catalog.find_by_name("Bench Press")


@pytest.fixture
def push_ups(catalog):
    return catalog.find_by_name("Push-ups")


@pytest.fixture
def squats(catalog):
    return catalog.find_by_name("Squats")


@pytest.fixture
def service(workout_repo) -> WorkoutService:
    """WorkoutService backed by the per-test store."""
    return WorkoutService(workout_repo)


# ---------------------------------------------------------------------------
# Test App and Client
# ---------------------------------------------------------------------------


@pytest.fixture
def test_settings() -> Settings:
    """Test settings that ignore any local .env file."""
    return Settings(environment="test", _env_file=None)


@pytest.fixture
def app(test_settings, workout_repo, catalog):
    """Create a test application around the per-test store and catalog."""
    return create_app(
        settings=test_settings,
        workout_repo=workout_repo,
        exercise_catalog=catalog,
    )


@pytest.fixture
def client(app) -> Generator[TestClient, None, None]:
    """
    Per-test FastAPI TestClient.
    Properly cleans up dependency overrides after each test.
    """
    yield TestClient(app)
    app.dependency_overrides.clear()
