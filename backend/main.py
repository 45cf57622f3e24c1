"""
Application factory for FastAPI.

This module provides a factory function for creating FastAPI application instances.
The factory pattern allows for:
- Easy testing with custom settings and pre-seeded stores
- Multiple app instances with different configurations
- Clear separation of app creation from route definitions

The workout store and exercise catalog are constructed here, once per app,
and attached to ``app.state``. Routers reach them through api/deps.py.

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

from application.ports import ExerciseCatalog, WorkoutRepository
from backend.settings import Settings, get_settings
from infrastructure.db import InMemoryExerciseCatalog, InMemoryWorkoutRepository

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    *,
    workout_repo: Optional[WorkoutRepository] = None,
    exercise_catalog: Optional[ExerciseCatalog] = None,
) -> FastAPI:
    """
    Create and configure a FastAPI application instance.

    Args:
        settings: Optional Settings instance. If not provided, uses get_settings()
                  which loads from environment variables.
        workout_repo: Workout store to use. Defaults to a fresh in-memory store.
        exercise_catalog: Exercise catalog to use. Defaults to the built-in list.

    Returns:
        Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    # Initialize Sentry for error tracking
    _init_sentry(settings)

    # Create FastAPI app
    app = FastAPI(
        title="Fitness Tracker API",
        description="Workout logging, personal records and training analytics",
        version="1.0.0",
    )

    # Application state: constructed once, shared by every request
    app.state.settings = settings
    if workout_repo is None:
        workout_repo = InMemoryWorkoutRepository()
    if exercise_catalog is None:
        exercise_catalog = InMemoryExerciseCatalog()
    app.state.workout_repo = workout_repo
    app.state.exercise_catalog = exercise_catalog

    # Configure CORS middleware
    _configure_cors(app, settings)

    # Include API routers
    _include_routers(app)

    logger.info(f"Fitness Tracker API created (environment={settings.environment})")
    return app


def _init_sentry(settings: Settings) -> None:
    """Initialize Sentry SDK if DSN is configured."""
    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.environment,
            traces_sample_rate=0.1,  # 10% of transactions for performance monitoring
        )
        logger.info("Sentry initialized for fitness-tracker-api")


def _configure_cors(app: FastAPI, settings: Settings) -> None:
    """Configure CORS middleware for the application."""
    trusted_origins = [
        "http://localhost:3000",
        "http://localhost:3001",
    ]
    trusted_origins.extend(settings.cors_origins_list)

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
        exercises_router,
        workouts_router,
        users_router,
    )

    # Health router (no prefix - /health at root)
    app.include_router(health_router)

    # Domain routers (with prefixes defined in each router)
    app.include_router(exercises_router)
    app.include_router(workouts_router)
    app.include_router(users_router)


# Default app instance for uvicorn
# This allows: uvicorn backend.main:app --reload
app = create_app()
