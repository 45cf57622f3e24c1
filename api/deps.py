"""
FastAPI Dependency Providers for the Fitness Tracker API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with fake implementations.

Architecture:
- Settings are cached per-process (lru_cache in backend.settings)
- The workout store and exercise catalog are created once by create_app()
  and read from app.state
- Services are created per-request around the shared store

Usage in routers:
    from api.deps import get_workout_service
    from backend.core.workout_service import WorkoutService

    @router.get("/workouts/{workout_id}")
    async def get_workout(
        workout_id: str,
        service: WorkoutService = Depends(get_workout_service),
    ):
        return await service.get_workout_by_id(workout_id)

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_workout_repo] = lambda: FailingWorkoutRepository()
"""

from fastapi import Depends, Request

# Protocol types (interfaces)
from application.ports import ExerciseCatalog, WorkoutRepository

from backend.core.workout_service import WorkoutService
from backend.settings import Settings


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings(request: Request) -> Settings:
    """
    Get the settings the running application was created with.

    Returns:
        Settings: Application settings instance
    """
    return request.app.state.settings


# =============================================================================
# Repository Providers
# =============================================================================


def get_workout_repo(request: Request) -> WorkoutRepository:
    """
    Get the application's WorkoutRepository.

    The return type is the Protocol to enable easy mocking.

    Returns:
        WorkoutRepository: Repository for workout persistence
    """
    return request.app.state.workout_repo


def get_exercise_catalog(request: Request) -> ExerciseCatalog:
    """
    Get the application's ExerciseCatalog.

    Returns:
        ExerciseCatalog: Static exercise lookup
    """
    return request.app.state.exercise_catalog


# =============================================================================
# Service Providers
# =============================================================================


def get_workout_service(
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
    settings: Settings = Depends(get_settings),
) -> WorkoutService:
    """
    Get WorkoutService with injected dependencies.

    Args:
        workout_repo: Workout repository (injected)
        settings: Application settings (injected)

    Returns:
        WorkoutService: Service for workout lifecycle and analytics
    """
    return WorkoutService(
        workout_repo,
        top_exercises_limit=settings.top_exercises_limit,
    )
