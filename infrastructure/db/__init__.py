"""
Infrastructure Storage Layer.

This package provides in-memory implementations of the repository interfaces
defined in application.ports. These implementations are constructed once by
the application factory and injected into services and routers.

Usage:
    from infrastructure.db import InMemoryWorkoutRepository, InMemoryExerciseCatalog

    workout_repo = InMemoryWorkoutRepository()
    exercise_catalog = InMemoryExerciseCatalog()  # default exercise list
"""

from infrastructure.db.workout_repository import InMemoryWorkoutRepository
from infrastructure.db.exercise_catalog import (
    DEFAULT_EXERCISES,
    InMemoryExerciseCatalog,
)

__all__ = [
    # Workout persistence
    "InMemoryWorkoutRepository",

    # Exercise catalog
    "InMemoryExerciseCatalog",
    "DEFAULT_EXERCISES",
]
