"""
Repository Interfaces (Ports) for the Fitness Tracker API.

This package defines abstract interfaces that decouple domain logic from
infrastructure (storage, static reference data). Implementations are provided
in the infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the domain needs)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import WorkoutRepository, ExerciseCatalog

    class WorkoutService:
        def __init__(self, workout_repo: WorkoutRepository):
            self._workout_repo = workout_repo

        async def get_workout_by_id(self, workout_id):
            return await self._workout_repo.find_by_id(workout_id)
"""

# Workout persistence
from application.ports.workout_repository import WorkoutRepository

# Exercise catalog
from application.ports.exercise_catalog import ExerciseCatalog

__all__ = [
    "WorkoutRepository",
    "ExerciseCatalog",
]
