"""
Domain layer for the Fitness Tracker API.

This package contains pure domain models that are independent of
infrastructure concerns (storage, HTTP, configuration).
"""

from domain.models import (
    Exercise,
    ExerciseCategory,
    Workout,
    WorkoutExercise,
    WorkoutSet,
    WorkoutSummary,
    estimate_one_rep_max,
)

__all__ = [
    "Exercise",
    "ExerciseCategory",
    "Workout",
    "WorkoutExercise",
    "WorkoutSet",
    "WorkoutSummary",
    "estimate_one_rep_max",
]
