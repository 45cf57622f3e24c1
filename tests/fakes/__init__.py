"""
Fake Repository Implementations and Builders for Testing.

This package provides test doubles for the repository interfaces plus
builders for domain objects, so tests can set up workouts in one line.

Usage:
    from tests.fakes import build_workout, FailingWorkoutRepository

    workout = build_workout(
        (bench_press, [(8, 80), (6, 85)]),
        days_ago=3,
    )
"""
from datetime import datetime, timedelta, timezone
from typing import Iterable, Optional, Sequence, Tuple

from domain.models import Exercise, ExerciseCategory, Workout, WorkoutExercise, WorkoutSet
from tests.fakes.workout_repository import (
    FailingWorkoutRepository,
    RecordingWorkoutRepository,
)


# =============================================================================
# Builders
# =============================================================================


def build_exercise(
    name: str,
    *,
    exercise_id: Optional[str] = None,
    category: ExerciseCategory = ExerciseCategory.CHEST,
    muscle_groups: Sequence[str] = ("Chest",),
) -> Exercise:
    """Create a catalog exercise with sensible defaults."""
    return Exercise(
        id=exercise_id or name.lower().replace(" ", "-"),
        name=name,
        category=category,
        muscle_groups=list(muscle_groups),
    )


def build_workout(
    *entries: Tuple[Exercise, Iterable[Tuple[int, float]]],
    user_id: str = "u1",
    name: str = "Test Workout",
    days_ago: float = 0,
    completed_minutes: Optional[int] = None,
) -> Workout:
    """
    Create a workout from (exercise, [(reps, weight), ...]) entries.

    Args:
        entries: Exercises with the sets performed for each
        user_id: Owner of the workout
        name: Workout name
        days_ago: How long ago the workout was created
        completed_minutes: If given, the workout is started at creation time
            and completed this many minutes later

    Returns:
        Unsaved Workout
    """
    created_at = datetime.now(timezone.utc) - timedelta(days=days_ago)
    workout = Workout(name=name, user_id=user_id, created_at=created_at)
    for exercise, sets in entries:
        workout.add_exercise(
            WorkoutExercise(
                exercise=exercise,
                sets=[WorkoutSet(reps=reps, weight=weight) for reps, weight in sets],
            )
        )
    if completed_minutes is not None:
        workout.start_time = created_at
        workout.end_time = created_at + timedelta(minutes=completed_minutes)
    return workout


__all__ = [
    "FailingWorkoutRepository",
    "RecordingWorkoutRepository",
    "build_exercise",
    "build_workout",
]
