"""
Domain models for the Fitness Tracker API.

These models represent the core training concepts:
- Exercise: A catalog entry (e.g. "Bench Press") with category and muscles
- WorkoutSet: One performed set (reps x weight, optional rest/RPE/notes)
- WorkoutExercise: A catalog exercise performed in a workout, with its sets
- Workout: The aggregate root - a session owned by a user
- WorkoutSummary: Snapshot of a workout's aggregate metrics

Usage:
    >>> from domain.models import Workout, WorkoutExercise, WorkoutSet

    >>> workout = Workout(name="Push Day", user_id="u1")
    >>> workout.add_exercise(WorkoutExercise(exercise=bench_press))
    >>> workout.exercises[0].add_set(WorkoutSet(reps=8, weight=80, rpe=7))

    >>> # Serialize to JSON (derived metrics included)
    >>> json_str = workout.model_dump_json(indent=2)
"""

from domain.models.exercise import Exercise, ExerciseCategory
from domain.models.workout_set import WorkoutSet, estimate_one_rep_max
from domain.models.workout import Workout, WorkoutExercise, WorkoutSummary

__all__ = [
    # Main entities
    "Workout",
    "WorkoutExercise",
    "WorkoutSet",
    "Exercise",
    "WorkoutSummary",
    # Enums
    "ExerciseCategory",
    # Formulas
    "estimate_one_rep_max",
]
