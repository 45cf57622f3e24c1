"""
Workout aggregate root and the exercises performed within it.

A Workout exclusively owns its WorkoutExercise entries, which in turn
exclusively own their WorkoutSet entries. Both sequences are append-only
and keep insertion order, which is the order the work was performed in.
"""

import math
import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, computed_field, field_validator

from domain.models.exercise import Exercise
from domain.models.timestamps import ensure_utc, utcnow
from domain.models.workout_set import WorkoutSet


def _mean(values: List[float]) -> float:
    if not values:
        return 0.0
    return sum(values) / len(values)


class WorkoutExercise(BaseModel):
    """
    One catalog exercise as performed within a workout.

    Examples:
        >>> we = WorkoutExercise(exercise=bench)
        >>> we.add_set(WorkoutSet(reps=8, weight=80, rpe=7))
        >>> we.add_set(WorkoutSet(reps=6, weight=85))
        >>> we.total_volume
        1150.0
        >>> we.average_rpe  # the set without RPE is ignored
        7.0
    """

    exercise: Exercise = Field(..., description="Catalog exercise performed")
    sets: List[WorkoutSet] = Field(
        default_factory=list, description="Sets in the order they were performed"
    )
    notes: Optional[str] = Field(default=None, description="Notes for this exercise")

    def add_set(self, workout_set: WorkoutSet) -> None:
        """Append a set to the end of the sequence."""
        self.sets.append(workout_set)

    @computed_field
    @property
    def total_reps(self) -> int:
        return sum(s.reps for s in self.sets)

    @computed_field
    @property
    def total_volume(self) -> float:
        return float(sum(s.volume for s in self.sets))

    @computed_field
    @property
    def average_rpe(self) -> float:
        """Mean RPE over the sets that recorded one; 0 if none did."""
        return _mean([s.rpe for s in self.sets if s.has_rpe])

    @property
    def set_count(self) -> int:
        return len(self.sets)


class WorkoutSummary(BaseModel):
    """
    Snapshot of a workout's identity, timing and aggregate metrics.

    Used for display and as the envelope of a serialized workout.
    """

    id: str
    name: str
    user_id: str
    duration: int = Field(..., description="Duration in whole minutes")
    total_sets: int
    total_reps: int
    total_volume: float
    exercise_count: int
    average_rpe: float
    created_at: datetime
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None


class Workout(BaseModel):
    """
    Aggregate root representing a training session.

    Lifecycle:
        created (no start/end) -> started (start_time set)
        -> exercises and sets appended -> completed (end_time set)

    Starting again overwrites ``start_time``; if the workout had already been
    completed before the new start, ``end_time`` is cleared so that an end
    never precedes its start. Completing again overwrites ``end_time``.

    Examples:
        >>> workout = Workout(name="Push Day", user_id="u1")
        >>> workout.start()
        >>> workout.add_exercise(WorkoutExercise(exercise=bench))
        >>> workout.exercises[0].add_set(WorkoutSet(reps=8, weight=80))
        >>> workout.end()
        >>> workout.total_volume
        640.0
    """

    # Identity
    id: str = Field(
        default_factory=lambda: str(uuid.uuid4()),
        description="Unique identifier (UUID)",
    )
    name: str = Field(..., min_length=1, max_length=200, description="Workout name")
    user_id: str = Field(..., min_length=1, description="Owner of the workout")
    notes: Optional[str] = Field(default=None, max_length=2000)

    # Timing
    created_at: datetime = Field(default_factory=utcnow)
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None

    # Structure
    exercises: List[WorkoutExercise] = Field(default_factory=list)

    model_config = {"validate_assignment": True}

    @field_validator("created_at", "start_time", "end_time")
    @classmethod
    def normalize_timestamps(cls, v: Optional[datetime]) -> Optional[datetime]:
        """Store every timestamp as aware UTC; naive values are taken as UTC."""
        return ensure_utc(v)

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def start(self) -> None:
        """Mark the workout as started now."""
        self.start_time = utcnow()
        if self.end_time is not None and self.end_time < self.start_time:
            self.end_time = None

    def end(self) -> None:
        """Mark the workout as completed now."""
        self.end_time = utcnow()

    def add_exercise(self, workout_exercise: WorkoutExercise) -> None:
        """Append an exercise to the end of the workout."""
        self.exercises.append(workout_exercise)

    @property
    def is_started(self) -> bool:
        return self.start_time is not None

    @property
    def is_completed(self) -> bool:
        return self.end_time is not None

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @computed_field
    @property
    def duration(self) -> int:
        """
        Duration in whole minutes, rounded half up.

        Returns:
            0 unless both start_time and end_time are set.
        """
        if self.start_time is None or self.end_time is None:
            return 0
        minutes = (self.end_time - self.start_time).total_seconds() / 60.0
        return int(math.floor(minutes + 0.5))

    @computed_field
    @property
    def total_sets(self) -> int:
        return sum(ex.set_count for ex in self.exercises)

    @computed_field
    @property
    def total_reps(self) -> int:
        return sum(ex.total_reps for ex in self.exercises)

    @computed_field
    @property
    def total_volume(self) -> float:
        return float(sum(ex.total_volume for ex in self.exercises))

    @computed_field
    @property
    def exercise_count(self) -> int:
        return len(self.exercises)

    @computed_field
    @property
    def average_rpe(self) -> float:
        """
        Mean RPE over every set of every exercise that recorded one.

        This is a flat mean over sets, not a mean of per-exercise averages.
        """
        return _mean(
            [s.rpe for ex in self.exercises for s in ex.sets if s.has_rpe]
        )

    @property
    def exercise_names(self) -> List[str]:
        """Exercise names in the order they were added (with repeats)."""
        return [ex.exercise.name for ex in self.exercises]

    def summary(self) -> WorkoutSummary:
        """Build a snapshot of identity, timing and aggregate metrics."""
        return WorkoutSummary(
            id=self.id,
            name=self.name,
            user_id=self.user_id,
            duration=self.duration,
            total_sets=self.total_sets,
            total_reps=self.total_reps,
            total_volume=self.total_volume,
            exercise_count=self.exercise_count,
            average_rpe=self.average_rpe,
            created_at=self.created_at,
            started_at=self.start_time,
            completed_at=self.end_time,
        )

    def describe(self) -> str:
        """Multi-line, human-readable description of the workout."""
        lines = [f"Workout: {self.name}", f"Date: {self.created_at:%a %b %d %Y}"]
        if self.duration > 0:
            lines.append(f"Duration: {self.duration} minutes")
        lines.append(f"Total: {self.total_sets} sets, {self.total_reps} reps")
        lines.append(f"Total Volume: {self.total_volume:g}kg")

        for number, we in enumerate(self.exercises, start=1):
            lines.append(f"{number}. {we.exercise}")
            lines.append(f"   Muscles: {', '.join(we.exercise.muscle_groups)}")
            for set_number, s in enumerate(we.sets, start=1):
                line = f"   Set {set_number}: {s}"
                if s.has_rpe:
                    line += f" (RPE: {s.rpe:g})"
                lines.append(line)
            if we.notes:
                lines.append(f"   Notes: {we.notes}")
            lines.append(
                f"   Total: {we.total_reps} reps, {we.total_volume:g}kg volume"
            )

        if self.notes:
            lines.append(f"Workout Notes: {self.notes}")
        return "\n".join(lines)
