"""
Workout Service and Analytics Engine.

This module provides business logic for workout tracking:
- Workout lifecycle (create, start, add exercises and sets, complete, delete)
- Analytics over a trailing window of days (totals, frequency ranking)
- Personal records by estimated one-rep max

"Not found" is reported by returning None (or an empty result), never by
raising. Invalid input raises pydantic.ValidationError from the domain models.
"""
from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional
import logging

from application.ports.workout_repository import WorkoutRepository
from domain.models import Exercise, Workout, WorkoutExercise, WorkoutSet

logger = logging.getLogger(__name__)

DEFAULT_ANALYTICS_DAYS = 30
DEFAULT_TOP_EXERCISES = 5


# =============================================================================
# Response DTOs
# =============================================================================


@dataclass
class ExerciseFrequency:
    """How many times an exercise appeared in the analysed workouts."""
    name: str
    count: int


@dataclass
class WorkoutAnalytics:
    """Aggregate statistics for a user's workouts over a window of days."""
    total_workouts: int = 0
    completed_workouts: int = 0
    total_volume: float = 0.0
    total_sets: int = 0
    total_reps: int = 0
    average_workout_duration: float = 0.0
    # Normalized rate (count / days * 7), not a per-calendar-week tally
    workouts_per_week: float = 0.0
    most_frequent_exercises: List[ExerciseFrequency] = field(default_factory=list)


@dataclass
class PersonalRecord:
    """
    Best set ever logged for an exercise, ranked by estimated 1RM.

    ``weight`` and ``reps`` are the winning set's logged values; ``date`` is
    the creation time of the workout the set belongs to.
    """
    exercise: str
    weight: float
    reps: int
    date: datetime
    estimated_one_rep_max: float


# =============================================================================
# Workout Service
# =============================================================================


class WorkoutService:
    """
    Service for workout lifecycle operations and analytics.

    Every mutation follows the same shape: read the workout by id, mutate
    the aggregate, save it back (an idempotent upsert) and return it.
    """

    def __init__(
        self,
        workout_repo: WorkoutRepository,
        *,
        top_exercises_limit: int = DEFAULT_TOP_EXERCISES,
    ):
        """
        Initialize the workout service.

        Args:
            workout_repo: Repository for workout persistence
            top_exercises_limit: How many exercises the frequency ranking keeps
        """
        self._workout_repo = workout_repo
        self._top_exercises_limit = top_exercises_limit

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    async def create_workout(
        self,
        name: str,
        user_id: str,
        notes: Optional[str] = None,
    ) -> Workout:
        workout = Workout(name=name, user_id=user_id, notes=notes)
        saved = await self._workout_repo.save(workout)
        logger.info(f"Workout created: {saved.id} ({saved.name}) for user {user_id}")
        return saved

    async def get_workout_by_id(self, workout_id: str) -> Optional[Workout]:
        return await self._workout_repo.find_by_id(workout_id)

    async def get_user_workouts(self, user_id: str) -> List[Workout]:
        return await self._workout_repo.find_by_user_id(user_id)

    async def start_workout(self, workout_id: str) -> Optional[Workout]:
        workout = await self._workout_repo.find_by_id(workout_id)
        if workout is None:
            logger.warning(f"Cannot start workout {workout_id}: not found")
            return None

        workout.start()
        logger.info(f"Workout started: {workout_id}")
        return await self._workout_repo.save(workout)

    async def complete_workout(self, workout_id: str) -> Optional[Workout]:
        workout = await self._workout_repo.find_by_id(workout_id)
        if workout is None:
            logger.warning(f"Cannot complete workout {workout_id}: not found")
            return None

        workout.end()
        logger.info(f"Workout completed: {workout_id} ({workout.duration} min)")
        return await self._workout_repo.save(workout)

    async def add_exercise_to_workout(
        self,
        workout_id: str,
        exercise: Exercise,
        notes: Optional[str] = None,
    ) -> Optional[Workout]:
        workout = await self._workout_repo.find_by_id(workout_id)
        if workout is None:
            logger.warning(f"Cannot add exercise to workout {workout_id}: not found")
            return None

        workout.add_exercise(WorkoutExercise(exercise=exercise, notes=notes))
        return await self._workout_repo.save(workout)

    async def add_set_to_workout_exercise(
        self,
        workout_id: str,
        exercise_index: int,
        reps: int,
        weight: float,
        rest_time: Optional[int] = None,
        rpe: Optional[float] = None,
        notes: Optional[str] = None,
    ) -> Optional[Workout]:
        """
        Append a set to the exercise at ``exercise_index``.

        Returns:
            The updated workout, or None if the workout does not exist or
            the index does not point at one of its exercises. Negative
            indices are treated as out of bounds.

        Raises:
            pydantic.ValidationError: If the set values are invalid
        """
        workout_set = WorkoutSet(
            reps=reps, weight=weight, rest_time=rest_time, rpe=rpe, notes=notes
        )

        workout = await self._workout_repo.find_by_id(workout_id)
        if workout is None:
            logger.warning(f"Cannot add set to workout {workout_id}: not found")
            return None
        if not 0 <= exercise_index < workout.exercise_count:
            logger.warning(
                f"Cannot add set to workout {workout_id}: "
                f"no exercise at index {exercise_index}"
            )
            return None

        workout.exercises[exercise_index].add_set(workout_set)
        return await self._workout_repo.save(workout)

    async def delete_workout(self, workout_id: str) -> bool:
        return await self._workout_repo.delete(workout_id)

    # -------------------------------------------------------------------------
    # Analytics
    # -------------------------------------------------------------------------

    async def get_workout_analytics(
        self,
        user_id: str,
        days: int = DEFAULT_ANALYTICS_DAYS,
    ) -> WorkoutAnalytics:
        """
        Summarize a user's workouts created in the last ``days`` days.

        Totals include incomplete workouts; the average duration only
        considers completed ones.

        Raises:
            ValueError: If days is less than 1
        """
        if days < 1:
            raise ValueError("days must be at least 1")

        now = datetime.now(timezone.utc)
        workouts = await self._workout_repo.find_in_date_range(
            user_id, now - timedelta(days=days), now
        )
        if not workouts:
            return WorkoutAnalytics()

        completed = [w for w in workouts if w.is_completed]
        average_duration = (
            sum(w.duration for w in completed) / len(completed) if completed else 0.0
        )

        return WorkoutAnalytics(
            total_workouts=len(workouts),
            completed_workouts=len(completed),
            total_volume=sum(w.total_volume for w in workouts),
            total_sets=sum(w.total_sets for w in workouts),
            total_reps=sum(w.total_reps for w in workouts),
            average_workout_duration=average_duration,
            workouts_per_week=len(workouts) / days * 7,
            most_frequent_exercises=self._most_frequent_exercises(workouts),
        )

    def _most_frequent_exercises(
        self, workouts: List[Workout]
    ) -> List[ExerciseFrequency]:
        """Rank exercise names by occurrence; ties keep first-seen order."""
        counts: Counter = Counter()
        for workout in workouts:
            counts.update(workout.exercise_names)

        # sorted() is stable, and Counter iterates in first-seen order
        ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
        return [
            ExerciseFrequency(name=name, count=count)
            for name, count in ranked[: self._top_exercises_limit]
        ]

    async def get_personal_records(self, user_id: str) -> List[PersonalRecord]:
        """
        Find each exercise's best set across all of a user's workouts.

        Sets are compared by estimated one-rep max; a later set must be
        strictly greater to replace the current record. Bodyweight sets
        are skipped.
        """
        workouts = await self._workout_repo.find_by_user_id(user_id)
        records: Dict[str, PersonalRecord] = {}

        for workout in workouts:
            for workout_exercise in workout.exercises:
                name = workout_exercise.exercise.name
                for workout_set in workout_exercise.sets:
                    if workout_set.is_bodyweight:
                        continue
                    one_rm = workout_set.estimated_one_rep_max
                    current = records.get(name)
                    if current is None or one_rm > current.estimated_one_rep_max:
                        records[name] = PersonalRecord(
                            exercise=name,
                            weight=workout_set.weight,
                            reps=workout_set.reps,
                            date=workout.created_at,
                            estimated_one_rep_max=one_rm,
                        )

        return list(records.values())
