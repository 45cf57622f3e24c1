"""
In-memory implementation of WorkoutRepository.

Workouts live in a dict keyed by workout id. There are no secondary indexes;
user and date queries scan and filter.

Stored records are isolated from callers: ``save`` stores a deep copy and
every read hands out deep copies, so a caller mutating a workout it fetched
does not change the store until it saves again.

No method awaits anything, so each call (and a service's find, mutate and
save sequence, which only awaits these calls) runs to completion on the event
loop without interleaving. A store backed by real I/O has to guard that
read-modify-write itself.
"""
import logging
from datetime import datetime
from typing import Dict, Iterable, List, Optional

from domain.models import Workout
from domain.models.timestamps import ensure_utc

logger = logging.getLogger(__name__)


def _newest_first(workouts: Iterable[Workout]) -> List[Workout]:
    return sorted(workouts, key=lambda w: w.created_at, reverse=True)


class InMemoryWorkoutRepository:
    """
    In-memory implementation of the WorkoutRepository protocol.

    Usage:
        repo = InMemoryWorkoutRepository()
        await repo.save(Workout(name="Push Day", user_id="u1"))
        workouts = await repo.find_by_user_id("u1")
    """

    def __init__(self, workouts: Optional[Iterable[Workout]] = None):
        """
        Initialize the store, optionally pre-populated.

        Args:
            workouts: Workouts to seed the store with
        """
        self._workouts: Dict[str, Workout] = {}
        for workout in workouts or []:
            self._workouts[workout.id] = workout.model_copy(deep=True)

    def reset(self) -> None:
        """Clear all stored workouts."""
        self._workouts.clear()

    # =========================================================================
    # WorkoutRepository Protocol Methods
    # =========================================================================

    async def save(self, workout: Workout) -> Workout:
        """Insert or replace a workout by id."""
        existed = workout.id in self._workouts
        self._workouts[workout.id] = workout.model_copy(deep=True)
        if existed:
            logger.debug(f"Workout {workout.id} updated")
        else:
            logger.debug(f"Workout {workout.id} saved for user {workout.user_id}")
        return workout

    async def find_by_id(self, workout_id: str) -> Optional[Workout]:
        workout = self._workouts.get(workout_id)
        if workout is None:
            return None
        return workout.model_copy(deep=True)

    async def find_by_user_id(self, user_id: str) -> List[Workout]:
        return _newest_first(
            w.model_copy(deep=True)
            for w in self._workouts.values()
            if w.user_id == user_id
        )

    async def find_in_date_range(
        self,
        user_id: str,
        start: datetime,
        end: datetime,
    ) -> List[Workout]:
        start, end = ensure_utc(start), ensure_utc(end)
        return _newest_first(
            w.model_copy(deep=True)
            for w in self._workouts.values()
            if w.user_id == user_id and start <= w.created_at <= end
        )

    async def delete(self, workout_id: str) -> bool:
        removed = self._workouts.pop(workout_id, None)
        if removed is None:
            logger.warning(f"No workout found with id {workout_id} (nothing deleted)")
            return False
        logger.info(f"Workout {workout_id} deleted")
        return True

    async def get_all(self) -> List[Workout]:
        return _newest_first(w.model_copy(deep=True) for w in self._workouts.values())

    async def count(self) -> int:
        return len(self._workouts)

    async def count_for_user(self, user_id: str) -> int:
        return sum(1 for w in self._workouts.values() if w.user_id == user_id)
