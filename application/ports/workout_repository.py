"""
Workout Repository Interface (Port).

This module defines the abstract interface for workout persistence operations.
Methods are coroutines so that a persistent backend can be swapped in
without changing callers; the bundled implementation is in-memory.
"""
from datetime import datetime
from typing import List, Optional, Protocol

from domain.models import Workout


class WorkoutRepository(Protocol):
    """
    Abstract interface for workout persistence operations.

    "Not found" is never an exception: lookups return None and
    deletions return False.

    Ordering contract: every list-returning method orders workouts by
    ``created_at`` descending (most recent first). Analytics rely on it.
    """

    async def save(self, workout: Workout) -> Workout:
        """
        Insert or replace a workout, keyed by its id.

        Saving the same id twice leaves one record reflecting the
        latest state.

        Args:
            workout: Workout to store

        Returns:
            The stored workout
        """
        ...

    async def find_by_id(self, workout_id: str) -> Optional[Workout]:
        """
        Get a single workout by ID.

        Args:
            workout_id: Workout UUID

        Returns:
            Workout or None if not found
        """
        ...

    async def find_by_user_id(self, user_id: str) -> List[Workout]:
        """
        Get every workout belonging to a user.

        Args:
            user_id: Owner of the workouts

        Returns:
            List of workouts, ordered by created_at desc
        """
        ...

    async def find_in_date_range(
        self,
        user_id: str,
        start: datetime,
        end: datetime,
    ) -> List[Workout]:
        """
        Get a user's workouts created within ``[start, end]`` (inclusive).

        Args:
            user_id: Owner of the workouts
            start: Earliest created_at to include
            end: Latest created_at to include

        Returns:
            List of workouts, ordered by created_at desc
        """
        ...

    async def delete(self, workout_id: str) -> bool:
        """
        Delete a workout.

        Args:
            workout_id: Workout UUID

        Returns:
            True if a record existed and was removed, False otherwise
        """
        ...

    async def get_all(self) -> List[Workout]:
        """Get every stored workout, ordered by created_at desc."""
        ...

    async def count(self) -> int:
        """Total number of stored workouts."""
        ...

    async def count_for_user(self, user_id: str) -> int:
        """Number of stored workouts belonging to a user."""
        ...
