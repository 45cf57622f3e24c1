"""
Exercise Catalog Interface (Port).

This module defines the abstract interface for looking up catalog exercises.
The catalog is static reference data; workouts only ever read from it.
"""
from typing import List, Optional, Protocol

from domain.models import Exercise, ExerciseCategory


class ExerciseCatalog(Protocol):
    """
    Abstract interface for querying the exercise catalog.

    All text matching is case-insensitive.
    """

    def get_all(self) -> List[Exercise]:
        """
        Get all exercises in catalog order.

        Returns:
            List of exercises
        """
        ...

    def get_by_id(self, exercise_id: str) -> Optional[Exercise]:
        """
        Get an exercise by its catalog ID.

        Args:
            exercise_id: The exercise ID (e.g., "4")

        Returns:
            Exercise or None if not found
        """
        ...

    def find_by_name(self, name: str) -> Optional[Exercise]:
        """
        Find an exercise by exact name match (case-insensitive).

        Args:
            name: The exercise name to search for

        Returns:
            Exercise or None if not found
        """
        ...

    def find_by_category(self, category: ExerciseCategory) -> List[Exercise]:
        """
        Find exercises in a category.

        Args:
            category: Category to filter on

        Returns:
            List of exercises in that category
        """
        ...

    def find_by_muscle_group(self, muscle: str) -> List[Exercise]:
        """
        Find exercises where any muscle group contains ``muscle``.

        Args:
            muscle: Muscle group fragment (e.g., "tri" matches "Triceps")

        Returns:
            List of matching exercises
        """
        ...

    def search(self, query: str) -> List[Exercise]:
        """
        Free-text search over name, description and muscle groups.

        Args:
            query: Substring to look for

        Returns:
            List of matching exercises
        """
        ...

    def add(self, exercise: Exercise) -> Exercise:
        """
        Add an exercise to the catalog.

        Raises:
            ValueError: If an exercise with the same id already exists
        """
        ...
