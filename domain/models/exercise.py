"""
Exercise catalog entry.

Exercises are owned by the exercise catalog and referenced (never owned)
by the WorkoutExercise entries of a workout.
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from domain.models.timestamps import ensure_utc, utcnow


class ExerciseCategory(str, Enum):
    """Body region an exercise primarily trains."""

    CHEST = "chest"
    BACK = "back"
    LEGS = "legs"
    SHOULDERS = "shoulders"
    ARMS = "arms"
    CORE = "core"
    CARDIO = "cardio"


class Exercise(BaseModel):
    """
    A catalog exercise such as "Bench Press" or "Plank".

    The ``id`` is the identity of the exercise and never changes.
    Descriptive fields may be edited through ``update_details``.

    Examples:
        >>> bench = Exercise(
        ...     id="4",
        ...     name="Bench Press",
        ...     category=ExerciseCategory.CHEST,
        ...     muscle_groups=["Chest", "Triceps", "Shoulders"],
        ...     equipment=["Barbell", "Bench"],
        ... )
        >>> bench.category.value
        'chest'
    """

    id: str = Field(..., min_length=1, description="Unique catalog identifier")
    name: str = Field(..., min_length=1, description="Display name")
    category: ExerciseCategory = Field(..., description="Primary body region")
    muscle_groups: List[str] = Field(
        default_factory=list,
        description="Muscles worked, most important first",
    )
    equipment: Optional[List[str]] = Field(
        default=None, description="Equipment required (empty for bodyweight)"
    )
    description: Optional[str] = Field(default=None, description="Short summary")
    instructions: Optional[str] = Field(
        default=None, description="How to perform the movement"
    )
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    model_config = {"validate_assignment": True}

    @field_validator("created_at", "updated_at")
    @classmethod
    def normalize_timestamps(cls, v: datetime) -> datetime:
        return ensure_utc(v)

    def update_details(self, **changes) -> "Exercise":
        """
        Edit descriptive fields in place and bump ``updated_at``.

        The edit is all or nothing: every change is validated before any
        field is touched.

        Raises:
            ValueError: If the change tries to modify ``id`` or ``created_at``,
                or names a field the model does not have.
            pydantic.ValidationError: If any new value is invalid
        """
        for key in ("id", "created_at"):
            if key in changes:
                raise ValueError(f"Exercise field '{key}' is immutable")
        unknown = set(changes) - set(type(self).model_fields)
        if unknown:
            raise ValueError(f"Unknown exercise fields: {sorted(unknown)}")

        validated = type(self).model_validate({**self.model_dump(), **changes})
        for key in changes:
            setattr(self, key, getattr(validated, key))
        self.updated_at = utcnow()
        return self

    def matches_muscle_group(self, muscle: str) -> bool:
        """Case-insensitive substring match against the muscle groups."""
        needle = muscle.lower()
        return any(needle in group.lower() for group in self.muscle_groups)

    def matches_query(self, query: str) -> bool:
        """Case-insensitive substring match over name, description and muscles."""
        needle = query.lower()
        if needle in self.name.lower():
            return True
        if self.description and needle in self.description.lower():
            return True
        return self.matches_muscle_group(needle)

    def __str__(self) -> str:
        return f"{self.name} ({self.category.value})"
