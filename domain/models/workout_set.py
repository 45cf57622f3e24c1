"""
WorkoutSet value object - a single performed set.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, computed_field, field_validator

from domain.models.timestamps import ensure_utc, utcnow

# Epley formula divisor: 1RM = weight * (1 + reps / 30)
EPLEY_DIVISOR = 30.0


def estimate_one_rep_max(weight: float, reps: int) -> float:
    """
    Estimate a one-rep max with the Epley formula.

    Bodyweight sets (weight 0) have no meaningful 1RM and return 0.

    Args:
        weight: Weight lifted
        reps: Number of reps completed

    Returns:
        Estimated 1RM (unrounded)
    """
    if weight == 0:
        return 0.0
    return weight * (1.0 + reps / EPLEY_DIVISOR)


class WorkoutSet(BaseModel):
    """
    Value object representing one set as it was performed.

    A weight of 0 means the set was done with bodyweight only. RPE is
    optional: a set without an RPE is left out of RPE averages rather than
    being counted as zero.

    Examples:
        >>> s = WorkoutSet(reps=8, weight=80, rpe=7)
        >>> s.volume
        640.0
        >>> str(s)
        '8 reps @ 80kg'

        >>> WorkoutSet(reps=15, weight=0).estimated_one_rep_max
        0.0
    """

    reps: int = Field(..., ge=0, description="Repetitions completed")
    weight: float = Field(
        ..., ge=0, description="Weight lifted in kg (0 for bodyweight)"
    )
    rest_time: Optional[int] = Field(
        default=None, ge=0, description="Rest after the set in seconds"
    )
    rpe: Optional[float] = Field(
        default=None, ge=1, le=10, description="Rate of perceived exertion (1-10)"
    )
    notes: Optional[str] = Field(default=None, description="Free-form notes")
    timestamp: datetime = Field(
        default_factory=utcnow,
        description="When the set was logged",
    )

    @field_validator("timestamp")
    @classmethod
    def normalize_timestamp(cls, v: datetime) -> datetime:
        return ensure_utc(v)

    @computed_field
    @property
    def volume(self) -> float:
        """Reps multiplied by weight."""
        return float(self.reps * self.weight)

    @computed_field
    @property
    def estimated_one_rep_max(self) -> float:
        """Epley estimate of the one-rep max for this set."""
        return estimate_one_rep_max(self.weight, self.reps)

    @property
    def is_bodyweight(self) -> bool:
        return self.weight == 0

    @property
    def has_rpe(self) -> bool:
        return self.rpe is not None

    def __str__(self) -> str:
        """Human-readable string representation."""
        weight_text = "bodyweight" if self.is_bodyweight else f"{self.weight:g}kg"
        return f"{self.reps} reps @ {weight_text}"

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {"reps": 8, "weight": 80, "rest_time": 120, "rpe": 7},
                {"reps": 15, "weight": 0, "rest_time": 60},
            ]
        },
    }
