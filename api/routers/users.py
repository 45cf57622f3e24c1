"""
Users router for per-user workout listings and analytics.

This router provides endpoints for:
- A user's workouts, most recent first
- Training analytics over a trailing window of days
- Personal records by estimated one-rep max

A user without workouts gets empty or zeroed results, never a 404.
"""
import logging
from dataclasses import asdict
from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, Field

from api.deps import get_settings, get_workout_service
from backend.core.workout_service import WorkoutService
from backend.settings import Settings
from domain.models import Workout

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/users",
    tags=["Users"],
)


# =============================================================================
# Response Models
# =============================================================================


class ExerciseFrequencyItem(BaseModel):
    """An exercise and how often it was performed."""
    name: str
    count: int


class WorkoutAnalyticsApiResponse(BaseModel):
    """Response model for the analytics endpoint."""
    total_workouts: int
    completed_workouts: int
    total_volume: float
    total_sets: int
    total_reps: int
    average_workout_duration: float
    workouts_per_week: float = Field(
        ..., description="Normalized rate: workouts / days * 7"
    )
    most_frequent_exercises: List[ExerciseFrequencyItem] = Field(default_factory=list)
    days: int


class PersonalRecordItem(BaseModel):
    """A single personal record."""
    exercise: str
    weight: float
    reps: int
    date: datetime
    estimated_one_rep_max: float


# =============================================================================
# Endpoints
# =============================================================================


@router.get("/{user_id}/workouts", response_model=List[Workout])
async def list_user_workouts(
    user_id: str,
    service: WorkoutService = Depends(get_workout_service),
) -> List[Workout]:
    """List a user's workouts, most recently created first."""
    try:
        return await service.get_user_workouts(user_id)
    except Exception:
        logger.exception(f"Failed to fetch workouts for user {user_id}")
        raise HTTPException(status_code=500, detail="Failed to fetch user workouts")


@router.get("/{user_id}/analytics", response_model=WorkoutAnalyticsApiResponse)
async def get_user_analytics(
    user_id: str,
    days: Optional[int] = Query(
        None, ge=1, le=3650, description="Window in days (defaults from settings)"
    ),
    service: WorkoutService = Depends(get_workout_service),
    settings: Settings = Depends(get_settings),
) -> WorkoutAnalyticsApiResponse:
    """
    Get training analytics for a user's workouts created in the last N days.

    ``workouts_per_week`` is the workout count scaled to a 7-day rate, not a
    count of workouts in any calendar week.
    """
    window = days or settings.analytics_default_days
    try:
        analytics = await service.get_workout_analytics(user_id, window)
    except Exception:
        logger.exception(f"Failed to compute analytics for user {user_id}")
        raise HTTPException(status_code=500, detail="Failed to fetch analytics")

    return WorkoutAnalyticsApiResponse(**asdict(analytics), days=window)


@router.get("/{user_id}/personal-records", response_model=List[PersonalRecordItem])
async def get_user_personal_records(
    user_id: str,
    service: WorkoutService = Depends(get_workout_service),
) -> List[PersonalRecordItem]:
    """Get the best set per exercise across all of a user's workouts."""
    try:
        records = await service.get_personal_records(user_id)
    except Exception:
        logger.exception(f"Failed to compute personal records for user {user_id}")
        raise HTTPException(
            status_code=500, detail="Failed to fetch personal records"
        )

    return [PersonalRecordItem(**asdict(record)) for record in records]
