"""
Workouts router for the workout lifecycle.

This router contains endpoints for:
- /workouts - Create a workout
- /workouts/{workout_id} - Get, delete workout
- /workouts/{workout_id}/start - Start a workout
- /workouts/{workout_id}/complete - Complete a workout
- /workouts/{workout_id}/exercises - Add a catalog exercise
- /workouts/{workout_id}/exercises/{exercise_index}/sets - Log a set

Service methods report "not found" by returning None; this router turns
that into a 404. Anything unexpected is logged and surfaced as a generic 500.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Response
from pydantic import BaseModel, Field, ValidationError

from api.deps import get_exercise_catalog, get_workout_service
from application.ports import ExerciseCatalog
from backend.core.workout_service import WorkoutService
from domain.models import Workout

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/workouts",
    tags=["Workouts"],
)


# =============================================================================
# Request Models
# =============================================================================


class CreateWorkoutRequest(BaseModel):
    """Request for creating a workout."""
    name: str = Field(..., min_length=1, max_length=200)
    user_id: str = Field(..., min_length=1)
    notes: Optional[str] = Field(default=None, max_length=2000)


class AddExerciseRequest(BaseModel):
    """Request for adding a catalog exercise to a workout."""
    exercise_id: str = Field(..., min_length=1)
    notes: Optional[str] = None


class AddSetRequest(BaseModel):
    """Request for logging a set against one of the workout's exercises."""
    reps: int = Field(..., ge=0)
    weight: float = Field(..., ge=0, description="kg, 0 for bodyweight")
    rest_time: Optional[int] = Field(default=None, ge=0, description="seconds")
    rpe: Optional[float] = Field(default=None, ge=1, le=10)
    notes: Optional[str] = None


# =============================================================================
# Helper Functions
# =============================================================================


def _workout_not_found(workout_id: str) -> HTTPException:
    return HTTPException(status_code=404, detail=f"Workout '{workout_id}' not found")


# =============================================================================
# Workout Endpoints
# =============================================================================


@router.post("", response_model=Workout, status_code=201)
async def create_workout(
    request: CreateWorkoutRequest,
    service: WorkoutService = Depends(get_workout_service),
) -> Workout:
    """Create a new (not yet started) workout for a user."""
    try:
        return await service.create_workout(
            request.name, request.user_id, request.notes
        )
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception:
        logger.exception("Failed to create workout")
        raise HTTPException(status_code=500, detail="Failed to create workout")


@router.get("/{workout_id}", response_model=Workout)
async def get_workout(
    workout_id: str,
    service: WorkoutService = Depends(get_workout_service),
) -> Workout:
    """Get a workout with all exercises, sets and derived metrics."""
    try:
        workout = await service.get_workout_by_id(workout_id)
    except Exception:
        logger.exception(f"Failed to fetch workout {workout_id}")
        raise HTTPException(status_code=500, detail="Failed to fetch workout")

    if workout is None:
        raise _workout_not_found(workout_id)
    return workout


@router.delete("/{workout_id}", status_code=204)
async def delete_workout(
    workout_id: str,
    service: WorkoutService = Depends(get_workout_service),
) -> Response:
    """Delete a workout."""
    try:
        deleted = await service.delete_workout(workout_id)
    except Exception:
        logger.exception(f"Failed to delete workout {workout_id}")
        raise HTTPException(status_code=500, detail="Failed to delete workout")

    if not deleted:
        raise _workout_not_found(workout_id)
    return Response(status_code=204)


@router.put("/{workout_id}/start", response_model=Workout)
async def start_workout(
    workout_id: str,
    service: WorkoutService = Depends(get_workout_service),
) -> Workout:
    """Mark a workout as started now."""
    try:
        workout = await service.start_workout(workout_id)
    except Exception:
        logger.exception(f"Failed to start workout {workout_id}")
        raise HTTPException(status_code=500, detail="Failed to start workout")

    if workout is None:
        raise _workout_not_found(workout_id)
    return workout


@router.put("/{workout_id}/complete", response_model=Workout)
async def complete_workout(
    workout_id: str,
    service: WorkoutService = Depends(get_workout_service),
) -> Workout:
    """Mark a workout as completed now."""
    try:
        workout = await service.complete_workout(workout_id)
    except Exception:
        logger.exception(f"Failed to complete workout {workout_id}")
        raise HTTPException(status_code=500, detail="Failed to complete workout")

    if workout is None:
        raise _workout_not_found(workout_id)
    return workout


@router.post("/{workout_id}/exercises", response_model=Workout)
async def add_exercise_to_workout(
    workout_id: str,
    request: AddExerciseRequest,
    service: WorkoutService = Depends(get_workout_service),
    catalog: ExerciseCatalog = Depends(get_exercise_catalog),
) -> Workout:
    """Append a catalog exercise to a workout."""
    exercise = catalog.get_by_id(request.exercise_id)
    if exercise is None:
        raise HTTPException(
            status_code=404, detail=f"Exercise '{request.exercise_id}' not found"
        )

    try:
        workout = await service.add_exercise_to_workout(
            workout_id, exercise, request.notes
        )
    except Exception:
        logger.exception(f"Failed to add exercise to workout {workout_id}")
        raise HTTPException(
            status_code=500, detail="Failed to add exercise to workout"
        )

    if workout is None:
        raise _workout_not_found(workout_id)
    return workout


@router.post("/{workout_id}/exercises/{exercise_index}/sets", response_model=Workout)
async def add_set_to_workout_exercise(
    workout_id: str,
    request: AddSetRequest,
    exercise_index: int = Path(..., description="Position of the exercise in the workout"),
    service: WorkoutService = Depends(get_workout_service),
) -> Workout:
    """Log a set against the exercise at ``exercise_index``."""
    try:
        workout = await service.add_set_to_workout_exercise(
            workout_id,
            exercise_index,
            request.reps,
            request.weight,
            rest_time=request.rest_time,
            rpe=request.rpe,
            notes=request.notes,
        )
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception:
        logger.exception(f"Failed to add set to workout {workout_id}")
        raise HTTPException(status_code=500, detail="Failed to add set")

    if workout is None:
        raise HTTPException(
            status_code=404, detail="Workout or exercise not found"
        )
    return workout
