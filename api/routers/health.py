"""
Health check router.

This router provides health check endpoints for monitoring and load balancers.
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from api.deps import get_exercise_catalog, get_settings, get_workout_repo
from application.ports import ExerciseCatalog, WorkoutRepository
from backend.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Health"],
)


@router.get("/health")
def health():
    """
    Simple liveness endpoint.

    Returns:
        dict: Status indicator for health checks
    """
    return {"status": "ok", "message": "Fitness Tracker API is running!"}


@router.get("/health/ready")
async def readiness(
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
    catalog: ExerciseCatalog = Depends(get_exercise_catalog),
    settings: Settings = Depends(get_settings),
):
    """
    Readiness endpoint reporting the size of the in-memory stores.

    Returns:
        dict: Status, environment and store counts
    """
    return {
        "status": "ok",
        "environment": settings.environment,
        "workout_count": await workout_repo.count(),
        "exercise_count": len(catalog.get_all()),
        "checked_at": datetime.now(timezone.utc).isoformat(),
    }
