"""
Router package for the Fitness Tracker API.

This package contains all API routers organized by domain:
- health: Liveness and readiness endpoints
- exercises: Exercise catalog lookup and search
- workouts: Workout lifecycle (create, start, log exercises/sets, complete)
- users: Per-user workout listings, analytics and personal records
"""

from api.routers.health import router as health_router
from api.routers.exercises import router as exercises_router
from api.routers.workouts import router as workouts_router
from api.routers.users import router as users_router

__all__ = [
    "health_router",
    "exercises_router",
    "workouts_router",
    "users_router",
]
