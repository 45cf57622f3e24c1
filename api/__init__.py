"""
API package for the Fitness Tracker API.

This package contains:
- deps.py: FastAPI dependency providers for DI
- routers/: API route handlers
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_workout_repo,
    get_exercise_catalog,
    get_workout_service,
)

__all__ = [
    # Settings
    "get_settings",
    # Repositories
    "get_workout_repo",
    "get_exercise_catalog",
    # Services
    "get_workout_service",
]
