"""
Infrastructure Layer for the Fitness Tracker API.

This package contains concrete implementations of repository interfaces:
- db/: In-memory workout store and static exercise catalog
"""

# Re-export storage implementations for convenient access
from infrastructure.db import (
    InMemoryWorkoutRepository,
    InMemoryExerciseCatalog,
)

__all__ = [
    "InMemoryWorkoutRepository",
    "InMemoryExerciseCatalog",
]
