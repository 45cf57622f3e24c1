"""
Exercises router for catalog lookup.

This router provides endpoints for:
- Listing the exercise catalog
- Free-text search over names, descriptions and muscle groups
- Filtering by category or muscle group
- Looking up a single exercise by ID
"""
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, Query

from api.deps import get_exercise_catalog
from application.ports import ExerciseCatalog
from domain.models import Exercise, ExerciseCategory

router = APIRouter(
    prefix="/exercises",
    tags=["Exercises"],
)


@router.get("", response_model=List[Exercise])
def list_exercises(
    catalog: ExerciseCatalog = Depends(get_exercise_catalog),
) -> List[Exercise]:
    """List every exercise in the catalog."""
    return catalog.get_all()


@router.get("/search", response_model=List[Exercise])
def search_exercises(
    q: str = Query("", description="Text to look for in name, description or muscles"),
    catalog: ExerciseCatalog = Depends(get_exercise_catalog),
) -> List[Exercise]:
    """Case-insensitive search across the catalog."""
    if not q.strip():
        raise HTTPException(status_code=400, detail='Query parameter "q" is required')
    return catalog.search(q.strip())


@router.get("/category/{category}", response_model=List[Exercise])
def list_exercises_by_category(
    category: ExerciseCategory = Path(..., description="Exercise category"),
    catalog: ExerciseCatalog = Depends(get_exercise_catalog),
) -> List[Exercise]:
    """List exercises in a category (e.g. chest, legs)."""
    return catalog.find_by_category(category)


@router.get("/muscle-group/{muscle}", response_model=List[Exercise])
def list_exercises_by_muscle_group(
    muscle: str = Path(..., min_length=1, description="Muscle group fragment"),
    catalog: ExerciseCatalog = Depends(get_exercise_catalog),
) -> List[Exercise]:
    """List exercises whose muscle groups contain the given text."""
    return catalog.find_by_muscle_group(muscle)


@router.get("/{exercise_id}", response_model=Exercise)
def get_exercise(
    exercise_id: str = Path(..., description="Catalog exercise ID"),
    catalog: ExerciseCatalog = Depends(get_exercise_catalog),
) -> Exercise:
    """Get a single exercise by ID."""
    exercise = catalog.get_by_id(exercise_id)
    if exercise is None:
        raise HTTPException(status_code=404, detail=f"Exercise '{exercise_id}' not found")
    return exercise
