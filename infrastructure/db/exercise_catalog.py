"""
In-memory implementation of ExerciseCatalog.

The catalog is a small static list of exercises. Lookups are linear scans;
the list is short enough that no index is needed.
"""
import logging
from typing import Iterable, List, Optional

from domain.models import Exercise, ExerciseCategory

logger = logging.getLogger(__name__)


DEFAULT_EXERCISES = [
    {
        "id": "1",
        "name": "Push-ups",
        "category": ExerciseCategory.CHEST,
        "muscle_groups": ["Chest", "Triceps", "Shoulders"],
        "description": "Classic bodyweight chest exercise",
        "equipment": [],
        "instructions": "Start in plank position, lower body to ground, push back up",
    },
    {
        "id": "2",
        "name": "Squats",
        "category": ExerciseCategory.LEGS,
        "muscle_groups": ["Quadriceps", "Glutes", "Hamstrings"],
        "description": "Fundamental leg exercise",
        "equipment": [],
        "instructions": "Stand with feet shoulder-width apart, lower body as if sitting back into a chair",
    },
    {
        "id": "3",
        "name": "Pull-ups",
        "category": ExerciseCategory.BACK,
        "muscle_groups": ["Lats", "Biceps", "Rhomboids"],
        "description": "Upper body pulling exercise",
        "equipment": ["Pull-up bar"],
        "instructions": "Hang from bar with palms facing away, pull body up until chin clears bar",
    },
    {
        "id": "4",
        "name": "Bench Press",
        "category": ExerciseCategory.CHEST,
        "muscle_groups": ["Chest", "Triceps", "Shoulders"],
        "description": "Classic chest exercise with barbell",
        "equipment": ["Barbell", "Bench"],
        "instructions": "Lie on bench, lower bar to chest, press back up",
    },
    {
        "id": "5",
        "name": "Deadlift",
        "category": ExerciseCategory.BACK,
        "muscle_groups": ["Hamstrings", "Glutes", "Lower Back", "Traps"],
        "description": "Compound full body exercise",
        "equipment": ["Barbell"],
        "instructions": "Stand with bar over mid-foot, bend at hips and knees, lift bar by extending hips and knees",
    },
    {
        "id": "6",
        "name": "Overhead Press",
        "category": ExerciseCategory.SHOULDERS,
        "muscle_groups": ["Shoulders", "Triceps", "Core"],
        "description": "Shoulder pressing movement",
        "equipment": ["Barbell", "Dumbbells"],
        "instructions": "Press weight overhead from shoulder level",
    },
    {
        "id": "7",
        "name": "Plank",
        "category": ExerciseCategory.CORE,
        "muscle_groups": ["Core", "Shoulders", "Glutes"],
        "description": "Isometric core exercise",
        "equipment": [],
        "instructions": "Hold push-up position with straight body line",
    },
    {
        "id": "8",
        "name": "Lunges",
        "category": ExerciseCategory.LEGS,
        "muscle_groups": ["Quadriceps", "Glutes", "Hamstrings"],
        "description": "Single leg exercise",
        "equipment": [],
        "instructions": "Step forward into lunge position, return to start",
    },
]


class InMemoryExerciseCatalog:
    """
    In-memory implementation of the ExerciseCatalog protocol.

    Constructed once at startup and shared read-only by every request.
    """

    def __init__(self, exercises: Optional[Iterable[Exercise]] = None):
        """
        Initialize the catalog.

        Args:
            exercises: Exercises to hold. Defaults to the built-in list.
        """
        if exercises is None:
            exercises = [Exercise(**data) for data in DEFAULT_EXERCISES]
        self._exercises: List[Exercise] = list(exercises)

    def get_all(self) -> List[Exercise]:
        return list(self._exercises)

    def get_by_id(self, exercise_id: str) -> Optional[Exercise]:
        for exercise in self._exercises:
            if exercise.id == exercise_id:
                return exercise
        return None

    def find_by_name(self, name: str) -> Optional[Exercise]:
        wanted = name.lower()
        for exercise in self._exercises:
            if exercise.name.lower() == wanted:
                return exercise
        return None

    def find_by_category(self, category: ExerciseCategory) -> List[Exercise]:
        return [ex for ex in self._exercises if ex.category == category]

    def find_by_muscle_group(self, muscle: str) -> List[Exercise]:
        return [ex for ex in self._exercises if ex.matches_muscle_group(muscle)]

    def search(self, query: str) -> List[Exercise]:
        return [ex for ex in self._exercises if ex.matches_query(query)]

    def add(self, exercise: Exercise) -> Exercise:
        if self.get_by_id(exercise.id) is not None:
            raise ValueError(f"Exercise with id '{exercise.id}' already exists")
        self._exercises.append(exercise)
        logger.info(f"Exercise added to catalog: {exercise.name} ({exercise.id})")
        return exercise
