import argparse
import asyncio
import json
import sys
from typing import Any, Dict, Optional

from pydantic import TypeAdapter

from backend.core.workout_service import WorkoutService
from domain.models import ExerciseCategory
from infrastructure.db import InMemoryExerciseCatalog, InMemoryWorkoutRepository

# (exercise name, notes, [(reps, weight, rest seconds, rpe), ...])
DEMO_SESSION = [
    ("Push-ups", "Warming up with bodyweight", [
        (15, 0, 60, 6),
        (12, 0, 60, 7),
        (10, 0, 60, 8),
    ]),
    ("Bench Press", "Working sets with good form", [
        (8, 80, 120, 7),
        (6, 85, 120, 8),
        (4, 90, 120, 9),
    ]),
]


async def run_demo(
    service: WorkoutService,
    catalog: InMemoryExerciseCatalog,
    user_id: str = "user123",
) -> Dict[str, Any]:
    """Log a "Push Day" workout and return it with analytics and records."""
    workout = await service.create_workout(
        "Push Day", user_id, "Focusing on chest and triceps"
    )
    await service.start_workout(workout.id)

    for index, (name, notes, sets) in enumerate(DEMO_SESSION):
        exercise = catalog.find_by_name(name)
        await service.add_exercise_to_workout(workout.id, exercise, notes)
        for reps, weight, rest_time, rpe in sets:
            await service.add_set_to_workout_exercise(
                workout.id, index, reps, weight, rest_time=rest_time, rpe=rpe
            )

    completed = await service.complete_workout(workout.id)
    analytics = await service.get_workout_analytics(user_id, 30)
    records = await service.get_personal_records(user_id)

    return {
        "workout": completed.model_dump(mode="json"),
        "description": completed.describe(),
        "analytics": _jsonable(analytics),
        "personal_records": [_jsonable(r) for r in records],
    }


def _jsonable(obj) -> Any:
    return TypeAdapter(type(obj)).dump_python(obj, mode="json")


def _list_exercises(
    catalog: InMemoryExerciseCatalog,
    category: Optional[str],
    search: Optional[str],
) -> list:
    if search:
        exercises = catalog.search(search)
    elif category:
        exercises = catalog.find_by_category(ExerciseCategory(category))
    else:
        exercises = catalog.get_all()
    return [ex.model_dump(mode="json") for ex in exercises]


def main(argv=None):
    parser = argparse.ArgumentParser(description="Fitness tracker command line tools")
    subparsers = parser.add_subparsers(dest="command", required=True)

    demo = subparsers.add_parser("demo", help="Log a sample workout and print analytics")
    demo.add_argument("--user", default="user123", help="User ID for the demo workout")
    demo.add_argument("--text", action="store_true", help="Print a readable summary instead of JSON")

    exercises = subparsers.add_parser("exercises", help="List catalog exercises")
    exercises.add_argument(
        "--category",
        choices=[c.value for c in ExerciseCategory],
        help="Only list exercises in this category",
    )
    exercises.add_argument("--search", help="Free-text search")

    args = parser.parse_args(argv)
    catalog = InMemoryExerciseCatalog()

    try:
        if args.command == "demo":
            service = WorkoutService(InMemoryWorkoutRepository())
            result = asyncio.run(run_demo(service, catalog, args.user))
            if args.text:
                print(result["description"])
            else:
                print(json.dumps(result, indent=2))
        else:
            print(json.dumps(_list_exercises(catalog, args.category, args.search), indent=2))
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
