"""
Unit tests for WorkoutService.

Tests cover:
- Workout lifecycle operations and their not-found behaviour
- Analytics over a window of days
- Most frequent exercise ranking
- Personal records by estimated one-rep max
"""
import asyncio
from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from backend.core.workout_service import (
    ExerciseFrequency,
    PersonalRecord,
    WorkoutAnalytics,
    WorkoutService,
)
from domain.models import Workout
from tests.fakes import RecordingWorkoutRepository, build_exercise, build_workout

pytestmark = pytest.mark.unit


# =============================================================================
# Lifecycle
# =============================================================================


class TestLifecycle:
    """Tests for create/start/add/complete/delete."""

    @pytest.mark.asyncio
    async def test_create_workout_persists(self, service, workout_repo):
        workout = await service.create_workout("Push Day", "u1", "chest focus")

        assert workout.name == "Push Day"
        assert workout.user_id == "u1"
        assert workout.notes == "chest focus"
        assert await workout_repo.count() == 1
        assert (await service.get_workout_by_id(workout.id)).id == workout.id

    @pytest.mark.asyncio
    async def test_create_workout_requires_name(self, service):
        with pytest.raises(ValidationError):
            await service.create_workout("", "u1")

    @pytest.mark.asyncio
    async def test_start_and_complete(self, service):
        workout = await service.create_workout("Push Day", "u1")

        started = await service.start_workout(workout.id)
        assert started.start_time is not None
        assert started.end_time is None

        completed = await service.complete_workout(workout.id)
        assert completed.end_time is not None
        assert completed.end_time >= completed.start_time

        stored = await service.get_workout_by_id(workout.id)
        assert stored.is_completed

    @pytest.mark.asyncio
    async def test_unknown_workout_returns_none(self, service, bench_press):
        assert await service.get_workout_by_id("missing") is None
        assert await service.start_workout("missing") is None
        assert await service.complete_workout("missing") is None
        assert await service.add_exercise_to_workout("missing", bench_press) is None
        assert await service.add_set_to_workout_exercise("missing", 0, 5, 100) is None
        assert await service.delete_workout("missing") is False

    @pytest.mark.asyncio
    async def test_not_found_does_not_save(self, bench_press):
        repo = RecordingWorkoutRepository()
        service = WorkoutService(repo)

        await service.start_workout("missing")
        await service.add_exercise_to_workout("missing", bench_press)

        assert repo.saved_ids == []

    @pytest.mark.asyncio
    async def test_push_day_scenario(self, service, push_ups, bench_press):
        workout = await service.create_workout("Push Day", "u1")
        await service.add_exercise_to_workout(workout.id, push_ups, "warm-up")
        for reps in (15, 12, 10):
            await service.add_set_to_workout_exercise(workout.id, 0, reps, 0)
        await service.add_exercise_to_workout(workout.id, bench_press)
        for reps, weight in ((8, 80), (6, 85), (4, 90)):
            result = await service.add_set_to_workout_exercise(
                workout.id, 1, reps, weight
            )

        assert result.exercises[0].total_reps == 37
        assert result.exercises[0].total_volume == 0
        assert result.exercises[0].notes == "warm-up"
        assert result.exercises[1].total_volume == 1510
        assert result.total_volume == 1510
        assert result.total_sets == 6
        assert result.total_reps == 55

        stored = await service.get_workout_by_id(workout.id)
        assert stored.total_sets == 6

    @pytest.mark.asyncio
    async def test_add_set_keeps_optional_fields(self, service, bench_press):
        workout = await service.create_workout("Push Day", "u1")
        await service.add_exercise_to_workout(workout.id, bench_press)

        result = await service.add_set_to_workout_exercise(
            workout.id, 0, 8, 80, rest_time=120, rpe=7.5, notes="paused"
        )

        logged = result.exercises[0].sets[0]
        assert logged.rest_time == 120
        assert logged.rpe == 7.5
        assert logged.notes == "paused"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("index", [1, 5, -1])
    async def test_add_set_out_of_bounds_leaves_workout_unchanged(
        self, service, bench_press, index
    ):
        workout = await service.create_workout("Push Day", "u1")
        await service.add_exercise_to_workout(workout.id, bench_press)
        await service.add_set_to_workout_exercise(workout.id, 0, 5, 100)

        assert await service.add_set_to_workout_exercise(workout.id, index, 5, 100) is None

        stored = await service.get_workout_by_id(workout.id)
        assert stored.total_sets == 1

    @pytest.mark.asyncio
    async def test_add_set_with_invalid_values_raises(self, service, bench_press):
        workout = await service.create_workout("Push Day", "u1")
        await service.add_exercise_to_workout(workout.id, bench_press)

        with pytest.raises(ValidationError):
            await service.add_set_to_workout_exercise(workout.id, 0, -1, 100)
        with pytest.raises(ValidationError):
            await service.add_set_to_workout_exercise(workout.id, 0, 5, 100, rpe=11)

        stored = await service.get_workout_by_id(workout.id)
        assert stored.total_sets == 0

    @pytest.mark.asyncio
    async def test_delete_workout(self, service):
        workout = await service.create_workout("Push Day", "u1")
        assert await service.delete_workout(workout.id) is True
        assert await service.get_workout_by_id(workout.id) is None

    @pytest.mark.asyncio
    async def test_user_workouts_newest_first(self, service, workout_repo, bench_press):
        older = build_workout((bench_press, [(5, 100)]), name="older", days_ago=3)
        newer = build_workout((bench_press, [(5, 100)]), name="newer", days_ago=1)
        await workout_repo.save(older)
        await workout_repo.save(newer)

        workouts = await service.get_user_workouts("u1")
        assert [w.name for w in workouts] == ["newer", "older"]

    @pytest.mark.asyncio
    async def test_concurrent_set_logging_keeps_every_set(self, service, bench_press):
        workout = await service.create_workout("Push Day", "u1")
        await service.add_exercise_to_workout(workout.id, bench_press)

        await asyncio.gather(
            *(service.add_set_to_workout_exercise(workout.id, 0, reps, 100) for reps in range(1, 11))
        )

        stored = await service.get_workout_by_id(workout.id)
        assert stored.total_sets == 10
        assert stored.total_reps == 55


# =============================================================================
# Analytics
# =============================================================================


class TestAnalytics:
    """Tests for get_workout_analytics."""

    @pytest.mark.asyncio
    async def test_no_workouts_gives_zeroed_analytics(self, service):
        analytics = await service.get_workout_analytics("nobody", 30)
        assert analytics == WorkoutAnalytics()
        assert analytics.most_frequent_exercises == []

    @pytest.mark.asyncio
    async def test_totals_include_incomplete_workouts(
        self, service, workout_repo, bench_press, squats
    ):
        await workout_repo.save(
            build_workout((bench_press, [(8, 80), (6, 85)]), days_ago=1, completed_minutes=40)
        )
        await workout_repo.save(
            build_workout((squats, [(5, 100)]), days_ago=2)
        )

        analytics = await service.get_workout_analytics("u1", 30)

        assert analytics.total_workouts == 2
        assert analytics.completed_workouts == 1
        assert analytics.total_volume == 640 + 510 + 500
        assert analytics.total_sets == 3
        assert analytics.total_reps == 19

    @pytest.mark.asyncio
    async def test_average_duration_uses_completed_only(
        self, service, workout_repo, bench_press
    ):
        await workout_repo.save(build_workout((bench_press, [(5, 100)]), days_ago=1, completed_minutes=30))
        await workout_repo.save(build_workout((bench_press, [(5, 100)]), days_ago=2, completed_minutes=60))
        await workout_repo.save(build_workout((bench_press, [(5, 100)]), days_ago=3))

        analytics = await service.get_workout_analytics("u1", 30)
        assert analytics.average_workout_duration == pytest.approx(45.0)

    @pytest.mark.asyncio
    async def test_average_duration_zero_without_completed(
        self, service, workout_repo, bench_press
    ):
        await workout_repo.save(build_workout((bench_press, [(5, 100)]), days_ago=1))
        analytics = await service.get_workout_analytics("u1", 30)
        assert analytics.completed_workouts == 0
        assert analytics.average_workout_duration == 0

    @pytest.mark.asyncio
    async def test_window_excludes_old_workouts(self, service, workout_repo, bench_press):
        await workout_repo.save(build_workout((bench_press, [(5, 100)]), days_ago=1))
        await workout_repo.save(build_workout((bench_press, [(5, 100)]), days_ago=10))
        await workout_repo.save(build_workout((bench_press, [(5, 100)]), days_ago=31))
        await workout_repo.save(build_workout((bench_press, [(5, 100)]), days_ago=90))

        analytics = await service.get_workout_analytics("u1", 30)

        assert analytics.total_workouts == 2
        assert analytics.workouts_per_week == pytest.approx(2 / 30 * 7)

    @pytest.mark.asyncio
    async def test_naive_workout_does_not_break_user_queries(
        self, service, workout_repo, bench_press
    ):
        await workout_repo.save(build_workout((bench_press, [(5, 100)]), days_ago=2))
        await workout_repo.save(
            Workout(
                name="naive",
                user_id="u1",
                created_at=datetime.now(timezone.utc).replace(tzinfo=None) - timedelta(days=1),
            )
        )

        analytics = await service.get_workout_analytics("u1", 30)
        assert analytics.total_workouts == 2

        workouts = await service.get_user_workouts("u1")
        assert workouts[0].name == "naive"
        assert await service.get_personal_records("u1") != []

    @pytest.mark.asyncio
    async def test_window_ignores_other_users(self, service, workout_repo, bench_press):
        await workout_repo.save(build_workout((bench_press, [(5, 100)]), user_id="u2", days_ago=1))
        analytics = await service.get_workout_analytics("u1", 30)
        assert analytics.total_workouts == 0

    @pytest.mark.asyncio
    async def test_workouts_per_week_scales_with_window(
        self, service, workout_repo, bench_press
    ):
        for days_ago in (1, 2, 3):
            await workout_repo.save(build_workout((bench_press, [(5, 100)]), days_ago=days_ago))

        analytics = await service.get_workout_analytics("u1", 7)
        assert analytics.workouts_per_week == pytest.approx(3.0)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("days", [0, -5])
    async def test_invalid_window_rejected(self, service, days):
        with pytest.raises(ValueError):
            await service.get_workout_analytics("u1", days)

    @pytest.mark.asyncio
    async def test_most_frequent_exercises_ranking_and_ties(
        self, service, workout_repo, bench_press, squats, catalog
    ):
        deadlift = catalog.find_by_name("Deadlift")
        # Newest first in repository order: [Squats, Bench], then [Bench, Deadlift]
        await workout_repo.save(
            build_workout((bench_press, [(5, 100)]), (deadlift, [(5, 140)]), days_ago=2)
        )
        await workout_repo.save(
            build_workout((squats, [(5, 120)]), (bench_press, [(5, 100)]), days_ago=1)
        )

        analytics = await service.get_workout_analytics("u1", 30)

        assert analytics.most_frequent_exercises == [
            ExerciseFrequency(name="Bench Press", count=2),
            ExerciseFrequency(name="Squats", count=1),
            ExerciseFrequency(name="Deadlift", count=1),
        ]

    @pytest.mark.asyncio
    async def test_most_frequent_exercises_counts_repeats_within_workout(
        self, service, workout_repo, bench_press, squats
    ):
        await workout_repo.save(
            build_workout(
                (squats, [(5, 100)]), (bench_press, [(5, 100)]), (bench_press, [(3, 110)]),
                days_ago=1,
            )
        )
        analytics = await service.get_workout_analytics("u1", 30)
        assert analytics.most_frequent_exercises[0] == ExerciseFrequency("Bench Press", 2)

    @pytest.mark.asyncio
    async def test_most_frequent_exercises_limited_to_top_five(self, workout_repo):
        names = ["A", "B", "C", "D", "E", "F", "G"]
        entries = [(build_exercise(n), [(5, 10)]) for n in names]
        await workout_repo.save(build_workout(*entries, days_ago=1))

        analytics = await WorkoutService(workout_repo).get_workout_analytics("u1", 30)
        assert [f.name for f in analytics.most_frequent_exercises] == ["A", "B", "C", "D", "E"]

        limited = await WorkoutService(workout_repo, top_exercises_limit=2).get_workout_analytics("u1", 30)
        assert len(limited.most_frequent_exercises) == 2


# =============================================================================
# Personal Records
# =============================================================================


class TestPersonalRecords:
    """Tests for get_personal_records."""

    @pytest.mark.asyncio
    async def test_no_workouts_gives_empty_list(self, service):
        assert await service.get_personal_records("nobody") == []

    @pytest.mark.asyncio
    async def test_highest_one_rep_max_wins_over_later_lower(
        self, service, workout_repo, bench_press
    ):
        w1 = build_workout((bench_press, [(5, 100)]), days_ago=2)  # 1RM 116.67
        w2 = build_workout((bench_press, [(8, 90)]), days_ago=1)   # 1RM 114
        await workout_repo.save(w1)
        await workout_repo.save(w2)

        records = await service.get_personal_records("u1")

        assert len(records) == 1
        record = records[0]
        assert record.exercise == "Bench Press"
        assert record.weight == 100
        assert record.reps == 5
        assert record.date == w1.created_at
        assert record.estimated_one_rep_max == pytest.approx(116.6667, rel=1e-4)

    @pytest.mark.asyncio
    async def test_ranks_by_one_rep_max_not_raw_weight(
        self, service, workout_repo, bench_press
    ):
        # 100 x 1 -> 103.3; 90 x 10 -> 120
        await workout_repo.save(build_workout((bench_press, [(1, 100), (10, 90)]), days_ago=1))

        record = (await service.get_personal_records("u1"))[0]
        assert record.weight == 90
        assert record.reps == 10

    @pytest.mark.asyncio
    async def test_tie_keeps_first_encountered(self, service, workout_repo, bench_press):
        older = build_workout((bench_press, [(5, 100)]), days_ago=3)
        newer = build_workout((bench_press, [(5, 100)]), days_ago=1)
        await workout_repo.save(older)
        await workout_repo.save(newer)

        record = (await service.get_personal_records("u1"))[0]
        # Workouts are scanned newest first; the equal older set does not replace it
        assert record.date == newer.created_at

    @pytest.mark.asyncio
    async def test_date_comes_from_workout_not_set(self, service, workout_repo, bench_press):
        workout = build_workout((bench_press, [(5, 100)]), days_ago=5)
        await workout_repo.save(workout)

        record = (await service.get_personal_records("u1"))[0]
        assert record.date == workout.created_at
        assert record.date != workout.exercises[0].sets[0].timestamp

    @pytest.mark.asyncio
    async def test_bodyweight_sets_produce_no_record(
        self, service, workout_repo, push_ups, bench_press
    ):
        await workout_repo.save(
            build_workout((push_ups, [(15, 0), (12, 0)]), (bench_press, [(5, 100)]), days_ago=1)
        )

        records = await service.get_personal_records("u1")
        assert [r.exercise for r in records] == ["Bench Press"]

    @pytest.mark.asyncio
    async def test_not_time_windowed(self, service, workout_repo, bench_press):
        await workout_repo.save(build_workout((bench_press, [(5, 100)]), days_ago=400))
        records = await service.get_personal_records("u1")
        assert len(records) == 1
        assert isinstance(records[0], PersonalRecord)
        assert records[0].weight == 100

    @pytest.mark.asyncio
    async def test_one_record_per_exercise(self, service, workout_repo, bench_press, squats):
        await workout_repo.save(
            build_workout((bench_press, [(5, 100)]), (squats, [(5, 140), (3, 150)]), days_ago=1)
        )
        records = await service.get_personal_records("u1")
        by_name = {r.exercise: r for r in records}
        assert set(by_name) == {"Bench Press", "Squats"}
        # 150 x 3 -> 165.0 beats 140 x 5 -> 163.3
        assert by_name["Squats"].weight == 150
