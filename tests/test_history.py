"""Tests for rebuilding exercise history from workouts."""
import pytest

from coachlog.errors import NotFound
from coachlog.models.workout import create_workout
from coachlog.services.completion import complete_exercise, uncomplete_exercise
from coachlog.services.history import build_history


@pytest.fixture
def older_workout(customer):
    return create_workout(
        customer.id,
        "2024-04-20",
        "Lower Body",
        ["Deadlifts 3x5 @ 100kg", "squats 5x5 @ 50kg - technique"],
    )


class TestBuildHistory:

    def test_unknown_customer(self, app):
        with pytest.raises(NotFound):
            build_history("missing", "Squats")

    def test_workout_history_contains_every_matching_workout(self, customer, workout, older_workout):
        history = build_history(customer.id, "  SQUATS ")

        assert [e["workout_id"] for e in history["workoutHistory"]] == [workout.id, older_workout.id]
        latest, older = history["workoutHistory"]
        assert latest["sets"] == "4"
        assert latest["reps"] == "8-10"
        assert latest["weight"] == "60kg"
        assert latest["notes"] == "felt heavy"
        assert latest["exercise_type"] == "sets"
        assert latest["bestSet"] is None
        assert older["exercise_index"] == 1
        assert older["notes"] == "technique"
        assert history["history"] == []
        assert history["pb"] is None

    def test_pb_history_only_for_best_sets(self, customer, workout, older_workout):
        complete_exercise(older_workout.id, customer.id, 1, "good", {"reps": "5", "weight": "50kg"})
        complete_exercise(workout.id, customer.id, 0, "hard")

        history = build_history(customer.id, "squats")

        assert len(history["workoutHistory"]) == 2
        [entry] = history["history"]
        assert entry["workout_id"] == older_workout.id
        assert entry["reps"] == "5"
        assert entry["weight"] == "50kg"
        assert entry["rating"] == "good"
        assert history["pb"]["weight"] == "50kg"
        assert history["exercise"]["display_name"] == "squats"

    def test_sorted_by_completed_at_before_workout_date(self, customer, workout, older_workout):
        complete_exercise(workout.id, customer.id, 0, "good", {"reps": "8"})
        # Älteres Workout, aber später abgehakt -> steht vorne
        older_workout.exercise_completions = [{
            "exerciseIndex": 1, "completed": True, "rating": "easy",
            "completed_at": "2999-01-01T00:00:00", "bestSet": {"reps": "5"},
        }]

        history = build_history(customer.id, "squats")

        assert [e["workout_id"] for e in history["history"]] == [older_workout.id, workout.id]
        assert history["workoutHistory"][0]["workout_id"] == older_workout.id

    def test_seconds_and_cardio_fields(self, customer, workout):
        plank = build_history(customer.id, "plank")["workoutHistory"][0]
        assert plank["type"] == "seconds"
        assert plank["seconds"] == "45"

        running = build_history(customer.id, "running")["workoutHistory"][0]
        assert running["exercise_type"] == "cardio"
        assert running["duration_minutes"] == "30"
        assert running["distance_km"] == "5"
        assert running["intensity"] == "Moderate"

    def test_uncomplete_removes_best_set_from_history(self, customer, workout):
        complete_exercise(workout.id, customer.id, 0, "good", {"reps": "8"})
        uncomplete_exercise(workout.id, customer.id, 0)

        history = build_history(customer.id, "squats")

        assert history["history"] == []
        assert history["workoutHistory"][0]["bestSet"] is None
        # PB bleibt bestehen
        assert history["pb"]["reps"] == "8"

    def test_duplicate_exercise_only_first_occurrence(self, customer):
        dup = create_workout(customer.id, "2024-06-01", "Double", ["Curls 3x10", "Curls 3x12"])
        complete_exercise(dup.id, customer.id, 1, "good", {"reps": "12"})

        history = build_history(customer.id, "curls")

        [entry] = history["workoutHistory"]
        assert entry["exercise_index"] == 0
        assert entry["bestSet"] is None
        assert history["history"] == []
