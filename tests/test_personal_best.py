"""Tests for the PB superiority rule and reconciliation."""
from datetime import date

import pytest
from sqlalchemy.exc import OperationalError

from coachlog.errors import DerivedDataFailure
from coachlog.models.exercise import Exercise, create_exercise
from coachlog.models.personal_best import ExercisePB, insert_pb
from coachlog.services import personal_best
from coachlog.services.personal_best import is_superior, reconcile, resolve_exercise, to_number


class TestToNumber:

    @pytest.mark.parametrize("raw, expected", [
        ("60kg", 60.0),
        ("22,5 kg", 22.5),
        ("8", 8.0),
        ("8-10", 8.0),
        ("60-65kg", 60.0),
        ("Body weight", 0.0),
        ("", 0.0),
        (None, 0.0),
    ])
    def test_first_number(self, raw, expected):
        assert to_number(raw) == expected


class TestIsSuperior:

    def test_no_existing_pb(self):
        assert is_superior({"reps": "1"}, None)

    def test_heavier_at_same_reps_wins(self):
        assert is_superior({"reps": "8", "weight": "55kg"}, {"reps": "8", "weight": "50kg"})

    def test_reps_first_fewer_reps_heavier_weight_loses(self):
        assert not is_superior({"reps": "6", "weight": "55kg"}, {"reps": "8", "weight": "50kg"})

    def test_more_reps_wins_even_if_lighter(self):
        assert is_superior({"reps": "10", "weight": "40kg"}, {"reps": "8", "weight": "50kg"})

    def test_equal_result_is_not_superior(self):
        assert not is_superior({"reps": "8", "weight": "50kg"}, {"reps": "8", "weight": "50kg"})

    def test_reps_tie_weight_only_on_new_side_keeps_old(self):
        assert not is_superior({"reps": "8", "weight": "20kg"}, {"reps": "8"})

    def test_reps_tie_weight_only_on_old_side_keeps_old(self):
        assert not is_superior({"reps": "8"}, {"reps": "8", "weight": "50kg"})

    def test_weight_only(self):
        assert is_superior({"weight": "100kg"}, {"weight": "90kg"})
        assert not is_superior({"weight": "80kg"}, {"reps": "5", "weight": "90kg"})

    def test_cardio_always_overwrites(self):
        assert is_superior({"duration_minutes": "10"}, {"duration_minutes": "60", "distance_km": "10"})


class TestReconcile:

    def _reconcile(self, customer, workout, best_set, raw=None):
        return reconcile(
            customer_id=customer.id,
            workout_id=workout.id,
            workout_date=workout.date,
            exercise_raw=raw or workout.exercises[0],
            best_set=best_set,
            trainer_id=customer.trainer_id,
        )

    def test_first_completion_creates_exercise_and_pb(self, customer, workout):
        pb = self._reconcile(customer, workout, {"reps": "8", "weight": "50kg"})

        exercise = Exercise.query.filter_by(name="squats").one()
        assert exercise.display_name == "Squats"
        assert exercise.trainer_id == customer.trainer_id
        assert exercise.exercise_type == "sets"
        assert pb.exercise_id == exercise.id
        assert pb.exercise_name == "squats"
        assert pb.reps == "8" and pb.weight == "50kg"
        assert pb.workout_id == workout.id
        assert pb.workout_date == date(2024, 5, 1)

    def test_heavier_weight_updates_in_place(self, customer, workout):
        first = self._reconcile(customer, workout, {"reps": "8", "weight": "50kg"})
        second = self._reconcile(customer, workout, {"reps": "8", "weight": "55kg"})

        assert second.id == first.id
        assert ExercisePB.query.count() == 1
        assert ExercisePB.query.one().weight == "55kg"

    def test_fewer_reps_does_not_update(self, customer, workout):
        self._reconcile(customer, workout, {"reps": "8", "weight": "50kg"})
        self._reconcile(customer, workout, {"reps": "6", "weight": "55kg"})

        pb = ExercisePB.query.one()
        assert pb.reps == "8"
        assert pb.weight == "50kg"

    def test_cardio_creates_cardio_exercise_and_overwrites(self, customer, workout):
        raw = workout.exercises[2]
        self._reconcile(customer, workout, {"duration_minutes": "30", "distance_km": "5"}, raw=raw)
        self._reconcile(customer, workout, {"duration_minutes": "20"}, raw=raw)

        assert Exercise.query.filter_by(name="running").one().exercise_type == "cardio"
        pb = ExercisePB.query.one()
        assert pb.duration_minutes == "20"
        assert pb.distance_km is None

    def test_legacy_row_found_by_name(self, customer, workout):
        legacy = insert_pb(customer_id=customer.id, exercise_name="squats", reps="8", weight="50kg")

        pb = self._reconcile(customer, workout, {"reps": "8", "weight": "60kg"})

        assert pb.id == legacy.id
        assert pb.exercise_id is not None
        assert ExercisePB.query.count() == 1

    def test_reuses_global_legacy_exercise(self, customer, workout):
        global_exercise = create_exercise(name="squats", display_name="Squats")

        pb = self._reconcile(customer, workout, {"reps": "5"})

        assert pb.exercise_id == global_exercise.id
        assert Exercise.query.count() == 1

    def test_empty_name_is_skipped(self, customer, workout):
        assert self._reconcile(customer, workout, {"reps": "5"}, raw="4x8 @ 50kg") is None
        assert ExercisePB.query.count() == 0

    def test_storage_error_becomes_derived_data_failure(self, customer, workout, monkeypatch):
        def broken(*args, **kwargs):
            raise OperationalError("INSERT", {}, Exception("disk I/O error"))

        monkeypatch.setattr(personal_best, "insert_pb", broken)

        with pytest.raises(DerivedDataFailure):
            self._reconcile(customer, workout, {"reps": "5"})

    def test_reps_tie_without_stored_weight_keeps_pb(self, customer, workout):
        self._reconcile(customer, workout, {"reps": "8"})
        self._reconcile(customer, workout, {"reps": "8", "weight": "20kg"})

        pb = ExercisePB.query.one()
        assert pb.reps == "8"
        assert pb.weight is None

    def test_concurrent_pb_insert_retried_as_update(self, customer, workout, monkeypatch):
        stored = insert_pb(customer_id=customer.id, exercise_name="squats", reps="8", weight="50kg")
        # Lookup sieht die Zeile noch nicht, der Insert läuft in den Unique-Key
        monkeypatch.setattr(personal_best, "find_pb", lambda *args, **kwargs: None)

        pb = self._reconcile(customer, workout, {"reps": "8", "weight": "60kg"})

        assert pb.id == stored.id
        assert ExercisePB.query.count() == 1
        row = ExercisePB.query.one()
        assert row.weight == "60kg"
        assert row.workout_id == workout.id
        assert row.exercise_id is not None


class TestResolveExercise:

    def test_concurrent_create_returns_existing_row(self, customer, monkeypatch):
        existing = create_exercise(trainer_id=customer.trainer_id, name="squats", display_name="Squats")
        real_find = personal_best.find_exercise
        calls = []

        def find_late(name, trainer_id):
            # Erster Lookup verpasst die parallel angelegte Zeile
            calls.append(name)
            if len(calls) == 1:
                return None
            return real_find(name, trainer_id)

        monkeypatch.setattr(personal_best, "find_exercise", find_late)

        exercise = resolve_exercise("Squats 4x8 @ 60kg", "squats", customer.trainer_id)

        assert exercise.id == existing.id
        assert len(calls) == 2
        assert Exercise.query.count() == 1

    def test_creates_missing_exercise(self, customer):
        exercise = resolve_exercise("[CARDIO] Rowing | 20min", "rowing", customer.trainer_id)

        assert exercise.display_name == "Rowing"
        assert exercise.exercise_type == "cardio"
        assert exercise.trainer_id == customer.trainer_id
