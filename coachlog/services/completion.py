# -*- coding: utf-8 -*-
"""
Service: Completions
Schreibt pro Workout und Übungs-Index eine Completion (Rating + optionales Best-Set)
in `workouts.exercise_completions`.

Die Completion ist die maßgebliche Schreiboperation. Der PB-Abgleich läuft
danach best-effort: Fehler dort werden geloggt und nie an den Aufrufer gereicht.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from ..db import utcnow, utcnow_iso
from ..errors import InvalidArgument, NotFound
from ..models.tenant import get_customer
from ..models.workout import Workout, get_workout, update_workout
from .personal_best import reconcile
from .record_parser import BEST_SET_FIELDS, parse_rating

logger = logging.getLogger(__name__)


def has_best_set(best_set: Optional[Dict[str, Any]]) -> bool:
    """Best-Set zählt nur, wenn mindestens eines der sechs Felder gefüllt ist."""
    if not best_set:
        return False
    return any(best_set.get(field) for field in BEST_SET_FIELDS)


def _load_workout(workout_id: str, customer_id: str) -> Workout:
    if not workout_id or not customer_id:
        raise InvalidArgument("workoutId and customerId are required")
    workout = get_workout(workout_id, customer_id)
    if workout is None:
        raise NotFound("Workout not found")
    return workout


def record_completion(
    workout: Workout,
    exercise_index: int,
    rating: str,
    best_set: Optional[Dict[str, Any]] = None,
) -> Workout:
    """
    Completion für `exercise_index` anlegen oder komplett ersetzen (kein Merge:
    die letzte Eingabe gilt) und die ganze Liste zurückschreiben.
    """
    rating = parse_rating(rating)
    exercises = workout.exercises or []
    if not 0 <= exercise_index < len(exercises):
        raise InvalidArgument(f"exerciseIndex {exercise_index} is out of range")

    completion: Dict[str, Any] = {
        "exerciseIndex": exercise_index,
        "completed": True,
        "rating": rating,
        "completed_at": utcnow_iso(),
    }
    if has_best_set(best_set):
        completion["bestSet"] = dict(best_set)

    completions: List[Dict[str, Any]] = list(workout.exercise_completions or [])
    existing = next(
        (i for i, ec in enumerate(completions) if ec.get("exerciseIndex") == exercise_index), None
    )
    if existing is None:
        completions.append(completion)
    else:
        completions[existing] = completion

    return update_workout(workout, exercise_completions=completions)


def complete_exercise(
    workout_id: str,
    customer_id: str,
    exercise_index: int,
    rating: str,
    best_set: Optional[Dict[str, Any]] = None,
) -> Workout:
    """Completion speichern, danach PB-Abgleich (Fehler werden nur geloggt)."""
    rating = parse_rating(rating)
    workout = _load_workout(workout_id, customer_id)
    workout = record_completion(workout, exercise_index, rating, best_set)

    if has_best_set(best_set):
        _reconcile_best_effort(workout, exercise_index, best_set)
    return workout


def _reconcile_best_effort(workout: Workout, exercise_index: int, best_set: Dict[str, Any]) -> None:
    try:
        customer = get_customer(workout.customer_id)
        reconcile(
            customer_id=workout.customer_id,
            workout_id=workout.id,
            workout_date=workout.date,
            exercise_raw=workout.exercises[exercise_index],
            best_set=best_set,
            trainer_id=customer.trainer_id if customer else None,
        )
    except Exception:
        logger.exception(
            "Error saving PB (non-blocking) for workout %s, exercise %s", workout.id, exercise_index
        )


def uncomplete_exercise(workout_id: str, customer_id: str, exercise_index: int) -> Workout:
    """Entfernt die Completion komplett. PBs werden dabei nicht zurückgerollt."""
    workout = _load_workout(workout_id, customer_id)
    completions = [
        ec for ec in (workout.exercise_completions or []) if ec.get("exerciseIndex") != exercise_index
    ]
    return update_workout(workout, exercise_completions=completions)


def complete_workout(workout_id: str, customer_id: str) -> Workout:
    workout = _load_workout(workout_id, customer_id)
    return update_workout(workout, completed=True, completed_at=utcnow())


def uncomplete_workout(workout_id: str, customer_id: str) -> Workout:
    workout = _load_workout(workout_id, customer_id)
    return update_workout(workout, completed=False, completed_at=None)
