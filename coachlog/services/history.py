# -*- coding: utf-8 -*-
"""
Service: Exercise History
Baut PB- und Workout-Verlauf einer Übung durch Replay aller Workouts eines Kunden.
Es gibt kein separates Event-Log; `workouts` ist die Quelle der Wahrheit.

Liefert die Keys, die die Übungs-Detailansicht erwartet:
  - pb              (aktuelle PB-Zeile oder None)
  - history         (Best-Sets, neueste zuerst)
  - workoutHistory  (jedes Workout mit dieser Übung, neueste zuerst)
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from ..errors import NotFound
from ..models.exercise import find_exercise
from ..models.personal_best import find_pb
from ..models.tenant import get_customer
from ..models.workout import list_workouts
from .exercise_names import extract_and_normalize, normalize_exercise_name
from .exercise_parser import parse_exercise
from .record_parser import BEST_SET_FIELDS


def _parse_dt(val: Optional[str]) -> Optional[datetime]:
    if not val:
        return None
    try:
        parsed = datetime.fromisoformat(val)
    except ValueError:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def _effective_date(entry: Dict[str, Any]) -> datetime:
    """completed_at vor workout_date; ohne Datum ganz ans Ende."""
    return _parse_dt(entry.get("completed_at")) or _parse_dt(entry.get("workout_date")) or datetime.min


def _find_exercise_index(exercises: List[str], normalized_name: str) -> int:
    # Nur der erste Treffer zählt, doppelte Übungen im Workout werden nicht unterschieden
    for index, raw in enumerate(exercises):
        if extract_and_normalize(raw) == normalized_name:
            return index
    return -1


def _find_completion(completions: List[Dict[str, Any]], index: int) -> Optional[Dict[str, Any]]:
    return next((ec for ec in completions if ec.get("exerciseIndex") == index), None)


def build_history(customer_id: str, exercise_name: str) -> Dict[str, Any]:
    customer = get_customer(customer_id)
    if customer is None:
        raise NotFound("Customer not found")

    normalized_name = normalize_exercise_name(exercise_name)
    exercise = find_exercise(normalized_name, customer.trainer_id)
    pb = find_pb(customer_id, exercise.id if exercise else None, normalized_name)

    pb_history: List[Dict[str, Any]] = []
    workout_history: List[Dict[str, Any]] = []

    for workout in list_workouts(customer_id):
        exercises = workout.exercises or []
        index = _find_exercise_index(exercises, normalized_name)
        if index < 0:
            continue

        workout_date = workout.date.isoformat() if workout.date else None
        completion = _find_completion(workout.exercise_completions or [], index) or {}
        best_set = completion.get("bestSet")

        parsed = parse_exercise(exercises[index]).to_dict()
        if parsed["exercise_type"] == "sets":
            parsed["seconds"] = parsed["reps"] if parsed["type"] == "seconds" else None

        entry: Dict[str, Any] = {
            "workout_id": workout.id,
            "workout_date": workout_date,
            "workout_title": workout.title,
            "exercise_index": index,
            "completed_at": completion.get("completed_at"),
            "rating": completion.get("rating"),
            "bestSet": best_set,
        }
        entry.update(parsed)
        workout_history.append(entry)

        if best_set:
            pb_entry: Dict[str, Any] = {
                "workout_id": workout.id,
                "workout_date": workout_date,
                "completed_at": completion.get("completed_at"),
                "rating": completion.get("rating"),
            }
            pb_entry.update({field: best_set.get(field) for field in BEST_SET_FIELDS})
            pb_history.append(pb_entry)

    pb_history.sort(key=_effective_date, reverse=True)
    workout_history.sort(key=_effective_date, reverse=True)

    return {
        "exercise": exercise.to_dict() if exercise else None,
        "pb": pb.to_dict() if pb else None,
        "history": pb_history,
        "workoutHistory": workout_history,
    }
