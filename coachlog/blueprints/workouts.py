from __future__ import annotations

from flask import Blueprint, jsonify, request

from ..errors import NotFound
from ..models.workout import get_workout
from ..services import completion
from ..services.record_parser import parse_best_set, parse_exercise_index

bp = Blueprint("workouts", __name__, url_prefix="/customers/<customer_id>/workouts")


@bp.get("/<workout_id>")
def workout_detail(customer_id: str, workout_id: str):
    """JSON: ein Workout des Kunden."""
    workout = get_workout(workout_id, customer_id)
    if workout is None:
        raise NotFound("Workout not found")
    return jsonify({"workout": workout.to_dict()})


@bp.post("/<workout_id>/exercises/<exercise_index>/complete")
def complete_exercise(customer_id: str, workout_id: str, exercise_index: str):
    """Übung abhaken: JSON-Body { "rating": "good", "bestSet": {...} }."""
    index = parse_exercise_index(exercise_index)
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        payload = {}

    workout = completion.complete_exercise(
        workout_id,
        customer_id,
        index,
        payload.get("rating"),
        parse_best_set(payload.get("bestSet")),
    )
    return jsonify({"workout": workout.to_dict(), "message": "Exercise marked as complete"})


@bp.post("/<workout_id>/exercises/<exercise_index>/uncomplete")
def uncomplete_exercise(customer_id: str, workout_id: str, exercise_index: str):
    index = parse_exercise_index(exercise_index)
    workout = completion.uncomplete_exercise(workout_id, customer_id, index)
    return jsonify({"workout": workout.to_dict(), "message": "Exercise marked as incomplete"})


@bp.post("/<workout_id>/complete")
def complete_workout(customer_id: str, workout_id: str):
    workout = completion.complete_workout(workout_id, customer_id)
    return jsonify({"workout": workout.to_dict(), "message": "Workout marked as complete"})


@bp.post("/<workout_id>/uncomplete")
def uncomplete_workout(customer_id: str, workout_id: str):
    workout = completion.uncomplete_workout(workout_id, customer_id)
    return jsonify({"workout": workout.to_dict(), "message": "Workout marked as incomplete"})
