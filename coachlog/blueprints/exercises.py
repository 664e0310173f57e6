from flask import Blueprint, jsonify

from ..errors import NotFound
from ..models.exercise import list_exercises
from ..models.tenant import get_trainer
from ..seed import seed_default_exercises
from ..services.history import build_history

bp = Blueprint("exercises", __name__)


@bp.get("/customers/<customer_id>/exercises/<path:exercise_name>")
def exercise_history(customer_id: str, exercise_name: str):
    """JSON: aktueller PB + PB-Verlauf + Workout-Verlauf einer Übung."""
    return jsonify(build_history(customer_id, exercise_name))


@bp.get("/trainers/<trainer_id>/exercises")
def trainer_exercises(trainer_id: str):
    """JSON: Übungskatalog des Trainers (inkl. globaler Alt-Einträge)."""
    if get_trainer(trainer_id) is None:
        raise NotFound("Trainer not found")
    return jsonify({"exercises": [e.to_dict() for e in list_exercises(trainer_id)]})


@bp.post("/trainers/<trainer_id>/exercises/seed-defaults")
def seed_defaults(trainer_id: str):
    if get_trainer(trainer_id) is None:
        raise NotFound("Trainer not found")
    created = seed_default_exercises(trainer_id)
    return jsonify({"created": created, "message": "Default exercises seeded"})
