"""
Seed-Skript für CoachLog.

Legt für einen Trainer die Standard-Übungen an (7 Kraft-, 3 Cardio-Übungen).

Ausführung:
    flask --app coachlog seed-exercises <TRAINER_ID>

oder per API:
    POST /trainers/<trainer_id>/exercises/seed-defaults
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from .db import db
from .models.exercise import Exercise

logger = logging.getLogger(__name__)

BODY_WEIGHT = "Body weight"

DEFAULT_EXERCISES: List[Dict[str, Any]] = [
    # Kraftübungen
    {"name": "bench press", "display_name": "Bench Press", "exercise_type": "sets",
     "default_sets": 4, "default_reps": "8-10", "default_weight": BODY_WEIGHT,
     "muscle_groups": ["Chest", "Triceps", "Shoulders"]},
    {"name": "squats", "display_name": "Squats", "exercise_type": "sets",
     "default_sets": 4, "default_reps": "10-12", "default_weight": BODY_WEIGHT,
     "muscle_groups": ["Legs", "Quadriceps", "Glutes", "Core"]},
    {"name": "deadlifts", "display_name": "Deadlifts", "exercise_type": "sets",
     "default_sets": 4, "default_reps": "6-8", "default_weight": BODY_WEIGHT,
     "muscle_groups": ["Back", "Legs", "Hamstrings", "Glutes", "Core"]},
    {"name": "barbell row", "display_name": "Barbell Row", "exercise_type": "sets",
     "default_sets": 4, "default_reps": "8-10", "default_weight": BODY_WEIGHT,
     "muscle_groups": ["Back", "Biceps", "Shoulders"]},
    {"name": "overhead press", "display_name": "Overhead Press", "exercise_type": "sets",
     "default_sets": 3, "default_reps": "8-12", "default_weight": BODY_WEIGHT,
     "muscle_groups": ["Shoulders", "Triceps", "Core"]},
    {"name": "pull ups", "display_name": "Pull Ups", "exercise_type": "sets",
     "default_sets": 3, "default_reps": "8-12", "default_weight": BODY_WEIGHT,
     "muscle_groups": ["Back", "Biceps", "Shoulders"]},
    {"name": "lunges", "display_name": "Lunges", "exercise_type": "sets",
     "default_sets": 3, "default_reps": "12 each leg", "default_weight": BODY_WEIGHT,
     "muscle_groups": ["Legs", "Quadriceps", "Glutes"]},
    # Cardio
    {"name": "running", "display_name": "Running", "exercise_type": "cardio",
     "default_duration_minutes": 30, "default_distance_km": 5.0, "default_intensity": "Moderate",
     "muscle_groups": ["Legs", "Cardio"]},
    {"name": "cycling", "display_name": "Cycling", "exercise_type": "cardio",
     "default_duration_minutes": 45, "default_distance_km": 15.0, "default_intensity": "Moderate",
     "muscle_groups": ["Legs", "Cardio"]},
    {"name": "rowing", "display_name": "Rowing", "exercise_type": "cardio",
     "default_duration_minutes": 30, "default_distance_km": None, "default_intensity": "Moderate",
     "muscle_groups": ["Back", "Arms", "Legs", "Cardio"]},
]


def seed_default_exercises(trainer_id: str) -> int:
    """Fügt die Standard-Übungen für den Trainer ein (idempotent). Gibt die Anzahl neuer Zeilen zurück."""
    existing = {
        name for (name,) in db.session.query(Exercise.name).filter(Exercise.trainer_id == trainer_id)
    }

    created = 0
    for fields in DEFAULT_EXERCISES:
        if fields["name"] in existing:
            continue
        db.session.add(Exercise(trainer_id=trainer_id, **fields))
        created += 1

    db.session.commit()
    logger.info("Seeded %d default exercises for trainer %s", created, trainer_id)
    return created
