from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional, Union

from ..db import db, new_id, utcnow


class Workout(db.Model):
    """
    Eine Trainingseinheit eines Kunden.

    `exercises` ist eine geordnete Liste von Freitext-Strings
    (z. B. "Squats 4x8-10 @ 60kg - felt heavy"). Eine Übung hat keine eigene ID,
    Completions verweisen deshalb per Index auf `exercises`.
    """
    __tablename__ = "workouts"

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    customer_id = db.Column(
        db.String(36), db.ForeignKey("customers.id", ondelete="CASCADE"), nullable=False, index=True
    )
    date = db.Column(db.Date, nullable=False)
    title = db.Column(db.String(200), nullable=False, default="")
    exercises = db.Column(db.JSON, nullable=False, default=list)
    exercise_completions = db.Column(db.JSON, nullable=False, default=list)
    completed = db.Column(db.Boolean, nullable=False, default=False)
    completed_at = db.Column(db.DateTime)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=utcnow)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "customer_id": self.customer_id,
            "date": self.date.isoformat() if self.date else None,
            "title": self.title,
            "exercises": list(self.exercises or []),
            "exercise_completions": list(self.exercise_completions or []),
            "completed": bool(self.completed),
            "completed_at": self.completed_at.isoformat() if self.completed_at else None,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self):
        return f"<Workout {self.title} ({self.date})>"


def create_workout(
    customer_id: str,
    workout_date: Union[date, str],
    title: str,
    exercises: List[str],
    exercise_completions: Optional[List[Dict[str, Any]]] = None,
) -> Workout:
    """Legt ein Workout an (Datum als date oder ISO-String)."""
    if isinstance(workout_date, str):
        workout_date = date.fromisoformat(workout_date)
    workout = Workout(
        customer_id=customer_id,
        date=workout_date,
        title=title,
        exercises=list(exercises),
        exercise_completions=list(exercise_completions or []),
    )
    db.session.add(workout)
    db.session.commit()
    return workout


def get_workout(workout_id: str, customer_id: str) -> Optional[Workout]:
    """Workout nur liefern, wenn es dem Kunden gehört."""
    return Workout.query.filter_by(id=workout_id, customer_id=customer_id).first()


def update_workout(workout: Workout, **fields: Any) -> Workout:
    """Schreibt die Felder zurück und setzt updated_at. Last writer wins."""
    for key, value in fields.items():
        setattr(workout, key, value)
    workout.updated_at = utcnow()
    db.session.commit()
    return workout


def list_workouts(customer_id: str) -> List[Workout]:
    """Alle Workouts eines Kunden, neuestes Datum zuerst."""
    return (
        Workout.query.filter_by(customer_id=customer_id)
        .order_by(Workout.date.desc(), Workout.created_at.desc())
        .all()
    )
