from __future__ import annotations

from typing import Any, Dict, Optional

from ..db import db, new_id, utcnow

PB_VALUE_FIELDS = ("reps", "weight", "seconds", "duration_minutes", "distance_km", "intensity")


class ExercisePB(db.Model):
    """
    Persönliche Bestleistung: eine Zeile pro (Kunde, Übung).
    exercise_name bleibt als Fallback-Key für Alt-Zeilen ohne exercise_id.
    """
    __tablename__ = "exercise_pbs"
    __table_args__ = (db.UniqueConstraint("customer_id", "exercise_name", name="uq_exercise_pbs_customer_name"),)

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    customer_id = db.Column(
        db.String(36), db.ForeignKey("customers.id", ondelete="CASCADE"), nullable=False, index=True
    )
    exercise_id = db.Column(db.String(36), db.ForeignKey("exercises.id", ondelete="CASCADE"), index=True)
    exercise_name = db.Column(db.String(200), nullable=False)

    reps = db.Column(db.String(40))
    weight = db.Column(db.String(40))
    seconds = db.Column(db.String(40))
    duration_minutes = db.Column(db.String(40))
    distance_km = db.Column(db.String(40))
    intensity = db.Column(db.String(40))

    workout_id = db.Column(db.String(36), db.ForeignKey("workouts.id", ondelete="SET NULL"))
    workout_date = db.Column(db.Date)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=utcnow)

    exercise = db.relationship("Exercise", back_populates="personal_bests")

    def values(self) -> Dict[str, Optional[str]]:
        return {field: getattr(self, field) for field in PB_VALUE_FIELDS}

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "id": self.id,
            "customer_id": self.customer_id,
            "exercise_id": self.exercise_id,
            "exercise_name": self.exercise_name,
            "workout_id": self.workout_id,
            "workout_date": self.workout_date.isoformat() if self.workout_date else None,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
        data.update(self.values())
        return data

    def __repr__(self):
        return f"<ExercisePB {self.exercise_name} ({self.customer_id})>"


def find_pb_by_exercise_id(customer_id: str, exercise_id: str) -> Optional[ExercisePB]:
    return ExercisePB.query.filter_by(customer_id=customer_id, exercise_id=exercise_id).first()


def find_pb_by_name(customer_id: str, exercise_name: str) -> Optional[ExercisePB]:
    return ExercisePB.query.filter_by(customer_id=customer_id, exercise_name=exercise_name).first()


def find_pb(customer_id: str, exercise_id: Optional[str], exercise_name: str) -> Optional[ExercisePB]:
    """Erst per exercise_id, dann per exercise_name (Zeilen aus der Zeit vor kanonischen Übungen)."""
    pb = None
    if exercise_id:
        pb = find_pb_by_exercise_id(customer_id, exercise_id)
    if pb is None:
        pb = find_pb_by_name(customer_id, exercise_name)
    return pb


def insert_pb(**fields: Any) -> ExercisePB:
    pb = ExercisePB(**fields)
    db.session.add(pb)
    db.session.commit()
    return pb


def update_pb(pb: ExercisePB, **fields: Any) -> ExercisePB:
    for key, value in fields.items():
        setattr(pb, key, value)
    pb.updated_at = utcnow()
    db.session.commit()
    return pb
