from typing import Any, Dict, List, Optional

from sqlalchemy import or_

from ..db import db, new_id, utcnow


class Exercise(db.Model):
    """
    Kanonische Übung pro Trainer.
    `name` ist der normalisierte Lookup-Key, `display_name` die Anzeige.
    trainer_id = NULL -> globale Alt-Einträge (Abwärtskompatibilität).
    """
    __tablename__ = "exercises"
    __table_args__ = (db.UniqueConstraint("trainer_id", "name", name="uq_exercises_trainer_name"),)

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    trainer_id = db.Column(db.String(36), db.ForeignKey("trainers.id", ondelete="CASCADE"), index=True)
    name = db.Column(db.String(200), nullable=False)
    display_name = db.Column(db.String(200), nullable=False)
    exercise_type = db.Column(db.String(10), nullable=False, default="sets")

    # Defaults für Kraftübungen
    default_sets = db.Column(db.Integer)
    default_reps = db.Column(db.String(40))
    default_weight = db.Column(db.String(40))

    # Defaults für Cardio
    default_duration_minutes = db.Column(db.Integer)
    default_distance_km = db.Column(db.Float)
    default_intensity = db.Column(db.String(40))

    description = db.Column(db.Text)
    muscle_groups = db.Column(db.JSON, nullable=False, default=list)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)

    personal_bests = db.relationship(
        "ExercisePB", back_populates="exercise", cascade="all, delete-orphan", passive_deletes=True
    )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "trainer_id": self.trainer_id,
            "name": self.name,
            "display_name": self.display_name,
            "exercise_type": self.exercise_type,
            "default_sets": self.default_sets,
            "default_reps": self.default_reps,
            "default_weight": self.default_weight,
            "default_duration_minutes": self.default_duration_minutes,
            "default_distance_km": self.default_distance_km,
            "default_intensity": self.default_intensity,
            "description": self.description,
            "muscle_groups": list(self.muscle_groups or []),
        }

    def __repr__(self):
        return f"<Exercise {self.name}>"


def find_exercise(name: str, trainer_id: Optional[str]) -> Optional[Exercise]:
    """
    Sucht eine Übung per normalisiertem Namen.
    Zuerst im Tenant des Trainers, danach unter den globalen Alt-Einträgen.
    """
    if trainer_id:
        exercise = Exercise.query.filter_by(name=name, trainer_id=trainer_id).first()
        if exercise:
            return exercise
    return Exercise.query.filter(Exercise.name == name, Exercise.trainer_id.is_(None)).first()


def create_exercise(**fields: Any) -> Exercise:
    exercise = Exercise(**fields)
    db.session.add(exercise)
    db.session.commit()
    return exercise


def list_exercises(trainer_id: str) -> List[Exercise]:
    """Übungen des Trainers plus globale Alt-Einträge, sortiert nach Anzeigename."""
    return (
        Exercise.query.filter(or_(Exercise.trainer_id == trainer_id, Exercise.trainer_id.is_(None)))
        .order_by(Exercise.display_name)
        .all()
    )
