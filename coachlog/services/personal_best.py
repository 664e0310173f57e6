"""
Service: Personal Bests

Entscheidet nach einer Completion mit Best-Set, ob ein neuer PB vorliegt,
und schreibt die PB-Zeile (eine pro Kunde und Übung).

Vergleichsregel:
  - kein PB vorhanden                -> neuer PB
  - beide mit reps                   -> mehr reps gewinnt, bei Gleichstand mehr Gewicht
                                        (nur wenn beide ein Gewicht haben, sonst bleibt der alte)
  - reps fehlen, beide mit weight    -> mehr Gewicht gewinnt
  - sonst (Cardio, nur seconds ...)  -> überschreiben
"""

from __future__ import annotations

import logging
import re
from datetime import date
from typing import Dict, Mapping, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from ..db import db
from ..errors import DerivedDataFailure
from ..models.exercise import Exercise, create_exercise, find_exercise
from ..models.personal_best import (
    PB_VALUE_FIELDS,
    ExercisePB,
    find_pb,
    find_pb_by_name,
    insert_pb,
    update_pb,
)
from .exercise_names import extract_exercise_name, normalize_exercise_name, title_case
from .exercise_parser import ParsedCardioExercise, parse_exercise

logger = logging.getLogger(__name__)

# Nur die erste Zahl zählt, Komma als Dezimaltrenner ("60-65kg" -> 60, nicht 6065).
# Ziffern werden also nicht einfach aus dem ganzen String zusammengezogen.
_NUMBER = re.compile(r"\d+(?:[.,]\d+)?")


def to_number(value: Optional[str]) -> float:
    """Erste Zahl im String ("60kg" -> 60.0, "22,5 kg" -> 22.5); ohne Zahl 0.0."""
    if not value:
        return 0.0
    match = _NUMBER.search(str(value))
    if not match:
        return 0.0
    return float(match.group(0).replace(",", "."))


def is_superior(new: Mapping[str, Optional[str]], old: Optional[Mapping[str, Optional[str]]]) -> bool:
    """True, wenn `new` den gespeicherten PB `old` ablöst."""
    if old is None:
        return True

    new_reps, old_reps = new.get("reps"), old.get("reps")
    new_weight, old_weight = new.get("weight"), old.get("weight")

    if new_reps and old_reps:
        if to_number(new_reps) != to_number(old_reps):
            return to_number(new_reps) > to_number(old_reps)
        # Gleichstand: Gewicht nur vergleichen, wenn beide eins haben, sonst bleibt der alte PB
        if new_weight and old_weight:
            return to_number(new_weight) > to_number(old_weight)
        return False

    if new_weight and old_weight:
        return to_number(new_weight) > to_number(old_weight)

    # Keine vergleichbaren Felder (z. B. Cardio): neuer Wert überschreibt
    return True


def resolve_exercise(raw: str, normalized_name: str, trainer_id: Optional[str]) -> Exercise:
    """Kanonische Übung suchen oder anlegen (display_name aus dem Roh-String)."""
    exercise = find_exercise(normalized_name, trainer_id)
    if exercise:
        return exercise

    parsed = parse_exercise(raw)
    fields = dict(
        trainer_id=trainer_id,
        name=normalized_name,
        display_name=extract_exercise_name(raw) or title_case(normalized_name),
        exercise_type="cardio" if isinstance(parsed, ParsedCardioExercise) else "sets",
    )
    try:
        exercise = create_exercise(**fields)
    except IntegrityError:
        # Parallel angelegt -> den anderen Eintrag verwenden
        db.session.rollback()
        exercise = find_exercise(normalized_name, trainer_id)
        if exercise is None:
            raise
        return exercise
    logger.info("Created exercise %r for trainer %s", exercise.name, trainer_id)
    return exercise


def reconcile(
    customer_id: str,
    workout_id: str,
    workout_date: Optional[date],
    exercise_raw: str,
    best_set: Dict[str, str],
    trainer_id: Optional[str] = None,
) -> Optional[ExercisePB]:
    """
    PB-Abgleich für ein frisch gespeichertes Best-Set.

    Gibt die geschriebene PB-Zeile zurück, die bestehende, wenn der alte PB
    besser bleibt, oder None, wenn sich kein Übungsname ableiten lässt.
    Speicherfehler kommen als DerivedDataFailure heraus.
    """
    normalized_name = normalize_exercise_name(extract_exercise_name(exercise_raw))
    if not normalized_name:
        return None

    try:
        exercise = resolve_exercise(exercise_raw, normalized_name, trainer_id)
        existing = find_pb(customer_id, exercise.id, normalized_name)

        if existing is not None and not is_superior(best_set, existing.values()):
            logger.debug("PB kept for %s / %r", customer_id, normalized_name)
            return existing

        pb_data = {field: best_set.get(field) or None for field in PB_VALUE_FIELDS}
        pb_data.update(
            customer_id=customer_id,
            exercise_id=exercise.id,
            exercise_name=normalized_name,
            workout_id=workout_id,
            workout_date=workout_date,
        )

        if existing is not None:
            pb = update_pb(existing, **pb_data)
            logger.info("PB updated for %s / %r", customer_id, normalized_name)
            return pb

        try:
            pb = insert_pb(**pb_data)
        except IntegrityError:
            # Race: jemand anderes hat die Zeile gerade angelegt -> als Update wiederholen
            db.session.rollback()
            existing = find_pb_by_name(customer_id, normalized_name)
            if existing is None:
                raise
            pb = update_pb(existing, **pb_data)
        logger.info("PB created for %s / %r", customer_id, normalized_name)
        return pb
    except SQLAlchemyError as exc:
        db.session.rollback()
        raise DerivedDataFailure(f"PB bookkeeping failed for {normalized_name!r}: {exc}") from exc
