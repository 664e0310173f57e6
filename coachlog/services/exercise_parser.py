"""
Parser für Übungs-Strings aus `workouts.exercises`.

Drei historische Formate, Reihenfolge = Priorität (erster Treffer gewinnt):

  1. "[CARDIO] Running | 30min | 5km | Moderate - easy pace"
  2. "Rowing - Duration: 20min, Distance: 4.0km, Intensity: Hard - notes"
  3. "Squats 4x8-10 @ 60kg - felt heavy"              (Fallback)

Gespeicherte Altdaten hängen an genau diesem Verhalten, also nicht "aufräumen".
"""

from __future__ import annotations

import re
from dataclasses import asdict, dataclass
from typing import Dict, Optional, Union

CARDIO_PREFIX = "[CARDIO]"
CARDIO_KEYWORDS = ("Duration:", "Distance:", "Intensity:")
NOTES_SEPARATOR = " - "
SEGMENT_SEPARATOR = " | "

WEIGHT_PATTERN = re.compile(r"@\s*([^-]+?)(?:\s*-\s*|$)")
SETS_REPS_PATTERN = re.compile(r"(\d+)x([\d-]+)(s)?")

DURATION_PATTERN = re.compile(r"Duration:\s*(\d+)\s*min", re.IGNORECASE)
DISTANCE_PATTERN = re.compile(r"Distance:\s*([\d.]+)\s*km", re.IGNORECASE)
INTENSITY_PATTERN = re.compile(r"Intensity:\s*([^,]+)", re.IGNORECASE)


@dataclass
class ParsedSetsExercise:
    sets: str = ""
    reps: str = ""
    type: str = "reps"          # "reps" | "seconds"
    weight: str = ""
    notes: str = ""
    exercise_type: str = "sets"

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


@dataclass
class ParsedCardioExercise:
    duration_minutes: str = ""
    distance_km: str = ""
    intensity: str = ""
    notes: str = ""
    exercise_type: str = "cardio"

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


ParsedExercise = Union[ParsedSetsExercise, ParsedCardioExercise]


def parse_exercise(raw: Optional[str]) -> ParsedExercise:
    """Total: leere oder unbrauchbare Eingaben ergeben ein leeres Sets-Ergebnis."""
    if not raw or not raw.strip():
        return ParsedSetsExercise()

    if raw.startswith(CARDIO_PREFIX):
        return _parse_cardio(raw)
    if any(keyword in raw for keyword in CARDIO_KEYWORDS):
        return _parse_legacy_cardio(raw)
    return _parse_sets(raw)


def _parse_cardio(raw: str) -> ParsedCardioExercise:
    cardio_str = raw.replace(CARDIO_PREFIX, "", 1).strip()
    main_part, _, notes = cardio_str.partition(NOTES_SEPARATOR)

    result = ParsedCardioExercise(notes=notes.strip())
    # Segment 0 ist der Name -> siehe exercise_names.extract_exercise_name
    for segment in main_part.strip().split(SEGMENT_SEPARATOR)[1:]:
        segment = segment.strip()
        if segment.endswith("min"):
            result.duration_minutes = segment[: -len("min")].strip()
        elif segment.endswith("km"):
            result.distance_km = segment[: -len("km")].strip()
        else:
            result.intensity = segment
    return result


def _parse_legacy_cardio(raw: str) -> ParsedCardioExercise:
    parts = raw.split(NOTES_SEPARATOR)
    notes = ""
    # Letztes Segment ohne Keyword = Freitext-Notiz
    if len(parts) > 1 and not any(keyword in parts[-1] for keyword in CARDIO_KEYWORDS):
        notes = parts.pop().strip()
    cardio_data = NOTES_SEPARATOR.join(parts)

    result = ParsedCardioExercise(notes=notes)
    match = DURATION_PATTERN.search(cardio_data)
    if match:
        result.duration_minutes = match.group(1)
    match = DISTANCE_PATTERN.search(cardio_data)
    if match:
        result.distance_km = match.group(1)
    match = INTENSITY_PATTERN.search(cardio_data)
    if match:
        result.intensity = match.group(1).strip()
    return result


def _parse_sets(raw: str) -> ParsedSetsExercise:
    parts = raw.split(NOTES_SEPARATOR)
    main_part = parts[0].strip()
    result = ParsedSetsExercise(notes=parts[1].strip() if len(parts) > 1 else "")

    match = WEIGHT_PATTERN.search(main_part)
    if match:
        result.weight = match.group(1).strip()
        main_part = WEIGHT_PATTERN.sub("", main_part, count=1).strip()

    match = SETS_REPS_PATTERN.search(main_part)
    if match:
        result.sets = match.group(1)
        result.reps = match.group(2)
        result.type = "seconds" if match.group(3) == "s" else "reps"
    return result
