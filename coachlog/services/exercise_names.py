"""
Normalisierung und Namensextraktion für Übungs-Strings.

"Bench Press", "bench press" und " Bench Press " sollen überall
denselben Lookup-Key ergeben.
"""

from __future__ import annotations

from typing import Optional

from .exercise_parser import (
    CARDIO_KEYWORDS,
    CARDIO_PREFIX,
    NOTES_SEPARATOR,
    SEGMENT_SEPARATOR,
    SETS_REPS_PATTERN,
    WEIGHT_PATTERN,
)


def normalize_exercise_name(name: Optional[str]) -> str:
    """Trim + lowercase. Idempotent, wirft nie."""
    if not name:
        return ""
    return name.strip().lower()


def extract_exercise_name(raw: Optional[str]) -> str:
    """
    Anzeigename aus einem Übungs-String.

      "[CARDIO] Running | 30min | 5km"           -> "Running"
      "Rowing - Duration: 20min, Distance: 4km"  -> "Rowing"
      "Squats 4x8-10 @ 60kg - felt heavy"        -> "Squats"
    """
    if not raw or not raw.strip():
        return ""

    if raw.startswith(CARDIO_PREFIX):
        cardio_str = raw.replace(CARDIO_PREFIX, "", 1).strip()
        main_part = cardio_str.split(NOTES_SEPARATOR)[0].strip()
        return main_part.split(SEGMENT_SEPARATOR)[0].strip()

    if any(keyword in raw for keyword in CARDIO_KEYWORDS):
        return raw.split(NOTES_SEPARATOR)[0].strip()

    main_part = raw.split(NOTES_SEPARATOR)[0].strip()
    main_part = WEIGHT_PATTERN.sub("", main_part, count=1).strip()
    main_part = SETS_REPS_PATTERN.sub("", main_part, count=1).strip()
    return main_part


def extract_and_normalize(raw: Optional[str]) -> str:
    return normalize_exercise_name(extract_exercise_name(raw))


def title_case(name: str) -> str:
    """'bench press' -> 'Bench Press' (Fallback für display_name)."""
    return " ".join(word[:1].upper() + word[1:] for word in name.split(" "))
