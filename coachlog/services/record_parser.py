"""
Utilities for parsing the completion payload (rating, best set, index).
"""

from __future__ import annotations
from typing import Any, Dict, Optional

from ..errors import InvalidArgument

BEST_SET_FIELDS = ("reps", "weight", "seconds", "duration_minutes", "distance_km", "intensity")
VALID_RATINGS = ("easy", "good", "hard", "too_hard")


def parse_best_set(payload: Any) -> Optional[Dict[str, str]]:
    """
    Extracts the best set from the request body.

    Expected (all optional):
      { "reps": "8", "weight": "60kg", "seconds": "45",
        "duration_minutes": "30", "distance_km": "5", "intensity": "Moderate" }

    Unknown keys are dropped, numbers become strings, empty values vanish.
    Returns None when nothing is left (best set counts as "not present").
    """
    if not isinstance(payload, dict):
        return None

    result: Dict[str, str] = {}
    for field in BEST_SET_FIELDS:
        raw_value = payload.get(field)
        if raw_value is None or isinstance(raw_value, bool):
            continue
        if not isinstance(raw_value, (str, int, float)):
            continue
        value = str(raw_value).strip()
        if value:
            result[field] = value

    return result or None


def parse_rating(raw: Any) -> str:
    if raw not in VALID_RATINGS:
        raise InvalidArgument("Valid rating is required")
    return raw


def parse_exercise_index(raw: Any) -> int:
    """Nicht-negativer Integer, sonst InvalidArgument."""
    if isinstance(raw, bool):
        raise InvalidArgument("exerciseIndex must be an integer")
    try:
        index = int(str(raw).strip())
    except (TypeError, ValueError):
        raise InvalidArgument("exerciseIndex must be an integer")
    if index < 0:
        raise InvalidArgument("exerciseIndex must not be negative")
    return index
