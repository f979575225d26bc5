from enum import Enum
from typing import Union


class UnknownScoringTypeError(ValueError):
    """Raised when a season declares a scoring mode that does not exist."""
    pass


class EventType(str, Enum):
    """Kind of session being predicted. Sprints are worth half points."""

    RACE = "RACE"
    SPRINT = "SPRINT"


class ScoringType(str, Enum):
    """Season-level scoring mode, never mixed within one event."""

    LEGACY_TOP3 = "LEGACY_TOP3"  # podium, higher is better
    FULL_GRID_DIFF = "FULL_GRID_DIFF"  # full grid penalty, lower is better


def parse_scoring_type(value: Union[ScoringType, str]) -> ScoringType:
    """Coerce a stored mode value into ScoringType."""
    try:
        return ScoringType(value)
    except ValueError:
        raise UnknownScoringTypeError(f"Unknown scoring type: {value!r}") from None
