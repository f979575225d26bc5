"""
Structural checks for predictions before they are stored or scored.

Advisory only: the scorers never call these and tolerate invalid input.
"""

from typing import Any, Optional, Union

from f1_predictions.core.config import get_settings
from f1_predictions.models.enums import ScoringType, parse_scoring_type
from f1_predictions.services.points_service import PODIUM_FIELDS, read_field


def _resolve(scoring_type: Optional[Union[ScoringType, str]]) -> ScoringType:
    return parse_scoring_type(scoring_type or get_settings().default_scoring_type)


def has_complete_podium(prediction: Any) -> bool:
    """True if all three podium slots are set"""
    return all(read_field(prediction, name) for name in PODIUM_FIELDS)


def has_unique_drivers(prediction: Any, scoring_type: Optional[Union[ScoringType, str]]) -> bool:
    """True if no driver id is listed twice"""
    if _resolve(scoring_type) is ScoringType.FULL_GRID_DIFF:
        drivers = list(read_field(prediction, "rankings") or [])
    else:
        drivers = [read_field(prediction, name) for name in PODIUM_FIELDS]
    return len(set(drivers)) == len(drivers)


def is_valid_prediction(prediction: Any, scoring_type: Optional[Union[ScoringType, str]]) -> bool:
    """
    Podium: all three slots set and pairwise distinct.
    Grid: rankings present with no duplicates. Partial grids are allowed.
    """
    mode = _resolve(scoring_type)
    if mode is ScoringType.FULL_GRID_DIFF:
        if read_field(prediction, "rankings") is None:
            return False
        return has_unique_drivers(prediction, mode)

    return has_complete_podium(prediction) and has_unique_drivers(prediction, mode)
