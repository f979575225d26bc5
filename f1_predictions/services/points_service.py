"""
Points Service - Scores a prediction against the official result of an event

Scoring systems (one per season, never mixed within an event):

LEGACY_TOP3 - higher is better
- 25 / 15 / 10 points: exact 1st / 2nd / 3rd
- +5 points: predicted driver is on the podium but in another slot
- Sprint events are worth exactly half

FULL_GRID_DIFF - lower is better
- Penalty: |predicted position - actual position| for every classified driver
- Driver missing from the prediction: grid_size (20) penalty
- Rankings missing entirely: unscoreable sentinel (1000)
- Sprint events: total penalty halved
"""

import logging
from typing import Any, List, Mapping, Optional, Union

from f1_predictions.core.config import Settings, get_settings
from f1_predictions.models.enums import (
    EventType,
    ScoringType,
    UnknownScoringTypeError,
    parse_scoring_type,
)
from f1_predictions.models.points import PointsConfig, get_points_config

logger = logging.getLogger(__name__)

PODIUM_FIELDS = ("first_place_id", "second_place_id", "third_place_id")

# Records coming straight from the web app use camelCase keys
_CAMEL_CASE_FIELDS = {
    "first_place_id": "firstPlaceId",
    "second_place_id": "secondPlaceId",
    "third_place_id": "thirdPlaceId",
}


def read_field(record: Any, name: str) -> Any:
    """Read a field from a model, a mapping or None."""
    if record is None:
        return None
    if isinstance(record, Mapping):
        value = record.get(name)
        if value is None and name in _CAMEL_CASE_FIELDS:
            value = record.get(_CAMEL_CASE_FIELDS[name])
        return value
    return getattr(record, name, None)


class PointsService:
    """
    Pure scoring functions for both scoring modes.

    Nothing here raises on incomplete data: missing podium slots score 0 and
    missing grid rankings score the unscoreable sentinel.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    def resolve_scoring_type(self, scoring_type: Optional[Union[ScoringType, str]]) -> ScoringType:
        """Season mode, or the configured default when the season has none"""
        value = scoring_type or self.settings.default_scoring_type
        return parse_scoring_type(value.upper() if isinstance(value, str) else value)

    def coerce_event_type(self, event_type: Any) -> Optional[EventType]:
        """EventType for any spelling of RACE or SPRINT, None if unknown"""
        if not isinstance(event_type, str):
            return None
        try:
            return EventType(event_type.upper())
        except ValueError:
            return None

    def normalize_podium(self, record: Any) -> List[str]:
        """Return [first, second, third] with unset slots as empty strings"""
        slots = []
        for name in PODIUM_FIELDS:
            value = read_field(record, name)
            slots.append(value if value is not None else "")
        return slots

    def normalize_rankings(self, record: Any, name: str) -> List[str]:
        """Return an ordered ranking list, empty if unset"""
        value = read_field(record, name)
        return list(value) if value is not None else []

    def has_grid_rankings(self, prediction: Any, result: Any) -> bool:
        """True if both sides carry a ranking, so the penalty is a real score"""
        return bool(
            self.normalize_rankings(prediction, "rankings")
            and self.normalize_rankings(result, "results")
        )

    def calculate_podium_points(
        self,
        prediction: Any,
        result: Any,
        points_config: PointsConfig
    ) -> float:
        """
        Calculate podium points for a LEGACY_TOP3 prediction.

        Args:
            prediction: PodiumPrediction or mapping with the three slot ids
            result: PodiumResult or mapping with the three slot ids
            points_config: Points table of the event type

        Returns:
            Points earned (0-50 for a race, 0-25 for a sprint)
        """
        predicted = self.normalize_podium(prediction)
        actual = self.normalize_podium(result)
        points = 0.0

        # Exact positions
        for index, (predicted_id, actual_id) in enumerate(zip(predicted, actual)):
            if predicted_id and predicted_id == actual_id:
                points += points_config.for_slot(index)

        # On the podium but in another slot, checked once per predicted slot
        for predicted_index, predicted_id in enumerate(predicted):
            if not predicted_id or predicted_id not in actual:
                continue
            if actual.index(predicted_id) != predicted_index:
                points += points_config.present_wrong_position

        return points

    def calculate_grid_penalty(
        self,
        prediction_rankings: Optional[List[str]],
        result_rankings: Optional[List[str]],
        is_sprint: bool = False,
        grid_size: Optional[int] = None
    ) -> float:
        """
        Calculate the positional penalty for a FULL_GRID_DIFF prediction.

        Iterates the official result so that drivers left out of the
        prediction are still penalised. Drivers that only appear in the
        prediction are ignored.

        Args:
            prediction_rankings: Predicted order, winner first
            result_rankings: Official classification, winner first
            is_sprint: Halve the total penalty
            grid_size: Penalty for a missing driver (defaults to settings.grid_size)

        Returns:
            Total penalty, or settings.unscoreable_penalty if either ranking is empty
        """
        if not prediction_rankings or not result_rankings:
            logger.warning(
                "Grid rankings missing (prediction=%d, result=%d drivers), returning sentinel %s",
                len(prediction_rankings or []),
                len(result_rankings or []),
                self.settings.unscoreable_penalty,
            )
            return float(self.settings.unscoreable_penalty)

        max_penalty = grid_size if grid_size is not None else self.settings.grid_size

        # First occurrence wins if a driver is listed twice
        predicted_positions = {}
        for index, driver_id in enumerate(prediction_rankings):
            predicted_positions.setdefault(driver_id, index)

        penalty = 0
        for actual_index, driver_id in enumerate(result_rankings):
            predicted_index = predicted_positions.get(driver_id)
            if predicted_index is None:
                penalty += max_penalty
            else:
                penalty += abs(predicted_index - actual_index)

        if is_sprint:
            return penalty * 0.5
        return float(penalty)

    def calculate_score(
        self,
        prediction: Any,
        result: Any,
        event_type: Union[EventType, str],
        scoring_type: Optional[Union[ScoringType, str]],
        grid_size: Optional[int] = None
    ) -> float:
        """
        Score one prediction with the scorer of the season's mode.

        Fields of the mode that is not live are ignored, unset fields of the
        live mode are normalised to empty defaults. An unknown mode or event
        type is unscoreable: 0 in podium mode, the sentinel otherwise.
        """
        try:
            mode = self.resolve_scoring_type(scoring_type)
        except UnknownScoringTypeError:
            logger.warning("Unknown scoring type %r, prediction not scored", scoring_type)
            return float(self.settings.unscoreable_penalty)

        event = self.coerce_event_type(event_type)
        if event is None:
            logger.warning("Unknown event type %r, prediction not scored", event_type)
            if mode is ScoringType.LEGACY_TOP3:
                return 0.0
            return float(self.settings.unscoreable_penalty)

        if mode is ScoringType.FULL_GRID_DIFF:
            points = self.calculate_grid_penalty(
                self.normalize_rankings(prediction, "rankings"),
                self.normalize_rankings(result, "results"),
                is_sprint=event is EventType.SPRINT,
                grid_size=grid_size,
            )
        else:
            points = self.calculate_podium_points(
                prediction, result, get_points_config(event)
            )

        logger.debug("Scored %s %s prediction: %s", mode.value, event.value, points)
        return points


def score(
    prediction: Any,
    result: Any,
    event_type: Union[EventType, str],
    scoring_type: Optional[Union[ScoringType, str]],
    grid_size: Optional[int] = None
) -> float:
    """Score a prediction using the configured settings"""
    return PointsService().calculate_score(
        prediction, result, event_type, scoring_type, grid_size=grid_size
    )
