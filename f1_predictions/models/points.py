"""
Points table for podium scoring

Sprint values are exactly half of the Race values, including the .5 steps.
"""

from typing import Union

from pydantic import BaseModel

from f1_predictions.models.enums import EventType


class PointsConfig(BaseModel):
    """Points awarded per podium slot for one event type."""

    first_correct: float
    second_correct: float
    third_correct: float
    present_wrong_position: float

    class Config:
        frozen = True

    def for_slot(self, index: int) -> float:
        """Exact-match points for slot 0 (first), 1 (second) or 2 (third)."""
        return (self.first_correct, self.second_correct, self.third_correct)[index]


POINTS = {
    EventType.RACE: PointsConfig(
        first_correct=25,
        second_correct=15,
        third_correct=10,
        present_wrong_position=5,
    ),
    EventType.SPRINT: PointsConfig(
        first_correct=12.5,
        second_correct=7.5,
        third_correct=5,
        present_wrong_position=2.5,
    ),
}


def get_points_config(event_type: Union[EventType, str]) -> PointsConfig:
    """Return the points table for an event type (raises ValueError if unknown)."""
    return POINTS[EventType(event_type)]
