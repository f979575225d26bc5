"""
F1 Predictions - scoring and ranking engine

Entry points used by the web app:

    score(prediction, result, event_type, scoring_type) -> float
    is_valid_prediction(prediction, scoring_type) -> bool
    aggregate_leaderboard(scored_predictions, scoring_type) -> list[LeaderboardEntry]
"""

from f1_predictions.models import EventType, ScoringType
from f1_predictions.services import (
    LeaderboardService,
    PointsService,
    aggregate_leaderboard,
    is_valid_prediction,
    score,
)

__version__ = "1.0.0"

__all__ = [
    "EventType",
    "ScoringType",
    "LeaderboardService",
    "PointsService",
    "aggregate_leaderboard",
    "is_valid_prediction",
    "score",
]
