from .enums import EventType, ScoringType, UnknownScoringTypeError, parse_scoring_type
from .points import PointsConfig, POINTS, get_points_config
from .prediction import PodiumPrediction, GridPrediction, Prediction, parse_prediction
from .event_result import PodiumResult, GridResult, EventResult, parse_event_result
from .leaderboard import (
    LeaderboardUser,
    ScoredPrediction,
    LeaderboardEntry,
    RankedLeaderboardEntry,
    EventScoreSummary,
)

__all__ = [
    "EventType",
    "ScoringType",
    "UnknownScoringTypeError",
    "parse_scoring_type",
    "PointsConfig",
    "POINTS",
    "get_points_config",
    "PodiumPrediction",
    "GridPrediction",
    "Prediction",
    "parse_prediction",
    "PodiumResult",
    "GridResult",
    "EventResult",
    "parse_event_result",
    "LeaderboardUser",
    "ScoredPrediction",
    "LeaderboardEntry",
    "RankedLeaderboardEntry",
    "EventScoreSummary",
]
