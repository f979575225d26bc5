from .points_service import PointsService, score
from .validation_service import is_valid_prediction, has_complete_podium, has_unique_drivers
from .leaderboard_service import LeaderboardService, aggregate_leaderboard

__all__ = [
    "PointsService",
    "score",
    "is_valid_prediction",
    "has_complete_podium",
    "has_unique_drivers",
    "LeaderboardService",
    "aggregate_leaderboard",
]
