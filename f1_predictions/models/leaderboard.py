from typing import Dict, Optional
from pydantic import BaseModel, Field


class LeaderboardUser(BaseModel):
    """Identity of a participant as supplied by the caller"""

    id: str
    name: Optional[str] = None
    email: Optional[str] = None

    class Config:
        populate_by_name = True


class ScoredPrediction(BaseModel):
    """One scored (or not yet scored) prediction fed to the aggregator"""

    user: LeaderboardUser

    # None means "event not scored yet"; 0 is a real score
    points: Optional[float] = None

    class Config:
        populate_by_name = True


class LeaderboardEntry(BaseModel):
    """Aggregated standing of one user (built fresh on every call)"""

    user: LeaderboardUser

    total_points: float = Field(..., alias="totalPoints")
    event_count: int = Field(..., alias="eventCount")
    average_points: float = Field(..., alias="averagePoints")

    class Config:
        populate_by_name = True


class RankedLeaderboardEntry(LeaderboardEntry):
    """Leaderboard entry numbered by its place in the standings"""

    position: int


class EventScoreSummary(BaseModel):
    """Outcome of scoring every prediction of one event"""

    event_type: str
    scoring_type: str

    scores: Dict[str, float] = Field(default_factory=dict)  # prediction_id -> score
    skipped: int = 0  # incomplete podium predictions
    unscoreable: int = 0  # grid predictions scored with the sentinel

    total_predictions: int = 0
    average_points: float = 0
    max_points: float = 0
    min_points: float = 0

    class Config:
        populate_by_name = True
