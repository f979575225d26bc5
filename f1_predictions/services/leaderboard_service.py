"""
LeaderboardService - Builds season standings from scored predictions.

Standings are calculated on the fly from (user, points) pairs supplied by the
caller. Nothing is fetched or stored here.
"""

import logging
from typing import Any, Iterable, List, Mapping, Optional, Union

from f1_predictions.models.enums import EventType, ScoringType
from f1_predictions.models.leaderboard import (
    EventScoreSummary,
    LeaderboardEntry,
    RankedLeaderboardEntry,
    ScoredPrediction,
)
from f1_predictions.services.points_service import PointsService
from f1_predictions.services.validation_service import has_complete_podium

logger = logging.getLogger(__name__)


class LeaderboardService:
    def __init__(self, points_service: Optional[PointsService] = None):
        self.points_service = points_service or PointsService()

    def calculate_leaderboard(
        self,
        scored_predictions: Iterable[Union[ScoredPrediction, Mapping[str, Any]]],
        scoring_type: Optional[Union[ScoringType, str]]
    ) -> List[LeaderboardEntry]:
        """
        Aggregate scored predictions into ordered standings.

        - Predictions with points=None (event not scored yet) are skipped,
          they count neither as points nor as an event.
        - Users without any counted event are left out.
        - FULL_GRID_DIFF sorts ascending (lowest penalty first),
          LEGACY_TOP3 descending. Ties keep first-seen order.

        No position is assigned, see with_positions().
        """
        mode = self.points_service.resolve_scoring_type(scoring_type)
        user_stats = {}

        for item in scored_predictions:
            prediction = (
                ScoredPrediction.model_validate(item)
                if isinstance(item, Mapping) else item
            )
            if prediction.points is None:
                continue

            stats = user_stats.get(prediction.user.id)
            if stats is not None:
                stats["total_points"] += prediction.points
                stats["event_count"] += 1
            else:
                user_stats[prediction.user.id] = {
                    "user": prediction.user,
                    "total_points": prediction.points,
                    "event_count": 1,
                }

        entries = [
            LeaderboardEntry(
                user=stats["user"],
                total_points=stats["total_points"],
                event_count=stats["event_count"],
                average_points=stats["total_points"] / stats["event_count"],
            )
            for stats in user_stats.values()
        ]

        # sorted() is stable with reverse=True as well
        entries = sorted(
            entries,
            key=lambda x: x.total_points,
            reverse=mode is ScoringType.LEGACY_TOP3,
        )

        logger.info("Leaderboard (%s) built for %d users", mode.value, len(entries))
        return entries

    def with_positions(self, entries: Iterable[LeaderboardEntry]) -> List[RankedLeaderboardEntry]:
        """Number entries 1..n in the order given."""
        return [
            RankedLeaderboardEntry(position=idx + 1, **entry.model_dump())
            for idx, entry in enumerate(entries)
        ]

    def score_event(
        self,
        predictions: Mapping[str, Any],
        result: Any,
        event_type: Union[EventType, str],
        scoring_type: Optional[Union[ScoringType, str]],
        grid_size: Optional[int] = None
    ) -> EventScoreSummary:
        """
        Score every prediction of one completed event.

        1. Skips podium predictions with an empty slot
        2. Scores the rest with PointsService
        3. Returns the scores with total/average/max/min

        Unscoreable grid predictions keep the sentinel in scores but are
        left out of the totals.

        Args:
            predictions: prediction_id -> prediction (model or mapping)
            result: Official result of the event
        """
        event = self.points_service.coerce_event_type(event_type)
        if event is None:
            raise ValueError(f"Unknown event type: {event_type!r}")
        mode = self.points_service.resolve_scoring_type(scoring_type)

        scores = {}
        values = []
        skipped = 0
        unscoreable = 0
        for prediction_id, prediction in predictions.items():
            if mode is ScoringType.LEGACY_TOP3 and not has_complete_podium(prediction):
                logger.warning("Skipping incomplete prediction %s", prediction_id)
                skipped += 1
                continue

            points = self.points_service.calculate_score(
                prediction, result, event, mode, grid_size=grid_size
            )
            scores[prediction_id] = points

            grid_unscoreable = (
                mode is ScoringType.FULL_GRID_DIFF
                and not self.points_service.has_grid_rankings(prediction, result)
            )
            if grid_unscoreable:
                unscoreable += 1
            else:
                values.append(points)

        summary = EventScoreSummary(
            event_type=event.value,
            scoring_type=mode.value,
            scores=scores,
            skipped=skipped,
            unscoreable=unscoreable,
            total_predictions=len(values),
            average_points=sum(values) / len(values) if values else 0,
            max_points=max(values) if values else 0,
            min_points=min(values) if values else 0,
        )

        logger.info(
            "Scored %d predictions (%d skipped, %d unscoreable) for %s event",
            summary.total_predictions, skipped, unscoreable, event.value,
        )
        return summary


def aggregate_leaderboard(
    scored_predictions: Iterable[Union[ScoredPrediction, Mapping[str, Any]]],
    scoring_type: Optional[Union[ScoringType, str]]
) -> List[LeaderboardEntry]:
    """Aggregate standings with a default LeaderboardService"""
    return LeaderboardService().calculate_leaderboard(scored_predictions, scoring_type)
