"""
Unit tests for prediction and result models
"""

import pytest
from pydantic import TypeAdapter, ValidationError

from f1_predictions.models import (
    GridPrediction,
    GridResult,
    PodiumPrediction,
    PodiumResult,
    Prediction,
    ScoringType,
    UnknownScoringTypeError,
    parse_event_result,
    parse_prediction,
)


class TestParsePrediction:
    """Test suite for building the mode-specific prediction shape."""

    def test_podium_from_camel_case(self):
        """Test the web app's camelCase payload."""
        prediction = parse_prediction(
            {"firstPlaceId": "VER", "secondPlaceId": "LEC", "thirdPlaceId": "HAM", "userId": "u1"},
            ScoringType.LEGACY_TOP3,
        )

        assert isinstance(prediction, PodiumPrediction)
        assert prediction.first_place_id == "VER"
        assert prediction.third_place_id == "HAM"

    def test_grid_ignores_podium_fields(self):
        """Test fields of the other mode are dropped."""
        prediction = parse_prediction(
            {"rankings": ["VER", "NOR"], "firstPlaceId": "VER"}, "FULL_GRID_DIFF"
        )

        assert isinstance(prediction, GridPrediction)
        assert prediction.rankings == ["VER", "NOR"]
        assert not hasattr(prediction, "first_place_id")

    def test_season_mode_wins_over_stored_tag(self):
        """Test a stale scoring_type key does not change the shape."""
        prediction = parse_prediction(
            {"scoring_type": "LEGACY_TOP3", "rankings": ["VER"]}, "FULL_GRID_DIFF"
        )
        assert isinstance(prediction, GridPrediction)

    def test_unknown_mode(self):
        with pytest.raises(UnknownScoringTypeError):
            parse_prediction({}, "TOP10")

    def test_invalid_ranking_entry(self):
        """Test malformed rankings fail at parse time."""
        with pytest.raises(ValidationError):
            parse_prediction({"rankings": "VER,NOR"}, "FULL_GRID_DIFF")

    def test_discriminated_union(self):
        """Test the tagged union picks the arm from scoring_type."""
        adapter = TypeAdapter(Prediction)

        podium = adapter.validate_python({"scoring_type": "LEGACY_TOP3", "first_place_id": "VER"})
        grid = adapter.validate_python({"scoring_type": "FULL_GRID_DIFF", "rankings": ["VER"]})

        assert isinstance(podium, PodiumPrediction)
        assert isinstance(grid, GridPrediction)


class TestParseEventResult:
    """Test suite for building the mode-specific result shape."""

    def test_podium_result(self):
        result = parse_event_result(
            {"first_place_id": "VER", "second_place_id": "HAM", "third_place_id": "NOR"},
            "LEGACY_TOP3",
        )
        assert isinstance(result, PodiumResult)
        assert result.second_place_id == "HAM"

    def test_grid_result(self):
        result = parse_event_result({"results": ["VER", "HAM"]}, ScoringType.FULL_GRID_DIFF)
        assert isinstance(result, GridResult)
        assert result.results == ["VER", "HAM"]

    def test_missing_results(self):
        """Test an unset classification is allowed on the model."""
        assert parse_event_result({}, "FULL_GRID_DIFF").results is None
