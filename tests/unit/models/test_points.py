"""
Unit tests for the points table
"""

import pytest
from pydantic import ValidationError

from f1_predictions.models import POINTS, EventType, get_points_config


class TestPointsTable:
    """Test suite for race and sprint point values."""

    def test_race_values(self):
        config = get_points_config(EventType.RACE)

        assert config.first_correct == 25
        assert config.second_correct == 15
        assert config.third_correct == 10
        assert config.present_wrong_position == 5

    def test_sprint_is_half_of_race(self):
        """Test every sprint value is exactly half the race value."""
        race = POINTS[EventType.RACE].model_dump()
        sprint = POINTS[EventType.SPRINT].model_dump()

        assert sprint == {key: value / 2 for key, value in race.items()}
        assert sprint["first_correct"] == 12.5

    def test_lookup_by_string(self):
        assert get_points_config("SPRINT").present_wrong_position == 2.5

    def test_unknown_event_type(self):
        with pytest.raises(ValueError):
            get_points_config("QUALIFYING")

    def test_for_slot(self):
        config = get_points_config(EventType.RACE)
        assert [config.for_slot(i) for i in range(3)] == [25, 15, 10]

    def test_table_is_immutable(self):
        with pytest.raises(ValidationError):
            POINTS[EventType.RACE].first_correct = 30
