"""
Pytest fixtures and configuration for all tests.
"""

import pytest

from f1_predictions.core.config import Settings
from f1_predictions.services.points_service import PointsService
from f1_predictions.services.leaderboard_service import LeaderboardService


@pytest.fixture
def settings() -> Settings:
    """Settings with default values, ignoring any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def points_service(settings) -> PointsService:
    return PointsService(settings)


@pytest.fixture
def leaderboard_service(points_service) -> LeaderboardService:
    return LeaderboardService(points_service)


@pytest.fixture
def sample_podium_prediction():
    """Verstappen, Leclerc, Hamilton."""
    return {
        "first_place_id": "VER",
        "second_place_id": "LEC",
        "third_place_id": "HAM",
    }


@pytest.fixture
def sample_podium_result():
    """Verstappen, Hamilton, Norris."""
    return {
        "first_place_id": "VER",
        "second_place_id": "HAM",
        "third_place_id": "NOR",
    }


@pytest.fixture
def sample_users():
    """Users as supplied by the web app."""
    return {
        "alice": {"id": "user1", "name": "Alice", "email": "alice@example.com"},
        "bob": {"id": "user2", "name": "Bob", "email": None},
        "carol": {"id": "user3", "name": None, "email": None},
    }
