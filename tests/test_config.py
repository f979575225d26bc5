"""
Tests for application settings

Checks that settings load from environment variables and that the defaults
keep the observed scoring constants.
"""

import logging

from unittest.mock import patch
from f1_predictions.core.config import Settings
from f1_predictions.core.logging_config import setup_logging


class TestSettings:
    """Tests for Settings"""

    def test_settings_default_values(self):
        """Defaults match a standard 20-driver season"""
        settings = Settings(_env_file=None)

        assert settings.grid_size == 20
        assert settings.unscoreable_penalty == 1000
        assert settings.default_scoring_type == "LEGACY_TOP3"
        assert isinstance(settings.log_level, str)

    @patch.dict('os.environ', {
        'GRID_SIZE': '22',
        'UNSCOREABLE_PENALTY': '9999',
        'DEFAULT_SCORING_TYPE': 'FULL_GRID_DIFF',
    })
    def test_settings_loads_from_env(self):
        """Settings are read from environment variables"""
        settings = Settings(_env_file=None)

        assert settings.grid_size == 22
        assert settings.unscoreable_penalty == 9999
        assert settings.default_scoring_type == "FULL_GRID_DIFF"

    @patch.dict('os.environ', {'APP_ENV': 'production'})
    def test_unrelated_env_vars_ignored(self):
        """Variables that are not settings are not picked up"""
        settings = Settings(_env_file=None)

        assert not hasattr(settings, "app_env")


class TestSetupLogging:
    """Tests for setup_logging"""

    def test_setup_logging_level(self):
        logger = setup_logging("DEBUG")

        assert logger.name == "f1_predictions"
        assert logging.getLogger().level == logging.DEBUG
        assert len(logging.getLogger().handlers) == 1

    def test_setup_logging_twice_keeps_one_handler(self):
        setup_logging("INFO")
        setup_logging("WARNING")

        assert logging.getLogger().level == logging.WARNING
        assert len(logging.getLogger().handlers) == 1
