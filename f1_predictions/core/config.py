"""
Configuration loaded from environment variables (.env)

Anything that varies between seasons or environments lives here
"""

from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # App
    log_level: str = "INFO"

    # Mode used when a season does not declare one
    default_scoring_type: str = "LEGACY_TOP3"

    # ==================== Grid-difference scoring ====================
    # Penalty for each driver of the official result that is missing from
    # a grid prediction. Matches the driver count of a standard season.
    grid_size: int = 20

    # Returned when prediction or result rankings are missing entirely.
    # It only flags "unscoreable" and must not be ranked against.
    unscoreable_penalty: float = 1000

    class Config:
        env_file = ".env"  # Read from the .env file
        env_file_encoding = "utf-8"
        extra = "ignore"  # Ignore .env entries that are not modelled here


@lru_cache()
def get_settings() -> Settings:
    """Return the settings instance (cached so it is read only once)"""
    return Settings()
