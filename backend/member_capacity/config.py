"""Application configuration."""
from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings from environment."""

    # Application
    app_env: str = "development"
    cors_origins: str = "http://localhost:5173,http://localhost:3000"
    log_level: str = "INFO"

    # Capacity defaults (used when the caller leaves a value unset)
    default_working_hours_per_week: float = 40.0

    # Engagement date plausibility (years either side of today)
    engagement_date_range_years: int = 10

    # Query horizons
    engagement_horizon_days: int = 14
    time_off_horizon_days: int = 30

    # Time-off policy
    annual_vacation_allowance_days: int = 25

    @property
    def cors_origins_list(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache
def get_settings() -> Settings:
    return Settings()
