"""Pytest configuration and shared fixtures."""
import pytest

from member_capacity.config import Settings


@pytest.fixture
def settings() -> Settings:
    return Settings(
        default_working_hours_per_week=40,
        engagement_horizon_days=14,
        time_off_horizon_days=30,
        annual_vacation_allowance_days=25,
    )
