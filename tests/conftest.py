"""
Shared pytest fixtures for effort analytics tests.

This module provides reusable fixtures for:
- Effort records and curves
- Settings configurations
- Temporary config and CSV files
"""

from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
import yaml

from effort_analytics.analysis.cp_model import hyperbolic_model
from effort_analytics.models import (
    ActivityCategory,
    CurvePoint,
    EffortRecord,
    EffortType,
    SeasonBestCurve,
)
from effort_analytics.settings import Settings

AS_OF = datetime(2024, 6, 30, 12, 0, tzinfo=timezone.utc)


# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def temp_config_file(tmp_path: Path) -> Path:
    """Create a temporary YAML config file path for testing."""
    return tmp_path / "config.yaml"


@pytest.fixture
def sample_config_dict() -> dict:
    """Provide a sample configuration dictionary."""
    return {
        "default_window_days": 42,
        "cp_min_duration_seconds": 120,
        "cp_max_duration_seconds": 1200,
        "efforts_file": "activity_efforts.csv",
        "ftp_estimation_factor": 0.95,
    }


@pytest.fixture
def sample_config_file(temp_config_file: Path, sample_config_dict: dict) -> Path:
    """Create a temporary config file with sample data."""
    with open(temp_config_file, "w") as f:
        yaml.dump(sample_config_dict, f)
    return temp_config_file


@pytest.fixture
def settings() -> Settings:
    """Provide default settings."""
    return Settings()


# ============================================================================
# Data Fixtures - Records
# ============================================================================


@pytest.fixture
def as_of() -> datetime:
    """Fixed as-of timestamp used across tests."""
    return AS_OF


@pytest.fixture
def make_record() -> Callable[..., EffortRecord]:
    """Factory for effort records with bike/power defaults."""

    def _make(
        duration_seconds: int,
        value: float,
        activity_id: str = "act-1",
        days_ago: float = 1,
        activity_category: ActivityCategory = ActivityCategory.BIKE,
        effort_type: EffortType = EffortType.POWER,
    ) -> EffortRecord:
        return EffortRecord(
            activity_id=activity_id,
            activity_category=activity_category,
            effort_type=effort_type,
            duration_seconds=duration_seconds,
            value=value,
            recorded_at=AS_OF - timedelta(days=days_ago),
        )

    return _make


@pytest.fixture
def bike_records(make_record) -> list[EffortRecord]:
    """
    Provide a realistic set of bike power efforts over three activities.

    Within 90 days of AS_OF except the 120-day-old record.
    """
    return [
        make_record(60, 420.0, "ride-a", days_ago=10),
        make_record(300, 330.0, "ride-a", days_ago=10),
        make_record(1200, 280.0, "ride-a", days_ago=10),
        make_record(60, 450.0, "ride-b", days_ago=30),
        make_record(300, 320.0, "ride-b", days_ago=30),
        make_record(600, 300.0, "ride-b", days_ago=30),
        make_record(300, 360.0, "ride-old", days_ago=120),
        make_record(1800, 270.0, "ride-c", days_ago=60),
    ]


@pytest.fixture
def synthetic_curve() -> Callable[..., SeasonBestCurve]:
    """Factory for curves generated exactly from a known CP model."""

    def _make(
        cp: float,
        w_prime: float,
        durations: list[int],
        effort_type: EffortType = EffortType.POWER,
    ) -> SeasonBestCurve:
        return SeasonBestCurve(
            points=[
                CurvePoint(
                    duration_seconds=d,
                    value=float(hyperbolic_model(d, cp, w_prime)),
                    activity_id=f"synthetic-{d}",
                    recorded_at=AS_OF,
                    activity_category=ActivityCategory.BIKE,
                    effort_type=effort_type,
                )
                for d in durations
            ]
        )

    return _make


# ============================================================================
# Test Data Files
# ============================================================================


@pytest.fixture
def fixtures_dir() -> Path:
    """Provide path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_efforts_csv(fixtures_dir: Path) -> Path:
    """Provide path to the sample efforts CSV."""
    return fixtures_dir / "sample_efforts.csv"
