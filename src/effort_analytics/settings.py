"""Application settings and configuration management."""

from pathlib import Path

import yaml
from pydantic import ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import (
    BaselineCurve,
    CriticalPowerBand,
    CSVConstants,
    SeasonWindow,
    StandardDurations,
    ThresholdFactors,
)
from .exceptions import ConfigurationError


class Settings(BaseSettings):
    """
    Application settings for the effort analytics engine.

    Settings are loaded in the following order of precedence (highest to lowest):
    1. Values passed explicitly (e.g. from a YAML file via load_settings)
    2. Environment variables (e.g., EFFORT_ANALYTICS_DEFAULT_WINDOW_DAYS)
    3. .env file (if found)
    4. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="EFFORT_ANALYTICS_", env_file=".env", extra="ignore"
    )

    # --- File Paths ---
    efforts_file: Path = Path("activity_efforts.csv")
    csv_separator: str = CSVConstants.DEFAULT_SEPARATOR

    # --- Season Window ---
    # Used only when a caller does not supply window_days explicitly
    default_window_days: int = SeasonWindow.DEFAULT_WINDOW_DAYS

    # --- Critical Power Model Band (seconds) ---
    cp_min_duration_seconds: int = CriticalPowerBand.MIN_DURATION
    cp_max_duration_seconds: int = CriticalPowerBand.MAX_DURATION

    # --- Prediction Table Durations (in seconds) ---
    prediction_durations: dict[str, int] = StandardDurations.get_standard_durations()

    # --- Threshold / Baseline Configuration ---
    ftp_estimation_factor: float = ThresholdFactors.FTP_FROM_20MIN
    baseline_w_prime: float = BaselineCurve.DEFAULT_W_PRIME

    @field_validator("default_window_days")
    @classmethod
    def check_window_days(cls, v: int) -> int:
        """Validate the default window is a positive number of days."""
        if v <= 0:
            raise ValueError("default_window_days must be positive")
        return v

    @field_validator("prediction_durations")
    @classmethod
    def check_prediction_durations(cls, v: dict[str, int]) -> dict[str, int]:
        """Validate prediction durations are positive."""
        for name, seconds in v.items():
            if seconds <= 0:
                raise ValueError(f"Prediction duration {name} must be positive")
        return v

    @model_validator(mode="after")
    def check_model_band(self) -> "Settings":
        """Validate the critical power band is a non-empty positive range."""
        if self.cp_min_duration_seconds <= 0:
            raise ValueError("cp_min_duration_seconds must be positive")
        if self.cp_min_duration_seconds >= self.cp_max_duration_seconds:
            raise ValueError(
                "cp_min_duration_seconds must be lower than cp_max_duration_seconds"
            )
        return self


def load_settings(config_file: Path | None = None) -> Settings:
    """Load settings from a YAML file, environment variables, and defaults."""
    if config_file:
        with open(config_file, encoding="utf-8") as f:
            yaml_settings = yaml.safe_load(f) or {}

        # Relative efforts file is resolved against the config file location
        if (
            "efforts_file" in yaml_settings
            and not Path(yaml_settings["efforts_file"]).is_absolute()
        ):
            yaml_settings["efforts_file"] = str(
                config_file.parent / yaml_settings["efforts_file"]
            )

        try:
            return Settings(**yaml_settings)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid configuration in {config_file}: {e}"
            ) from e

    return Settings()
