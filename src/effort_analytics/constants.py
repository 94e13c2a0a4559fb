"""
Constants used throughout the effort analytics package.

This module centralizes all magic numbers and commonly used values to improve
maintainability and clarity.
"""

from typing import Final


# === Time Constants ===
class TimeConstants:
    """Time-related constants in seconds."""

    SECONDS_PER_MINUTE: Final[int] = 60
    SECONDS_PER_HOUR: Final[int] = 3600
    SECONDS_PER_DAY: Final[int] = 86400


# === Season Window ===
class SeasonWindow:
    """Trailing window used to build season-best curves."""

    DEFAULT_WINDOW_DAYS: Final[int] = 90


# === Critical Power Model Band ===
class CriticalPowerBand:
    """Duration band (seconds) over which the two-parameter model is valid."""

    MIN_DURATION: Final[int] = 180  # 3 minutes
    MAX_DURATION: Final[int] = 1800  # 30 minutes
    MIN_POINTS: Final[int] = 2


# === Threshold Estimation Factors ===
class ThresholdFactors:
    """Factors used for threshold estimation."""

    FTP_FROM_20MIN: Final[float] = 0.95  # FTP = 95% of 20-min best power
    FTP_DURATION: Final[int] = 1200


# === Baseline Curve Derivation ===
class BaselineCurve:
    """Durations and multipliers for curves derived from a single threshold."""

    DEFAULT_W_PRIME: Final[float] = 20000.0  # joules
    LAND_DURATIONS: Final[tuple[int, ...]] = (
        5,
        10,
        30,
        60,
        180,
        300,
        600,
        1200,
        1800,
        3600,
    )
    SWIM_DURATIONS: Final[tuple[int, ...]] = (
        10,
        20,
        30,
        60,
        120,
        180,
        300,
        600,
        900,
        1800,
    )

    # (upper bound in seconds, multiplier); the last entry has no upper bound
    RUN_MULTIPLIERS: Final[tuple[tuple[float, float], ...]] = (
        (60, 1.15),  # Sprint
        (300, 1.08),  # VO2max
        (1200, 1.0),  # Threshold
        (float("inf"), 0.92),  # Tempo
    )
    SWIM_MULTIPLIERS: Final[tuple[tuple[float, float], ...]] = (
        (60, 1.1),  # Sprint
        (180, 1.06),  # Middle
        (600, 1.0),  # CSS
        (float("inf"), 0.93),  # Distance
    )


# === Standard Prediction Durations ===
class StandardDurations:
    """Standard durations for prediction tables (in seconds)."""

    DURATION_1MIN: Final[int] = 60
    DURATION_3MIN: Final[int] = 180
    DURATION_5MIN: Final[int] = 300
    DURATION_10MIN: Final[int] = 600
    DURATION_20MIN: Final[int] = 1200
    DURATION_30MIN: Final[int] = 1800
    DURATION_1HR: Final[int] = 3600

    @classmethod
    def get_standard_durations(cls) -> dict[str, int]:
        """Get all standard durations as a dictionary."""
        return {
            "1min": cls.DURATION_1MIN,
            "3min": cls.DURATION_3MIN,
            "5min": cls.DURATION_5MIN,
            "10min": cls.DURATION_10MIN,
            "20min": cls.DURATION_20MIN,
            "30min": cls.DURATION_30MIN,
            "1hr": cls.DURATION_1HR,
        }


# === Units ===
class Units:
    """Output units keyed by effort type value."""

    WATTS: Final[str] = "watts"
    METERS_PER_SECOND: Final[str] = "m/s"


# === CSV Parsing ===
class CSVConstants:
    """Constants for CSV file parsing."""

    DEFAULT_SEPARATOR: Final[str] = ";"  # Semicolon-separated format
    DEFAULT_ENCODING: Final[str] = "utf-8"
    EFFORT_COLUMNS: Final[tuple[str, ...]] = (
        "activity_id",
        "activity_category",
        "effort_type",
        "duration_seconds",
        "value",
        "recorded_at",
    )
