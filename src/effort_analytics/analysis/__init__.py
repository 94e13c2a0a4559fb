"""
Analysis and computation layer.

This package contains the pure stages of the performance engine:
- window_filter: Category, effort type and time-window selection
- season_best: Season-best curve construction with deterministic tie-breaks
- cp_model: Critical power / critical speed model fitting
- predictor: Predictions and time to exhaustion from a fitted model
- baseline: Curves derived from a single threshold, threshold estimates
"""

from .baseline import (
    derive_power_curve_from_ftp,
    derive_speed_curve_from_threshold_pace,
    derive_swim_curve_from_css,
    estimate_threshold_from_curve,
)
from .cp_model import CriticalPowerModelFitter, hyperbolic_model
from .predictor import PerformancePredictor
from .season_best import SeasonBestCurveBuilder
from .window_filter import EffortWindowFilter

__all__ = [
    "EffortWindowFilter",
    "SeasonBestCurveBuilder",
    "CriticalPowerModelFitter",
    "PerformancePredictor",
    "hyperbolic_model",
    "derive_power_curve_from_ftp",
    "derive_speed_curve_from_threshold_pace",
    "derive_swim_curve_from_css",
    "estimate_threshold_from_curve",
]
