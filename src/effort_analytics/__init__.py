"""Effort Analytics - season-best curves and critical power modelling."""

__version__ = "0.3.0"

from . import analysis, constants, data, exceptions, models, services
from .analysis import (
    CriticalPowerModelFitter,
    EffortWindowFilter,
    PerformancePredictor,
    SeasonBestCurveBuilder,
)
from .data import EffortDataLoader
from .models import (
    ActivityCategory,
    BaselineEffort,
    CriticalPowerModel,
    CurvePoint,
    EffortRecord,
    EffortType,
    FitResult,
    FitStatus,
    PredictionOutcome,
    PredictionResult,
    SeasonBestCurve,
)
from .services import PerformanceService


def get_version() -> str:
    """Get the current version of effort_analytics."""
    return __version__


def get_package_info() -> dict[str, str]:
    """Get package information including name and version."""
    return {
        "name": "effort-analytics",
        "version": __version__,
        "description": "Season-best curves and critical power modelling",
    }


__all__ = [
    # Version & Info
    "get_version",
    "get_package_info",
    # Models
    "ActivityCategory",
    "BaselineEffort",
    "CriticalPowerModel",
    "CurvePoint",
    "EffortRecord",
    "EffortType",
    "FitResult",
    "FitStatus",
    "PredictionOutcome",
    "PredictionResult",
    "SeasonBestCurve",
    # Analysis Layer
    "EffortWindowFilter",
    "SeasonBestCurveBuilder",
    "CriticalPowerModelFitter",
    "PerformancePredictor",
    # Data Layer
    "EffortDataLoader",
    # Services
    "PerformanceService",
    # Modules
    "analysis",
    "constants",
    "data",
    "exceptions",
    "models",
    "services",
]
