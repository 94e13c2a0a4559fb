"""
Critical power modelling.

This module fits the two-parameter critical power model, P(t) = CP + W' / t,
to the mid-duration band of a season-best curve. The fit uses the work-time
linearisation: work (value * duration) regressed on duration gives CP as the
slope and W' as the intercept. The same model serves critical speed when the
curve holds speed efforts.
"""

import logging
from collections.abc import Sequence

import numpy as np
from scipy.stats import linregress

from ..constants import CriticalPowerBand
from ..models import (
    CriticalPowerModel,
    CurvePoint,
    FitResult,
    FitStatus,
    SeasonBestCurve,
)
from ..settings import Settings

logger = logging.getLogger(__name__)


# pylint: disable=C0103  # Allow short variable names for mathematical functions.
def hyperbolic_model(
    t: np.ndarray | float, CP: float, W_prime: float
) -> np.ndarray | float:
    """
    Hyperbolic duration model: P(t) = CP + W' / t.

    Args:
        t: Duration in seconds (must be positive)
        CP: Critical Power or Critical Speed
        W_prime: Finite reserve above CP

    Returns:
        Predicted value at t
    """
    return CP + W_prime / np.asarray(t, dtype=float)


def rms_error(
    durations: np.ndarray, values: np.ndarray, cp: float, w_prime: float
) -> float:
    """Root-mean-square deviation between observed and modelled values."""
    residuals = values - hyperbolic_model(durations, cp, w_prime)
    return float(np.sqrt(np.mean(residuals**2)))


class CriticalPowerModelFitter:
    """
    Fits CP and W' to the qualifying band of a season-best curve.

    Only points with min_duration <= duration_seconds <= max_duration take part
    in the fit. The outcome is always returned as a FitResult: insufficient or
    degenerate data is reported through its status, never raised.
    """

    def __init__(
        self,
        min_duration: int = CriticalPowerBand.MIN_DURATION,
        max_duration: int = CriticalPowerBand.MAX_DURATION,
    ):
        """
        Initialize the fitter.

        Args:
            min_duration: Shortest duration (seconds) in the model band
            max_duration: Longest duration (seconds) in the model band
        """
        self.min_duration = min_duration
        self.max_duration = max_duration

    @classmethod
    def from_settings(cls, settings: Settings) -> "CriticalPowerModelFitter":
        """Create a fitter using the model band configured in settings."""
        return cls(
            min_duration=settings.cp_min_duration_seconds,
            max_duration=settings.cp_max_duration_seconds,
        )

    def qualifying_points(
        self, curve: SeasonBestCurve | Sequence[CurvePoint]
    ) -> list[CurvePoint]:
        """Curve points inside the model band, in curve order."""
        points = curve.points if isinstance(curve, SeasonBestCurve) else curve
        return [
            p
            for p in points
            if self.min_duration <= p.duration_seconds <= self.max_duration
        ]

    def fit(self, curve: SeasonBestCurve | Sequence[CurvePoint]) -> FitResult:
        """
        Fit the critical power model.

        Args:
            curve: Season-best curve, or any sequence of curve points

        Returns:
            FitResult with status OK and a model, or INSUFFICIENT_DATA when
            fewer than two points qualify, or DEGENERATE_FIT when qualifying
            points share a duration
        """
        points = self.qualifying_points(curve)
        count = len(points)

        if count < CriticalPowerBand.MIN_POINTS:
            logger.debug(f"Only {count} curve points in the model band")
            return FitResult(
                status=FitStatus.INSUFFICIENT_DATA,
                qualifying_points=count,
                message=(
                    f"Need at least {CriticalPowerBand.MIN_POINTS} efforts between "
                    f"{self.min_duration}s and {self.max_duration}s, found {count}"
                ),
            )

        durations = np.array([p.duration_seconds for p in points], dtype=float)
        values = np.array([p.value for p in points], dtype=float)

        if len(np.unique(durations)) != count:
            logger.debug("Qualifying curve points share a duration")
            return FitResult(
                status=FitStatus.DEGENERATE_FIT,
                qualifying_points=count,
                message="Qualifying efforts share a duration; regression is singular",
            )

        work = values * durations
        regression = linregress(durations, work)
        cp = float(regression.slope)
        w_prime = float(regression.intercept)
        error = rms_error(durations, values, cp, w_prime)

        if cp <= 0 or w_prime < 0:
            logger.warning(
                f"Non-physical critical power fit: cp={cp:.3f}, w_prime={w_prime:.1f}"
            )

        model = CriticalPowerModel(cp=cp, w_prime=w_prime, error=error)
        logger.debug(
            f"Fitted cp={cp:.3f}, w_prime={w_prime:.1f}, error={error:.4f} "
            f"from {count} points"
        )
        return FitResult(status=FitStatus.OK, model=model, qualifying_points=count)
