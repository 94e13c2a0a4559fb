"""
High-level service for performance analytics requests.

This service is the boundary a request-handling layer talks to. It chains the
pure analysis stages (filter, curve, fit, predict) and owns the request
defaults: a missing ``as_of`` becomes the current UTC time and a missing
``window_days`` comes from settings.
"""

import logging
from collections.abc import Sequence
from datetime import datetime, timezone
from typing import Protocol

from ..analysis import (
    CriticalPowerModelFitter,
    EffortWindowFilter,
    PerformancePredictor,
    SeasonBestCurveBuilder,
    estimate_threshold_from_curve,
)
from ..exceptions import InvalidInputError
from ..models import (
    ActivityCategory,
    CriticalPowerModel,
    EffortRecord,
    EffortType,
    FitResult,
    PredictionOutcome,
    PredictionResult,
    SeasonBestCurve,
)
from ..settings import Settings

logger = logging.getLogger(__name__)


class PerformanceServiceProtocol(Protocol):
    """Protocol for performance services."""

    def critical_power(
        self,
        records: Sequence[EffortRecord],
        activity_category: ActivityCategory | str,
        effort_type: EffortType | str,
        as_of: datetime | None = None,
        window_days: int | None = None,
    ) -> FitResult:
        """Fit the critical power model for a profile's efforts."""
        ...


class PerformanceService:
    """
    High-level service coordinating season-best and critical power requests.

    Records passed in must already belong to a single profile and carry an
    activity id; fetching them is the caller's concern.
    """

    def __init__(self, settings: Settings):
        """
        Initialize the performance service.

        Args:
            settings: Application settings
        """
        self.settings = settings
        self.logger = logging.getLogger(__name__)

        # Initialize stages
        self.window_filter = EffortWindowFilter()
        self.curve_builder = SeasonBestCurveBuilder()
        self.fitter = CriticalPowerModelFitter.from_settings(settings)
        self.predictor = PerformancePredictor()

    def _resolve_window(
        self, as_of: datetime | None, window_days: int | None
    ) -> tuple[datetime, int]:
        if as_of is None:
            as_of = datetime.now(timezone.utc)
        if window_days is None:
            window_days = self.settings.default_window_days
        return as_of, window_days

    def season_best_curve(
        self,
        records: Sequence[EffortRecord],
        activity_category: ActivityCategory | str,
        effort_type: EffortType | str,
        as_of: datetime | None = None,
        window_days: int | None = None,
    ) -> SeasonBestCurve:
        """
        Build the season-best curve for one category and effort type.

        Args:
            records: Effort records of a single profile
            activity_category: Category to analyse
            effort_type: Effort type to analyse
            as_of: End of the window (defaults to now, UTC)
            window_days: Window length (defaults to settings.default_window_days)

        Returns:
            Season-best curve, possibly empty

        Raises:
            InvalidInputError: If records or window parameters are invalid
        """
        as_of, window_days = self._resolve_window(as_of, window_days)
        filtered = self.window_filter.filter(
            records, activity_category, effort_type, as_of, window_days
        )
        curve = self.curve_builder.build(filtered)
        self.logger.info(
            f"Season-best curve for {activity_category}/{effort_type}: "
            f"{len(curve)} durations from {len(filtered)} efforts "
            f"({window_days} days to {as_of.isoformat()})"
        )
        return curve

    def critical_power(
        self,
        records: Sequence[EffortRecord],
        activity_category: ActivityCategory | str,
        effort_type: EffortType | str,
        as_of: datetime | None = None,
        window_days: int | None = None,
    ) -> FitResult:
        """
        Fit the critical power (or speed) model on the season-best curve.

        Returns:
            FitResult; insufficient or degenerate data is reported in its
            status rather than raised

        Raises:
            InvalidInputError: If records or window parameters are invalid
        """
        curve = self.season_best_curve(
            records, activity_category, effort_type, as_of, window_days
        )
        result = self.fitter.fit(curve)
        if result.ok:
            self.logger.info(
                f"Critical power fit from {result.qualifying_points} points: "
                f"cp={result.model.cp:.2f}, w_prime={result.model.w_prime:.0f}"
            )
        else:
            self.logger.info(f"Critical power not fitted: {result.message}")
        return result

    def predict(
        self,
        records: Sequence[EffortRecord],
        activity_category: ActivityCategory | str,
        effort_type: EffortType | str,
        duration_seconds: int,
        as_of: datetime | None = None,
        window_days: int | None = None,
    ) -> PredictionOutcome:
        """
        Predict the best value for a duration from a profile's efforts.

        Returns:
            PredictionOutcome carrying the prediction, or the fit status and
            reason when no model could be fitted

        Raises:
            InvalidInputError: If duration_seconds is not positive, or records
                or window parameters are invalid
        """
        if duration_seconds is None or duration_seconds <= 0:
            raise InvalidInputError(
                f"duration_seconds must be positive, got {duration_seconds}"
            )

        result = self.critical_power(
            records, activity_category, effort_type, as_of, window_days
        )
        if not result.ok:
            return PredictionOutcome(status=result.status, message=result.message)

        prediction = self.predictor.predict(result.model, duration_seconds, effort_type)
        return PredictionOutcome(status=result.status, prediction=prediction)

    def predict_standard_durations(
        self, model: CriticalPowerModel, effort_type: EffortType | str
    ) -> dict[str, PredictionResult]:
        """Predict values at every configured prediction duration."""
        return self.predictor.predict_many(
            model, self.settings.prediction_durations, effort_type
        )

    def estimate_threshold(
        self,
        records: Sequence[EffortRecord],
        activity_category: ActivityCategory | str,
        effort_type: EffortType | str,
        as_of: datetime | None = None,
        window_days: int | None = None,
    ) -> float | None:
        """
        Estimate threshold from the 20-minute season best.

        Returns:
            settings.ftp_estimation_factor times the 20-minute best, or None
        """
        curve = self.season_best_curve(
            records, activity_category, effort_type, as_of, window_days
        )
        return estimate_threshold_from_curve(
            curve, factor=self.settings.ftp_estimation_factor
        )
