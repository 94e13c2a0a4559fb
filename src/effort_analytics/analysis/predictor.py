"""
Performance prediction from a fitted critical power model.
"""

import logging
import math
from collections.abc import Mapping

from ..exceptions import InvalidInputError
from ..models import CriticalPowerModel, EffortType, PredictionResult
from .cp_model import hyperbolic_model

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round to the nearest integer; halves round up."""
    return int(math.floor(value + 0.5))


class PerformancePredictor:
    """Evaluates a CriticalPowerModel at requested durations."""

    def predict(
        self,
        model: CriticalPowerModel,
        duration_seconds: int | float,
        effort_type: EffortType | str,
    ) -> PredictionResult:
        """
        Predict the best sustainable value for a duration.

        The value is ``cp + w_prime / duration_seconds`` rounded to the nearest
        integer. Rounding applies to speed as well as power, so m/s
        predictions lose their fractional part.

        Args:
            model: Fitted critical power model
            duration_seconds: Requested duration, must be positive
            effort_type: Effort type the model was fitted on; selects the unit

        Returns:
            PredictionResult with the rounded value, unit and model

        Raises:
            InvalidInputError: If duration_seconds is not positive or the
                effort type is unknown
        """
        if duration_seconds is None or duration_seconds <= 0:
            raise InvalidInputError(
                f"duration_seconds must be positive, got {duration_seconds}"
            )
        try:
            kind = EffortType(effort_type)
        except ValueError as e:
            raise InvalidInputError(str(e)) from e

        raw = float(hyperbolic_model(duration_seconds, model.cp, model.w_prime))
        return PredictionResult(
            predicted_value=round_half_up(raw), unit=kind.unit, model=model
        )

    def predict_many(
        self,
        model: CriticalPowerModel,
        durations: Mapping[str, int],
        effort_type: EffortType | str,
    ) -> dict[str, PredictionResult]:
        """
        Predict values for several named durations.

        Args:
            model: Fitted critical power model
            durations: Mapping of label to duration in seconds
            effort_type: Effort type the model was fitted on

        Returns:
            Mapping of label to prediction, in the order of ``durations``
        """
        return {
            label: self.predict(model, seconds, effort_type)
            for label, seconds in durations.items()
        }

    def time_to_exhaustion(
        self, model: CriticalPowerModel, target_value: float
    ) -> float | None:
        """
        Estimate how long a target value can be held.

        Inverts the model: t = W' / (target - CP).

        Args:
            model: Fitted critical power model
            target_value: Power (watts) or speed (m/s) to hold

        Returns:
            Duration in seconds, or None when the target is at or below CP
            (sustainable indefinitely under the model) or W' is not positive

        Raises:
            InvalidInputError: If target_value is not positive
        """
        if target_value <= 0:
            raise InvalidInputError(f"target_value must be positive: {target_value}")
        if target_value <= model.cp or model.w_prime <= 0:
            return None
        return model.w_prime / (target_value - model.cp)
