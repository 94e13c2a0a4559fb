"""
Baseline curves and threshold estimates.

Athletes without effort history still need a starting curve. These helpers
derive estimated best efforts from a single known threshold (FTP, threshold
run pace, or swim critical speed), and estimate FTP back from a curve.
"""

import logging

from ..constants import BaselineCurve, ThresholdFactors
from ..exceptions import InvalidInputError
from ..models import ActivityCategory, BaselineEffort, EffortType, SeasonBestCurve
from .predictor import round_half_up

logger = logging.getLogger(__name__)

WATTS = "watts"
METERS_PER_SECOND = "meters_per_second"


def _multiplier_for(
    duration: int, multipliers: tuple[tuple[float, float], ...]
) -> float:
    for upper_bound, multiplier in multipliers:
        if duration < upper_bound:
            return multiplier
    return multipliers[-1][1]


def _to_hundredths(value: float) -> float:
    return round_half_up(value * 100) / 100


def derive_power_curve_from_ftp(
    ftp: float, w_prime: float = BaselineCurve.DEFAULT_W_PRIME
) -> list[BaselineEffort]:
    """
    Derive a bike power curve from FTP using the hyperbolic model.

    Each duration gets ``round(ftp + w_prime / duration)`` watts.

    Args:
        ftp: Functional threshold power in watts
        w_prime: Assumed W' in joules

    Returns:
        Estimated efforts for the standard land durations

    Raises:
        InvalidInputError: If ftp is not positive or w_prime is negative
    """
    if ftp <= 0:
        raise InvalidInputError(f"ftp must be positive: {ftp}")
    if w_prime < 0:
        raise InvalidInputError(f"w_prime must not be negative: {w_prime}")

    return [
        BaselineEffort(
            duration_seconds=duration,
            effort_type=EffortType.POWER,
            value=round_half_up(ftp + w_prime / duration),
            unit=WATTS,
            activity_category=ActivityCategory.BIKE,
        )
        for duration in BaselineCurve.LAND_DURATIONS
    ]


def derive_speed_curve_from_threshold_pace(
    threshold_pace_seconds_per_km: float,
) -> list[BaselineEffort]:
    """
    Derive a running speed curve from threshold pace.

    Args:
        threshold_pace_seconds_per_km: Threshold pace in seconds per kilometre

    Returns:
        Estimated efforts for the standard land durations, in m/s

    Raises:
        InvalidInputError: If the pace is not positive
    """
    if threshold_pace_seconds_per_km <= 0:
        raise InvalidInputError(
            f"threshold pace must be positive: {threshold_pace_seconds_per_km}"
        )

    threshold_speed = 1000 / threshold_pace_seconds_per_km
    return [
        BaselineEffort(
            duration_seconds=duration,
            effort_type=EffortType.SPEED,
            value=_to_hundredths(
                threshold_speed
                * _multiplier_for(duration, BaselineCurve.RUN_MULTIPLIERS)
            ),
            unit=METERS_PER_SECOND,
            activity_category=ActivityCategory.RUN,
        )
        for duration in BaselineCurve.LAND_DURATIONS
    ]


def derive_swim_curve_from_css(
    css_seconds_per_hundred_meters: float,
) -> list[BaselineEffort]:
    """
    Derive a swim speed curve from critical swim speed pace.

    Args:
        css_seconds_per_hundred_meters: CSS pace in seconds per 100 m

    Returns:
        Estimated efforts for the standard swim durations, in m/s

    Raises:
        InvalidInputError: If the pace is not positive
    """
    if css_seconds_per_hundred_meters <= 0:
        raise InvalidInputError(
            f"CSS pace must be positive: {css_seconds_per_hundred_meters}"
        )

    css_speed = 100 / css_seconds_per_hundred_meters
    return [
        BaselineEffort(
            duration_seconds=duration,
            effort_type=EffortType.SPEED,
            value=_to_hundredths(
                css_speed * _multiplier_for(duration, BaselineCurve.SWIM_MULTIPLIERS)
            ),
            unit=METERS_PER_SECOND,
            activity_category=ActivityCategory.SWIM,
        )
        for duration in BaselineCurve.SWIM_DURATIONS
    ]


def estimate_threshold_from_curve(
    curve: SeasonBestCurve, factor: float = ThresholdFactors.FTP_FROM_20MIN
) -> float | None:
    """
    Estimate threshold as a fraction of the 20-minute best.

    Args:
        curve: Season-best curve
        factor: Fraction of the 20-minute value (default 0.95)

    Returns:
        Threshold estimate, or None if the curve has no 20-minute point
    """
    best_20min = curve.value_at(ThresholdFactors.FTP_DURATION)
    if best_20min is None:
        logger.debug("No 20-minute effort on curve; threshold not estimated")
        return None
    return best_20min * factor
