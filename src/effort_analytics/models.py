"""
Data models for the effort analytics package.

This module defines all the core data structures used by the engine, ensuring
type safety and data validation using Pydantic models. Every model is frozen:
records, curves and fitted models are created and consumed within a single
computation and are never mutated.
"""

from datetime import datetime
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import Units
from .exceptions import DegenerateFitError, InsufficientDataError


class ActivityCategory(str, Enum):
    """Supported activity categories."""

    RUN = "run"
    BIKE = "bike"
    SWIM = "swim"
    STRENGTH = "strength"
    OTHER = "other"


class EffortType(str, Enum):
    """Kind of value a best effort measures."""

    POWER = "power"
    SPEED = "speed"

    @property
    def unit(self) -> str:
        """Output unit for predictions of this effort type."""
        if self is EffortType.POWER:
            return Units.WATTS
        return Units.METERS_PER_SECOND


class EffortRecord(BaseModel):
    """One maximal-effort observation extracted from an activity."""

    model_config = ConfigDict(frozen=True)

    activity_id: str | None = Field(
        ..., description="Identifier of the source activity"
    )
    activity_category: ActivityCategory = Field(..., description="Activity category")
    effort_type: EffortType = Field(..., description="Power or speed effort")
    duration_seconds: int = Field(..., gt=0, description="Sustained duration")
    value: float = Field(..., gt=0, description="Best value in watts or m/s")
    recorded_at: datetime = Field(..., description="Start time of the activity")


class CurvePoint(BaseModel):
    """Best effort for a single duration on a season-best curve."""

    model_config = ConfigDict(frozen=True)

    duration_seconds: int = Field(..., gt=0, description="Duration in seconds")
    value: float = Field(..., description="Best value in watts or m/s")
    activity_id: str = Field(..., description="Activity that produced the value")
    recorded_at: datetime = Field(..., description="Start time of that activity")
    activity_category: ActivityCategory = Field(..., description="Activity category")
    effort_type: EffortType = Field(..., description="Power or speed effort")

    @classmethod
    def from_record(cls, record: EffortRecord) -> "CurvePoint":
        """Build a curve point carrying the fields of its source record."""
        return cls(
            duration_seconds=record.duration_seconds,
            value=record.value,
            activity_id=record.activity_id,
            recorded_at=record.recorded_at,
            activity_category=record.activity_category,
            effort_type=record.effort_type,
        )


class SeasonBestCurve(BaseModel):
    """Season-best curve, strictly ascending by duration."""

    model_config = ConfigDict(frozen=True)

    points: list[CurvePoint] = Field(
        default_factory=list, description="Curve points ordered by duration"
    )

    @field_validator("points")
    @classmethod
    def check_strictly_ascending(cls, v: list[CurvePoint]) -> list[CurvePoint]:
        """Validate that durations are strictly ascending without duplicates."""
        for previous, current in zip(v, v[1:]):
            if current.duration_seconds <= previous.duration_seconds:
                raise ValueError(
                    "Curve durations must be strictly ascending, got "
                    f"{previous.duration_seconds} before {current.duration_seconds}"
                )
        return v

    def __len__(self) -> int:
        return len(self.points)

    @property
    def durations(self) -> list[int]:
        """Durations present on the curve."""
        return [p.duration_seconds for p in self.points]

    @property
    def as_dict(self) -> dict[int, float]:
        """Return the curve as a duration:value dictionary."""
        return {p.duration_seconds: p.value for p in self.points}

    def value_at(self, duration_seconds: int) -> float | None:
        """Best value observed at exactly this duration, if any."""
        return self.as_dict.get(duration_seconds)


class CriticalPowerModel(BaseModel):
    """Critical power (or critical speed) model parameters."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    cp: float = Field(..., description="Critical Power (watts) or Speed (m/s)")
    w_prime: float = Field(
        ..., alias="wPrime", description="W' reserve in value-seconds (joules)"
    )
    error: float = Field(..., ge=0, description="RMS fit error in value units")


class FitStatus(str, Enum):
    """Outcome of a critical power fit."""

    OK = "ok"
    INSUFFICIENT_DATA = "insufficient_data"
    DEGENERATE_FIT = "degenerate_fit"


class FitResult(BaseModel):
    """Tagged result of a critical power fit: a model or a named failure."""

    model_config = ConfigDict(frozen=True)

    status: FitStatus = Field(..., description="Fit outcome")
    model: CriticalPowerModel | None = Field(
        None, description="Fitted model when status is OK"
    )
    qualifying_points: int = Field(
        0, description="Number of curve points inside the model band"
    )
    message: str | None = Field(None, description="Reason for a failed fit")

    @property
    def ok(self) -> bool:
        """Whether a model was produced."""
        return self.status is FitStatus.OK

    def raise_for_status(self) -> CriticalPowerModel:
        """
        Return the model or raise the exception matching the failure.

        Raises:
            InsufficientDataError: If too few points were in the model band
            DegenerateFitError: If the regression was singular
        """
        if self.status is FitStatus.INSUFFICIENT_DATA:
            raise InsufficientDataError(self.message or "Not enough data")
        if self.status is FitStatus.DEGENERATE_FIT:
            raise DegenerateFitError(self.message or "Degenerate fit")
        assert self.model is not None
        return self.model


class PredictionResult(BaseModel):
    """Predicted performance at a requested duration."""

    model_config = ConfigDict(frozen=True)

    predicted_value: int = Field(..., description="Rounded predicted value")
    unit: Literal["watts", "m/s"] = Field(..., description="Unit of the value")
    model: CriticalPowerModel = Field(..., description="Model used to predict")


class PredictionOutcome(BaseModel):
    """Tagged result of an end-to-end prediction request."""

    model_config = ConfigDict(frozen=True)

    status: FitStatus = Field(..., description="Outcome of the underlying fit")
    prediction: PredictionResult | None = Field(
        None, description="Prediction when status is OK"
    )
    message: str | None = Field(None, description="Reason for a failed prediction")

    @property
    def ok(self) -> bool:
        """Whether a prediction was produced."""
        return self.status is FitStatus.OK


class BaselineEffort(BaseModel):
    """Estimated best effort derived from a single threshold value."""

    model_config = ConfigDict(frozen=True)

    duration_seconds: int = Field(..., gt=0, description="Duration in seconds")
    effort_type: EffortType = Field(..., description="Power or speed effort")
    value: float = Field(..., description="Estimated value in watts or m/s")
    unit: str = Field(..., description="Storage unit of the value")
    activity_category: ActivityCategory = Field(..., description="Activity category")
