"""
Effort window filter.

Selects the effort records relevant to one computation: a single activity
category and effort type, recorded within a trailing window ending at an
explicit as-of timestamp.
"""

import logging
from collections.abc import Sequence
from datetime import datetime, timedelta

import pandas as pd

from ..constants import TimeConstants
from ..data import records_to_frame
from ..exceptions import InvalidInputError
from ..models import ActivityCategory, EffortRecord, EffortType

logger = logging.getLogger(__name__)


def to_utc_timestamp(value: datetime) -> pd.Timestamp:
    """Normalise a datetime to a UTC timestamp; naive values are taken as UTC."""
    ts = pd.Timestamp(value)
    if ts.tzinfo is None:
        return ts.tz_localize("UTC")
    return ts.tz_convert("UTC")


def window_start(as_of: datetime, window_days: int) -> pd.Timestamp:
    """First instant (inclusive) of a trailing window of window_days."""
    return to_utc_timestamp(as_of) - timedelta(
        seconds=window_days * TimeConstants.SECONDS_PER_DAY
    )


def validate_record(record: EffortRecord) -> None:
    """
    Check the invariants every record must satisfy before analysis.

    Raises:
        InvalidInputError: If the record has no activity id or a non-positive
            duration or value
    """
    if record.activity_id is None or not str(record.activity_id).strip():
        raise InvalidInputError("Effort record is missing activity_id")
    if record.duration_seconds <= 0:
        raise InvalidInputError(
            f"Effort {record.activity_id} has non-positive duration "
            f"{record.duration_seconds}"
        )
    if record.value <= 0:
        raise InvalidInputError(
            f"Effort {record.activity_id} has non-positive value {record.value}"
        )


class EffortWindowFilter:
    """Selects the records that take part in a season-best computation."""

    def filter(
        self,
        records: Sequence[EffortRecord],
        activity_category: ActivityCategory | str,
        effort_type: EffortType | str,
        as_of: datetime,
        window_days: int,
    ) -> list[EffortRecord]:
        """
        Return the records matching category and type inside the window.

        A record is kept when its category and effort type match exactly and
        ``recorded_at >= as_of - window_days * 86400s``. Input order is
        preserved.

        Args:
            records: Candidate effort records
            activity_category: Category to keep
            effort_type: Effort type to keep
            as_of: End of the trailing window, supplied by the caller
            window_days: Window length in days

        Returns:
            List of matching records

        Raises:
            InvalidInputError: If window_days is not positive or a record
                violates the record invariants
        """
        if isinstance(window_days, bool) or not isinstance(window_days, int):
            raise InvalidInputError(
                f"window_days must be an integer: {window_days!r}"
            )
        if window_days <= 0:
            raise InvalidInputError(f"window_days must be positive: {window_days}")

        try:
            category = ActivityCategory(activity_category)
            kind = EffortType(effort_type)
        except ValueError as e:
            raise InvalidInputError(str(e)) from e

        for record in records:
            validate_record(record)

        if not records:
            return []

        df = records_to_frame(records)
        cutoff = window_start(as_of, window_days)
        mask = (
            (df["activity_category"] == category.value)
            & (df["effort_type"] == kind.value)
            & (df["recorded_at"] >= cutoff)
        )
        selected = [records[i] for i in df.loc[mask, "position"]]

        logger.debug(
            f"Kept {len(selected)} of {len(records)} {category.value}/{kind.value} "
            f"efforts since {cutoff.isoformat()}"
        )
        return selected
