"""
Season-best curve construction.

This module reduces a set of filtered effort records to one best value per
duration. The curve is sparse: only durations present in the data appear, and
no interpolation is performed.
"""

import logging
from collections.abc import Sequence

from ..data import records_to_frame
from ..exceptions import InvalidInputError
from ..models import CurvePoint, EffortRecord, SeasonBestCurve
from .window_filter import validate_record

logger = logging.getLogger(__name__)

# Best value first; ties go to the most recent effort, then the smaller id
_RANKING_COLUMNS = ["duration_seconds", "value", "recorded_at", "activity_id"]
_RANKING_ASCENDING = [True, False, False, True]


class SeasonBestCurveBuilder:
    """Builds season-best curves from filtered effort records."""

    def build(self, records: Sequence[EffortRecord]) -> SeasonBestCurve:
        """
        Build the season-best curve.

        Records are grouped by ``duration_seconds`` and the record with the
        highest ``value`` wins each group. When values tie, the most recent
        ``recorded_at`` wins, then the lexicographically smaller
        ``activity_id``, so the output is fully determined by the input set.

        Args:
            records: Filtered records sharing one category and effort type

        Returns:
            Curve with one point per observed duration, ascending by duration

        Raises:
            InvalidInputError: If a record violates the record invariants or
                records mix categories or effort types
        """
        if not records:
            return SeasonBestCurve(points=[])

        for record in records:
            validate_record(record)

        kinds = {(r.activity_category, r.effort_type) for r in records}
        if len(kinds) > 1:
            raise InvalidInputError(
                "Season-best curve requires a single category and effort type, got "
                + ", ".join(sorted(f"{c.value}/{t.value}" for c, t in kinds))
            )

        df = records_to_frame(records)
        best = df.sort_values(
            _RANKING_COLUMNS, ascending=_RANKING_ASCENDING, kind="mergesort"
        ).drop_duplicates("duration_seconds", keep="first")

        points = [CurvePoint.from_record(records[i]) for i in best["position"]]
        logger.debug(f"Built season-best curve with {len(points)} points")
        return SeasonBestCurve(points=points)
