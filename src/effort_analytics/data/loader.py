"""
Effort data loading functionality.

This module provides a clean interface for turning effort rows (CSV exports or
already-fetched mappings) into validated EffortRecord objects.
"""

import logging
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path
from typing import Any, Protocol

import pandas as pd
from pydantic import ValidationError

from ..constants import CSVConstants
from ..exceptions import DataLoadError, InvalidInputError
from ..models import EffortRecord
from ..settings import Settings

logger = logging.getLogger(__name__)


class EffortLoaderProtocol(Protocol):
    """Protocol for effort loaders."""

    def load_efforts(self, path: Path | None = None) -> list[EffortRecord]:
        """Load effort records."""
        ...


def parse_effort_records(rows: Iterable[Mapping[str, Any]]) -> list[EffortRecord]:
    """
    Validate raw effort rows into EffortRecord objects.

    Args:
        rows: Mappings with the EffortRecord fields

    Returns:
        List of validated records, in input order

    Raises:
        InvalidInputError: If any row fails validation
    """
    records = []
    for index, row in enumerate(rows):
        try:
            records.append(EffortRecord.model_validate(dict(row)))
        except ValidationError as e:
            raise InvalidInputError(f"Invalid effort row {index}: {e}") from e
    return records


def records_to_frame(records: Sequence[EffortRecord]) -> pd.DataFrame:
    """
    Convert effort records to a DataFrame.

    The frame keeps a ``position`` column pointing back into ``records`` so
    callers can recover the original objects after sorting or filtering.
    ``recorded_at`` is normalised to UTC; naive timestamps are taken as UTC.

    Args:
        records: Effort records

    Returns:
        DataFrame with one row per record
    """
    df = pd.DataFrame(
        {
            "position": range(len(records)),
            "activity_id": [r.activity_id for r in records],
            "activity_category": [r.activity_category.value for r in records],
            "effort_type": [r.effort_type.value for r in records],
            "duration_seconds": [r.duration_seconds for r in records],
            "value": [r.value for r in records],
            "recorded_at": [r.recorded_at for r in records],
        }
    )
    df["duration_seconds"] = df["duration_seconds"].astype("int64")
    df["value"] = df["value"].astype("float64")
    df["recorded_at"] = pd.to_datetime(df["recorded_at"], utc=True)
    return df


class EffortDataLoader:
    """
    Handles loading of best-effort records from CSV files.

    This class encapsulates all file I/O for effort data, providing a clean
    interface for the rest of the application. Rows without an activity id are
    dropped here, before any record reaches the analysis stages.
    """

    def __init__(self, settings: Settings):
        """
        Initialize the data loader.

        Args:
            settings: Application settings containing data paths
        """
        self.settings = settings
        self.logger = logging.getLogger(__name__)

    def load_efforts(self, path: Path | None = None) -> list[EffortRecord]:
        """
        Load effort records from a CSV file.

        Args:
            path: CSV file to read (defaults to settings.efforts_file)

        Returns:
            List of validated effort records

        Raises:
            DataLoadError: If the file is missing or cannot be parsed
            InvalidInputError: If a row violates the record invariants
        """
        efforts_file = path or self.settings.efforts_file
        if not efforts_file.exists():
            raise DataLoadError(f"Efforts file not found: {efforts_file}")

        try:
            self.logger.info(f"Loading efforts from {efforts_file}")
            df = pd.read_csv(
                efforts_file,
                sep=self.settings.csv_separator,
                dtype={"activity_id": "string"},
                encoding=CSVConstants.DEFAULT_ENCODING,
            )
        except Exception as e:
            raise DataLoadError(f"Failed to load efforts: {e}") from e

        missing = set(CSVConstants.EFFORT_COLUMNS) - set(df.columns)
        if missing:
            raise DataLoadError(
                f"Efforts file is missing columns: {', '.join(sorted(missing))}"
            )

        df = df[list(CSVConstants.EFFORT_COLUMNS)]
        without_activity = df["activity_id"].isna() | (
            df["activity_id"].str.strip() == ""
        )
        if without_activity.any():
            self.logger.warning(
                f"Dropping {int(without_activity.sum())} efforts without activity_id"
            )
            df = df[~without_activity]

        df = df.assign(recorded_at=pd.to_datetime(df["recorded_at"], utc=True))
        records = parse_effort_records(df.to_dict("records"))
        self.logger.info(f"Loaded {len(records)} efforts")
        return records
