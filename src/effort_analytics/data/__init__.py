"""
Data access layer.

This package contains modules for loading and shaping effort records.
"""

from .loader import EffortDataLoader, parse_effort_records, records_to_frame

__all__ = [
    "EffortDataLoader",
    "parse_effort_records",
    "records_to_frame",
]
