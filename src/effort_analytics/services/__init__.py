"""
Service layer for coordinating business logic.

This package contains high-level services that coordinate the analysis
stages to answer performance requests.
"""

from .performance_service import PerformanceService

__all__ = [
    "PerformanceService",
]
