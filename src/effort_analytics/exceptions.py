"""
Custom exceptions for the effort analytics package.

This module defines all custom exceptions used throughout the engine,
providing clear error hierarchies and specific error types for different scenarios.
"""


class EffortAnalyticsError(Exception):
    """Base exception for all effort analytics errors."""


class ConfigurationError(EffortAnalyticsError):
    """Raised when there is an issue with configuration settings."""


class ValidationError(EffortAnalyticsError):
    """Raised when data validation fails."""


class InvalidInputError(ValidationError):
    """Raised when a record or a request parameter violates an input invariant."""


class CalculationError(EffortAnalyticsError):
    """Raised when there is an error during model calculation."""


class InsufficientDataError(CalculationError):
    """Raised when too few curve points fall inside the model band."""


class DegenerateFitError(CalculationError):
    """Raised when qualifying curve points make the regression singular."""


class DataLoadError(EffortAnalyticsError):
    """Raised when there is an error loading effort files."""
