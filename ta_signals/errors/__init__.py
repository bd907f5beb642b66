"""
Error classification system for indicator computation.

This module provides a structured exception hierarchy for the two kinds of
failure the engine can report: rejected input data and internal failures.
"""

from .data_quality import (
    DataQualityError,
    ValidationError,
    MalformedDataError,
    TemporalDataError,
)
from .system_failures import (
    SystemFailureError,
    IndicatorCalculationError,
    ConfigurationError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "ValidationError",
    "MalformedDataError",
    "TemporalDataError",
    # System Failures
    "SystemFailureError",
    "IndicatorCalculationError",
    "ConfigurationError",
]
