"""
System failure error classifications for unrecoverable errors.

These exceptions represent failures inside the engine itself rather than
problems with the caller's data.
"""

from typing import Optional, Dict, Any


class SystemFailureError(Exception):
    """Base class for unrecoverable system failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class IndicatorCalculationError(SystemFailureError):
    """Unexpected failure while computing an indicator."""

    def __init__(self, message: str, indicator_name: Optional[str] = None,
                 calculation_input: Optional[Dict[str, Any]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.indicator_name = indicator_name
        self.calculation_input = calculation_input


class ConfigurationError(SystemFailureError):
    """Merged configuration failed validation."""

    def __init__(self, message: str, issues: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.issues = issues or []
