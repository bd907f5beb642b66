"""
Data quality error classifications for price series processing.

These exceptions categorize the ways a caller-supplied price series can be
rejected before any indicator is computed.
"""

from typing import Optional, Dict, Any


class DataQualityError(Exception):
    """Base class for data quality issues that can be handled gracefully."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class ValidationError(DataQualityError):
    """Price series failed validation."""

    def __init__(self, message: str, index: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.index = index


class MalformedDataError(ValidationError):
    """Data exists but is in incorrect format."""

    def __init__(self, message: str, raw_data: Optional[str] = None,
                 expected_format: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.raw_data = raw_data
        self.expected_format = expected_format


class TemporalDataError(ValidationError):
    """Timestamp or sequencing issues in the series."""

    def __init__(self, message: str, timestamp: Optional[int] = None,
                 previous_timestamp: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.timestamp = timestamp
        self.previous_timestamp = previous_timestamp
