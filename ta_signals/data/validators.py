"""
Price series validation.

Indicator calculators assume well-formed input: finite positive prices,
non-negative volume, non-decreasing timestamps. This module checks those
assumptions and rejects anything else with a ValidationError subclass.
"""

import math
from typing import Any, Optional

from ..errors import MalformedDataError, TemporalDataError
from .models import PricePoint, PriceSeries


def _is_finite_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


class SeriesValidator:
    """Validates price series against data quality rules."""

    def __init__(self, config: Optional[dict[str, Any]] = None):
        """
        Initialize validator with configuration.

        Args:
            config: Validation configuration dict
        """
        self.config = config or {}

        self.require_positive_price = self.config.get("require_positive_price", True)
        self.allow_negative_volume = self.config.get("allow_negative_volume", False)

    def validate(self, series: PriceSeries) -> None:
        """
        Validate every point and the ordering of the series.

        Args:
            series: Series to validate

        Raises:
            MalformedDataError: A point has an invalid price, volume or timestamp
            TemporalDataError: Timestamps decrease somewhere in the series
        """
        previous: Optional[PricePoint] = None
        for index, point in enumerate(series):
            self.validate_point(point, index)
            if previous is not None and point.timestamp < previous.timestamp:
                raise TemporalDataError(
                    f"Timestamp {point.timestamp} at index {index} precedes "
                    f"{previous.timestamp}",
                    timestamp=point.timestamp,
                    previous_timestamp=previous.timestamp,
                    index=index,
                )
            previous = point

    def validate_point(self, point: PricePoint, index: Optional[int] = None) -> None:
        """Validate a single price point."""
        if isinstance(point.timestamp, bool) or not isinstance(point.timestamp, int):
            raise MalformedDataError(
                f"Invalid timestamp type: {type(point.timestamp).__name__}",
                raw_data=repr(point.timestamp),
                expected_format="int epoch milliseconds",
                index=index,
            )

        if not _is_finite_number(point.price):
            raise MalformedDataError(
                f"Invalid price value: {point.price!r}",
                raw_data=repr(point.price),
                expected_format="finite number",
                index=index,
            )

        if self.require_positive_price and point.price <= 0:
            raise MalformedDataError(
                f"Non-positive price: {point.price}",
                raw_data=repr(point.price),
                index=index,
            )

        if not _is_finite_number(point.volume):
            raise MalformedDataError(
                f"Invalid volume value: {point.volume!r}",
                raw_data=repr(point.volume),
                expected_format="finite number",
                index=index,
            )

        if not self.allow_negative_volume and point.volume < 0:
            raise MalformedDataError(
                f"Negative volume: {point.volume}",
                raw_data=repr(point.volume),
                index=index,
            )


def validate_series(series: PriceSeries) -> None:
    """Validate a series with the default rules."""
    SeriesValidator().validate(series)
