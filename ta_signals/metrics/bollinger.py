"""Bollinger Band calculation"""

import math

from ..data.models import PriceSeries
from ..models.indicators import BollingerPoint


def calculate_bollinger(
    series: PriceSeries,
    period: int = 20,
    std_dev_multiplier: float = 2,
) -> list[BollingerPoint]:
    """
    Calculate Bollinger Bands

    middle = SMA of the trailing ``period`` prices,
    upper/lower = middle +/- multiplier * population standard deviation.

    Args:
        series: Price series in chronological order
        period: Window length (default 20)
        std_dev_multiplier: Band width in standard deviations (default 2)

    Returns:
        One BollingerPoint per window ending at ``series[period - 1]`` and
        later, or an empty list when ``len(series) < period``
    """
    if period <= 0 or len(series) < period:
        return []

    bands = []
    for i in range(period - 1, len(series)):
        window = [point.price for point in series[i - period + 1:i + 1]]

        if min(window) == max(window):
            # Flat window: summing would leave rounding noise in the mean
            middle = window[0]
            offset = 0.0
        else:
            middle = sum(window) / period
            # Population variance: divide by period, not period - 1
            variance = sum((price - middle) ** 2 for price in window) / period
            offset = std_dev_multiplier * math.sqrt(variance)

        bands.append(BollingerPoint(
            label=series[i].label,
            upper=middle + offset,
            middle=middle,
            lower=middle - offset,
            price=series[i].price,
        ))

    return bands
