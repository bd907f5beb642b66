"""EMA (Exponential Moving Average) calculation"""

from collections.abc import Sequence


def calculate_ema(values: Sequence[float], period: int) -> list[float]:
    """
    Calculate an Exponential Moving Average series

    The first value is the SMA of the first ``period`` values. Each later
    value follows ``ema = (value - prev) * k + prev`` with ``k = 2 / (period + 1)``.

    Args:
        values: Input values in chronological order
        period: EMA period

    Returns:
        List of ``len(values) - period + 1`` EMA values, empty if insufficient data
    """
    if period <= 0 or len(values) < period:
        return []

    multiplier = 2 / (period + 1)

    ema = [sum(values[:period]) / period]
    for i in range(period, len(values)):
        ema.append((values[i] - ema[-1]) * multiplier + ema[-1])

    return ema
