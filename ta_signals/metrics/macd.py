"""MACD (Moving Average Convergence Divergence) calculation"""

from ..data.models import PriceSeries, prices_of
from ..models.indicators import MACDPoint
from .ema import calculate_ema


def calculate_macd(
    series: PriceSeries,
    fast_period: int = 12,
    slow_period: int = 26,
    signal_period: int = 9,
) -> list[MACDPoint]:
    """
    Calculate MACD line, signal line and histogram

    MACD line = EMA(fast) - EMA(slow), with the longer fast EMA shifted by
    ``slow_period - fast_period`` so both sides refer to the same price.
    Signal line = EMA(MACD line, signal_period). Histogram = MACD - signal.

    Args:
        series: Price series in chronological order
        fast_period: Fast EMA period (default 12)
        slow_period: Slow EMA period (default 26)
        signal_period: Signal line EMA period (default 9)

    Returns:
        ``len(series) - (slow_period + signal_period - 1)`` points, the first
        aligned to ``series[slow_period + signal_period - 1]``; empty if
        ``len(series) < slow_period + signal_period`` or the periods are
        unusable (non-positive, or fast_period > slow_period)
    """
    if min(fast_period, slow_period, signal_period) <= 0 or fast_period > slow_period:
        return []

    if len(series) < slow_period + signal_period:
        return []

    prices = prices_of(series)
    fast_ema = calculate_ema(prices, fast_period)
    slow_ema = calculate_ema(prices, slow_period)

    offset = slow_period - fast_period
    macd_line = [fast_ema[i + offset] - slow_ema[i] for i in range(len(slow_ema))]

    signal_line = calculate_ema(macd_line, signal_period)

    # signal_line[i] pairs with macd_line[i + signal_period - 1] and covers
    # prices up to series[slow_period + signal_period - 2 + i]. The first
    # pair is the signal seed and is not emitted, so output starts at
    # series[slow_period + signal_period - 1].
    first = slow_period + signal_period - 2
    points = []
    for i in range(1, len(signal_line)):
        signal = signal_line[i]
        macd = macd_line[i + signal_period - 1]
        points.append(MACDPoint(
            label=series[first + i].label,
            macd=macd,
            signal=signal,
            histogram=macd - signal,
        ))

    return points
