"""RSI (Relative Strength Index) calculation"""

from ..data.models import PriceSeries
from ..models.indicators import RSIPoint

# Stand-in for RS when average loss is zero. This yields RSI = 100 - 100/101
# (about 99.01) rather than exactly 100. Kept on purpose: existing consumers
# expect this value.
ZERO_LOSS_RS = 100.0


def _rsi_from_averages(avg_gain: float, avg_loss: float) -> float:
    rs = ZERO_LOSS_RS if avg_loss == 0 else avg_gain / avg_loss
    return 100 - (100 / (1 + rs))


def calculate_rsi(series: PriceSeries, period: int = 14) -> list[RSIPoint]:
    """
    Calculate Wilder-smoothed Relative Strength Index

    1. delta = price[i] - price[i-1], split into gains and |losses|
    2. Seed average gain/loss with the mean of the first ``period`` deltas
    3. Then avg = (prev_avg * (period - 1) + current) / period

    Args:
        series: Price series in chronological order
        period: RSI period (default 14)

    Returns:
        One RSIPoint per point from ``series[period]`` onward, or an empty
        list when ``len(series) < period + 1``
    """
    if period <= 0 or len(series) < period + 1:
        return []

    gains = []
    losses = []
    for i in range(1, len(series)):
        change = series[i].price - series[i - 1].price
        gains.append(change if change > 0 else 0.0)
        losses.append(-change if change < 0 else 0.0)

    avg_gain = sum(gains[:period]) / period
    avg_loss = sum(losses[:period]) / period

    rsi = [RSIPoint(label=series[period].label, value=_rsi_from_averages(avg_gain, avg_loss))]

    for i in range(period, len(gains)):
        avg_gain = (avg_gain * (period - 1) + gains[i]) / period
        avg_loss = (avg_loss * (period - 1) + losses[i]) / period
        # gains[i] is the move into series[i + 1]
        rsi.append(RSIPoint(label=series[i + 1].label, value=_rsi_from_averages(avg_gain, avg_loss)))

    return rsi
