"""VWAP (Volume Weighted Average Price) calculation"""

from ..data.models import PriceSeries
from ..models.indicators import VWAPPoint


def calculate_vwap(series: PriceSeries) -> list[VWAPPoint]:
    """
    Calculate cumulative VWAP from the start of the series

    VWAP_i = sum(price * volume) / sum(volume) over points 0..i
    deviation_pct = 100 * (price - VWAP) / VWAP

    While cumulative volume is still zero the VWAP is taken to be the price
    itself, giving a deviation of 0.

    Args:
        series: Price series in chronological order

    Returns:
        One VWAPPoint per input point
    """
    points = []
    cumulative_pv = 0.0
    cumulative_volume = 0.0

    for point in series:
        cumulative_pv += point.price * point.volume
        cumulative_volume += point.volume

        if cumulative_volume > 0:
            vwap = cumulative_pv / cumulative_volume
        else:
            vwap = point.price

        deviation = 100.0 * (point.price - vwap) / vwap if vwap else 0.0
        points.append(VWAPPoint(
            label=point.label,
            price=point.price,
            vwap=vwap,
            deviation_pct=deviation,
        ))

    return points
