"""
Canonical data models for price series.

A price series is an ordered, immutable sequence of PricePoint values. Every
calculator reads it and none of them mutate it.
"""

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class PricePoint:
    """One price observation."""
    timestamp: int     # Epoch milliseconds, non-decreasing along the series
    label: str         # Display label, not used in computation
    price: float       # Positive price
    volume: float = 0.0


# Ordered by timestamp ascending. Duplicate timestamps count as separate samples.
PriceSeries = Sequence[PricePoint]


def prices_of(series: PriceSeries) -> list[float]:
    """Extract the raw price column."""
    return [point.price for point in series]
