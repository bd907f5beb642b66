"""Pytest configuration and shared fixtures."""

import pytest
from typing import Callable, List, Optional, Sequence

from ta_signals.data.models import PricePoint
from ta_signals.utils.time import format_label

DAY_MS = 24 * 60 * 60 * 1000
START_MS = 1704067200000  # 2024-01-01 00:00:00 UTC


def build_series(
    prices: Sequence[float],
    volumes: Optional[Sequence[float]] = None,
    start: int = START_MS,
    step: int = DAY_MS,
) -> List[PricePoint]:
    """Daily price series starting 2024-01-01."""
    if volumes is None:
        volumes = [1000.0] * len(prices)
    return [
        PricePoint(
            timestamp=start + i * step,
            label=format_label(start + i * step),
            price=float(price),
            volume=float(volume),
        )
        for i, (price, volume) in enumerate(zip(prices, volumes))
    ]


@pytest.fixture
def make_series() -> Callable[..., List[PricePoint]]:
    """Factory for daily price series."""
    return build_series


@pytest.fixture
def descending_series() -> List[PricePoint]:
    """40 points ramping linearly from 100 down to 50."""
    return build_series([100 - i * 50 / 39 for i in range(40)])


@pytest.fixture
def flat_series() -> List[PricePoint]:
    """40 points all priced at 100."""
    return build_series([100.0] * 40)


@pytest.fixture
def oscillating_series() -> List[PricePoint]:
    """60 points with a repeating up/down pattern around 100."""
    pattern = [0, 1.5, -0.5, 2.0, -1.0, 0.5, -2.5, 1.0]
    prices = []
    price = 100.0
    for i in range(60):
        price += pattern[i % len(pattern)]
        prices.append(price)
    return build_series(prices)


@pytest.fixture
def market_chart_payload() -> dict:
    """Market-chart payload as returned by the price history API."""
    prices = [[START_MS + i * DAY_MS, 100.0 + (i % 7) - (i % 3) * 0.5] for i in range(45)]
    volumes = [[START_MS + i * DAY_MS, 5000.0 + i * 10] for i in range(45)]
    return {"prices": prices, "total_volumes": volumes}
