#!/usr/bin/env python3
"""
Basic Usage Example - TA Signals Indicator Engine

This script demonstrates the basic usage of the indicator engine with a
simulated price history. It shows how to:
- Normalize a market-chart payload into a price series
- Evaluate indicators and signals for a symbol
- Read the JSON-ready result

Run: python examples/basic_usage.py
"""

import json
import math
from typing import Any, Dict

from ta_signals.data.normalizer import normalize_market_chart
from ta_signals.engine import IndicatorEngine
from ta_signals.logging import configure_logging

DAY_MS = 24 * 60 * 60 * 1000


def create_market_chart(start_ms: int, days: int, base_price: float) -> Dict[str, Any]:
    """Build a deterministic market-chart payload with a slow sine trend."""
    prices = []
    volumes = []
    price = base_price
    for i in range(days):
        price *= 1 + math.sin(i / 7) * 0.02
        ts = start_ms + i * DAY_MS
        prices.append([ts, round(price, 2)])
        volumes.append([ts, base_price * 500 * (1 + (i % 5) / 10)])
    return {"prices": prices, "total_volumes": volumes}


def main() -> None:
    configure_logging(level="INFO")

    payload = create_market_chart(start_ms=1704067200000, days=60, base_price=90000.0)
    series = normalize_market_chart(payload)

    engine = IndicatorEngine()
    result = engine.evaluate(series, symbol="BTC")

    print("\n📊 Signals")
    for signal in result.signals:
        print(f"  {signal.indicator:<10} {signal.signal.value.upper():<8} "
              f"{signal.strength:6.1f}  {signal.reason}")

    latest = result.to_dict()
    print("\n🧾 Latest values")
    print(json.dumps({
        "rsi": latest["rsi"][-1],
        "macd": latest["macd"][-1],
        "bollinger": latest["bollinger"][-1],
    }, indent=2))


if __name__ == "__main__":
    main()
