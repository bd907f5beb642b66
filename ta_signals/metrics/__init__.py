"""Indicator calculation engine for technical analysis"""

from .bollinger import calculate_bollinger
from .calculator import IndicatorCalculator, calculate_all_indicators
from .ema import calculate_ema
from .macd import calculate_macd
from .rsi import calculate_rsi
from .vwap import calculate_vwap

__all__ = [
    "IndicatorCalculator",
    "calculate_all_indicators",
    "calculate_bollinger",
    "calculate_ema",
    "calculate_macd",
    "calculate_rsi",
    "calculate_vwap",
]
