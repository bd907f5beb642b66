"""
TA Signals - Technical Indicator and Signal Engine

Computes RSI, MACD, Bollinger Bands and VWAP from a time-ordered price
series and maps the latest indicator values into discrete buy/sell/neutral
trading signals.
"""

__version__ = "0.1.0"
__author__ = "TA Signals Team"
