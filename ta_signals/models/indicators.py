"""Data models for indicator outputs"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class RSIPoint:
    """RSI value at one price point"""
    label: str
    value: float


@dataclass(frozen=True)
class MACDPoint:
    """MACD line, signal line and histogram at one price point"""
    label: str
    macd: float
    signal: float
    histogram: float


@dataclass(frozen=True)
class BollingerPoint:
    """Bollinger envelope plus the raw price it was computed at"""
    label: str
    upper: float
    middle: float
    lower: float
    price: float

    @property
    def width(self) -> float:
        return self.upper - self.lower

    def position(self) -> Optional[float]:
        """Where price sits in the band (0 = lower, 1 = upper); None for a zero-width band"""
        if self.width == 0:
            return None
        return (self.price - self.lower) / self.width


@dataclass(frozen=True)
class VWAPPoint:
    """Cumulative VWAP and the price's percentage deviation from it"""
    label: str
    price: float
    vwap: float
    deviation_pct: float


@dataclass(frozen=True)
class IndicatorSet:
    """RSI, MACD and Bollinger series computed from the same price series"""
    rsi: list[RSIPoint] = field(default_factory=list)
    macd: list[MACDPoint] = field(default_factory=list)
    bollinger: list[BollingerPoint] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not (self.rsi or self.macd or self.bollinger)
