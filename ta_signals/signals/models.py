"""Signal data models"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class SignalType(str, Enum):
    """Direction of a trading signal"""
    BUY = "buy"
    SELL = "sell"
    NEUTRAL = "neutral"


@dataclass(frozen=True)
class Signal:
    """One indicator's read of the latest market state"""
    indicator: str          # "RSI", "MACD", "Bollinger" or "VWAP"
    signal: SignalType
    strength: float         # 0-100
    reason: str

    @property
    def is_actionable(self) -> bool:
        return self.signal is not SignalType.NEUTRAL

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready representation"""
        return {
            "indicator": self.indicator,
            "signal": self.signal.value,
            "strength": self.strength,
            "reason": self.reason,
        }
