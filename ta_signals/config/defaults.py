"""Default configuration parameters for indicator calculation and signal synthesis."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RSIParams:
    """RSI calculation parameters."""
    period: int = 14


@dataclass(frozen=True)
class MACDParams:
    """MACD calculation parameters."""
    fast_period: int = 12
    slow_period: int = 26
    signal_period: int = 9


@dataclass(frozen=True)
class BollingerParams:
    """Bollinger Band calculation parameters."""
    period: int = 20
    std_dev_multiplier: float = 2.0


@dataclass(frozen=True)
class VWAPParams:
    """VWAP calculation and signal parameters."""
    enable: bool = True
    deviation_threshold_pct: float = 1.5     # Distance from VWAP that counts as stretched
    strength_multiplier: float = 20.0        # Strength per % beyond the threshold


@dataclass(frozen=True)
class SignalThresholds:
    """Signal synthesis thresholds."""
    # RSI zones
    rsi_oversold: float = 30.0
    rsi_overbought: float = 70.0
    rsi_strength_multiplier: float = 3.0

    # MACD strength scaling
    macd_crossover_multiplier: float = 100.0
    macd_momentum_multiplier: float = 50.0
    macd_momentum_cap: float = 50.0

    # Bollinger position within band (0 = lower, 1 = upper)
    bollinger_lower_zone: float = 0.1
    bollinger_upper_zone: float = 0.9
    bollinger_strength_multiplier: float = 500.0

    max_strength: float = 100.0


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    rsi: RSIParams
    macd: MACDParams
    bollinger: BollingerParams
    vwap: VWAPParams
    signals: SignalThresholds


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        rsi=RSIParams(),
        macd=MACDParams(),
        bollinger=BollingerParams(),
        vwap=VWAPParams(),
        signals=SignalThresholds(),
    )
