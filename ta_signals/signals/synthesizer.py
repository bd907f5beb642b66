"""
Signal synthesis from the latest indicator values.

Each indicator rule reads only the last one or two points of its series and
appends at most one signal. Rules are independent: there is no voting or
conflict resolution between indicators, and an empty indicator series is
simply skipped.
"""

from collections.abc import Sequence
from typing import Optional

from ..config.defaults import SignalThresholds, VWAPParams
from ..models.indicators import BollingerPoint, MACDPoint, RSIPoint, VWAPPoint
from .models import Signal, SignalType


def rsi_signal(rsi: Sequence[RSIPoint], thresholds: SignalThresholds) -> Optional[Signal]:
    """Oversold/overbought read of the latest RSI value."""
    if not rsi:
        return None

    value = rsi[-1].value

    if value < thresholds.rsi_oversold:
        return Signal(
            indicator="RSI",
            signal=SignalType.BUY,
            strength=min(thresholds.max_strength,
                         (thresholds.rsi_oversold - value) * thresholds.rsi_strength_multiplier),
            reason=f"RSI at {value:.1f} - Oversold conditions",
        )

    if value > thresholds.rsi_overbought:
        return Signal(
            indicator="RSI",
            signal=SignalType.SELL,
            strength=min(thresholds.max_strength,
                         (value - thresholds.rsi_overbought) * thresholds.rsi_strength_multiplier),
            reason=f"RSI at {value:.1f} - Overbought conditions",
        )

    return Signal(
        indicator="RSI",
        signal=SignalType.NEUTRAL,
        strength=0.0,
        reason=f"RSI at {value:.1f} - Neutral zone",
    )


def macd_signal(macd: Sequence[MACDPoint], thresholds: SignalThresholds) -> Optional[Signal]:
    """Histogram crossover, or momentum direction when nothing crossed."""
    if len(macd) < 2:
        return None

    latest = macd[-1]
    previous = macd[-2]
    histogram = latest.histogram

    if histogram > 0 and previous.histogram <= 0:
        return Signal(
            indicator="MACD",
            signal=SignalType.BUY,
            strength=min(thresholds.max_strength, abs(histogram) * thresholds.macd_crossover_multiplier),
            reason="MACD crossover - Bullish signal",
        )

    if histogram < 0 and previous.histogram >= 0:
        return Signal(
            indicator="MACD",
            signal=SignalType.SELL,
            strength=min(thresholds.max_strength, abs(histogram) * thresholds.macd_crossover_multiplier),
            reason="MACD crossover - Bearish signal",
        )

    # Momentum branch never returns neutral: a histogram of exactly 0 reads as
    # bearish. Deliberate, consumers rely on MACD always taking a side.
    bullish = histogram > 0
    return Signal(
        indicator="MACD",
        signal=SignalType.BUY if bullish else SignalType.SELL,
        strength=min(thresholds.macd_momentum_cap, abs(histogram) * thresholds.macd_momentum_multiplier),
        reason=f"MACD {'bullish' if bullish else 'bearish'} momentum",
    )


def bollinger_signal(bollinger: Sequence[BollingerPoint], thresholds: SignalThresholds) -> Optional[Signal]:
    """Read of where the latest price sits inside the band."""
    if not bollinger:
        return None

    position = bollinger[-1].position()

    if position is None:
        return Signal(
            indicator="Bollinger",
            signal=SignalType.NEUTRAL,
            strength=0.0,
            reason="Bollinger bands have zero width - no volatility",
        )

    if position < thresholds.bollinger_lower_zone:
        return Signal(
            indicator="Bollinger",
            signal=SignalType.BUY,
            strength=min(thresholds.max_strength,
                         (thresholds.bollinger_lower_zone - position) * thresholds.bollinger_strength_multiplier),
            reason="Price near lower band - Potential reversal",
        )

    if position > thresholds.bollinger_upper_zone:
        return Signal(
            indicator="Bollinger",
            signal=SignalType.SELL,
            strength=min(thresholds.max_strength,
                         (position - thresholds.bollinger_upper_zone) * thresholds.bollinger_strength_multiplier),
            reason="Price near upper band - Potential reversal",
        )

    return Signal(
        indicator="Bollinger",
        signal=SignalType.NEUTRAL,
        strength=0.0,
        reason="Price within normal band range",
    )


def vwap_signal(vwap: Sequence[VWAPPoint], params: VWAPParams,
                max_strength: float = 100.0) -> Optional[Signal]:
    """Stretch of the latest price away from VWAP."""
    if not vwap:
        return None

    deviation = vwap[-1].deviation_pct
    threshold = params.deviation_threshold_pct

    if deviation > threshold:
        return Signal(
            indicator="VWAP",
            signal=SignalType.SELL,
            strength=min(max_strength, (deviation - threshold) * params.strength_multiplier),
            reason=f"Price {deviation:.2f}% above VWAP - Overbought",
        )

    if deviation < -threshold:
        return Signal(
            indicator="VWAP",
            signal=SignalType.BUY,
            strength=min(max_strength, (-deviation - threshold) * params.strength_multiplier),
            reason=f"Price {-deviation:.2f}% below VWAP - Oversold",
        )

    return Signal(
        indicator="VWAP",
        signal=SignalType.NEUTRAL,
        strength=0.0,
        reason="Price at VWAP",
    )


def synthesize_signals(
    rsi: Sequence[RSIPoint],
    macd: Sequence[MACDPoint],
    bollinger: Sequence[BollingerPoint],
    thresholds: Optional[SignalThresholds] = None,
    vwap: Optional[Sequence[VWAPPoint]] = None,
    vwap_params: Optional[VWAPParams] = None,
) -> list[Signal]:
    """
    Map the latest indicator values into trading signals

    Args:
        rsi: RSI series
        macd: MACD series (needs at least two points)
        bollinger: Bollinger series
        thresholds: Signal thresholds, defaults when omitted
        vwap: Optional VWAP series
        vwap_params: VWAP signal parameters, defaults when omitted

    Returns:
        Signals in RSI, MACD, Bollinger, VWAP order, one per indicator that
        had enough data
    """
    thresholds = thresholds or SignalThresholds()

    candidates = [
        rsi_signal(rsi, thresholds),
        macd_signal(macd, thresholds),
        bollinger_signal(bollinger, thresholds),
    ]
    if vwap is not None:
        candidates.append(vwap_signal(vwap, vwap_params or VWAPParams(), thresholds.max_strength))

    return [signal for signal in candidates if signal is not None]
