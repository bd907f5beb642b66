"""Indicator calculator coordinating all indicator computations"""

from typing import Optional

import structlog

from ..config.defaults import DefaultConfig, get_default_config
from ..data.models import PriceSeries
from ..errors import IndicatorCalculationError
from ..models.indicators import IndicatorSet, VWAPPoint
from .bollinger import calculate_bollinger
from .macd import calculate_macd
from .rsi import calculate_rsi
from .vwap import calculate_vwap

logger = structlog.get_logger(__name__)


def calculate_all_indicators(series: PriceSeries) -> IndicatorSet:
    """Compute RSI, MACD and Bollinger Bands with default periods."""
    return IndicatorSet(
        rsi=calculate_rsi(series),
        macd=calculate_macd(series),
        bollinger=calculate_bollinger(series),
    )


class IndicatorCalculator:
    """
    Computes every configured indicator over a price series.

    Holds configuration only; each call is independent of the previous one.
    """

    def __init__(self, config: Optional[DefaultConfig] = None):
        self.config = config or get_default_config()

    def calculate(self, series: PriceSeries) -> IndicatorSet:
        """
        Calculate RSI, MACD and Bollinger Bands using configured periods

        Args:
            series: Validated price series

        Returns:
            IndicatorSet; indicators without enough data come back empty

        Raises:
            IndicatorCalculationError: An indicator failed unexpectedly
        """
        self._log_warmup_shortfalls(len(series))

        rsi_params = self.config.rsi
        macd_params = self.config.macd
        bollinger_params = self.config.bollinger

        rsi = self._run("rsi", len(series), calculate_rsi, series, rsi_params.period)
        macd = self._run(
            "macd", len(series), calculate_macd, series,
            macd_params.fast_period, macd_params.slow_period, macd_params.signal_period,
        )
        bollinger = self._run(
            "bollinger", len(series), calculate_bollinger, series,
            bollinger_params.period, bollinger_params.std_dev_multiplier,
        )

        return IndicatorSet(rsi=rsi, macd=macd, bollinger=bollinger)

    def calculate_vwap(self, series: PriceSeries) -> list[VWAPPoint]:
        """Calculate VWAP when enabled, otherwise return an empty list"""
        if not self.config.vwap.enable:
            return []
        return self._run("vwap", len(series), calculate_vwap, series)

    def get_warmup_periods(self) -> dict[str, int]:
        """Minimum number of points each indicator needs for its first value"""
        return {
            "rsi": self.config.rsi.period + 1,
            "macd": self.config.macd.slow_period + self.config.macd.signal_period,
            "bollinger": self.config.bollinger.period,
        }

    def is_warmed_up(self, series: PriceSeries) -> bool:
        """Check if the series is long enough for every indicator"""
        return len(series) >= max(self.get_warmup_periods().values())

    def _log_warmup_shortfalls(self, length: int) -> None:
        for name, required in self.get_warmup_periods().items():
            if length < required:
                logger.debug(
                    "Insufficient data for indicator",
                    indicator=name,
                    required_count=required,
                    available_count=length,
                )

    @staticmethod
    def _run(name, length, func, *args):
        try:
            return func(*args)
        except Exception as e:
            raise IndicatorCalculationError(
                f"{name.upper()} calculation failed: {str(e)}",
                indicator_name=name,
                calculation_input={"series_length": length},
            ) from e
