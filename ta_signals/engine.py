"""
Main indicator engine coordinator.

Orchestrates the evaluation pipeline, coordinating configuration, series
validation, indicator calculation and signal synthesis.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Union

import structlog

from .config.defaults import DefaultConfig
from .config.loader import ConfigLoader
from .config.validation import ConfigValidator
from .data.models import PriceSeries
from .data.validators import SeriesValidator
from .errors import ConfigurationError, ValidationError
from .logging.config import get_signal_logger, log_signal_decision
from .metrics.calculator import IndicatorCalculator
from .models.indicators import IndicatorSet, VWAPPoint
from .signals.models import Signal
from .signals.synthesizer import synthesize_signals

logger = structlog.get_logger(__name__)
signal_logger = get_signal_logger(__name__)


@dataclass(frozen=True)
class EngineResult:
    """Indicators and signals computed for one series"""
    symbol: Optional[str]
    indicators: IndicatorSet
    signals: list[Signal]
    vwap: list[VWAPPoint] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready representation for API and UI consumers"""
        return {
            "symbol": self.symbol,
            "rsi": [{"date": p.label, "value": p.value} for p in self.indicators.rsi],
            "macd": [
                {"date": p.label, "macd": p.macd, "signal": p.signal, "histogram": p.histogram}
                for p in self.indicators.macd
            ],
            "bollinger": [
                {"date": p.label, "upper": p.upper, "middle": p.middle, "lower": p.lower, "price": p.price}
                for p in self.indicators.bollinger
            ],
            "vwap": [
                {"date": p.label, "price": p.price, "vwap": p.vwap, "deviation_pct": p.deviation_pct}
                for p in self.vwap
            ],
            "signals": [s.to_dict() for s in self.signals],
        }


class IndicatorEngine:
    """
    Main coordinator for indicator evaluation.

    Manages the evaluation pipeline:
    Config → Validation → Indicators → Signals
    """

    def __init__(self, config_dir: Optional[Union[str, Path]] = None) -> None:
        """Initialize the indicator engine."""
        self.logger = logger
        self.signal_logger = signal_logger

        self.config_loader = ConfigLoader.create(Path(config_dir) if config_dir else None)
        self.validator = SeriesValidator()

        self.logger.info("Indicator engine initialized", config_dir=str(self.config_loader.config_dir))

    def resolve_config(
        self,
        symbol: Optional[str] = None,
        overrides: Optional[dict[str, Any]] = None
    ) -> DefaultConfig:
        """
        Merge and validate configuration for a symbol.

        Raises:
            ConfigurationError: The merged configuration is invalid
        """
        merged = self.config_loader.merge_config(symbol, overrides)
        issues = ConfigValidator.validate_config(merged)
        if issues:
            self.logger.error(
                "Invalid indicator configuration",
                symbol=symbol,
                issues=[f"{issue.field}: {issue.message}" for issue in issues],
            )
            raise ConfigurationError(
                f"Invalid configuration for {symbol or 'defaults'}: "
                + "; ".join(f"{issue.field} {issue.message}" for issue in issues),
                issues=issues,
                context={"symbol": symbol},
            )
        return ConfigLoader.build_config(merged)

    def evaluate(
        self,
        series: PriceSeries,
        symbol: Optional[str] = None,
        overrides: Optional[dict[str, Any]] = None
    ) -> EngineResult:
        """
        Compute indicators and signals for a price series.

        Args:
            series: Price series in chronological order
            symbol: Optional symbol used to pick up per-symbol overrides
            overrides: Optional per-call configuration overrides

        Returns:
            EngineResult with indicator series and synthesized signals

        Raises:
            ValidationError: The series is malformed
            ConfigurationError: The merged configuration is invalid
            IndicatorCalculationError: An indicator failed unexpectedly
        """
        config = self.resolve_config(symbol, overrides)

        try:
            self.validator.validate(series)
        except ValidationError as e:
            self.logger.warning(
                "Rejected price series",
                symbol=symbol,
                error=str(e),
                index=e.index,
                error_type=type(e).__name__,
            )
            raise

        calculator = IndicatorCalculator(config)
        indicators = calculator.calculate(series)
        vwap = calculator.calculate_vwap(series)

        signals = synthesize_signals(
            indicators.rsi,
            indicators.macd,
            indicators.bollinger,
            thresholds=config.signals,
            vwap=vwap if config.vwap.enable else None,
            vwap_params=config.vwap,
        )

        for signal in signals:
            log_signal_decision(self.signal_logger, signal, symbol)

        self.logger.info(
            "Series evaluated",
            symbol=symbol,
            series_length=len(series),
            rsi_points=len(indicators.rsi),
            macd_points=len(indicators.macd),
            bollinger_points=len(indicators.bollinger),
            signal_count=len(signals),
        )

        return EngineResult(symbol=symbol, indicators=indicators, signals=signals, vwap=vwap)
