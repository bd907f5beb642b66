"""Unit tests for the indicator engine coordinator."""

from pathlib import Path
from unittest.mock import patch

import pytest

from ta_signals.engine import EngineResult, IndicatorEngine
from ta_signals.errors import (
    ConfigurationError,
    IndicatorCalculationError,
    MalformedDataError,
    TemporalDataError,
)
from ta_signals.data.models import PricePoint
from ta_signals.signals.models import SignalType


@pytest.fixture
def engine(tmp_path: Path) -> IndicatorEngine:
    (tmp_path / "symbols.yaml").write_text(
        "symbols:\n"
        "  FAST:\n"
        "    rsi:\n"
        "      period: 5\n"
        "  NOVWAP:\n"
        "    vwap:\n"
        "      enable: false\n"
        "  BROKEN:\n"
        "    macd:\n"
        "      fast_period: 30\n"
    )
    return IndicatorEngine(config_dir=tmp_path)


class TestEngineInitialization:
    """Test engine construction."""

    def test_default_config_dir(self):
        engine = IndicatorEngine()
        assert engine.config_loader.config_dir.name == "config"

    def test_string_config_dir(self, tmp_path: Path):
        engine = IndicatorEngine(config_dir=str(tmp_path))
        assert engine.config_loader.config_dir == tmp_path


class TestEvaluate:
    """Test evaluation of a price series."""

    def test_default_evaluation(self, engine, oscillating_series):
        result = engine.evaluate(oscillating_series)

        assert isinstance(result, EngineResult)
        assert result.symbol is None
        n = len(oscillating_series)
        assert len(result.indicators.rsi) == n - 14
        assert len(result.indicators.macd) == n - 34
        assert len(result.indicators.bollinger) == n - 19
        assert len(result.vwap) == n
        assert [s.indicator for s in result.signals] == ["RSI", "MACD", "Bollinger", "VWAP"]

    def test_symbol_overrides(self, engine, oscillating_series):
        result = engine.evaluate(oscillating_series, symbol="FAST")
        assert result.symbol == "FAST"
        assert len(result.indicators.rsi) == len(oscillating_series) - 5

    def test_call_overrides(self, engine, oscillating_series):
        result = engine.evaluate(oscillating_series, overrides={"bollinger": {"period": 10}})
        assert len(result.indicators.bollinger) == len(oscillating_series) - 9

    def test_vwap_disabled(self, engine, oscillating_series):
        result = engine.evaluate(oscillating_series, symbol="NOVWAP")
        assert result.vwap == []
        assert "VWAP" not in [s.indicator for s in result.signals]

    def test_short_series_is_not_an_error(self, engine, make_series):
        result = engine.evaluate(make_series([100.0, 101.0, 102.0]))
        assert result.indicators.is_empty()
        assert [s.indicator for s in result.signals] == ["VWAP"]

    def test_empty_series(self, engine):
        result = engine.evaluate([])
        assert result.signals == []
        assert result.vwap == []

    def test_repeat_evaluation_identical(self, engine, oscillating_series):
        assert engine.evaluate(oscillating_series) == engine.evaluate(oscillating_series)

    def test_to_dict(self, engine, oscillating_series):
        data = engine.evaluate(oscillating_series, symbol="FAST").to_dict()

        assert data["symbol"] == "FAST"
        assert set(data) == {"symbol", "rsi", "macd", "bollinger", "vwap", "signals"}
        assert set(data["rsi"][0]) == {"date", "value"}
        assert set(data["macd"][0]) == {"date", "macd", "signal", "histogram"}
        assert set(data["bollinger"][0]) == {"date", "upper", "middle", "lower", "price"}
        assert data["macd"][-1]["date"] == oscillating_series[-1].label
        assert data["signals"][0]["signal"] in {"buy", "sell", "neutral"}


class TestEngineErrors:
    """Test error propagation from the engine."""

    def test_malformed_series_rejected(self, engine, make_series):
        series = make_series([100.0, 101.0])
        series.append(PricePoint(timestamp=series[-1].timestamp + 1, label="bad", price=float("nan")))
        with pytest.raises(MalformedDataError):
            engine.evaluate(series)

    def test_unordered_series_rejected(self, engine, make_series):
        series = list(reversed(make_series([100.0, 101.0, 102.0])))
        with pytest.raises(TemporalDataError):
            engine.evaluate(series)

    def test_invalid_symbol_config(self, engine, oscillating_series):
        with pytest.raises(ConfigurationError) as exc_info:
            engine.evaluate(oscillating_series, symbol="BROKEN")
        assert exc_info.value.issues[0].field == "macd.fast_period"
        assert exc_info.value.context == {"symbol": "BROKEN"}

    def test_invalid_overrides(self, engine, oscillating_series):
        with pytest.raises(ConfigurationError):
            engine.evaluate(oscillating_series, overrides={"rsi": {"period": -3}})

    def test_non_mapping_section_rejected(self, engine, oscillating_series):
        with pytest.raises(ConfigurationError) as exc_info:
            engine.evaluate(oscillating_series, overrides={"rsi": None})
        assert [i.field for i in exc_info.value.issues] == ["rsi"]

    def test_misspelled_parameter_rejected(self, engine, oscillating_series):
        with pytest.raises(ConfigurationError) as exc_info:
            engine.evaluate(oscillating_series, overrides={"rsi": {"periods": 5}})
        assert [i.field for i in exc_info.value.issues] == ["rsi.periods"]

    def test_calculation_failure_wrapped(self, engine, oscillating_series):
        with patch("ta_signals.metrics.calculator.calculate_bollinger", side_effect=ValueError("boom")):
            with pytest.raises(IndicatorCalculationError) as exc_info:
                engine.evaluate(oscillating_series)
        assert exc_info.value.indicator_name == "bollinger"


class TestEngineSignals:
    """Test signals produced through the engine."""

    def test_descending_series_buys(self, engine, descending_series):
        result = engine.evaluate(descending_series)
        rsi_signal = result.signals[0]
        assert rsi_signal.indicator == "RSI"
        assert rsi_signal.signal is SignalType.BUY
