"""Unit tests for configuration management."""

import pytest
from pathlib import Path

from ta_signals.config.defaults import DefaultConfig, get_default_config
from ta_signals.config.loader import ConfigLoader
from ta_signals.config.validation import ConfigValidator


@pytest.fixture
def symbols_dir(tmp_path: Path) -> Path:
    (tmp_path / "symbols.yaml").write_text(
        "symbols:\n"
        "  ETH:\n"
        "    rsi:\n"
        "      period: 9\n"
        "    bollinger:\n"
        "      std_dev_multiplier: 3.0\n"
        "  EMPTY:\n"
    )
    return tmp_path


class TestDefaultConfig:
    """Test suite for default configuration."""

    def test_default_config_creation(self) -> None:
        config = get_default_config()
        assert config.rsi.period == 14
        assert (config.macd.fast_period, config.macd.slow_period, config.macd.signal_period) == (12, 26, 9)
        assert config.bollinger.period == 20
        assert config.bollinger.std_dev_multiplier == 2.0
        assert config.signals.rsi_oversold == 30.0
        assert config.signals.rsi_overbought == 70.0
        assert config.vwap.deviation_threshold_pct == 1.5

    def test_defaults_are_valid(self) -> None:
        loader = ConfigLoader.create()
        assert ConfigValidator.validate_config(loader.merge_config()) == []


class TestConfigLoader:
    """Test suite for configuration loader."""

    def test_config_loader_creation(self) -> None:
        loader = ConfigLoader.create()
        assert isinstance(loader.config_dir, Path)
        assert loader.config_dir.name == "config"

    def test_bundled_symbol_overrides_are_valid(self) -> None:
        loader = ConfigLoader.create()
        config = loader.merge_config("DOGE")
        assert config["rsi"]["period"] == 10
        assert ConfigValidator.validate_config(config) == []

    def test_merge_config_defaults_only(self, symbols_dir: Path) -> None:
        loader = ConfigLoader.create(symbols_dir)
        config = loader.merge_config("UNKNOWN-SYMBOL")
        assert config["rsi"]["period"] == 14
        assert config["macd"]["slow_period"] == 26

    def test_symbol_overrides(self, symbols_dir: Path) -> None:
        loader = ConfigLoader.create(symbols_dir)
        config = loader.merge_config("ETH")
        assert config["rsi"]["period"] == 9
        assert config["bollinger"]["std_dev_multiplier"] == 3.0
        # Untouched keys keep their defaults
        assert config["bollinger"]["period"] == 20

    def test_call_overrides_win(self, symbols_dir: Path) -> None:
        loader = ConfigLoader.create(symbols_dir)
        config = loader.merge_config("ETH", {"rsi": {"period": 21}})
        assert config["rsi"]["period"] == 21
        assert config["bollinger"]["std_dev_multiplier"] == 3.0

    def test_symbol_without_overrides(self, symbols_dir: Path) -> None:
        loader = ConfigLoader.create(symbols_dir)
        assert loader.load_symbol_config("EMPTY") == {}

    def test_missing_file(self, tmp_path: Path) -> None:
        loader = ConfigLoader.create(tmp_path)
        assert loader.load_symbol_config("ETH") == {}

    def test_build_config(self, symbols_dir: Path) -> None:
        loader = ConfigLoader.create(symbols_dir)
        config = ConfigLoader.build_config(loader.merge_config("ETH"))
        assert isinstance(config, DefaultConfig)
        assert config.rsi.period == 9
        assert config.bollinger.std_dev_multiplier == 3.0
        assert config.macd == get_default_config().macd

    def test_build_config_ignores_unknown_keys(self) -> None:
        config = ConfigLoader.build_config({"rsi": {"period": 5, "colour": "red"}, "extra": {}})
        assert config.rsi.period == 5


class TestConfigValidator:
    """Test suite for configuration validation."""

    def test_invalid_rsi_period(self) -> None:
        issues = ConfigValidator.validate_config({"rsi": {"period": 0}})
        assert [i.field for i in issues] == ["rsi.period"]

    def test_bool_is_not_a_period(self) -> None:
        issues = ConfigValidator.validate_rsi_params({"period": True})
        assert len(issues) == 1

    def test_fast_must_be_shorter_than_slow(self) -> None:
        issues = ConfigValidator.validate_macd_params(
            {"fast_period": 26, "slow_period": 12, "signal_period": 9}
        )
        assert [i.field for i in issues] == ["macd.fast_period"]

    def test_non_integer_macd_period(self) -> None:
        issues = ConfigValidator.validate_macd_params({"signal_period": 2.5})
        assert issues[0].field == "macd.signal_period"

    def test_bollinger_multiplier(self) -> None:
        issues = ConfigValidator.validate_bollinger_params({"std_dev_multiplier": -1})
        assert issues[0].field == "bollinger.std_dev_multiplier"

    def test_rsi_zone_ordering(self) -> None:
        issues = ConfigValidator.validate_signal_thresholds({"rsi_oversold": 70.0, "rsi_overbought": 30.0})
        assert [i.field for i in issues] == ["signals.rsi_oversold"]

    def test_bollinger_zone_ordering(self) -> None:
        issues = ConfigValidator.validate_signal_thresholds(
            {"bollinger_lower_zone": 0.9, "bollinger_upper_zone": 0.1}
        )
        assert [i.field for i in issues] == ["signals.bollinger_lower_zone"]

    def test_vwap_enable_must_be_bool(self) -> None:
        issues = ConfigValidator.validate_vwap_params({"enable": "yes"})
        assert issues[0].field == "vwap.enable"
        assert issues[0].value == "yes"

    def test_section_must_be_mapping(self) -> None:
        issues = ConfigValidator.validate_config({"rsi": None, "macd": [12, 26, 9]})
        assert [(i.field, i.message) for i in issues] == [
            ("rsi", "Must be a mapping"),
            ("macd", "Must be a mapping"),
        ]

    def test_empty_yaml_section_is_reported(self, tmp_path: Path) -> None:
        (tmp_path / "symbols.yaml").write_text("symbols:\n  ETH:\n    rsi:\n")
        loader = ConfigLoader.create(tmp_path)
        issues = ConfigValidator.validate_config(loader.merge_config("ETH"))
        assert [(i.field, i.message) for i in issues] == [("rsi", "Must be a mapping")]

    def test_unknown_parameter_reported(self) -> None:
        issues = ConfigValidator.validate_config({"rsi": {"periods": 5}})
        assert [(i.field, i.message, i.value) for i in issues] == [
            ("rsi.periods", "Unknown parameter", 5)
        ]

    def test_unknown_threshold_reported_once(self) -> None:
        issues = ConfigValidator.validate_config({"signals": {"rsi_overbougth": 80.0}})
        assert [i.field for i in issues] == ["signals.rsi_overbougth"]

    def test_unknown_section_reported(self) -> None:
        issues = ConfigValidator.validate_config({"stochastic": {"period": 14}})
        assert [(i.field, i.message) for i in issues] == [("stochastic", "Unknown configuration section")]
