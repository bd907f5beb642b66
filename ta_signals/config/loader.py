"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from .defaults import (
    BollingerParams,
    DefaultConfig,
    MACDParams,
    RSIParams,
    SignalThresholds,
    VWAPParams,
    get_default_config,
)

_SECTIONS = {
    "rsi": RSIParams,
    "macd": MACDParams,
    "bollinger": BollingerParams,
    "vwap": VWAPParams,
    "signals": SignalThresholds,
}


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_symbol_config(self, symbol: str) -> dict[str, Any]:
        """Load symbol-specific configuration overrides."""
        symbols_file = self.config_dir / "symbols.yaml"

        if not symbols_file.exists():
            return {}

        with open(symbols_file) as f:
            symbols_config = yaml.safe_load(f) or {}

        return (symbols_config.get("symbols") or {}).get(symbol, {}) or {}  # type: ignore[no-any-return]

    def merge_config(
        self,
        symbol: Optional[str] = None,
        overrides: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Per-call overrides (highest priority)
        2. Symbol-specific overrides
        3. Global defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)

        if symbol:
            config = self._deep_merge(config, self.load_symbol_config(symbol))

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    @staticmethod
    def build_config(config: dict[str, Any]) -> DefaultConfig:
        """Turn a merged configuration dict back into typed parameters."""
        sections = {}
        for name, params_cls in _SECTIONS.items():
            known = params_cls.__dataclass_fields__
            values = {k: v for k, v in (config.get(name) or {}).items() if k in known}
            sections[name] = params_cls(**values)
        return DefaultConfig(**sections)

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name in obj.__dataclass_fields__:
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
