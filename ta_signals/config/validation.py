"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

from .defaults import BollingerParams, MACDParams, RSIParams, SignalThresholds, VWAPParams


@dataclass(frozen=True)
class ConfigIssue:
    """Represents a configuration validation problem."""
    field: str
    message: str
    value: Any


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_rsi_params(params: dict[str, Any]) -> list[ConfigIssue]:
        """Validate RSI parameters."""
        errors = []

        if "period" in params and not _is_positive_int(params["period"]):
            errors.append(ConfigIssue(
                field="rsi.period",
                message="Must be a positive integer",
                value=params["period"]
            ))

        return errors

    @staticmethod
    def validate_macd_params(params: dict[str, Any]) -> list[ConfigIssue]:
        """Validate MACD parameters."""
        errors = []

        for name in ("fast_period", "slow_period", "signal_period"):
            if name in params and not _is_positive_int(params[name]):
                errors.append(ConfigIssue(
                    field=f"macd.{name}",
                    message="Must be a positive integer",
                    value=params[name]
                ))

        # Fast line must warm up before the slow one
        fast = params.get("fast_period")
        slow = params.get("slow_period")
        if _is_positive_int(fast) and _is_positive_int(slow) and fast >= slow:
            errors.append(ConfigIssue(
                field="macd.fast_period",
                message="Must be less than slow_period",
                value=fast
            ))

        return errors

    @staticmethod
    def validate_bollinger_params(params: dict[str, Any]) -> list[ConfigIssue]:
        """Validate Bollinger Band parameters."""
        errors = []

        if "period" in params and not _is_positive_int(params["period"]):
            errors.append(ConfigIssue(
                field="bollinger.period",
                message="Must be a positive integer",
                value=params["period"]
            ))

        if "std_dev_multiplier" in params:
            value = params["std_dev_multiplier"]
            if not _is_number(value) or value <= 0:
                errors.append(ConfigIssue(
                    field="bollinger.std_dev_multiplier",
                    message="Must be a positive number",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_vwap_params(params: dict[str, Any]) -> list[ConfigIssue]:
        """Validate VWAP parameters."""
        errors = []

        if "enable" in params and not isinstance(params["enable"], bool):
            errors.append(ConfigIssue(
                field="vwap.enable",
                message="Must be a boolean",
                value=params["enable"]
            ))

        for name in ("deviation_threshold_pct", "strength_multiplier"):
            if name in params:
                value = params[name]
                if not _is_number(value) or value < 0:
                    errors.append(ConfigIssue(
                        field=f"vwap.{name}",
                        message="Must be a non-negative number",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_signal_thresholds(params: dict[str, Any]) -> list[ConfigIssue]:
        """Validate signal synthesis thresholds."""
        errors = []

        for name, value in params.items():
            if not _is_number(value) or value < 0:
                errors.append(ConfigIssue(
                    field=f"signals.{name}",
                    message="Must be a non-negative number",
                    value=value
                ))

        oversold = params.get("rsi_oversold")
        overbought = params.get("rsi_overbought")
        if _is_number(oversold) and _is_number(overbought):
            if oversold >= overbought or overbought > 100:
                errors.append(ConfigIssue(
                    field="signals.rsi_oversold",
                    message="Must satisfy rsi_oversold < rsi_overbought <= 100",
                    value=(oversold, overbought)
                ))

        lower = params.get("bollinger_lower_zone")
        upper = params.get("bollinger_upper_zone")
        if _is_number(lower) and _is_number(upper) and lower >= upper:
            errors.append(ConfigIssue(
                field="signals.bollinger_lower_zone",
                message="Must be less than bollinger_upper_zone",
                value=(lower, upper)
            ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ConfigIssue]:
        """Validate complete configuration."""
        errors = []

        for name in config:
            if name not in _SECTIONS:
                errors.append(ConfigIssue(
                    field=name,
                    message="Unknown configuration section",
                    value=config[name]
                ))

        for name, (params_cls, validate) in _SECTIONS.items():
            if name not in config:
                continue

            params = config[name]
            # An empty YAML block loads as None
            if not isinstance(params, dict):
                errors.append(ConfigIssue(
                    field=name,
                    message="Must be a mapping",
                    value=params
                ))
                continue

            known = params_cls.__dataclass_fields__
            for key in params:
                if key not in known:
                    errors.append(ConfigIssue(
                        field=f"{name}.{key}",
                        message="Unknown parameter",
                        value=params[key]
                    ))

            errors.extend(validate({k: v for k, v in params.items() if k in known}))

        return errors


_SECTIONS = {
    "rsi": (RSIParams, ConfigValidator.validate_rsi_params),
    "macd": (MACDParams, ConfigValidator.validate_macd_params),
    "bollinger": (BollingerParams, ConfigValidator.validate_bollinger_params),
    "vwap": (VWAPParams, ConfigValidator.validate_vwap_params),
    "signals": (SignalThresholds, ConfigValidator.validate_signal_thresholds),
}
