#!/usr/bin/env python3
"""Validate the per-symbol indicator overrides in config/symbols.yaml."""

import sys
from pathlib import Path
from typing import List

import yaml

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from ta_signals.config.loader import ConfigLoader
from ta_signals.config.validation import ConfigIssue, ConfigValidator


def configured_symbols(loader: ConfigLoader) -> List[str]:
    """List the symbols that have overrides on disk."""
    symbols_file = loader.config_dir / "symbols.yaml"
    if not symbols_file.exists():
        return []
    with open(symbols_file) as f:
        data = yaml.safe_load(f) or {}
    return sorted((data.get("symbols") or {}).keys())


def validate_symbol_config(loader: ConfigLoader, symbol: str) -> List[ConfigIssue]:
    """Validate the merged configuration for a specific symbol."""
    config = loader.merge_config(symbol)
    return ConfigValidator.validate_config(config)


def main():
    """Main validation function."""
    print("🔍 Validating indicator configuration...")

    loader = ConfigLoader.create()
    symbols = configured_symbols(loader) + ["UNKNOWN-SYMBOL"]  # last one uses defaults

    all_valid = True
    for symbol in symbols:
        print(f"\n📊 Validating {symbol}...")

        try:
            issues = validate_symbol_config(loader, symbol)
        except (OSError, yaml.YAMLError) as e:
            print(f"❌ Error loading configuration for {symbol}: {e}")
            all_valid = False
            continue

        if issues:
            print(f"❌ Found {len(issues)} validation errors:")
            for issue in issues:
                print(f"  • {issue.field}: {issue.message} (value: {issue.value})")
            all_valid = False
        else:
            print(f"✅ {symbol} configuration is valid")

    if all_valid:
        print("\n🎉 All configuration validation passed!")
        sys.exit(0)
    else:
        print("\n❌ Configuration validation failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()
