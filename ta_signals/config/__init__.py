"""
Configuration module.

Default indicator parameters, per-symbol YAML overrides and validation.
"""
