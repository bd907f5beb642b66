"""
Price data ingestion and validation module.

Defines the price series model, normalizes raw market-chart payloads into
it, and validates series before indicators are computed.
"""
