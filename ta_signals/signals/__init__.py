"""
Signal synthesis module.

Maps the latest indicator values into discrete buy/sell/neutral signals
with a 0-100 strength score and a human-readable reason.
"""
