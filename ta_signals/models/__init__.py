"""
Indicator output models.

Immutable per-point indicator values, aligned to the labels of the price
points they were computed at.
"""
