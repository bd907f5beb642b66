"""
Utility functions module.

Common helpers shared across the package.

Time Semantics:
- Timestamps are integer epoch milliseconds, always interpreted as UTC
- Labels are display strings only and never take part in computation
"""
