"""Diagnostics package.

- pretty_month, round_trip: always available
- year_drift: needs the diagnostics extra (numpy + matplotlib)
"""

__all__ = ["pretty_month", "round_trip", "year_drift"]
