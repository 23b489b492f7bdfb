"""Diagnostics package.

Light-weight checks runnable through ``storycal diag <tool>``.
"""

__all__ = ["round_trip", "year_table"]
