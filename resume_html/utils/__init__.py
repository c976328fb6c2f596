"""
Shared utilities for resume_html.

Common functionality used across contexts:
- Logger setup
- Timestamps and partial ISO dates
"""

from resume_html.utils.timestamp import now, parse_partial_date, to_iso_utc

__all__ = ["now", "parse_partial_date", "to_iso_utc"]
