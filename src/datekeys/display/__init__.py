"""
datekeys.display
~~~~~~~~~~~~~~~~

Locale-aware, human-readable rendering of date keys and key ranges.

Basic usage::

    from datekeys.display import format_friendly_date, FormatOptions

    format_friendly_date("2024-01-15")                          # "January 15, 2024"
    format_friendly_date("2024-06-15", {"date_style": "full"})  # "Saturday, June 15, 2024"
    format_friendly_date("2024-01", "2024-03")                  # "January – March 2024"

    opts = FormatOptions(omit_current=True)
    format_friendly_date("2026-06-17", opts)                    # "17" during June 2026

Public API
----------
format_friendly_date  Render a key or an inclusive key range.
FormatOptions         omit_current / date_style / locale / week_rule.
"""

from __future__ import annotations

from datekeys.display.friendly import format_friendly_date
from datekeys.display.options import DATE_STYLES, DEFAULT_LOCALE, FormatOptions

__all__ = [
    "DATE_STYLES",
    "DEFAULT_LOCALE",
    "FormatOptions",
    "format_friendly_date",
]
