"""
datekeys
~~~~~~~~

Calendar dates at an explicit resolution (day, week, month, year) as string
keys, plus friendly, locale-aware display of those keys.

Sub-packages
------------
datekeys.keys     Guards, builders, week numbering and date <-> key conversion.
datekeys.display  format_friendly_date and FormatOptions.
datekeys.period   is_current_* comparisons against the local clock.
"""

from __future__ import annotations

from datekeys.display import DEFAULT_LOCALE, FormatOptions, format_friendly_date
from datekeys.keys import *  # noqa: F401,F403
from datekeys.keys import __all__ as _keys_all
from datekeys.period import (
    is_current_day,
    is_current_month,
    is_current_period,
    is_current_week,
    is_current_year,
)

__all__ = [
    *_keys_all,
    "DEFAULT_LOCALE",
    "FormatOptions",
    "format_friendly_date",
    "is_current_day",
    "is_current_month",
    "is_current_period",
    "is_current_week",
    "is_current_year",
]
