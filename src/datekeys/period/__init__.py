"""
datekeys.period
~~~~~~~~~~~~~~~

Compare a date key against the current day, week, month or year.

Basic usage::

    from datekeys.period import is_current_period, is_current_week

    is_current_week("2026-W42")              # this week?
    is_current_period("2026-10-16", "month") # is that day in this month?

Every check takes ``now=`` (a zero-argument callable returning a date or
datetime) for a fixed reference time; the local clock is used otherwise.
"""

from __future__ import annotations

from datekeys.period.current import (
    is_current_day,
    is_current_month,
    is_current_period,
    is_current_week,
    is_current_year,
)

__all__ = [
    "is_current_day",
    "is_current_month",
    "is_current_period",
    "is_current_week",
    "is_current_year",
]
