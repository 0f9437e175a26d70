"""
datekeys.keys
~~~~~~~~~~~~~

Calendar periods as string keys.  A key's resolution is given by its shape
alone::

    "2024"        year
    "2024-01"     month
    "2024-W03"    week (week-numbering year + week)
    "2024-01-15"  day

Basic usage::

    from datetime import date
    from datekeys.keys import date_to_week_key, parse_date_key, convert_date_key

    date_to_week_key(date(2023, 12, 31))      # → "2024-W01"
    parse_date_key("2024-W01")                # → date(2023, 12, 31)
    convert_date_key("2024-01-15", "month")   # → "2024-01"

Weeks start on Sunday and belong to the year holding at least four of their
days unless another WeekRule is passed.

Public API
----------
is_*_key / to_*_key     Shape guards and builders.
date_to_*_key           Project a date onto a resolution.
parse_*                 Split keys into fields, or into the start date.
convert_date_key        Coarsen or refine a key.
WeekRule                Week-numbering convention.
DateKeyError            Base exception for all date-key errors.
"""

from __future__ import annotations

from datekeys.keys._exceptions import DateKeyError, InvalidDateKeyError
from datekeys.keys.arrays import date_key_types, format_dates_as_keys, parse_date_keys
from datekeys.keys.builders import (
    DateKey,
    DayKey,
    MonthKey,
    WeekKey,
    YearKey,
    to_day_key,
    to_month_key,
    to_week_key,
    to_year_key,
)
from datekeys.keys.converters import (
    RESOLUTIONS,
    Clock,
    DateKeyParts,
    DayParts,
    MonthParts,
    Resolution,
    WeekParts,
    as_date,
    convert_date_key,
    date_to_day_key,
    date_to_month_key,
    date_to_week_key,
    date_to_year_key,
    format_date_as_key,
    get_date_key_type,
    parse_date_key,
    parse_date_key_to_parts,
    parse_day_key,
    parse_month_key,
    parse_week_key,
    parse_year_key,
)
from datekeys.keys.guards import is_day_key, is_month_key, is_week_key, is_year_key
from datekeys.keys.weeks import (
    DEFAULT_WEEK_RULE,
    WeekRule,
    week_end,
    week_key_start,
    week_one_start,
    week_start,
    week_year_and_number,
    weeks_in_year,
)

__all__ = [
    "DEFAULT_WEEK_RULE",
    "RESOLUTIONS",
    "Clock",
    "DateKey",
    "DateKeyError",
    "DateKeyParts",
    "DayKey",
    "DayParts",
    "InvalidDateKeyError",
    "MonthKey",
    "MonthParts",
    "Resolution",
    "WeekKey",
    "WeekParts",
    "WeekRule",
    "YearKey",
    "as_date",
    "convert_date_key",
    "date_key_types",
    "date_to_day_key",
    "date_to_month_key",
    "date_to_week_key",
    "date_to_year_key",
    "format_date_as_key",
    "format_dates_as_keys",
    "get_date_key_type",
    "is_day_key",
    "is_month_key",
    "is_week_key",
    "is_year_key",
    "parse_date_key",
    "parse_date_key_to_parts",
    "parse_date_keys",
    "parse_day_key",
    "parse_month_key",
    "parse_week_key",
    "parse_year_key",
    "to_day_key",
    "to_month_key",
    "to_week_key",
    "to_year_key",
    "week_end",
    "week_key_start",
    "week_one_start",
    "week_start",
    "week_year_and_number",
    "weeks_in_year",
]
