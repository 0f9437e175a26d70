from __future__ import annotations

from datetime import date, datetime
from typing import Callable, Literal, NamedTuple, Optional, Union

import numpy as np

from ._exceptions import DateKeyError, InvalidDateKeyError
from .builders import (
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
from .guards import is_day_key, is_month_key, is_week_key, is_year_key
from .weeks import DEFAULT_WEEK_RULE, WeekRule, week_key_start, week_year_and_number

Resolution = Literal["day", "week", "month", "year"]
RESOLUTIONS: tuple[Resolution, ...] = ("day", "week", "month", "year")

DateLike = Union[date, datetime, np.datetime64]

# Zero-argument source of "now"; datetime.now when not given.
Clock = Callable[[], Union[date, datetime]]


class DayParts(NamedTuple):
    year: int
    month: int
    day: int


class WeekParts(NamedTuple):
    year: int
    week: int


class MonthParts(NamedTuple):
    year: int
    month: int


class DateKeyParts(NamedTuple):
    year: int
    month: Optional[int] = None
    day: Optional[int] = None
    week: Optional[int] = None


def as_date(value: DateLike) -> date:
    """Calendar day of a ``date``, ``datetime`` or ``numpy.datetime64``."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, np.datetime64):
        day = value.astype("datetime64[D]").item()
        if isinstance(day, date):
            return day
    raise TypeError(f"Expected a date, datetime or datetime64; got {value!r}.")


# ── date → key ───────────────────────────────────────────────────────────

def date_to_day_key(value: DateLike) -> DayKey:
    d = as_date(value)
    return to_day_key(d.year, d.month, d.day)


def date_to_week_key(value: DateLike, rule: WeekRule = DEFAULT_WEEK_RULE) -> WeekKey:
    year, week = week_year_and_number(as_date(value), rule)
    return to_week_key(year, week)


def date_to_month_key(value: DateLike) -> MonthKey:
    d = as_date(value)
    return to_month_key(d.year, d.month)


def date_to_year_key(value: DateLike) -> YearKey:
    return to_year_key(as_date(value).year)


def format_date_as_key(
    value: DateLike,
    resolution: Resolution,
    rule: WeekRule = DEFAULT_WEEK_RULE,
) -> DateKey:
    """Project ``value`` down to the key of the period containing it."""
    if resolution == "day":
        return date_to_day_key(value)
    if resolution == "week":
        return date_to_week_key(value, rule)
    if resolution == "month":
        return date_to_month_key(value)
    if resolution == "year":
        return date_to_year_key(value)
    raise DateKeyError(f"Invalid key type: {resolution!r}")


# ── key → fields ─────────────────────────────────────────────────────────

def parse_day_key(key: DayKey) -> DayParts:
    year, month, day = key.split("-")
    return DayParts(int(year), int(month), int(day))


def parse_week_key(key: WeekKey) -> WeekParts:
    year, week = key.split("-W")
    return WeekParts(int(year), int(week))


def parse_month_key(key: MonthKey) -> MonthParts:
    year, month = key.split("-")
    return MonthParts(int(year), int(month))


def parse_year_key(key: YearKey) -> int:
    return int(key)


def parse_date_key_to_parts(key: DateKey) -> DateKeyParts:
    if is_day_key(key):
        year, month, day = parse_day_key(key)
        return DateKeyParts(year, month=month, day=day)
    if is_week_key(key):
        year, week = parse_week_key(key)
        return DateKeyParts(year, week=week)
    if is_month_key(key):
        year, month = parse_month_key(key)
        return DateKeyParts(year, month=month)
    if is_year_key(key):
        return DateKeyParts(parse_year_key(key))
    raise InvalidDateKeyError(key)


def get_date_key_type(key: DateKey) -> Resolution:
    if is_day_key(key):
        return "day"
    if is_week_key(key):
        return "week"
    if is_month_key(key):
        return "month"
    if is_year_key(key):
        return "year"
    raise InvalidDateKeyError(key)


# ── key → date ───────────────────────────────────────────────────────────

def parse_date_key(key: DateKey, rule: WeekRule = DEFAULT_WEEK_RULE) -> date:
    """
    First day of the period ``key`` denotes.

    Raises InvalidDateKeyError when ``key`` matches no key shape, or when
    its fields do not name a real calendar period (``"2024-02-30"``,
    ``"2024-W00"``).
    """
    resolution = get_date_key_type(key)
    try:
        if resolution == "day":
            return date(*parse_day_key(key))
        if resolution == "week":
            return week_key_start(*parse_week_key(key), rule=rule)
        if resolution == "month":
            return date(*parse_month_key(key), 1)
        return date(parse_year_key(key), 1, 1)
    except ValueError as exc:
        raise InvalidDateKeyError(key, str(exc)) from exc


def convert_date_key(
    key: DateKey,
    resolution: Resolution,
    rule: WeekRule = DEFAULT_WEEK_RULE,
) -> DateKey:
    """
    Re-encode ``key`` at another resolution.

    Coarsening drops information ("2024-01-15" -> "2024-01"); refining
    yields the start of the period ("2024-01" -> "2024-01-01"), it does
    not recover a day that was dropped earlier.
    """
    return format_date_as_key(parse_date_key(key, rule), resolution, rule)
