from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta

from babel import Locale

from ._exceptions import DateKeyError

_SUNDAY = 6


@dataclass(frozen=True, slots=True)
class WeekRule:
    """
    Week-numbering convention.

    first_weekday : day a week starts on, Monday = 0 ... Sunday = 6
    min_days      : days of a week that must fall in a year for that year
                    to own the week (4 = majority, 1 = the week containing Jan 1)
    """

    first_weekday: int = _SUNDAY
    min_days: int = 4

    def __post_init__(self) -> None:
        if not 0 <= self.first_weekday <= 6:
            raise DateKeyError(f"first_weekday must be in 0..6; got {self.first_weekday}.")
        if not 1 <= self.min_days <= 7:
            raise DateKeyError(f"min_days must be in 1..7; got {self.min_days}.")

    @classmethod
    def iso(cls) -> WeekRule:
        return cls(first_weekday=0, min_days=4)

    @classmethod
    def from_locale(cls, locale: str | Locale) -> WeekRule:
        loc = Locale.parse(locale)
        return cls(first_weekday=int(loc.first_week_day), min_days=int(loc.min_week_days))


DEFAULT_WEEK_RULE = WeekRule()


# ── week boundaries ──────────────────────────────────────────────────────

def week_start(day: date, rule: WeekRule = DEFAULT_WEEK_RULE) -> date:
    return day - timedelta(days=(day.weekday() - rule.first_weekday) % 7)


def week_end(day: date, rule: WeekRule = DEFAULT_WEEK_RULE) -> date:
    return week_start(day, rule) + timedelta(days=6)


def week_one_start(year: int, rule: WeekRule = DEFAULT_WEEK_RULE) -> date:
    """First day of week 1 of the week-numbering ``year``."""
    jan1 = date(year, 1, 1)
    start = week_start(jan1, rule)
    days_in_year = 7 - (jan1 - start).days
    if days_in_year >= rule.min_days:
        return start
    return start + timedelta(days=7)


# ── numbering ────────────────────────────────────────────────────────────

def week_year_and_number(day: date, rule: WeekRule = DEFAULT_WEEK_RULE) -> tuple[int, int]:
    """
    Week-numbering year and 1-based week of ``day``.

    The year owning a week can differ from the calendar year of the day
    queried, e.g. Dec 31 2023 is in 2024-W01 under the default rule.
    """
    start = week_start(day, rule)
    year = day.year
    if start >= week_one_start(year + 1, rule):
        year += 1
    elif start < week_one_start(year, rule):
        year -= 1
    return year, (start - week_one_start(year, rule)).days // 7 + 1


def weeks_in_year(year: int, rule: WeekRule = DEFAULT_WEEK_RULE) -> int:
    return (week_one_start(year + 1, rule) - week_one_start(year, rule)).days // 7


def week_key_start(year: int, week: int, rule: WeekRule = DEFAULT_WEEK_RULE) -> date:
    """First day of ``week`` in the week-numbering ``year``."""
    if not 1 <= week <= weeks_in_year(year, rule):
        raise ValueError(f"week {week} is out of range for week-year {year}")
    return week_one_start(year, rule) + timedelta(weeks=week - 1)
