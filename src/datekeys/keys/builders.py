from __future__ import annotations

from typing import NewType, Union

DayKey = NewType("DayKey", str)
WeekKey = NewType("WeekKey", str)
MonthKey = NewType("MonthKey", str)
YearKey = NewType("YearKey", str)

DateKey = Union[DayKey, WeekKey, MonthKey, YearKey]


def _pad(n: int) -> str:
    # Wider values are kept verbatim and fail the shape guards.
    return f"{int(n):02d}"


def to_day_key(year: int, month: int, day: int) -> DayKey:
    return DayKey(f"{int(year)}-{_pad(month)}-{_pad(day)}")


def to_week_key(year: int, week: int) -> WeekKey:
    return WeekKey(f"{int(year)}-W{_pad(week)}")


def to_month_key(year: int, month: int) -> MonthKey:
    return MonthKey(f"{int(year)}-{_pad(month)}")


def to_year_key(year: int) -> YearKey:
    return YearKey(f"{int(year)}")
