from __future__ import annotations

from datetime import datetime
from typing import Optional

from datekeys.keys import (
    DEFAULT_WEEK_RULE,
    Clock,
    DateKey,
    InvalidDateKeyError,
    Resolution,
    WeekRule,
    convert_date_key,
    format_date_as_key,
    get_date_key_type,
)


def _is_current(
    key: DateKey,
    resolution: Resolution,
    now: Optional[Clock],
    rule: WeekRule,
) -> bool:
    reference = (now or datetime.now)()
    return convert_date_key(key, resolution, rule) == format_date_as_key(reference, resolution, rule)


def is_current_day(
    key: DateKey, *, now: Optional[Clock] = None, rule: WeekRule = DEFAULT_WEEK_RULE
) -> bool:
    return _is_current(key, "day", now, rule)


def is_current_week(
    key: DateKey, *, now: Optional[Clock] = None, rule: WeekRule = DEFAULT_WEEK_RULE
) -> bool:
    return _is_current(key, "week", now, rule)


def is_current_month(
    key: DateKey, *, now: Optional[Clock] = None, rule: WeekRule = DEFAULT_WEEK_RULE
) -> bool:
    return _is_current(key, "month", now, rule)


def is_current_year(
    key: DateKey, *, now: Optional[Clock] = None, rule: WeekRule = DEFAULT_WEEK_RULE
) -> bool:
    return _is_current(key, "year", now, rule)


_CHECKS = {
    "day": is_current_day,
    "week": is_current_week,
    "month": is_current_month,
    "year": is_current_year,
}


def is_current_period(
    key: DateKey,
    period: Optional[Resolution] = None,
    *,
    now: Optional[Clock] = None,
    rule: WeekRule = DEFAULT_WEEK_RULE,
) -> bool:
    """
    Whether ``key`` falls in the current ``period`` (default: the key's own
    resolution).  False, rather than an error, when the resolution cannot be
    determined.
    """
    if period is None:
        try:
            period = get_date_key_type(key)
        except InvalidDateKeyError:
            return False
    check = _CHECKS.get(period)
    if check is None:
        return False
    return check(key, now=now, rule=rule)
