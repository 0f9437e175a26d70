"""
NumPy-vectorized key conversion.

Arrays of any shape are accepted wherever a single date or key is; results
keep the input shape::

    import numpy as np
    from datekeys.keys.arrays import format_dates_as_keys

    days = np.arange("2023-12-29", "2024-01-03", dtype="datetime64[D]")
    format_dates_as_keys(days, "week")
    # array(['2023-W52', '2023-W52', '2024-W01', '2024-W01', '2024-W01'], ...)
"""

from __future__ import annotations

from typing import Any

import numpy as np

from ._exceptions import DateKeyError
from .builders import to_day_key, to_month_key, to_week_key, to_year_key
from .converters import Resolution, get_date_key_type, parse_date_key
from .weeks import DEFAULT_WEEK_RULE, WeekRule

ArrayLike = Any

_EPOCH_WEEKDAY = 3  # 1970-01-01 was a Thursday


def _as_day_array(dates: ArrayLike) -> np.ndarray:
    arr = np.asarray(dates)
    if arr.dtype.kind != "M":
        arr = arr.astype("datetime64[us]")
    return arr.astype("datetime64[D]")


# ── calendar fields ──────────────────────────────────────────────────────

def _years(days: np.ndarray) -> np.ndarray:
    return days.astype("datetime64[Y]").astype(np.int64) + 1970


def _months(days: np.ndarray) -> np.ndarray:
    return days.astype("datetime64[M]").astype(np.int64) % 12 + 1


def _days_of_month(days: np.ndarray) -> np.ndarray:
    first = days.astype("datetime64[M]").astype("datetime64[D]")
    return (days - first).astype(np.int64) + 1


# ── week numbering on day ordinals (days since 1970-01-01) ───────────────

def _week_start(ordinal: np.ndarray, rule: WeekRule) -> np.ndarray:
    weekday = (ordinal + _EPOCH_WEEKDAY) % 7
    return ordinal - (weekday - rule.first_weekday) % 7


def _week_one_start(years: np.ndarray, rule: WeekRule) -> np.ndarray:
    jan1 = (years - 1970).astype("datetime64[Y]").astype("datetime64[D]").astype(np.int64)
    start = _week_start(jan1, rule)
    return np.where(7 - (jan1 - start) >= rule.min_days, start, start + 7)


def _week_fields(days: np.ndarray, rule: WeekRule) -> tuple[np.ndarray, np.ndarray]:
    ordinal = days.astype(np.int64)
    start = _week_start(ordinal, rule)
    years = _years(days)
    years = np.where(start >= _week_one_start(years + 1, rule), years + 1, years)
    years = np.where(start < _week_one_start(years, rule), years - 1, years)
    weeks = (start - _week_one_start(years, rule)) // 7 + 1
    return years, weeks


# ── public ───────────────────────────────────────────────────────────────

def format_dates_as_keys(
    dates: ArrayLike,
    resolution: Resolution,
    rule: WeekRule = DEFAULT_WEEK_RULE,
) -> np.ndarray:
    days = _as_day_array(dates)
    shape = days.shape
    flat = days.ravel()
    if np.isnat(flat).any():
        raise DateKeyError("Cannot format NaT as a date key.")

    years = _years(flat)
    if resolution == "day":
        keys = [
            to_day_key(y, m, d)
            for y, m, d in zip(years, _months(flat), _days_of_month(flat))
        ]
    elif resolution == "week":
        week_years, weeks = _week_fields(flat, rule)
        keys = [to_week_key(y, w) for y, w in zip(week_years, weeks)]
    elif resolution == "month":
        keys = [to_month_key(y, m) for y, m in zip(years, _months(flat))]
    elif resolution == "year":
        keys = [to_year_key(y) for y in years]
    else:
        raise DateKeyError(f"Invalid key type: {resolution!r}")

    return np.array(keys, dtype=str).reshape(shape)


def parse_date_keys(keys: ArrayLike, rule: WeekRule = DEFAULT_WEEK_RULE) -> np.ndarray:
    arr = np.asarray(keys, dtype=object)
    starts = [parse_date_key(k, rule) for k in arr.ravel()]
    return np.array(starts, dtype="datetime64[D]").reshape(arr.shape)


def date_key_types(keys: ArrayLike) -> np.ndarray:
    arr = np.asarray(keys, dtype=object)
    types = [get_date_key_type(k) for k in arr.ravel()]
    return np.array(types, dtype=str).reshape(arr.shape)
