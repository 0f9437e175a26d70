from __future__ import annotations

import re

_DAY_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_WEEK_RE = re.compile(r"[0-9]{4}-W[0-9]{2}")
_MONTH_RE = re.compile(r"[0-9]{4}-[0-9]{2}")
_YEAR_RE = re.compile(r"[0-9]{4}")


def _matches(pattern: re.Pattern[str], value: object) -> bool:
    return isinstance(value, str) and pattern.fullmatch(value) is not None


def is_day_key(value: object) -> bool:
    """``YYYY-MM-DD``, e.g. ``"2024-01-15"``."""
    return _matches(_DAY_RE, value)


def is_week_key(value: object) -> bool:
    """``YYYY-Www``, e.g. ``"2024-W03"``."""
    return _matches(_WEEK_RE, value)


def is_month_key(value: object) -> bool:
    """``YYYY-MM``, e.g. ``"2024-01"``."""
    return _matches(_MONTH_RE, value)


def is_year_key(value: object) -> bool:
    """``YYYY``, e.g. ``"2024"``."""
    return _matches(_YEAR_RE, value)
