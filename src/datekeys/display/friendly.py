from __future__ import annotations

import logging
import re
from datetime import date, datetime
from typing import Any, Mapping, Optional, Union

from babel import Locale
from babel.dates import format_date, match_skeleton

from datekeys.keys import (
    Clock,
    DateKey,
    InvalidDateKeyError,
    as_date,
    is_day_key,
    is_month_key,
    is_week_key,
    is_year_key,
    parse_date_key,
    week_end,
)

from .options import DateStyle, FormatOptions

_LOGGER = logging.getLogger(__name__)

OptionsLike = Union[FormatOptions, Mapping[str, Any], None]

# (skeletons with year, skeletons without year, widen month names, widen weekday names)
# The first skeleton the locale defines wins; fields it still abbreviates are
# widened to full names.
_DAY_SKELETONS: dict[DateStyle, tuple[tuple[str, ...], tuple[str, ...], bool, bool]] = {
    "full": (("yMMMMEEEEd", "yMMMMEd", "yMMMEd"), ("MMMMEEEEd", "MMMMEd", "MMMEd"), True, True),
    "long": (("yMMMMd", "yMMMd"), ("MMMMd", "MMMd"), True, False),
    "medium": (("yMMMd",), ("MMMd",), False, False),
    "short": (("yMd",), ("Md",), False, False),
}

_MONTH_SKELETONS: dict[DateStyle, tuple[tuple[str, ...], tuple[str, ...], bool]] = {
    "full": (("yMMMM", "yMMM"), ("MMMM", "MMM"), True),
    "long": (("yMMMM", "yMMM"), ("MMMM", "MMM"), True),
    "medium": (("yMMM",), ("MMM",), False),
    "short": (("yM",), ("M",), False),
}

_RANGE_FIELDS = ("y", "M", "d")

_QUOTED = re.compile(r"('(?:[^']|'')*')")
_ABBR_MONTH = re.compile(r"(?<![ML])([ML])\1\1(?![ML])")
_ABBR_WEEKDAY = re.compile(r"(?<!E)E{1,3}(?!E)")

_EN_DASH = " – "


def _widen(pattern: Any, months: bool, weekdays: bool) -> str:
    """Switch abbreviated month/weekday fields of ``pattern`` to full names."""
    parts = _QUOTED.split(str(pattern))
    for i in range(0, len(parts), 2):  # odd indices are quoted literals
        if months:
            parts[i] = _ABBR_MONTH.sub(lambda m: m.group(1) * 4, parts[i])
        if weekdays:
            parts[i] = _ABBR_WEEKDAY.sub("EEEE", parts[i])
    return "".join(parts)


def _pick(candidates: tuple[str, ...], available: Mapping[Any, Any]) -> Optional[str]:
    """First of ``candidates`` the locale defines, else the closest match to the last."""
    for skeleton in candidates:
        if skeleton in available:
            return skeleton
    return match_skeleton(candidates[-1], [k for k in available if k])


def _today(now: Optional[Clock]) -> date:
    return as_date((now or datetime.now)())


class _FriendlyFormatter:
    """One top-level call: fixed options, locale and reference day."""

    def __init__(self, options: FormatOptions, today: date) -> None:
        self._options = options
        self._style = options.date_style
        self._locale = Locale.parse(options.locale)
        self._rule = options.week_rule
        self._today = today

    # ── patterns ─────────────────────────────────────────────────────────

    def _skeleton_pattern(
        self, candidates: tuple[str, ...], months: bool, weekdays: bool = False
    ) -> str:
        patterns = self._locale.datetime_skeletons
        skeleton = _pick(candidates, patterns) or candidates[-1]
        return _widen(patterns.get(skeleton, skeleton), months, weekdays)

    def _interval(
        self,
        start: date,
        end: date,
        candidates: tuple[str, ...],
        months: bool,
        weekdays: bool = False,
    ) -> str:
        formats = self._locale.interval_formats
        skeleton = _pick(candidates, formats)

        by_field = (formats.get(skeleton) if skeleton else None) or {}
        for field, a, b in zip(_RANGE_FIELDS, (start.year, start.month, start.day),
                               (end.year, end.month, end.day)):
            if a != b and field in by_field:
                return "".join(
                    format_date(instant, _widen(pattern, months, weekdays), locale=self._locale)
                    for pattern, instant in zip(by_field[field], (start, end))
                )

        single = self._skeleton_pattern(candidates, months, weekdays)
        if start == end:
            return format_date(start, single, locale=self._locale)
        fallback = formats.get(None) or "{0}" + _EN_DASH + "{1}"
        return fallback.replace("{0}", format_date(start, single, locale=self._locale)).replace(
            "{1}", format_date(end, single, locale=self._locale)
        )

    # ── dispatch ─────────────────────────────────────────────────────────

    def format(self, start: DateKey, end: Optional[DateKey] = None) -> str:
        if end and end != start:
            return self._range(start, end)
        if is_week_key(start):
            return self._week(start)
        if is_month_key(start):
            return self._month(start)
        if is_day_key(start):
            return self._day(start)
        if is_year_key(start):
            return self._year(start)
        return start

    def _range(self, start: DateKey, end: DateKey) -> str:
        try:
            if is_week_key(start) and is_week_key(end):
                first = parse_date_key(start, self._rule)
                last = week_end(parse_date_key(end, self._rule), self._rule)
                return self._day_range(first, last)
            if is_day_key(start) and is_day_key(end):
                return self._day_range(parse_date_key(start), parse_date_key(end))
            if is_month_key(start) and is_month_key(end):
                return self._month_range(parse_date_key(start), parse_date_key(end))
        except InvalidDateKeyError as exc:
            _LOGGER.debug("Formatting range endpoints separately: %s", exc)
        return f"{self.format(start)}{_EN_DASH}{self.format(end)}"

    # ── single keys ──────────────────────────────────────────────────────

    def _week(self, key: DateKey) -> str:
        try:
            first = parse_date_key(key, self._rule)
        except InvalidDateKeyError as exc:
            _LOGGER.debug("Leaving week key as is: %s", exc)
            return key
        return self._day_range(first, week_end(first, self._rule))

    def _month(self, key: DateKey) -> str:
        try:
            first = parse_date_key(key)
        except InvalidDateKeyError as exc:
            _LOGGER.debug("Leaving month key as is: %s", exc)
            return key
        with_year, without_year, months = _MONTH_SKELETONS[self._style]
        omit = self._options.omission("month") is not None and first.year == self._today.year
        pattern = self._skeleton_pattern(without_year if omit else with_year, months)
        return format_date(first, pattern, locale=self._locale)

    def _day(self, key: DateKey) -> str:
        try:
            day = parse_date_key(key)
        except InvalidDateKeyError as exc:
            _LOGGER.debug("Leaving day key as is: %s", exc)
            return key

        omission = self._options.omission("day")
        same_year = day.year == self._today.year
        if omission == "month" and same_year and day.month == self._today.month:
            return format_date(day, self._skeleton_pattern(("d",), False), locale=self._locale)
        if omission is not None and same_year:
            _, without_year, months, weekdays = _DAY_SKELETONS[self._style]
            pattern = self._skeleton_pattern(without_year, months, weekdays)
            return format_date(day, pattern, locale=self._locale)
        return format_date(day, self._style, locale=self._locale)

    def _year(self, key: DateKey) -> str:
        try:
            first = parse_date_key(key)
        except InvalidDateKeyError as exc:
            _LOGGER.debug("Leaving year key as is: %s", exc)
            return key
        return format_date(first, "yyyy", locale=self._locale)

    # ── ranges ───────────────────────────────────────────────────────────

    def _omit_range_year(self, start: date, end: date) -> bool:
        return (
            self._options.omission("range") is not None
            and start.year == end.year == self._today.year
        )

    def _day_range(self, start: date, end: date) -> str:
        with_year, without_year, months, weekdays = _DAY_SKELETONS[self._style]
        candidates = without_year if self._omit_range_year(start, end) else with_year
        return self._interval(start, end, candidates, months, weekdays)

    def _month_range(self, start: date, end: date) -> str:
        with_year, without_year, months = _MONTH_SKELETONS[self._style]
        candidates = without_year if self._omit_range_year(start, end) else with_year
        return self._interval(start, end, candidates, months)


def format_friendly_date(
    start: DateKey,
    end: Union[DateKey, FormatOptions, Mapping[str, Any], None] = None,
    options: OptionsLike = None,
    *,
    now: Optional[Clock] = None,
) -> str:
    """
    Human-readable rendering of a date key, or of an inclusive range of two.

    Called as ``format_friendly_date(key, options)`` or
    ``format_friendly_date(start, end, options)``::

        format_friendly_date("2024-01")                    # "January 2024"
        format_friendly_date("2024-01-15", "2024-01-20")   # "January 15 – 20, 2024"
        format_friendly_date("2024-W03")                   # "January 14 – 20, 2024"

    Weeks are shown as their day span.  A string that is not a key, or that
    does not name a real date, is returned unchanged.  ``now`` supplies the
    reference date for ``omit_current`` and defaults to the local clock; it
    is read once per call.
    """
    if isinstance(end, (FormatOptions, Mapping)):
        if options is not None:
            raise TypeError("options given twice")
        end, options = None, end
    if not start:
        return ""

    formatter = _FriendlyFormatter(FormatOptions.coerce(options), _today(now))
    return formatter.format(start, end)
