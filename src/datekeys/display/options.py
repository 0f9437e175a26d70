from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Mapping, Optional, Union

from babel import Locale, UnknownLocaleError

from datekeys.keys import DEFAULT_WEEK_RULE, DateKeyError, Resolution, WeekRule

DateStyle = Literal["full", "long", "medium", "short"]
OmitCurrent = Union[bool, Literal["year", "month"]]
Omission = Optional[Literal["year", "month"]]

DEFAULT_LOCALE = "en_US"

DATE_STYLES: tuple[DateStyle, ...] = ("full", "long", "medium", "short")

# Accept the camelCase spelling used by JSON payloads.
_ALIASES = {"omitCurrent": "omit_current", "dateStyle": "date_style", "weekRule": "week_rule"}


@dataclass(frozen=True, slots=True)
class FormatOptions:
    """
    Options for friendly date formatting.

    omit_current : False, True, "year" or "month".  Drop the year (and, for
                   days, the month) when they match the current date.
    date_style   : "full", "long", "medium" or "short".
    locale       : any Babel locale identifier.
    week_rule    : week-numbering convention used to expand week keys.
    """

    omit_current: OmitCurrent = False
    date_style: DateStyle = "long"
    locale: str = DEFAULT_LOCALE
    week_rule: WeekRule = DEFAULT_WEEK_RULE

    def __post_init__(self) -> None:
        if not (isinstance(self.omit_current, bool) or self.omit_current in ("year", "month")):
            raise DateKeyError(
                f"omit_current must be a bool, 'year' or 'month'; got {self.omit_current!r}."
            )
        if self.date_style not in DATE_STYLES:
            raise DateKeyError(
                f"date_style must be one of {DATE_STYLES}; got {self.date_style!r}."
            )
        if not isinstance(self.week_rule, WeekRule):
            raise DateKeyError(f"week_rule must be a WeekRule; got {self.week_rule!r}.")
        try:
            Locale.parse(self.locale)
        except (UnknownLocaleError, ValueError, TypeError) as exc:
            raise DateKeyError(f"Unknown locale: {self.locale!r}.") from exc

    @classmethod
    def coerce(cls, value: FormatOptions | Mapping[str, Any] | None) -> FormatOptions:
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            kwargs = {_ALIASES.get(str(k), str(k)): v for k, v in value.items()}
            try:
                return cls(**kwargs)
            except TypeError as exc:
                raise DateKeyError(f"Unknown format option: {exc}") from exc
        raise DateKeyError(f"Expected FormatOptions or a mapping; got {value!r}.")

    def omission(self, resolution: Resolution | Literal["range"]) -> Omission:
        """
        What omit_current may drop for a value of ``resolution``.

        Months and ranges can only lose their year; for days ``True`` means
        "month", which also drops the year.
        """
        if not self.omit_current:
            return None
        if resolution == "day":
            return "year" if self.omit_current == "year" else "month"
        return "year"
