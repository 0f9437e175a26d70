"""
tests/period/test_current.py

Covers:
  - is_current_day / week / month / year against a frozen clock
  - Keys of any resolution compared at another resolution
  - is_current_period dispatch and its no-raise behaviour
  - The real clock as default
"""

from datetime import date, datetime, timedelta

import pytest

from datekeys.display import friendly
from datekeys.keys import Clock, InvalidDateKeyError, WeekRule, format_date_as_key
from datekeys.period import current
from datekeys.period import (
    is_current_day,
    is_current_month,
    is_current_period,
    is_current_week,
    is_current_year,
)


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def now():
    """Wednesday, June 17 2026, in 2026-W24 (Sun Jun 14 .. Sat Jun 20)."""
    return lambda: datetime(2026, 6, 17, 9, 30)


# ── Single resolutions ────────────────────────────────────────────────────────

class TestCurrentDay:

    def test_today(self, now):
        assert is_current_day("2026-06-17", now=now)

    def test_yesterday(self, now):
        assert not is_current_day("2026-06-16", now=now)

    def test_month_key_refines_to_first(self, now):
        assert not is_current_day("2026-06", now=now)
        assert is_current_day("2026-06", now=lambda: date(2026, 6, 1))

    def test_invalid_key_raises(self, now):
        with pytest.raises(InvalidDateKeyError):
            is_current_day("today", now=now)


class TestCurrentWeek:

    def test_week_key(self, now):
        assert is_current_week("2026-W24", now=now)
        assert not is_current_week("2026-W25", now=now)

    def test_day_keys_at_week_edges(self, now):
        assert is_current_week("2026-06-14", now=now)
        assert is_current_week("2026-06-20", now=now)
        assert not is_current_week("2026-06-13", now=now)
        assert not is_current_week("2026-06-21", now=now)

    def test_other_rule(self, now):
        iso = WeekRule.iso()
        assert not is_current_week("2026-06-14", now=now, rule=iso)
        assert is_current_week("2026-06-15", now=now, rule=iso)


class TestCurrentMonth:

    def test_month_key(self, now):
        assert is_current_month("2026-06", now=now)
        assert not is_current_month("2025-06", now=now)

    def test_day_and_week_keys(self, now):
        assert is_current_month("2026-06-01", now=now)
        assert is_current_month("2026-W24", now=now)


class TestCurrentYear:

    def test_year_key(self, now):
        assert is_current_year("2026", now=now)
        assert not is_current_year("2025", now=now)

    def test_day_key(self, now):
        assert not is_current_year("2025-12-31", now=now)

    def test_week_key_compares_its_first_day(self):
        # 2025-W53 runs Sun Dec 28 2025 .. Sat Jan 3 2026
        clock = lambda: date(2026, 1, 2)
        assert is_current_week("2025-W53", now=clock)
        assert not is_current_year("2025-W53", now=clock)


# ── is_current_period ─────────────────────────────────────────────────────────

class TestCurrentPeriod:

    @pytest.mark.parametrize("key", ["2026-06-17", "2026-W24", "2026-06", "2026"])
    def test_own_resolution(self, now, key):
        assert is_current_period(key, now=now)

    @pytest.mark.parametrize("key", ["2026-06-16", "2026-W23", "2026-05", "2025"])
    def test_own_resolution_false(self, now, key):
        assert not is_current_period(key, now=now)

    def test_explicit_period(self, now):
        assert is_current_period("2026-06-01", "month", now=now)
        assert is_current_period("2026-01-01", "year", now=now)
        assert not is_current_period("2026-06-01", "week", now=now)

    def test_undetectable_resolution_is_false(self, now):
        assert not is_current_period("soon", now=now)

    def test_unknown_period_is_false(self, now):
        assert not is_current_period("2026-06-17", "decade", now=now)


# ── Real clock ────────────────────────────────────────────────────────────────

class TestRealClock:

    def test_today_is_current(self):
        assert is_current_day(format_date_as_key(datetime.now(), "day"))

    def test_yesterday_is_not_current(self):
        yesterday = datetime.now() - timedelta(days=1)
        assert not is_current_day(format_date_as_key(yesterday, "day"))

    def test_this_year(self):
        assert is_current_period(str(date.today().year))


# ── Clock injection ───────────────────────────────────────────────────────────

class TestClock:

    def test_one_clock_type_shared_by_all_entry_points(self):
        assert current.Clock is Clock
        assert friendly.Clock is Clock

    def test_date_returning_clock(self):
        assert is_current_day("2026-06-17", now=lambda: date(2026, 6, 17))
