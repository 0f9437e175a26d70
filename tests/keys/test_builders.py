"""
tests/keys/test_builders.py

Covers:
  - Zero padding of month, day and week
  - Year emitted verbatim
  - Builder output always passes the matching guard for in-range input
  - Over-wide fields are kept verbatim and fail the guard
"""

import numpy as np
import pytest

from datekeys.keys import (
    is_day_key,
    is_month_key,
    is_week_key,
    is_year_key,
    parse_day_key,
    to_day_key,
    to_month_key,
    to_week_key,
    to_year_key,
)


# ── Formatting ───────────────────────────────────────────────────────────────

class TestFormatting:

    def test_day_key(self):
        assert to_day_key(2024, 1, 15) == "2024-01-15"
        assert to_day_key(2024, 12, 5) == "2024-12-05"

    def test_week_key(self):
        assert to_week_key(2024, 3) == "2024-W03"
        assert to_week_key(2024, 52) == "2024-W52"

    def test_month_key(self):
        assert to_month_key(2024, 1) == "2024-01"
        assert to_month_key(2024, 12) == "2024-12"

    def test_year_key(self):
        assert to_year_key(2024) == "2024"

    def test_year_is_not_padded(self):
        assert to_year_key(999) == "999"
        assert not is_year_key(to_year_key(999))

    def test_numpy_integers_accepted(self):
        assert to_day_key(np.int64(2024), np.int64(2), np.int64(9)) == "2024-02-09"


# ── Builder ↔ guard agreement ────────────────────────────────────────────────

class TestGuardAgreement:

    @pytest.mark.parametrize("year", [1970, 2000, 2024, 9999])
    def test_all_months_and_days(self, year):
        for month in range(1, 13):
            assert is_month_key(to_month_key(year, month))
            for day in range(1, 32):
                assert is_day_key(to_day_key(year, month, day))

    @pytest.mark.parametrize("year", [1970, 2024])
    def test_all_weeks(self, year):
        for week in range(1, 54):
            assert is_week_key(to_week_key(year, week))

    def test_year(self):
        assert is_year_key(to_year_key(2024))

    def test_three_digit_field_breaks_shape(self):
        assert to_month_key(2024, 100) == "2024-100"
        assert not is_month_key(to_month_key(2024, 100))
        assert not is_week_key(to_week_key(2024, 100))

    def test_no_range_validation(self):
        assert to_month_key(2024, 13) == "2024-13"
        assert to_week_key(2024, 99) == "2024-W99"


# ── Round trip ───────────────────────────────────────────────────────────────

class TestRoundTrip:

    def test_day_parts(self):
        assert parse_day_key(to_day_key(2024, 1, 15)) == (2024, 1, 15)
        parts = parse_day_key(to_day_key(2024, 1, 15))
        assert (parts.year, parts.month, parts.day) == (2024, 1, 15)
