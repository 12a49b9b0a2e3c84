"""
Tests for the NepaliDate value object.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from unittest.mock import patch

import pytest

from patro.calendar.converter import BSDate
from patro.calendar.nepali_date import NepaliDate
from patro.core.exceptions import OutOfRangeError


class TestConstruction:
    """Tests for the factory methods."""

    def test_from_ad(self):
        nd = NepaliDate.from_ad(date(2025, 12, 19))
        assert (nd.year, nd.month, nd.day) == (2082, 9, 4)

    def test_from_ad_string(self):
        assert NepaliDate.from_ad("2025-04-14") == NepaliDate.from_bs(BSDate(2082, 1, 1))

    def test_from_bs_is_unvalidated(self):
        nd = NepaliDate.from_bs(BSDate(2300, 1, 1))
        assert nd.year == 2300

        with pytest.raises(OutOfRangeError):
            nd.to_ad()

    def test_today_uses_local_calendar_day(self):
        late_evening = datetime(2025, 12, 19, 23, 0, tzinfo=timezone(timedelta(hours=5, minutes=45)))
        with patch("patro.calendar.nepali_date._local_now", return_value=late_evening):
            assert NepaliDate.today() == NepaliDate(BSDate(2082, 9, 4))


class TestAccessors:
    """Tests for derived values."""

    @pytest.fixture
    def new_year(self) -> NepaliDate:
        return NepaliDate.from_bs(BSDate(2082, 1, 1))

    def test_to_ad(self, new_year: NepaliDate):
        assert new_year.to_ad() == datetime(2025, 4, 14, tzinfo=timezone.utc)

    def test_weekday(self, new_year: NepaliDate):
        assert new_year.weekday() == 1  # Monday

    def test_to_bs_returns_equal_copy(self, new_year: NepaliDate):
        bs = new_year.to_bs()
        assert bs == BSDate(2082, 1, 1)

    def test_format_delegates(self, new_year: NepaliDate):
        assert new_year.format() == "२०८२-१-१"
        assert new_year.format("DD/MM/YYYY", "long", "long") == "सोमबार/बैशाख/२०८२"

    def test_immutable(self, new_year: NepaliDate):
        with pytest.raises(AttributeError):
            new_year.year = 2083
        with pytest.raises(AttributeError):
            new_year._bs = BSDate(2083, 1, 1)


class TestValueSemantics:
    """Tests for equality, ordering and text forms."""

    def test_equality_and_hash(self):
        a = NepaliDate(BSDate(2082, 9, 4))
        b = NepaliDate.from_ad(date(2025, 12, 19))
        assert a == b
        assert len({a, b}) == 1

    def test_ordering(self):
        assert NepaliDate(BSDate(2081, 12, 30)) < NepaliDate(BSDate(2082, 1, 1))
        assert NepaliDate(BSDate(2082, 2, 1)) >= NepaliDate(BSDate(2082, 1, 31))

    def test_str_and_repr(self):
        nd = NepaliDate(BSDate(2082, 9, 4))
        assert str(nd) == "2082-09-04"
        assert repr(nd) == "NepaliDate(2082, 9, 4)"
