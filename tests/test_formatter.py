"""
Tests for BS/AD string formatting and the numeral codec.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from patro.calendar.converter import BSDate
from patro.calendar.formatter import DateFormat, DisplayType, format_ad, format_bs
from patro.calendar.numerals import to_english_numeral, to_nepali_numeral
from patro.core.exceptions import OutOfRangeError

# 2082-09-04 BS is Friday 2025-12-19 AD
FRIDAY = BSDate(2082, 9, 4)


class TestFormatBs:
    """Tests for format_bs."""

    def test_numeric_is_not_zero_padded(self):
        result = format_bs(BSDate(2082, 9, 30), "YYYY-MM-DD", "numeric", "numeric")
        assert result == "२०८२-९-३०"
        assert to_english_numeral(result) == "2082-9-30"

    def test_defaults(self):
        assert format_bs(FRIDAY) == "२०८२-९-४"

    @pytest.mark.parametrize(
        ("fmt", "expected"),
        [
            ("YYYY-MM-DD", "२०८२-९-४"),
            ("DD-MM-YYYY", "४-९-२०८२"),
            ("DD/MM/YYYY", "४/९/२०८२"),
            ("YYYY/MM/DD", "२०८२/९/४"),
            (DateFormat.DMY_SLASH, "४/९/२०८२"),
            ("MM.DD.YYYY", "२०८२-९-४"),
            (None, "२०८२-९-४"),
        ],
    )
    def test_layouts(self, fmt, expected):
        assert format_bs(FRIDAY, fmt) == expected

    def test_month_long_and_short(self):
        assert format_bs(FRIDAY, month_display="long") == "२०८२-पुष-४"
        assert format_bs(BSDate(2082, 1, 4), month_display="long") == "२०८२-बैशाख-४"
        assert format_bs(BSDate(2082, 1, 4), month_display=DisplayType.SHORT) == "२०८२-बैश-४"

    def test_day_display_renders_weekday_name(self):
        assert format_bs(FRIDAY, day_display="long") == "२०८२-९-शुक्रबार"
        assert format_bs(FRIDAY, day_display="short") == "२०८२-९-शुक"

    def test_month_and_day_names_together(self):
        result = format_bs(FRIDAY, "DD/MM/YYYY", "long", "long")
        assert result == "शुक्रबार/पुष/२०८२"

    def test_unknown_display_falls_back_to_numeric(self):
        assert format_bs(FRIDAY, month_display="roman") == "२०८२-९-४"

    def test_year_outside_table_raises(self):
        with pytest.raises(OutOfRangeError):
            format_bs(BSDate(2100, 1, 1))


class TestFormatAd:
    """Tests for format_ad."""

    def test_slash_layout(self):
        assert format_ad(datetime(2025, 12, 19, tzinfo=timezone.utc), "DD/MM/YYYY") == "19/12/2025"

    @pytest.mark.parametrize(
        ("fmt", "expected"),
        [
            ("YYYY-MM-DD", "2025-04-05"),
            ("DD-MM-YYYY", "05-04-2025"),
            ("YYYY/MM/DD", "2025/04/05"),
            ("bogus", "2025-04-05"),
        ],
    )
    def test_zero_padded_ascii(self, fmt, expected):
        assert format_ad(date(2025, 4, 5), fmt) == expected

    def test_aware_datetime_read_in_utc(self):
        morning_in_nepal = datetime(2025, 12, 19, 3, 0, tzinfo=timezone(timedelta(hours=5, minutes=45)))
        assert format_ad(morning_in_nepal) == "2025-12-18"


class TestNumerals:
    """Tests for the numeral codec."""

    def test_number_to_nepali(self):
        assert to_nepali_numeral(2082) == "२०८२"
        assert to_nepali_numeral(0) == "०"

    def test_mixed_text_passes_through(self):
        assert to_nepali_numeral("Room 12, floor 3") == "Room १२, floor ३"
        assert to_english_numeral("मिति: २०८२/०९/०४") == "मिति: 2082/09/04"

    def test_unknown_characters_untouched(self):
        assert to_english_numeral("abc ✓") == "abc ✓"
        assert to_nepali_numeral("") == ""

    @pytest.mark.parametrize("text", ["2082-09-30", "0123456789", "a1b2c3", "--//"])
    def test_round_trip(self, text):
        assert to_english_numeral(to_nepali_numeral(text)) == text
