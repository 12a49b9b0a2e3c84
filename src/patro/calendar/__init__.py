"""Bikram Sambat calendar: metadata, conversion, formatting and numerals."""

from patro.calendar.converter import (
    BSDate,
    ad_to_bs,
    bs_to_ad,
    is_valid_bs_date,
    normalize,
    weekday,
)
from patro.calendar.formatter import DateFormat, DisplayType, format_ad, format_bs
from patro.calendar.metadata import (
    DEFAULT_TABLE,
    EPOCH,
    FIRST_YEAR,
    CalendarTable,
    day_name,
    month_name,
)
from patro.calendar.nepali_date import NepaliDate
from patro.calendar.numerals import to_english_numeral, to_nepali_numeral
from patro.calendar.picker import MonthView, PickerResult, select

__all__ = [
    "BSDate",
    "ad_to_bs",
    "bs_to_ad",
    "is_valid_bs_date",
    "normalize",
    "weekday",
    "DateFormat",
    "DisplayType",
    "format_ad",
    "format_bs",
    "DEFAULT_TABLE",
    "EPOCH",
    "FIRST_YEAR",
    "CalendarTable",
    "day_name",
    "month_name",
    "NepaliDate",
    "to_english_numeral",
    "to_nepali_numeral",
    "MonthView",
    "PickerResult",
    "select",
]
