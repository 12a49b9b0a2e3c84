"""
Patro - Bikram Sambat (BS) and Gregorian (AD) date conversion.

Converts dates between the Nepali Bikram Sambat calendar and the Gregorian
calendar using a published month-length table, and renders BS dates with
Devanagari numerals and Nepali month and weekday names.
"""

__version__ = "1.0.0"

from patro.calendar import (
    BSDate,
    CalendarTable,
    DateFormat,
    DisplayType,
    MonthView,
    NepaliDate,
    PickerResult,
    ad_to_bs,
    bs_to_ad,
    format_ad,
    format_bs,
    to_english_numeral,
    to_nepali_numeral,
)
from patro.core.config import Config
from patro.core.exceptions import (
    ConfigurationError,
    InvalidInputError,
    OutOfRangeError,
    PatroError,
)
from patro.cli.main import cli

__all__ = [
    "__version__",
    "BSDate",
    "CalendarTable",
    "DateFormat",
    "DisplayType",
    "MonthView",
    "NepaliDate",
    "PickerResult",
    "ad_to_bs",
    "bs_to_ad",
    "format_ad",
    "format_bs",
    "to_english_numeral",
    "to_nepali_numeral",
    "Config",
    "PatroError",
    "ConfigurationError",
    "InvalidInputError",
    "OutOfRangeError",
    "cli",
]
