"""
String layouts for BS and AD dates.

BS dates render with Devanagari numerals and optional Nepali month/weekday
names. AD dates render with zero-padded ASCII digits.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from enum import Enum

from patro.calendar.converter import ADInput, BSDate, normalize, weekday
from patro.calendar.metadata import DEFAULT_TABLE, CalendarTable, day_name, month_name
from patro.calendar.numerals import to_nepali_numeral

logger = logging.getLogger(__name__)

SHORT_NAME_LENGTH = 3


class DateFormat(str, Enum):
    """Field order and separator."""

    YMD_DASH = "YYYY-MM-DD"
    DMY_DASH = "DD-MM-YYYY"
    DMY_SLASH = "DD/MM/YYYY"
    YMD_SLASH = "YYYY/MM/DD"


class DisplayType(str, Enum):
    """How a month or day field is rendered."""

    NUMERIC = "numeric"
    SHORT = "short"
    LONG = "long"


def _coerce_format(fmt: DateFormat | str | None) -> DateFormat:
    if fmt is None:
        return DateFormat.YMD_DASH
    try:
        return DateFormat(fmt)
    except ValueError:
        logger.warning("Unknown date format '%s', using %s", fmt, DateFormat.YMD_DASH.value)
        return DateFormat.YMD_DASH


def _coerce_display(display: DisplayType | str | None) -> DisplayType:
    if display is None:
        return DisplayType.NUMERIC
    try:
        return DisplayType(display)
    except ValueError:
        logger.warning("Unknown display type '%s', using numeric", display)
        return DisplayType.NUMERIC


def _layout(fmt: DateFormat, y: str, m: str, d: str) -> str:
    if fmt is DateFormat.DMY_DASH:
        return f"{d}-{m}-{y}"
    if fmt is DateFormat.DMY_SLASH:
        return f"{d}/{m}/{y}"
    if fmt is DateFormat.YMD_SLASH:
        return f"{y}/{m}/{d}"
    return f"{y}-{m}-{d}"


def _shorten(name: str, display: DisplayType) -> str:
    # Plain character slice; Devanagari vowel signs count as characters
    if display is DisplayType.SHORT:
        return name[:SHORT_NAME_LENGTH]
    return name


def format_bs(
    bs_date: BSDate,
    fmt: DateFormat | str | None = DateFormat.YMD_DASH,
    month_display: DisplayType | str | None = DisplayType.NUMERIC,
    day_display: DisplayType | str | None = DisplayType.NUMERIC,
    table: CalendarTable = DEFAULT_TABLE,
) -> str:
    """
    Render a BS date.

    The year is always in Devanagari numerals. ``month_display`` picks
    between the month number, its Nepali name or the first three characters
    of that name. ``day_display`` is numeric for the day of month, while
    ``short``/``long`` render the Nepali *weekday* name instead.

    Args:
        bs_date: Date to render
        fmt: One of the ``DateFormat`` layouts; unknown values fall back to YYYY-MM-DD
        month_display: numeric, short or long
        day_display: numeric, short or long
        table: Calendar table used to derive the weekday

    Returns:
        Formatted string, e.g. ``"२०८२-९-३०"``

    Raises:
        OutOfRangeError: If the year is outside the table
    """
    layout = _coerce_format(fmt)
    month_mode = _coerce_display(month_display)
    day_mode = _coerce_display(day_display)

    # Resolving the weekday up front also rejects years outside the table
    index = weekday(bs_date.year, bs_date.month, bs_date.day, table)
    y = to_nepali_numeral(bs_date.year)

    if month_mode is DisplayType.NUMERIC:
        m = to_nepali_numeral(bs_date.month)
    else:
        m = _shorten(month_name(bs_date.month, "np"), month_mode)

    if day_mode is DisplayType.NUMERIC:
        d = to_nepali_numeral(bs_date.day)
    else:
        d = _shorten(day_name(index, "np"), day_mode)

    return _layout(layout, y, m, d)


def format_ad(ad_value: ADInput, fmt: DateFormat | str | None = DateFormat.YMD_DASH) -> str:
    """
    Render an AD date with zero-padded ASCII fields.

    Aware datetimes are read in UTC; naive datetimes and dates as given.

    Examples:
        >>> format_ad(date(2025, 12, 19), "DD/MM/YYYY")
        '19/12/2025'
    """
    layout = _coerce_format(fmt)

    if isinstance(ad_value, datetime) and ad_value.tzinfo is not None:
        ad_value = ad_value.astimezone(timezone.utc)
    day = normalize(ad_value)

    return _layout(layout, f"{day.year:04d}", f"{day.month:02d}", f"{day.day:02d}")
