"""
AD <-> BS conversion by day counting against the calendar table.

Both directions count whole days from the table epoch (BS first year,
month 1, day 1). AD values are normalized to UTC midnight first so the
same calendar day always maps to the same BS date regardless of the
timezone or time of day it was given in.

Usage:
    from patro.calendar.converter import ad_to_bs, bs_to_ad

    ad_to_bs(date(2025, 4, 14))   # BSDate(year=2082, month=1, day=1)
    bs_to_ad(2082, 1, 1)          # datetime(2025, 4, 14, tzinfo=UTC)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from typing import Union

from patro.calendar.metadata import DEFAULT_TABLE, MONTHS_IN_YEAR, CalendarTable
from patro.calendar.numerals import to_english_numeral
from patro.core.exceptions import InvalidInputError, OutOfRangeError

logger = logging.getLogger(__name__)

ADInput = Union[date, datetime, str]


@dataclass(frozen=True, order=True)
class BSDate:
    """
    A Bikram Sambat calendar day.

    Not validated on construction; conversion and formatting are where an
    impossible day or unsupported year is detected.
    """

    year: int
    month: int
    day: int

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def isoformat(self) -> str:
        """ASCII ``YYYY-MM-DD`` form."""
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    @classmethod
    def fromisoformat(cls, value: str) -> BSDate:
        """Parse ``YYYY-MM-DD``; Devanagari digits are accepted too."""
        parts = to_english_numeral(value.strip()).split("-")
        if len(parts) != 3:
            raise InvalidInputError("Expected a YYYY-MM-DD BS date", value=value)
        try:
            year, month, day = (int(part) for part in parts)
        except ValueError as e:
            raise InvalidInputError("Expected a YYYY-MM-DD BS date", value=value) from e
        return cls(year, month, day)

    def __str__(self) -> str:
        return self.isoformat()


def normalize(ad_value: ADInput) -> datetime:
    """
    Reduce an AD value to its calendar day at midnight UTC.

    Aware datetimes keep the calendar day they show in their own timezone;
    naive datetimes and dates are taken at face value. ISO ``YYYY-MM-DD``
    strings are parsed.

    Raises:
        InvalidInputError: If the value is not a date, datetime or ISO date string
    """
    if isinstance(ad_value, str):
        try:
            ad_value = date.fromisoformat(ad_value.strip())
        except ValueError as e:
            raise InvalidInputError("Invalid AD date", value=ad_value) from e
    elif not isinstance(ad_value, date):
        # Rejects timestamps (int/float) and bool along with everything else
        raise InvalidInputError("Invalid AD date", value=ad_value)

    return datetime(ad_value.year, ad_value.month, ad_value.day, tzinfo=timezone.utc)


def ad_to_bs(ad_value: ADInput, table: CalendarTable = DEFAULT_TABLE) -> BSDate:
    """
    Convert an AD date to its BS equivalent.

    Args:
        ad_value: date, datetime (naive or aware) or ``YYYY-MM-DD`` string
        table: Calendar table to walk (defaults to the compiled-in one)

    Returns:
        BSDate

    Raises:
        InvalidInputError: If ``ad_value`` is not a calendar instant
        OutOfRangeError: If the day precedes the epoch or follows the last table year
    """
    ad_utc = normalize(ad_value)
    total_days = (ad_utc - table.epoch).days

    if total_days < 0:
        raise OutOfRangeError(
            "AD date is before supported Nepali calendar range",
            supported=table.span,
            details={"ad": ad_utc.date().isoformat()},
        )

    bs_year = table.first_year
    while True:
        if not table.contains(bs_year):
            raise OutOfRangeError(
                "AD date is after supported Nepali calendar range",
                supported=table.span,
                details={"ad": ad_utc.date().isoformat()},
            )
        year_days = table.days_in_year(bs_year)
        if total_days < year_days:
            break
        total_days -= year_days
        bs_year += 1

    bs_month = 1
    for month_days in table.month_lengths(bs_year):
        if total_days < month_days:
            break
        total_days -= month_days
        bs_month += 1

    result = BSDate(bs_year, bs_month, total_days + 1)
    logger.debug("ad_to_bs %s -> %s", ad_utc.date(), result)
    return result


def bs_to_ad(year: int, month: int, day: int, table: CalendarTable = DEFAULT_TABLE) -> datetime:
    """
    Convert a BS date to the AD instant at UTC midnight.

    Only the year is checked against the table. Month and day are counted
    linearly, so an impossible date such as month 2, day 40 lands on the
    AD day it extrapolates to rather than raising.

    Raises:
        OutOfRangeError: If ``year`` is not a table year, or the day count
            runs past what ``datetime`` can represent
    """
    if not table.contains(year):
        raise OutOfRangeError("BS year out of supported range", year=year, supported=table.span)

    total_days = sum(table.days_in_year(y) for y in range(table.first_year, year))
    total_days += sum(table.month_lengths(year)[: max(month - 1, 0)])
    total_days += day - 1

    try:
        return table.epoch + timedelta(days=total_days)
    except OverflowError as e:
        raise OutOfRangeError(
            "BS date is outside the representable AD range",
            year=year,
            supported=table.span,
            details={"month": month, "day": day},
        ) from e


def weekday(year: int, month: int, day: int, table: CalendarTable = DEFAULT_TABLE) -> int:
    """Weekday of a BS date, 0 = Sunday ... 6 = Saturday."""
    return bs_to_ad(year, month, day, table).isoweekday() % 7


def is_valid_bs_date(year: int, month: int, day: int, table: CalendarTable = DEFAULT_TABLE) -> bool:
    """Check a BS date against the table without raising."""
    if not table.contains(year):
        return False
    if month < 1 or month > MONTHS_IN_YEAR:
        return False
    return 1 <= day <= table.days_in_month(year, month)
