"""
Headless date-picker support.

Everything a calendar widget needs from the library: the selection result
it hands back to its caller, the initial view parsed from a bound value,
and the month grid to draw.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime

from patro.calendar.converter import bs_to_ad, weekday
from patro.calendar.metadata import (
    DAY_NAMES,
    DEFAULT_TABLE,
    MONTH_NAMES,
    MONTHS_IN_YEAR,
    CalendarTable,
    month_name,
)
from patro.calendar.nepali_date import NepaliDate
from patro.calendar.numerals import to_nepali_numeral

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class PickerResult:
    """
    Value emitted when a day is selected.

    Attributes:
        bs: ASCII ``YYYY-MM-DD`` BS date
        ad: Equivalent AD instant (UTC midnight)
        nepali: ``bs`` with Devanagari numerals
    """

    bs: str
    ad: datetime
    nepali: str

    def to_dict(self) -> dict:
        return {"bs": self.bs, "ad": self.ad.isoformat(), "nepali": self.nepali}


def select(year: int, month: int, day: int, table: CalendarTable = DEFAULT_TABLE) -> PickerResult:
    """Build the result for a picked BS day."""
    bs = f"{year}-{month:02d}-{day:02d}"
    return PickerResult(bs=bs, ad=bs_to_ad(year, month, day, table), nepali=to_nepali_numeral(bs))


def parse_value(value: str | None) -> tuple[int, int]:
    """
    Initial (year, month) for a picker bound to ``value``.

    ``value`` is a ``YYYY-MM-DD`` BS string. Without one the view opens on
    today's BS month.
    """
    if value and "-" in value:
        parts = value.split("-")
        try:
            return int(parts[0]), int(parts[1])
        except (IndexError, ValueError):
            logger.warning("Ignoring malformed picker value: %s", value)

    today = NepaliDate.today()
    return today.year, today.month


def available_years(table: CalendarTable = DEFAULT_TABLE) -> list[int]:
    return list(table.years())


def month_labels(lang: str = "en") -> list[str]:
    return [name.get(lang) for name in MONTH_NAMES]


def weekday_labels(lang: str = "en") -> list[str]:
    """Column headers, Sunday first: 3 characters in Nepali, 2 in English."""
    width = 3 if lang == "np" else 2
    return [name.get(lang)[:width] for name in DAY_NAMES]


@dataclass(frozen=True)
class MonthView:
    """
    One BS month laid out as a Sunday-first week grid.

    The year must be in the table; ``days``, ``start_weekday`` and ``weeks()``
    raise ``OutOfRangeError`` otherwise.
    """

    year: int
    month: int
    table: CalendarTable = DEFAULT_TABLE

    def __post_init__(self) -> None:
        if not 1 <= self.month <= MONTHS_IN_YEAR:
            raise ValueError(f"Invalid month: {self.month}")

    @property
    def days(self) -> int:
        return self.table.days_in_month(self.year, self.month)

    @property
    def start_weekday(self) -> int:
        """Weekday of day 1 (0 = Sunday)."""
        return weekday(self.year, self.month, 1, self.table)

    def weeks(self) -> list[list[int | None]]:
        """Rows of seven cells; ``None`` pads before day 1 and after the last day."""
        cells: list[int | None] = [None] * self.start_weekday
        cells.extend(range(1, self.days + 1))
        while len(cells) % 7:
            cells.append(None)
        return [cells[i : i + 7] for i in range(0, len(cells), 7)]

    def title(self, lang: str = "en") -> str:
        year = to_nepali_numeral(self.year) if lang == "np" else str(self.year)
        return f"{month_name(self.month, lang)} {year}"

    def previous(self) -> MonthView:
        if self.month == 1:
            return MonthView(self.year - 1, MONTHS_IN_YEAR, self.table)
        return MonthView(self.year, self.month - 1, self.table)

    def next(self) -> MonthView:
        if self.month == MONTHS_IN_YEAR:
            return MonthView(self.year + 1, 1, self.table)
        return MonthView(self.year, self.month + 1, self.table)
