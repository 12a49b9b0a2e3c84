"""
Bikram Sambat calendar metadata.

Month lengths are not computable; they are published per year. The table
below covers BS 2000 through BS 2090, anchored so that 2000-01-01 BS is
1943-04-14 AD.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import NamedTuple, Sequence

from patro.core.exceptions import OutOfRangeError

FIRST_YEAR = 2000

# 1943-04-14 AD (UTC midnight) == FIRST_YEAR-01-01 BS
EPOCH = datetime(1943, 4, 14, tzinfo=timezone.utc)

MONTHS_IN_YEAR = 12
DAYS_IN_WEEK = 7

LANGUAGES = ("en", "np")

# Days in each month, one row per BS year starting at FIRST_YEAR
MONTH_LENGTHS: tuple[tuple[int, ...], ...] = (
    (30, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31),  # 2000
    (31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),  # 2001
    (31, 31, 32, 32, 31, 30, 30, 29, 30, 29, 30, 30),  # 2002
    (31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31),  # 2003
    (30, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31),  # 2004
    (31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),  # 2005
    (31, 31, 32, 32, 31, 30, 30, 29, 30, 29, 30, 30),  # 2006
    (31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31),  # 2007
    (31, 31, 31, 32, 31, 31, 29, 30, 30, 29, 29, 31),  # 2008
    (31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),  # 2009
    (31, 31, 32, 32, 31, 30, 30, 29, 30, 29, 30, 30),  # 2010
    (31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31),  # 2011
    (31, 31, 31, 32, 31, 31, 29, 30, 30, 29, 30, 30),  # 2012
    (31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),  # 2013
    (31, 31, 32, 32, 31, 30, 30, 29, 30, 29, 30, 30),  # 2014
    (31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31),  # 2015
    (31, 31, 31, 32, 31, 31, 29, 30, 30, 29, 30, 30),  # 2016
    (31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),  # 2017
    (31, 32, 31, 32, 31, 30, 30, 29, 30, 29, 30, 30),  # 2018
    (31, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31),  # 2019
    (31, 31, 31, 32, 31, 31, 30, 29, 30, 29, 30, 30),  # 2020
    (31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),  # 2021
    (31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 30),  # 2022
    (31, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31),  # 2023
    (31, 31, 31, 32, 31, 31, 30, 29, 30, 29, 30, 30),  # 2024
    (31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),  # 2025
    (31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31),  # 2026
    (30, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31),  # 2027
    (31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),  # 2028
    (31, 31, 32, 31, 32, 30, 30, 29, 30, 29, 30, 30),  # 2029
    (31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31),  # 2030
    (30, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31),  # 2031
    (31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),  # 2032
    (31, 31, 32, 32, 31, 30, 30, 29, 30, 29, 30, 30),  # 2033
    (31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31),  # 2034
    (30, 32, 31, 32, 31, 31, 29, 30, 30, 29, 29, 31),  # 2035
    (31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),  # 2036
    (31, 31, 32, 32, 31, 30, 30, 29, 30, 29, 30, 30),  # 2037
    (31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31),  # 2038
    (31, 31, 31, 32, 31, 31, 29, 30, 30, 29, 30, 30),  # 2039
    (31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),  # 2040
    (31, 31, 32, 32, 31, 30, 30, 29, 30, 29, 30, 30),  # 2041
    (31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31),  # 2042
    (31, 31, 31, 32, 31, 31, 29, 30, 30, 29, 30, 30),  # 2043
    (31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),  # 2044
    (31, 32, 31, 32, 31, 30, 30, 29, 30, 29, 30, 30),  # 2045
    (31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31),  # 2046
    (31, 31, 31, 32, 31, 31, 30, 29, 30, 29, 30, 30),  # 2047
    (31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),  # 2048
    (31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 30),  # 2049
    (31, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31),  # 2050
    (31, 31, 31, 32, 31, 31, 30, 29, 30, 29, 30, 30),  # 2051
    (31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),  # 2052
    (31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 30),  # 2053
    (31, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31),  # 2054
    (31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),  # 2055
    (31, 31, 32, 31, 32, 30, 30, 29, 30, 29, 30, 30),  # 2056
    (31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31),  # 2057
    (30, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31),  # 2058
    (31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),  # 2059
    (31, 31, 32, 32, 31, 30, 30, 29, 30, 29, 30, 30),  # 2060
    (31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31),  # 2061
    (30, 32, 31, 32, 31, 31, 29, 30, 29, 30, 29, 31),  # 2062
    (31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),  # 2063
    (31, 31, 32, 32, 31, 30, 30, 29, 30, 29, 30, 30),  # 2064
    (31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31),  # 2065
    (31, 31, 31, 32, 31, 31, 29, 30, 30, 29, 29, 31),  # 2066
    (31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),  # 2067
    (31, 31, 32, 32, 31, 30, 30, 29, 30, 29, 30, 30),  # 2068
    (31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31),  # 2069
    (31, 31, 31, 32, 31, 31, 29, 30, 30, 29, 30, 30),  # 2070
    (31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),  # 2071
    (31, 32, 31, 32, 31, 30, 30, 29, 30, 29, 30, 30),  # 2072
    (31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31),  # 2073
    (31, 31, 31, 32, 31, 31, 30, 29, 30, 29, 30, 30),  # 2074
    (31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),  # 2075
    (31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 30),  # 2076
    (31, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31),  # 2077
    (31, 31, 31, 32, 31, 31, 30, 29, 30, 29, 30, 30),  # 2078
    (31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),  # 2079
    (31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 30),  # 2080
    (31, 31, 32, 32, 31, 30, 30, 30, 29, 30, 30, 30),  # 2081
    (30, 32, 31, 32, 31, 30, 30, 30, 29, 30, 30, 30),  # 2082
    (31, 31, 32, 31, 31, 30, 30, 30, 29, 30, 30, 30),  # 2083
    (31, 31, 32, 31, 31, 30, 30, 30, 29, 30, 30, 30),  # 2084
    (31, 32, 31, 32, 30, 31, 30, 30, 29, 30, 30, 30),  # 2085
    (30, 32, 31, 32, 31, 30, 30, 30, 29, 30, 30, 30),  # 2086
    (31, 31, 32, 31, 31, 31, 30, 30, 29, 30, 30, 30),  # 2087
    (30, 31, 32, 32, 30, 31, 30, 30, 29, 30, 30, 30),  # 2088
    (30, 32, 31, 32, 31, 30, 30, 30, 29, 30, 30, 30),  # 2089
    (30, 32, 31, 32, 31, 30, 30, 30, 29, 30, 30, 30),  # 2090
)


class LocalizedName(NamedTuple):
    """English and Nepali spelling of a month or weekday."""

    en: str
    np: str

    def get(self, lang: str = "en") -> str:
        return self.np if lang == "np" else self.en


MONTH_NAMES: tuple[LocalizedName, ...] = (
    LocalizedName("Baisakh", "बैशाख"),
    LocalizedName("Jestha", "जेठ"),
    LocalizedName("Ashadh", "असार"),
    LocalizedName("Shrawan", "साउन"),
    LocalizedName("Bhadra", "भदौ"),
    LocalizedName("Ashwin", "असोज"),
    LocalizedName("Kartik", "कार्तिक"),
    LocalizedName("Mangsir", "मंसिर"),
    LocalizedName("Poush", "पुष"),
    LocalizedName("Magh", "माघ"),
    LocalizedName("Falgun", "फागुन"),
    LocalizedName("Chaitra", "चैत"),
)

# Index 0 is Sunday, matching the weekday numbering used throughout patro
DAY_NAMES: tuple[LocalizedName, ...] = (
    LocalizedName("Sunday", "आइतबार"),
    LocalizedName("Monday", "सोमबार"),
    LocalizedName("Tuesday", "मंगलबार"),
    LocalizedName("Wednesday", "बुधबार"),
    LocalizedName("Thursday", "बिहिबार"),
    LocalizedName("Friday", "शुक्रबार"),
    LocalizedName("Saturday", "शनिबार"),
)


class CalendarTable:
    """
    Read-only view over the per-year month lengths.

    Instances hold tuples only and expose no mutators, so one table can be
    shared by every conversion in the process. The converter receives the
    table by reference; ``DEFAULT_TABLE`` is the compiled-in one.

    Usage:
        table = CalendarTable(2000, EPOCH, MONTH_LENGTHS)
        table.days_in_month(2082, 9)   # -> 29
        table.days_in_year(2082)       # -> 365
    """

    __slots__ = ("_first_year", "_epoch", "_rows", "_year_totals")

    def __init__(self, first_year: int, epoch: datetime, rows: Sequence[Sequence[int]]):
        frozen = tuple(tuple(row) for row in rows)
        for offset, row in enumerate(frozen):
            if len(row) != MONTHS_IN_YEAR or any(length <= 0 for length in row):
                raise ValueError(
                    f"Row for BS {first_year + offset} must hold {MONTHS_IN_YEAR} positive lengths"
                )
        if not frozen:
            raise ValueError("Calendar table needs at least one year")

        object.__setattr__(self, "_first_year", first_year)
        object.__setattr__(self, "_epoch", epoch)
        object.__setattr__(self, "_rows", frozen)
        object.__setattr__(self, "_year_totals", tuple(sum(row) for row in frozen))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def first_year(self) -> int:
        return self._first_year

    @property
    def last_year(self) -> int:
        return self._first_year + len(self._rows) - 1

    @property
    def epoch(self) -> datetime:
        """AD instant of day 1, month 1 of ``first_year``."""
        return self._epoch

    @property
    def span(self) -> tuple[int, int]:
        return (self.first_year, self.last_year)

    def __len__(self) -> int:
        return len(self._rows)

    def years(self) -> range:
        return range(self.first_year, self.last_year + 1)

    def contains(self, year: int) -> bool:
        if isinstance(year, bool) or not isinstance(year, int):
            return False
        return self.first_year <= year <= self.last_year

    def _index(self, year: int) -> int:
        if not self.contains(year):
            raise OutOfRangeError("BS year out of supported range", year=year, supported=self.span)
        return year - self._first_year

    def month_lengths(self, year: int) -> tuple[int, ...]:
        """Twelve month lengths for ``year``."""
        return self._rows[self._index(year)]

    def days_in_month(self, year: int, month: int) -> int:
        if not 1 <= month <= MONTHS_IN_YEAR:
            raise ValueError(f"Invalid month: {month}")
        return self.month_lengths(year)[month - 1]

    def days_in_year(self, year: int) -> int:
        return self._year_totals[self._index(year)]

    def __repr__(self) -> str:
        return f"CalendarTable(BS {self.first_year}-{self.last_year})"


def month_name(month: int, lang: str = "en") -> str:
    """Month name for ``month`` (1-12) in ``lang`` (``en`` or ``np``)."""
    if 1 <= month <= MONTHS_IN_YEAR:
        return MONTH_NAMES[month - 1].get(lang)
    raise ValueError(f"Invalid month: {month}")


def day_name(weekday: int, lang: str = "en") -> str:
    """Weekday name for ``weekday`` (0 = Sunday ... 6 = Saturday)."""
    if 0 <= weekday < DAYS_IN_WEEK:
        return DAY_NAMES[weekday].get(lang)
    raise ValueError(f"Invalid weekday: {weekday}")


DEFAULT_TABLE = CalendarTable(FIRST_YEAR, EPOCH, MONTH_LENGTHS)
