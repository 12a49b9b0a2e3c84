"""
NepaliDate - immutable BS date handle.

Stores a single BSDate. The AD instant, weekday and formatted text are
derived from it on every access.
"""

from __future__ import annotations

from datetime import datetime
from functools import total_ordering

from patro.calendar.converter import ADInput, BSDate, ad_to_bs, bs_to_ad
from patro.calendar.formatter import DateFormat, DisplayType, format_bs


def _local_now() -> datetime:
    return datetime.now().astimezone()


@total_ordering
class NepaliDate:
    """
    Bikram Sambat date with derived AD conversion and formatting.

    Construct through one of the factories; the plain constructor stores
    the BSDate it is given without validating it.

    Usage:
        today = NepaliDate.today()
        new_year = NepaliDate.from_bs(BSDate(2082, 1, 1))
        new_year.to_ad()                       # 2025-04-14 00:00 UTC
        NepaliDate.from_ad(date(2025, 12, 19)).format("DD/MM/YYYY")
    """

    __slots__ = ("_bs",)

    def __init__(self, bs_date: BSDate):
        object.__setattr__(self, "_bs", bs_date)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("NepaliDate is immutable")

    @classmethod
    def today(cls) -> NepaliDate:
        """BS date of the current local calendar day."""
        return cls.from_ad(_local_now())

    @classmethod
    def from_ad(cls, ad_value: ADInput) -> NepaliDate:
        """Convert an AD date, datetime or ``YYYY-MM-DD`` string."""
        return cls(ad_to_bs(ad_value))

    @classmethod
    def from_bs(cls, bs_date: BSDate) -> NepaliDate:
        """Wrap an existing BSDate as is."""
        return cls(bs_date)

    @property
    def year(self) -> int:
        return self._bs.year

    @property
    def month(self) -> int:
        return self._bs.month

    @property
    def day(self) -> int:
        return self._bs.day

    def weekday(self) -> int:
        """0 = Sunday ... 6 = Saturday."""
        return self.to_ad().isoweekday() % 7

    def to_ad(self) -> datetime:
        return bs_to_ad(self._bs.year, self._bs.month, self._bs.day)

    def to_bs(self) -> BSDate:
        # BSDate is frozen, but callers get their own instance
        return BSDate(self._bs.year, self._bs.month, self._bs.day)

    def format(
        self,
        fmt: DateFormat | str = DateFormat.YMD_DASH,
        month_display: DisplayType | str = DisplayType.NUMERIC,
        day_display: DisplayType | str = DisplayType.NUMERIC,
    ) -> str:
        return format_bs(self._bs, fmt, month_display, day_display)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NepaliDate):
            return NotImplemented
        return self._bs.as_tuple() == other._bs.as_tuple()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, NepaliDate):
            return NotImplemented
        return self._bs.as_tuple() < other._bs.as_tuple()

    def __hash__(self) -> int:
        return hash(self._bs.as_tuple())

    def __str__(self) -> str:
        return self._bs.isoformat()

    def __repr__(self) -> str:
        return f"NepaliDate({self.year}, {self.month}, {self.day})"
