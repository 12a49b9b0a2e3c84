"""
ASCII <-> Devanagari numeral transliteration.

Both directions are total: characters outside the digit sets pass through.
"""

from __future__ import annotations

NEPALI_DIGITS = "०१२३४५६७८९"
ENGLISH_DIGITS = "0123456789"

_TO_NEPALI = str.maketrans(ENGLISH_DIGITS, NEPALI_DIGITS)
_TO_ENGLISH = str.maketrans(NEPALI_DIGITS, ENGLISH_DIGITS)


def to_nepali_numeral(value: int | str) -> str:
    """
    Replace ASCII digits with Devanagari numerals.

    Examples:
        >>> to_nepali_numeral(2082)
        '२०८२'
        >>> to_nepali_numeral("2082-09-30")
        '२०८२-०९-३०'
    """
    return str(value).translate(_TO_NEPALI)


def to_english_numeral(value: int | str) -> str:
    """
    Replace Devanagari numerals with ASCII digits.

    Examples:
        >>> to_english_numeral("२०८२-०९-३०")
        '2082-09-30'
    """
    return str(value).translate(_TO_ENGLISH)
