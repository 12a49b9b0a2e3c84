"""
Custom exceptions for Patro.

Exception hierarchy:
    PatroError (base)
    ├── ConfigurationError
    ├── InvalidInputError
    └── OutOfRangeError
"""

from __future__ import annotations

from typing import Any


class PatroError(Exception):
    """Base exception for all Patro errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """
        Initialize the exception.

        Args:
            message: Error message
            details: Additional error details (optional)
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message


class ConfigurationError(PatroError):
    """
    Raised when configuration is invalid or missing.

    Examples:
        - Missing config file passed explicitly
        - Invalid YAML syntax
    """

    pass


class InvalidInputError(PatroError, ValueError):
    """
    Raised when an AD value is not a well-formed calendar instant.

    Examples:
        - Unparseable date string
        - Fractional timestamp or other non-date type
    """

    def __init__(
        self,
        message: str,
        value: Any = None,
        details: dict[str, Any] | None = None,
    ):
        """
        Initialize invalid input error.

        Args:
            message: Error message
            value: The rejected input
            details: Additional error details
        """
        super().__init__(message, details)
        self.value = value

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.message}: {self.value!r}"
        return self.message


class OutOfRangeError(PatroError, ValueError):
    """
    Raised when a date falls outside the supported calendar table.

    Applies to both conversion directions: an AD instant before the epoch
    or after the last supported year, and a BS year missing from the table.
    """

    def __init__(
        self,
        message: str,
        year: int | None = None,
        supported: tuple[int, int] | None = None,
        details: dict[str, Any] | None = None,
    ):
        """
        Initialize out-of-range error.

        Args:
            message: Error message
            year: Offending BS year, if known
            supported: (first, last) supported BS years
            details: Additional error details
        """
        super().__init__(message, details)
        self.year = year
        self.supported = supported

    def __str__(self) -> str:
        parts = [self.message]
        if self.year is not None:
            parts.append(f"[year {self.year}]")
        if self.supported:
            parts.append(f"(supported BS {self.supported[0]}-{self.supported[1]})")
        return " ".join(parts)
