"""Core modules for Patro."""

from patro.core.config import Config
from patro.core.exceptions import (
    ConfigurationError,
    InvalidInputError,
    OutOfRangeError,
    PatroError,
)

__all__ = [
    "Config",
    "PatroError",
    "ConfigurationError",
    "InvalidInputError",
    "OutOfRangeError",
]
