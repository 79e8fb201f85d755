"""Exceptions raised by the Nepal Sambat engine.

Exception hierarchy:
    NepalSambatError (base)
    ├── InvalidDateError
    └── ConfigurationError
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class NepalSambatError(Exception):
    """Base exception for all engine errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message


class InvalidDateError(NepalSambatError, ValueError):
    """Raised when a Gregorian year/month/day triple is malformed or out of range.

    This is the only validation boundary of the engine; every astronomical
    function downstream assumes a valid Julian Day.
    """

    def __init__(
        self,
        message: str,
        year: Any = None,
        month: Any = None,
        day: Any = None,
    ):
        super().__init__(message)
        self.year = year
        self.month = month
        self.day = day

    def __str__(self) -> str:
        return self.message


class ConfigurationError(NepalSambatError):
    """Raised when an environment override cannot be parsed."""

    def __init__(self, message: str, key: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)
        self.key = key

    def __str__(self) -> str:
        if self.key:
            return f"[{self.key}] {self.message}"
        return self.message


__all__ = ["NepalSambatError", "InvalidDateError", "ConfigurationError"]
