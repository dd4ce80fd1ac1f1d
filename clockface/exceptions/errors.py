"""Clockface feature exceptions."""
from __future__ import annotations


class ClockfaceError(Exception):
    """Base exception for the clockface feature."""


class InvalidTotalError(ClockfaceError, ValueError):
    """Raised when a clock unit modulus is not a positive number."""

    def __init__(self, total: int) -> None:
        super().__init__(f"total must be > 0, got {total!r}")
        self.total = total


class InvalidClockTimeError(ClockfaceError, ValueError):
    """Raised when a ClockTime field is outside its range."""
