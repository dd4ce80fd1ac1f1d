"""
Immutable time snapshot consumed by the clock renderer.

A new ClockTime is taken on every tick and replaces the previous one
wholesale; equality is by value only.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..exceptions.errors import InvalidClockTimeError


@dataclass(frozen=True)
class ClockTime:
    """
    Hour/minute/second triple of the local wall clock.

    Attributes:
        hour (int): 0-23
        minute (int): 0-59
        second (int): 0-59
    """
    hour: int = 0
    minute: int = 0
    second: int = 0

    def __post_init__(self) -> None:
        for name, upper in (("hour", 24), ("minute", 60), ("second", 60)):
            value = getattr(self, name)
            if not 0 <= value < upper:
                raise InvalidClockTimeError(f"{name} must be in [0, {upper}), got {value!r}")

    @classmethod
    def from_datetime(cls, dt: datetime) -> "ClockTime":
        return cls(hour=dt.hour, minute=dt.minute, second=dt.second)

    @classmethod
    def now(cls) -> "ClockTime":
        """Snapshot of the platform local time."""
        return cls.from_datetime(datetime.now())

    @property
    def hour12(self) -> int:
        """Hour reduced to the 12-hour dial."""
        return self.hour % 12
