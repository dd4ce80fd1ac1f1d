"""
ClockService – local time snapshots and status texts for the clock view.
Separated from the view to keep responsibilities clean.
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable, Optional

from ..models.clock_events import ClockAction, ShowUnit, Shutdown
from ..models.clock_time import ClockTime


class ClockService:
    """Reads the wall clock and formats what the view displays."""

    def __init__(self, clock: Optional[Callable[[], datetime]] = None) -> None:
        self._clock = clock or datetime.now

    def now(self) -> ClockTime:
        return ClockTime.from_datetime(self._clock())

    @staticmethod
    def format_time(now: ClockTime) -> str:
        return f"{now.hour:02d}:{now.minute:02d}:{now.second:02d}"

    @staticmethod
    def describe(action: ClockAction) -> str:
        if isinstance(action, ShowUnit):
            return f"{action.region.value.capitalize()} pressed at minute {action.unit:.3f}"
        if isinstance(action, Shutdown):
            return "Closing"
        return ""
