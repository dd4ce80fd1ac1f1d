"""
ClockController – turns ticks and presses into state changes and actions.

Kept free of Tk so the host window only has to forward bounds, pointer
positions and timestamps, and execute the returned actions.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..models.clock_events import (
    CenterPressed,
    ClockAction,
    ClockEvent,
    NoAction,
    ShowUnit,
    Shutdown,
)
from ..models.clock_time import ClockTime
from ..models.clockface_settings import ClockfaceSettings
from ..models.geometry import Point, Rect
from .hit_testing import classify_press
from .rotation import MINUTES_PER_HOUR

logger = logging.getLogger(__name__)


class ClockController:
    """Tracks the displayed time and classifies presses on the dial."""

    def __init__(self, settings: Optional[ClockfaceSettings] = None,
                 now: Optional[ClockTime] = None, press_total: int = MINUTES_PER_HOUR) -> None:
        self._settings = (settings or ClockfaceSettings()).normalized()
        self._now = now if now is not None else ClockTime.now()
        self._press_total = press_total

    @property
    def now(self) -> ClockTime:
        return self._now

    def tick(self, now: ClockTime) -> bool:
        """
        Stores the tick time.

        Returns:
            bool: True when the displayed time changed.
        """
        if now == self._now:
            return False
        self._now = now
        return True

    def press(self, bounds: Rect, click: Point) -> Optional[ClockEvent]:
        return classify_press(bounds, click, self._press_total)

    def action_for(self, event: Optional[ClockEvent]) -> ClockAction:
        if event is None:
            return NoAction()
        if isinstance(event, CenterPressed):
            if self._settings.exit_on_center:
                logger.info("Center button pressed, requesting shutdown")
                return Shutdown()
            return NoAction()
        logger.info("Dial pressed in %s at %.3f", event.region.value, event.unit)
        return ShowUnit(unit=event.unit, region=event.region)

    def handle_press(self, bounds: Rect, click: Point) -> ClockAction:
        return self.action_for(self.press(bounds, click))
