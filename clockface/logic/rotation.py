"""
Hand rotation angles.

Angles are in radians, 0 points to 12 o'clock and grows clockwise, which
matches screen space where y grows downward.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..exceptions.errors import InvalidTotalError
from ..models.clock_time import ClockTime

HOURS_ON_DIAL = 12
MINUTES_PER_HOUR = 60
SECONDS_PER_MINUTE = 60


def hand_rotation(count: int, total: int) -> float:
    """
    Fraction of a full turn swept by ``count`` out of ``total``.

    Callers pass ``count`` already in ``[0, total)``; an unreduced count
    (e.g. a 24h hour against ``total=12``) wraps past a full turn.

    Raises:
        InvalidTotalError: if ``total`` is not positive.
    """
    if total <= 0:
        raise InvalidTotalError(total)
    return 2.0 * math.pi * (count / total)


@dataclass(frozen=True)
class HandAngles:
    hour: float
    minute: float
    second: float


def hand_angles(now: ClockTime) -> HandAngles:
    return HandAngles(
        hour=hand_rotation(now.hour12, HOURS_ON_DIAL),
        minute=hand_rotation(now.minute, MINUTES_PER_HOUR),
        second=hand_rotation(now.second, SECONDS_PER_MINUTE),
    )
