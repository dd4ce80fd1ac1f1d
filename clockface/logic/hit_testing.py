"""
clockface/logic/hit_testing.py
==============================

Maps pointer presses back onto the clock face.

* ``classify`` decides which radial band (center button, face, outside)
  a press falls into.
* ``unit_from_position`` converts a press into a continuous clock unit,
  zero at 12 o'clock and increasing clockwise.
* ``classify_press`` combines both into a ``ClockEvent``.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable, Optional

from ..exceptions.errors import InvalidTotalError
from ..models.circular_region import CLICK_REGIONS, CircularRegion, Region
from ..models.clock_events import CenterPressed, ClockEvent, FacePressed, OutsidePressed
from ..models.geometry import Point, Rect

logger = logging.getLogger(__name__)

UNIT_PRECISION = 1000


def normalized_distance(center: Point, bounds: Rect, click: Point) -> Optional[float]:
    """
    Distance from ``center`` to ``click`` in multiples of the fitted radius.

    Returns:
        Optional[float]: 0 at the center, 1 on the dial edge, None when the
        bounds have no area.
    """
    fit_radius = bounds.fit_radius
    if fit_radius <= 0:
        return None
    return center.distance_to(click) / fit_radius


def classify(
    center: Point,
    bounds: Rect,
    click: Point,
    regions: Iterable[CircularRegion] = CLICK_REGIONS,
) -> Optional[Region]:
    normalized = normalized_distance(center, bounds, click)
    if normalized is None:
        logger.debug("Ignoring press at %s: degenerate bounds %s", click, bounds)
        return None
    for band in regions:
        if band.contains(normalized):
            return band.region
    return Region.OUTSIDE


def unit_from_position(center: Point, position: Point, total: int) -> float:
    """
    Clock unit under ``position`` on a dial of ``total`` units.

    The vertical axis is flipped so that up is positive, the angle is taken
    with ``atan2`` and remapped from the mathematical frame (0 at 3 o'clock,
    counter-clockwise) to the dial frame (0 at 12 o'clock, clockwise).
    The result is rounded to three decimals and lies in ``[0, total)``.

    Raises:
        InvalidTotalError: if ``total`` is not positive.
    """
    if total <= 0:
        raise InvalidTotalError(total)

    dx = position.x - center.x
    dy = -(position.y - center.y)
    raw = math.atan2(dy, dx)

    angle = (2.5 * math.pi - raw) % (2.0 * math.pi)
    fraction = angle / (2.0 * math.pi)
    unit = round(total * fraction * UNIT_PRECISION) / UNIT_PRECISION
    # 11.9999 rounds up to 12.0 on a 12-unit dial; that is 12 o'clock.
    unit = unit % total

    logger.debug("Press %s around %s -> %.3f / %d", position, center, unit, total)
    return unit


def classify_press(bounds: Rect, click: Point, total: int) -> Optional[ClockEvent]:
    """
    Classifies a press against a dial centered in ``bounds``.

    Returns:
        Optional[ClockEvent]: None for degenerate bounds.
    """
    center = bounds.center
    region = classify(center, bounds, click)
    if region is None:
        return None
    if region is Region.CENTER:
        return CenterPressed()
    unit = unit_from_position(center, click, total)
    if region is Region.FACE:
        return FacePressed(unit)
    return OutsidePressed(unit)
