"""clockface/models/circular_region.py
=====================================

Radial bands of the clock face, in fractions of the fitted radius.

Bands are half-open: a normalized distance ``x`` belongs to a band when
``inner <= x < outer``. They are checked in the order of ``CLICK_REGIONS``
and must not overlap.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Region(str, Enum):
    """Hit-test outcome for a pointer press."""

    CENTER = "center"
    FACE = "face"
    OUTSIDE = "outside"


@dataclass(frozen=True)
class CircularRegion:
    region: Region
    inner: float
    outer: float

    def contains(self, normalized: float) -> bool:
        return self.inner <= normalized < self.outer


CLOCK_FACE_RADIUS = 1.0
CENTER_BUTTON_RADIUS = 0.067

CENTER_BUTTON_REGION = CircularRegion(Region.CENTER, 0.0, CENTER_BUTTON_RADIUS)
FACE_REGION = CircularRegion(Region.FACE, CENTER_BUTTON_RADIUS, CLOCK_FACE_RADIUS)

# Anything not matched falls through to Region.OUTSIDE.
CLICK_REGIONS: tuple[CircularRegion, ...] = (CENTER_BUTTON_REGION, FACE_REGION)
