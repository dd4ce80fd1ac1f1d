from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """Screen-space point; y grows downward."""
    x: float
    y: float

    def distance_to(self, other: "Point") -> float:
        return math.hypot(other.x - self.x, other.y - self.y)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned bounds with a top-left origin."""
    x: float
    y: float
    width: float
    height: float

    @property
    def center(self) -> Point:
        return Point(self.x + self.width / 2.0, self.y + self.height / 2.0)

    @property
    def fit_radius(self) -> float:
        """Radius of the largest circle that fits inside the bounds."""
        return min(self.width, self.height) / 2.0
