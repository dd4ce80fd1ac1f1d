"""
ClockRenderer – draws the analog clock into a Pillow image.
Separated from the view so that rendering can run (and be tested) without Tk.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from PIL import Image, ImageDraw

from ..models.circular_region import CENTER_BUTTON_RADIUS, CLOCK_FACE_RADIUS
from ..models.clock_time import ClockTime
from ..models.clockface_settings import ClockfaceSettings
from .rotation import hand_angles


def _hex_to_rgba(hexstr: str) -> Tuple[int, int, int, int]:
    """
    Convert hex color (#RRGGBB or #RGB) into an opaque RGBA tuple for PIL.
    """
    s = (hexstr or "#000000").strip()
    if not s.startswith("#"):
        s = "#" + s
    if len(s) == 4:
        r = int(s[1] * 2, 16); g = int(s[2] * 2, 16); b = int(s[3] * 2, 16)
    else:
        r = int(s[1:3], 16); g = int(s[3:5], 16); b = int(s[5:7], 16)
    return (r, g, b, 255)


@dataclass(frozen=True)
class HandStyle:
    """Hand length as a fraction of the fitted radius, width in radius/200 steps."""
    length: float
    width_steps: float


HOUR_HAND = HandStyle(length=0.5, width_steps=11.0)
MINUTE_HAND = HandStyle(length=0.8, width_steps=6.0)
SECOND_HAND = HandStyle(length=0.9, width_steps=1.0)


def hand_tip(cx: float, cy: float, length: float, angle: float) -> Tuple[float, float]:
    """Endpoint of a hand rotated ``angle`` radians clockwise from 12 o'clock."""
    return (cx + length * math.sin(angle), cy - length * math.cos(angle))


class ClockRenderer:
    """Renders a ClockTime to a transparent RGBA image of a given size."""

    def __init__(self, settings: ClockfaceSettings) -> None:
        self._settings = settings.normalized()

    def render(self, now: ClockTime, size: Tuple[int, int]) -> Image.Image:
        w, h = size
        if w <= 0 or h <= 0:
            return Image.new("RGBA", (1, 1), (0, 0, 0, 0))

        scale = self._settings.antialias
        sw, sh = w * scale, h * scale
        img = Image.new("RGBA", (sw, sh), (0, 0, 0, 0))
        drw = ImageDraw.Draw(img)

        cx, cy = sw / 2.0, sh / 2.0
        radius = min(sw, sh) / 2.0

        self._disc(drw, cx, cy, radius * CLOCK_FACE_RADIUS, _hex_to_rgba(self._settings.face_color))

        angles = hand_angles(now)
        step = radius / 200.0
        hand_rgba = _hex_to_rgba(self._settings.hand_color)
        for style, angle in ((HOUR_HAND, angles.hour), (MINUTE_HAND, angles.minute),
                             (SECOND_HAND, angles.second)):
            self._hand(drw, cx, cy, style.length * radius, max(1.0, style.width_steps * step),
                       angle, hand_rgba)

        self._disc(drw, cx, cy, radius * CENTER_BUTTON_RADIUS, _hex_to_rgba(self._settings.center_color))

        if scale == 1:
            return img
        return img.resize((w, h), Image.LANCZOS)

    # --- Drawing primitives -------------------------------------------------

    @staticmethod
    def _disc(drw: ImageDraw.ImageDraw, cx: float, cy: float, r: float, fill) -> None:
        drw.ellipse((cx - r, cy - r, cx + r, cy + r), fill=fill)

    @classmethod
    def _hand(cls, drw: ImageDraw.ImageDraw, cx: float, cy: float, length: float,
              width: float, angle: float, fill) -> None:
        tip = hand_tip(cx, cy, length, angle)
        drw.line([(cx, cy), tip], fill=fill, width=int(round(width)))
        # round caps
        cap = width / 2.0
        cls._disc(drw, cx, cy, cap, fill)
        cls._disc(drw, tip[0], tip[1], cap, fill)
