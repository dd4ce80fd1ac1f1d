"""
Classified pointer events and the application actions derived from them.

Events describe *where* the clock was pressed; actions describe what the
host application should do about it. The host consumes actions, the
clockface core never exits the process itself.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .circular_region import Region


@dataclass(frozen=True)
class CenterPressed:
    region: Region = Region.CENTER


@dataclass(frozen=True)
class FacePressed:
    """Press on the dial; ``unit`` is the continuous clock unit under the pointer."""
    unit: float
    region: Region = Region.FACE


@dataclass(frozen=True)
class OutsidePressed:
    """Press beyond the dial edge; ``unit`` is still measured from the center."""
    unit: float
    region: Region = Region.OUTSIDE


ClockEvent = Union[CenterPressed, FacePressed, OutsidePressed]


@dataclass(frozen=True)
class Shutdown:
    """Intent: the host should close the application."""


@dataclass(frozen=True)
class ShowUnit:
    unit: float
    region: Region


@dataclass(frozen=True)
class NoAction:
    pass


ClockAction = Union[Shutdown, ShowUnit, NoAction]
