"""
RenderCache – single-slot cache for the rendered clock.

The cached artifact is valid only for the exact key it was rendered for
(ClockTime snapshot plus render size). Observing a different time or
asking for a different key clears the slot before the next read.
"""

from __future__ import annotations

import logging
from typing import Callable, Generic, Hashable, Optional, TypeVar

from ..models.clock_time import ClockTime

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RenderCache(Generic[T]):
    """Holds at most one artifact together with the key it was rendered for."""

    def __init__(self) -> None:
        self._key: Optional[Hashable] = None
        self._artifact: Optional[T] = None
        self._observed: Optional[ClockTime] = None
        self.hits = 0
        self.misses = 0

    @property
    def is_empty(self) -> bool:
        return self._artifact is None

    def observe(self, now: ClockTime) -> bool:
        """
        Records the latest tick time.

        Returns:
            bool: True if the time changed and the cache was cleared.
        """
        if now == self._observed:
            return False
        self._observed = now
        self.invalidate()
        return True

    def invalidate(self) -> None:
        self._key = None
        self._artifact = None

    def get_or_render(self, key: Hashable, render: Callable[[], T]) -> T:
        if self._artifact is not None and key == self._key:
            self.hits += 1
            return self._artifact
        self.misses += 1
        logger.debug("Render cache miss for %r", key)
        self.invalidate()
        artifact = render()
        self._key = key
        self._artifact = artifact
        return artifact
