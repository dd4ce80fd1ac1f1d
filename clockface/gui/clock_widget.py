"""
ClockWidget (Tkinter)
---------------------
Analog clock view drawn on a Tk canvas.

UX notes:
- The dial is rendered with Pillow and shown as a PhotoImage.
- The image is re-rendered only when the displayed second or the canvas
  size changes.
- A press on the center button asks the host to close, a press on the dial
  reports the minute under the pointer.
"""

from __future__ import annotations

import logging
import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional

from PIL import ImageTk

from ..logic.clock_controller import ClockController
from ..logic.clock_renderer import ClockRenderer
from ..logic.clock_service import ClockService
from ..logic.clockface_settings_repository import ClockfaceSettingsRepository
from ..logic.render_cache import RenderCache
from ..models.clock_events import ClockAction
from ..models.clockface_settings import ClockfaceSettings
from ..models.geometry import Point, Rect

logger = logging.getLogger(__name__)


class ClockWidget(ttk.Frame):
    """
    Main clock view. Mount this into any container (e.g., a tab or a panel).

    The widget refreshes itself using Tk's `after` method. Presses are turned
    into ClockActions and handed to `on_action`; the widget never closes the
    application by itself.
    """

    def __init__(
        self,
        parent: tk.Misc,
        settings: Optional[ClockfaceSettings] = None,
        on_action: Optional[Callable[[ClockAction], None]] = None,
    ) -> None:
        """
        Args:
            parent (tk.Misc): Tk parent container.
            settings (ClockfaceSettings, optional): Defaults to config.ini / built-ins.
            on_action (callable, optional): Receives actions produced by presses.
        """
        super().__init__(parent)
        self._on_action = on_action

        # Services & state
        self._settings = (settings or ClockfaceSettingsRepository().load()).normalized()
        self._svc = ClockService()
        self._controller = ClockController(self._settings, now=self._svc.now())
        self._renderer = ClockRenderer(self._settings)
        self._cache: RenderCache = RenderCache()
        self._photo: Optional[ImageTk.PhotoImage] = None
        self._after_id: Optional[str] = None

        # UI
        self._build_ui()
        self._schedule_tick()

    # --- Public API ---------------------------------------------------------

    def stop(self) -> None:
        """Cancels the pending tick."""
        if self._after_id is not None:
            try:
                self.after_cancel(self._after_id)
            except tk.TclError:
                pass
            self._after_id = None

    def destroy(self) -> None:
        self.stop()
        super().destroy()

    # --- UI -----------------------------------------------------------------

    def _build_ui(self) -> None:
        self.columnconfigure(0, weight=1)
        self.rowconfigure(0, weight=1)

        pad = self._settings.padding
        self.canvas = tk.Canvas(self, highlightthickness=0, borderwidth=0)
        self.canvas.grid(row=0, column=0, sticky="nsew", padx=pad, pady=pad)

        self.canvas.bind("<Configure>", lambda _e: self._redraw())
        self.canvas.bind("<Button-1>", self._on_press)

    def _bounds(self) -> Rect:
        return Rect(0.0, 0.0, float(self.canvas.winfo_width()), float(self.canvas.winfo_height()))

    # --- Tick loop ----------------------------------------------------------

    def _schedule_tick(self) -> None:
        self._after_id = self.after(self._settings.update_interval_ms, self._on_tick)

    def _on_tick(self) -> None:
        now = self._svc.now()
        if self._controller.tick(now):
            self._cache.observe(now)
            self._redraw()
        self._schedule_tick()

    def _redraw(self) -> None:
        w, h = self.canvas.winfo_width(), self.canvas.winfo_height()
        if w <= 1 or h <= 1:
            return  # not mapped yet
        now = self._controller.now
        img = self._cache.get_or_render((now, (w, h)), lambda: self._renderer.render(now, (w, h)))
        self._photo = ImageTk.PhotoImage(img)
        self.canvas.delete("clock")
        self.canvas.create_image(0, 0, image=self._photo, anchor="nw", tags=("clock",))

    # --- Pointer ------------------------------------------------------------

    def _on_press(self, event: tk.Event) -> None:
        action = self._controller.handle_press(self._bounds(), Point(float(event.x), float(event.y)))
        logger.debug("Press at (%s, %s) -> %s", event.x, event.y, action)
        if self._on_action is not None:
            self._on_action(action)
