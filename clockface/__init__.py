"""
Clockface feature package initializer.

Provides factory functions that a main window / feature loader can call to
create the analog clock view without hard-coding internals.

The GUI module is imported lazily so the geometry and rendering core can be
used without a display.
"""

from typing import Callable, Optional

__version__ = "1.0.0"


def get_feature_name() -> str:
    """
    Human readable feature name (used e.g. for window titles).

    Returns:
        str: The feature name.
    """
    return "Clock"


def create_feature_view(parent, settings=None, on_action: Optional[Callable] = None):
    """
    Factory for the analog clock view.

    Args:
        parent (tk.Misc): Tk container to mount the widget onto.
        settings (ClockfaceSettings, optional): Overrides config.ini.
        on_action (callable, optional): Receives ClockActions from presses.

    Returns:
        tk.Frame: A fully wired clock widget.
    """
    from .gui.clock_widget import ClockWidget

    frame = ClockWidget(parent, settings=settings, on_action=on_action)
    return frame
