import logging
import tkinter as tk
from tkinter import Label, X

from clockface import create_feature_view, get_feature_name
from clockface.logic.clock_service import ClockService
from clockface.logic.clockface_settings_repository import ClockfaceSettingsRepository
from clockface.models.clock_events import ClockAction, Shutdown

logger = logging.getLogger(__name__)


class MainWindow(tk.Tk):
    def __init__(self, settings=None):
        super().__init__()

        self.settings = settings or ClockfaceSettingsRepository().load()

        self.title(get_feature_name())
        self.geometry("420x460")

        # Anzeige-Bereich (Mitte)
        self.clock_view = create_feature_view(self, settings=self.settings, on_action=self.handle_action)
        self.clock_view.pack(fill="both", expand=True)

        # Statusleiste (unten)
        self.status_bar = Label(self, text="", anchor="w", bg="#eeeeee")
        self.status_bar.pack(side="bottom", fill=X)

    def handle_action(self, action: ClockAction):
        """Führt eine Aktion der Uhr aus."""
        if isinstance(action, Shutdown):
            logger.info("Shutdown requested from clock face")
            self.destroy()
            return
        self.set_status(ClockService.describe(action))

    def set_status(self, message):
        """Aktualisiert die Statusleiste."""
        self.status_bar.config(text=message)


if __name__ == "__main__":
    _settings = ClockfaceSettingsRepository().load()
    logging.basicConfig(
        level=getattr(logging, _settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = MainWindow(_settings)
    app.mainloop()
