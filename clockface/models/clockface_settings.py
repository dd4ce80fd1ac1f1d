"""
Data model for Clockface settings.
"""

from dataclasses import dataclass, replace


@dataclass
class ClockfaceSettings:
    """
    Presentation options for the analog clock widget.

    Attributes:
        update_interval_ms (int): Tick cadence in milliseconds.
        padding (int): Gap between the canvas edge and the host frame in pixels.
        face_color (str): Fill of the dial (#RRGGBB).
        hand_color (str): Stroke color of the hands (#RRGGBB).
        center_color (str): Fill of the center button (#RRGGBB).
        antialias (int): Supersampling factor used when rendering.
        log_level (str): Root logging level name.
        exit_on_center (bool): Whether a center press asks the host to quit.
    """
    update_interval_ms: int = 500
    padding: int = 20
    face_color: str = "#1293D8"
    hand_color: str = "#FFFFFF"
    center_color: str = "#FFFFFF"
    antialias: int = 4
    log_level: str = "INFO"
    exit_on_center: bool = True

    def normalized(self) -> "ClockfaceSettings":
        """
        Returns a copy with numeric fields clamped to usable ranges.

        Returns:
            ClockfaceSettings: interval >= 50 ms, antialias in 1..8, padding >= 0.
        """
        return replace(
            self,
            update_interval_ms=max(50, int(self.update_interval_ms)),
            padding=max(0, int(self.padding)),
            antialias=min(8, max(1, int(self.antialias))),
            log_level=str(self.log_level).upper(),
        )
