"""
ClockfaceSettingsRepository
---------------------------
Read-only access to the [Clockface] section of config/config.ini.

Strategy:
- Locate config/config.ini (env var, upward traversal, cwd fallback).
- Missing file or section yields defaults.
- A malformed value falls back to the default for that key and is logged.
"""

from __future__ import annotations

import configparser
import logging
import os
from dataclasses import fields
from pathlib import Path
from typing import Optional

from ..models.clockface_settings import ClockfaceSettings

logger = logging.getLogger(__name__)

ENV_CONFIG_PATH = "CLOCKFACE_CONFIG_PATH"


class ClockfaceSettingsRepository:
    """
    Loads ClockfaceSettings from the [Clockface] section.
    """

    SECTION = "Clockface"

    def __init__(self, config_path: Optional[Path] = None) -> None:
        self.config_path = Path(config_path) if config_path else self._find_config_ini()
        self._config = configparser.ConfigParser()
        self._read()

    # --- Public API ---------------------------------------------------------

    def load(self) -> ClockfaceSettings:
        """
        Returns settings loaded from config.ini, or defaults if missing.
        """
        cfg = self._config
        defaults = ClockfaceSettings()
        if not cfg.has_section(self.SECTION):
            return defaults

        sec = cfg[self.SECTION]
        values = {}
        for f in fields(ClockfaceSettings):
            default = getattr(defaults, f.name)
            if f.name not in sec:
                continue
            try:
                if isinstance(default, bool):
                    values[f.name] = sec.getboolean(f.name)
                elif isinstance(default, int):
                    values[f.name] = sec.getint(f.name)
                else:
                    values[f.name] = sec.get(f.name)
            except ValueError:
                logger.warning(
                    "Invalid value %r for [%s] %s in %s, using %r",
                    sec.get(f.name), self.SECTION, f.name, self.config_path, default,
                )
        return ClockfaceSettings(**values).normalized()

    # --- Internal helpers ---------------------------------------------------

    def _read(self) -> None:
        try:
            self._config.read(self.config_path, encoding="utf-8")
        except configparser.Error as exc:
            logger.warning("Cannot parse %s: %s", self.config_path, exc)
            self._config = configparser.ConfigParser()

    @staticmethod
    def _find_config_ini() -> Path:
        """
        Tries several strategies to locate config.ini:

        Order:
            1) Env var CLOCKFACE_CONFIG_PATH (file path to config.ini)
            2) Walk upwards from this file until a 'config/config.ini' is found
            3) Fallback to './config/config.ini' (may not exist)

        Returns:
            Path: Path to config.ini (not guaranteed to exist).
        """
        env_p = os.environ.get(ENV_CONFIG_PATH)
        if env_p:
            p = Path(env_p).expanduser().resolve()
            if p.exists() and p.is_file():
                return p

        here = Path(__file__).resolve()
        for _ in range(6):
            maybe = here.parent / "config" / "config.ini"
            if maybe.exists():
                return maybe.resolve()
            here = here.parent

        return Path.cwd() / "config" / "config.ini"
