"""Settings repository tests using temporary config.ini files."""
from __future__ import annotations

from pathlib import Path

from clockface.logic.clockface_settings_repository import (
    ENV_CONFIG_PATH,
    ClockfaceSettingsRepository,
)
from clockface.models.clockface_settings import ClockfaceSettings


def _write_ini(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "config" / "config.ini"
    path.parent.mkdir(parents=True)
    path.write_text(body, encoding="utf-8")
    return path


def test_missing_file_gives_defaults(tmp_path: Path) -> None:
    repo = ClockfaceSettingsRepository(tmp_path / "nope.ini")
    assert repo.load() == ClockfaceSettings()


def test_missing_section_gives_defaults(tmp_path: Path) -> None:
    path = _write_ini(tmp_path, "[Other]\nkey = value\n")
    assert ClockfaceSettingsRepository(path).load() == ClockfaceSettings()


def test_values_are_read_and_clamped(tmp_path: Path) -> None:
    path = _write_ini(
        tmp_path,
        "[Clockface]\n"
        "update_interval_ms = 1000\n"
        "antialias = 20\n"
        "exit_on_center = no\n"
        "face_color = #000000\n"
        "log_level = debug\n",
    )
    s = ClockfaceSettingsRepository(path).load()
    assert s.update_interval_ms == 1000
    assert s.antialias == 8
    assert s.exit_on_center is False
    assert s.face_color == "#000000"
    assert s.log_level == "DEBUG"
    assert s.padding == 20


def test_malformed_value_falls_back(tmp_path: Path, caplog) -> None:
    path = _write_ini(tmp_path, "[Clockface]\npadding = wide\nexit_on_center = maybe\n")
    with caplog.at_level("WARNING"):
        s = ClockfaceSettingsRepository(path).load()
    assert s.padding == 20
    assert s.exit_on_center is True
    assert "padding" in caplog.text


def test_env_var_locates_config(tmp_path: Path, monkeypatch) -> None:
    path = _write_ini(tmp_path, "[Clockface]\npadding = 3\n")
    monkeypatch.setenv(ENV_CONFIG_PATH, str(path))
    repo = ClockfaceSettingsRepository()
    assert repo.config_path == path.resolve()
    assert repo.load().padding == 3
