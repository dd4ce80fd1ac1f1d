"""Renderer tests: pixels of a rendered dial at known times."""
from __future__ import annotations

from clockface.logic.clock_renderer import ClockRenderer, hand_tip
from clockface.models.clock_time import ClockTime
from clockface.models.clockface_settings import ClockfaceSettings

FACE = (0x12, 0x93, 0xD8, 255)
WHITE = (255, 255, 255, 255)
TRANSPARENT = (0, 0, 0, 0)


def _renderer(antialias: int = 1) -> ClockRenderer:
    return ClockRenderer(ClockfaceSettings(antialias=antialias))


def test_midnight_hands_point_up() -> None:
    img = _renderer().render(ClockTime(0, 0, 0), (200, 200))
    assert img.size == (200, 200)
    assert img.mode == "RGBA"
    assert img.getpixel((0, 0)) == TRANSPARENT
    assert img.getpixel((100, 100)) == WHITE
    assert img.getpixel((100, 30)) == WHITE
    assert img.getpixel((100, 160)) == FACE
    assert img.getpixel((160, 100)) == FACE


def test_three_o_clock_hour_hand_points_right() -> None:
    img = _renderer().render(ClockTime(15, 0, 0), (200, 200))
    assert img.getpixel((140, 100)) == WHITE
    assert img.getpixel((100, 160)) == FACE


def test_non_square_canvas_centers_dial() -> None:
    img = _renderer().render(ClockTime(6, 30, 0), (300, 100))
    assert img.size == (300, 100)
    assert img.getpixel((10, 50)) == TRANSPARENT
    assert img.getpixel((150, 50)) == WHITE


def test_antialiased_render_keeps_size() -> None:
    img = _renderer(antialias=4).render(ClockTime(10, 10, 10), (120, 80))
    assert img.size == (120, 80)
    assert img.getpixel((0, 0))[3] == 0


def test_render_is_idempotent() -> None:
    renderer = _renderer(antialias=2)
    a = renderer.render(ClockTime(9, 41, 7), (160, 160))
    b = renderer.render(ClockTime(9, 41, 7), (160, 160))
    assert a.tobytes() == b.tobytes()


def test_zero_size_gives_placeholder() -> None:
    img = _renderer().render(ClockTime(), (0, 50))
    assert img.size == (1, 1)
    assert img.getpixel((0, 0)) == TRANSPARENT


def test_hand_tip_follows_clockwise_convention() -> None:
    x, y = hand_tip(100.0, 100.0, 50.0, 0.0)
    assert (round(x, 6), round(y, 6)) == (100.0, 50.0)
    x, y = hand_tip(100.0, 100.0, 50.0, 3.141592653589793 / 2)
    assert (round(x, 6), round(y, 6)) == (150.0, 100.0)
