"""
clockface/tests/test_models.py

Value objects: ClockTime validation and settings normalization.
"""

from __future__ import annotations

import unittest
from datetime import datetime

from clockface.exceptions.errors import InvalidClockTimeError
from clockface.models.clock_time import ClockTime
from clockface.models.clockface_settings import ClockfaceSettings


class TestClockTime(unittest.TestCase):
    def test_from_datetime(self) -> None:
        t = ClockTime.from_datetime(datetime(2023, 1, 2, 23, 59, 58))
        self.assertEqual((t.hour, t.minute, t.second), (23, 59, 58))
        self.assertEqual(t.hour12, 11)

    def test_value_equality(self) -> None:
        self.assertEqual(ClockTime(1, 2, 3), ClockTime(1, 2, 3))
        self.assertNotEqual(ClockTime(1, 2, 3), ClockTime(1, 2, 4))
        self.assertEqual(hash(ClockTime(1, 2, 3)), hash(ClockTime(1, 2, 3)))

    def test_out_of_range(self) -> None:
        for args in ((24, 0, 0), (0, 60, 0), (0, 0, 60), (-1, 0, 0)):
            with self.assertRaises(InvalidClockTimeError):
                ClockTime(*args)

    def test_now_is_valid(self) -> None:
        self.assertIsInstance(ClockTime.now(), ClockTime)


class TestClockfaceSettings(unittest.TestCase):
    def test_defaults(self) -> None:
        s = ClockfaceSettings()
        self.assertEqual(s.update_interval_ms, 500)
        self.assertEqual(s.padding, 20)
        self.assertEqual(s.face_color, "#1293D8")
        self.assertTrue(s.exit_on_center)

    def test_normalized_clamps(self) -> None:
        s = ClockfaceSettings(update_interval_ms=1, padding=-5, antialias=99, log_level="debug").normalized()
        self.assertEqual(s.update_interval_ms, 50)
        self.assertEqual(s.padding, 0)
        self.assertEqual(s.antialias, 8)
        self.assertEqual(s.log_level, "DEBUG")
        self.assertEqual(ClockfaceSettings(antialias=0).normalized().antialias, 1)


if __name__ == "__main__":
    unittest.main()
