#!/usr/bin/env python3
"""
Unit tests for the per-axis sliding window.
"""

import unittest
import sys
import os

# Add core modules to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from posture.sensors import SlidingWindow


class TestScaling(unittest.TestCase):
    """Test raw value scaling and deadband."""

    def test_scale_to_g_with_rounding(self):
        """Raw values are divided by 1000 and rounded to two decimals."""
        self.assertAlmostEqual(SlidingWindow.scale(1234), 1.23)
        self.assertAlmostEqual(SlidingWindow.scale(120), 0.12)
        self.assertAlmostEqual(SlidingWindow.scale(-1500), -1.5)

    def test_deadband_snaps_small_values(self):
        """Scaled magnitudes below 0.1 become exactly zero."""
        self.assertEqual(SlidingWindow.scale(50), 0.0)
        self.assertEqual(SlidingWindow.scale(-80), 0.0)
        self.assertEqual(SlidingWindow.scale(0), 0.0)


class TestSlidingWindow(unittest.TestCase):
    """Test SlidingWindow class."""

    def test_warm_up_not_ready(self):
        """Average is undefined until the window is full."""
        window = SlidingWindow(size=10)

        for i in range(9):
            self.assertIsNone(window.add(1000))
            self.assertFalse(window.is_ready)
            self.assertIsNone(window.average)
            self.assertEqual(window.count, i + 1)

        self.assertIsNotNone(window.add(1000))
        self.assertTrue(window.is_ready)
        self.assertAlmostEqual(window.average, 1.0)

    def test_identical_samples_converge(self):
        """Repeated identical samples average to their scaled value."""
        window = SlidingWindow(size=10)
        for _ in range(25):
            window.add(-340)

        self.assertAlmostEqual(window.average, -0.34)
        self.assertEqual(window.count, 10)

    def test_deadband_contributes_zero(self):
        """A value inside the deadband adds zero to the sum."""
        window = SlidingWindow(size=2)
        window.add(50)
        window.add(1000)

        self.assertEqual(window.values, (0.0, 1.0))
        self.assertAlmostEqual(window.average, 0.5)

    def test_oldest_value_is_dropped(self):
        """The window keeps only the most recent readings."""
        window = SlidingWindow(size=3)
        for value in (1000, 2000, 3000):
            window.add(value)
        self.assertAlmostEqual(window.average, 2.0)

        window.add(4000)
        self.assertEqual(window.values, (2.0, 3.0, 4.0))
        self.assertAlmostEqual(window.average, 3.0)

    def test_average_deadband_distinct_from_not_ready(self):
        """A small full-window average reports zero, not the warm-up state."""
        window = SlidingWindow(size=2)
        window.add(150)
        window.add(-100)

        self.assertTrue(window.is_ready)
        self.assertEqual(window.average, 0.0)
        self.assertIsNotNone(window.average)

    def test_callable_observer(self):
        """Observer is notified once per full-window average."""
        averages = []
        window = SlidingWindow(size=2, on_average=averages.append)

        window.add(1000)
        self.assertEqual(averages, [])

        window.add(2000)
        window.add(3000)
        self.assertEqual(len(averages), 2)
        self.assertAlmostEqual(averages[0], 1.5)
        self.assertAlmostEqual(averages[1], 2.5)

    def test_object_observer(self):
        """Objects with on_average_ready are accepted as observers."""
        class Recorder:
            def __init__(self):
                self.values = []

            def on_average_ready(self, value):
                self.values.append(value)

        recorder = Recorder()
        window = SlidingWindow(size=1, on_average=recorder)
        window.add(500)

        self.assertEqual(len(recorder.values), 1)
        self.assertAlmostEqual(recorder.values[0], 0.5)

    def test_invalid_observer(self):
        with self.assertRaises(ValueError):
            SlidingWindow(size=3, on_average=42)

    def test_invalid_size(self):
        """Non-positive or non-integer sizes fail at construction."""
        for size in (0, -1, 2.5, True, "10"):
            with self.assertRaises(ValueError):
                SlidingWindow(size=size)

    def test_reset(self):
        """Reset returns the window to warm-up."""
        window = SlidingWindow(size=2)
        window.add(1000)
        window.add(1000)
        window.reset()

        self.assertEqual(window.count, 0)
        self.assertIsNone(window.average)
        self.assertFalse(window.is_ready)

        window.add(2000)
        window.add(2000)
        self.assertAlmostEqual(window.average, 2.0)


if __name__ == '__main__':
    unittest.main()
