"""Tests for FrameScheduler."""

import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import unittest

from scheduler import FrameScheduler


class TestFrameScheduler(unittest.TestCase):
    """Test frame callback queueing."""

    def test_runs_requested_callbacks(self):
        scheduler = FrameScheduler()
        calls = []
        scheduler.request(lambda: calls.append("a"))
        self.assertTrue(scheduler.pending)
        self.assertEqual(scheduler.run_pending(), 1)
        self.assertEqual(calls, ["a"])
        self.assertFalse(scheduler.pending)

    def test_rescheduled_callback_waits_for_next_refresh(self):
        scheduler = FrameScheduler()
        calls = []

        def frame():
            calls.append(len(calls))
            scheduler.request(frame)

        scheduler.request(frame)
        scheduler.run_pending()
        self.assertEqual(calls, [0])
        self.assertTrue(scheduler.pending)
        scheduler.run_pending()
        self.assertEqual(calls, [0, 1])

    def test_clear(self):
        scheduler = FrameScheduler()
        scheduler.request(lambda: None)
        scheduler.clear()
        self.assertFalse(scheduler.pending)
        self.assertEqual(scheduler.run_pending(), 0)


if __name__ == "__main__":
    unittest.main()
