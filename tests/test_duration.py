"""Unit tests for the session duration state machine."""
import unittest

from packages.core.monitor.duration import DurationTracker
from packages.core.monitor.types import SessionState


class FakeClock:
    def __init__(self, now: float = 1_700_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class TestDurationTracker(unittest.TestCase):
    """Stopped/Running transitions and elapsed time."""

    def setUp(self) -> None:
        self.clock = FakeClock()
        self.tracker = DurationTracker(clock=self.clock)

    def test_starts_stopped_with_zero_duration(self) -> None:
        self.assertFalse(self.tracker.running)
        self.assertEqual(self.tracker.accumulated_seconds, 0.0)

    def test_not_running_keeps_duration_zero(self) -> None:
        self.clock.advance(30)

        self.assertEqual(self.tracker.observe(False), 0.0)
        self.assertFalse(self.tracker.running)

    def test_first_running_tick_starts_at_zero(self) -> None:
        # time spent before the target appeared does not count
        self.clock.advance(120)

        self.assertEqual(self.tracker.observe(True), 0.0)
        self.assertTrue(self.tracker.running)
        self.assertEqual(self.tracker.state.last_transition_at, self.clock.now)

    def test_duration_grows_while_running(self) -> None:
        self.tracker.observe(True)
        self.clock.advance(15)
        self.assertAlmostEqual(self.tracker.observe(True), 15.0)
        self.clock.advance(15)
        self.assertAlmostEqual(self.tracker.observe(True), 30.0)

    def test_session_start_is_stable_across_ticks(self) -> None:
        self.tracker.observe(True)
        first = self.tracker.session_start()
        for _ in range(4):
            self.clock.advance(15)
            self.tracker.observe(True)
            self.assertAlmostEqual(self.tracker.session_start(), first)

    def test_stop_resets_duration_and_records_transition(self) -> None:
        self.tracker.observe(True)
        self.clock.advance(45)
        self.tracker.observe(True)
        self.clock.advance(5)

        self.assertEqual(self.tracker.observe(False), 0.0)
        self.assertFalse(self.tracker.running)
        self.assertEqual(self.tracker.state.last_transition_at, self.clock.now)

    def test_restart_measures_a_fresh_session(self) -> None:
        self.tracker.observe(True)
        self.clock.advance(600)
        self.tracker.observe(True)
        self.clock.advance(15)
        self.tracker.observe(False)
        self.clock.advance(15)

        self.assertEqual(self.tracker.observe(True), 0.0)
        self.clock.advance(15)
        self.assertAlmostEqual(self.tracker.observe(True), 15.0)

    def test_clock_going_backwards_never_goes_negative(self) -> None:
        self.tracker.observe(True)
        self.clock.advance(-10)

        self.assertEqual(self.tracker.observe(True), 0.0)

    def test_uses_supplied_state(self) -> None:
        state = SessionState(is_target_running=True, last_transition_at=self.clock.now - 60)
        tracker = DurationTracker(state, clock=self.clock)

        self.assertAlmostEqual(tracker.observe(True), 60.0)
        self.assertIs(tracker.state, state)


if __name__ == "__main__":
    unittest.main()
