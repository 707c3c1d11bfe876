from __future__ import annotations

import time
from typing import Callable, Optional

from .types import SessionState


class DurationTracker:
    """
    Stopped/Running state machine measuring how long the target has been up.

    Stopped -> Running records the transition time. While running the
    accumulated duration is recomputed from it each tick, so the derived
    session start stays fixed and the client shows a counting-up timer.
    Running -> Stopped zeroes the duration so a restart measures afresh.
    """

    def __init__(self, state: Optional[SessionState] = None, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self.state = state if state is not None else SessionState(last_transition_at=clock())

    @property
    def running(self) -> bool:
        return self.state.is_target_running

    @property
    def accumulated_seconds(self) -> float:
        return self.state.accumulated_seconds

    def observe(self, running: bool) -> float:
        now = self._clock()
        s = self.state

        if running and not s.is_target_running:
            s.is_target_running = True
            s.last_transition_at = now
            s.accumulated_seconds = 0.0
        elif running:
            s.accumulated_seconds = max(0.0, now - s.last_transition_at)
        elif s.is_target_running:
            s.is_target_running = False
            s.last_transition_at = now
            s.accumulated_seconds = 0.0
        else:
            s.accumulated_seconds = 0.0

        return s.accumulated_seconds

    def session_start(self, now: Optional[float] = None) -> float:
        if now is None:
            now = self._clock()
        return now - self.state.accumulated_seconds
