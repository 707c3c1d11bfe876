from __future__ import annotations

import logging
import threading
import time
from typing import Callable, Optional

from packages.shared.config import MissingCredentialError
from packages.core.presence.client import PresenceClient, PypresenceClient
from packages.core.presence.publisher import PresencePublisher

from .activity import extract_label
from .duration import DurationTracker
from .process_detector import is_running
from .types import MonitorConfig, MonitorState, SessionState


log = logging.getLogger(__name__)


def _now_iso() -> str:
    return time.strftime("%Y-%m-%dT%H:%M:%S", time.localtime())


class PresenceMonitor:
    """Background loop mirroring Resolve's open project into Discord Rich Presence."""

    def __init__(
        self,
        config: dict,
        client_factory: Callable[[str], PresenceClient] = PypresenceClient,
        process_probe: Callable[[str], bool] = is_running,
        label_extractor: Callable[[str, str], str] = extract_label,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._cfg = MonitorConfig(**config)
        self._client_factory = client_factory
        self._probe = process_probe
        self._extract = label_extractor
        self._clock = clock

        self._tracker = DurationTracker(SessionState(last_transition_at=clock()), clock=clock)
        self._state = MonitorState()
        self._lock = threading.Lock()

        self._publisher: Optional[PresencePublisher] = None

        self._event_cb: Optional[Callable[[dict], None]] = None
        self._error_cb: Optional[Callable[[str], None]] = None

        self._thread: Optional[threading.Thread] = None
        self._stop_evt = threading.Event()

    def on_event(self, cb: Callable[[dict], None]) -> None:
        self._event_cb = cb

    def on_error(self, cb: Callable[[str], None]) -> None:
        self._error_cb = cb

    def update_config(self, config: dict) -> None:
        with self._lock:
            self._cfg = MonitorConfig(**config)

    def get_state(self) -> MonitorState:
        with self._lock:
            return MonitorState(
                status=self._state.status,
                target_running=self._state.target_running,
                label=self._state.label,
                accumulated_seconds=self._state.accumulated_seconds,
            )

    @property
    def session(self) -> SessionState:
        return self._tracker.state

    def is_alive(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        with self._lock:
            if self._state.status == "RUNNING":
                return
            if not self._cfg.app_id.strip():
                raise MissingCredentialError("Discord application id is not set")
            self._state = MonitorState(status="RUNNING")
            self._tracker = DurationTracker(SessionState(last_transition_at=self._clock()), clock=self._clock)

        self._stop_evt.clear()
        self._thread = threading.Thread(target=self._run, name="PresenceMonitor", daemon=True)
        self._thread.start()

    def stop(self) -> None:
        self._stop_evt.set()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join()
        self._thread = None

        if self._publisher is not None:
            self._publisher.close()
            self._publisher = None
            self._emit({"type": "PRESENCE_CLEARED", "at": _now_iso(), "reason": "STOPPED"})

        with self._lock:
            self._state = MonitorState()

    def wait(self, poll_seconds: float = 0.5) -> None:
        """Block until the worker exits. Short joins keep Ctrl+C responsive."""
        while self._thread is not None and self._thread.is_alive():
            self._thread.join(poll_seconds)

    def connect(self) -> None:
        with self._lock:
            cfg = self._cfg
        client = self._client_factory(cfg.app_id)
        client.on_ready(lambda: self._emit({"type": "CLIENT_READY", "at": _now_iso()}))
        client.on_presence_update(
            lambda payload: self._emit({"type": "PRESENCE_UPDATED", "at": _now_iso(), "presence": payload})
        )
        self._publisher = PresencePublisher(client, clock=self._clock)
        try:
            client.initialize()
        except Exception as e:
            # The client reconnects on the next send; keep polling.
            log.warning("Discord RPC connection failed: %s", e)
            self._emit_error(f"Discord RPC connection failed: {e}")

    def tick(self) -> None:
        if self._publisher is None:
            self.connect()
        publisher = self._publisher
        if publisher is None:
            raise RuntimeError("Presence publisher was not created")

        with self._lock:
            cfg = self._cfg

        was_running = self._tracker.running
        running = self._probe(cfg.process_name)

        if running:
            label = self._extract(cfg.process_name, cfg.title_marker)
            accumulated = self._tracker.observe(True)
            if not was_running:
                log.info("%s started, project: %s", cfg.process_name, label)
                self._emit({"type": "SESSION_STARTED", "at": _now_iso(), "label": label})
            log.debug("Project %s, session %.0fs", label, accumulated)
            publisher.publish(label, accumulated)
        else:
            label = None
            accumulated = self._tracker.observe(False)
            if was_running:
                log.info("%s is no longer running", cfg.process_name)
                self._emit({"type": "SESSION_ENDED", "at": _now_iso()})
            publisher.clear()

        with self._lock:
            self._state.target_running = running
            self._state.label = label
            self._state.accumulated_seconds = accumulated

    def _emit(self, evt: dict) -> None:
        if self._event_cb:
            self._event_cb(evt)

    def _emit_error(self, msg: str) -> None:
        if self._error_cb:
            self._error_cb(msg)

    def _run(self) -> None:
        self.connect()
        while not self._stop_evt.is_set():
            try:
                self.tick()
            except Exception as e:
                log.exception("Monitor loop error")
                self._emit_error(str(e))

            with self._lock:
                interval = self._cfg.poll_interval_seconds
            self._stop_evt.wait(interval)
