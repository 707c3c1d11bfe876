from __future__ import annotations

import logging
from typing import Callable, Optional, Protocol

from pypresence import Presence
from pypresence.exceptions import PyPresenceException

log = logging.getLogger(__name__)


class PresenceClient(Protocol):
    def on_ready(self, cb: Callable[[], None]) -> None:
        ...

    def on_presence_update(self, cb: Callable[[dict], None]) -> None:
        ...

    def initialize(self) -> None:
        ...

    def set_presence(
        self,
        details: str,
        state: str,
        start: int,
        large_image: str,
        large_text: str,
    ) -> None:
        ...

    def clear_presence(self) -> None:
        ...

    def close(self) -> None:
        ...


class PypresenceClient:
    """Discord IPC client backed by pypresence; reconnects lazily on the next send."""

    def __init__(self, app_id: str) -> None:
        self._app_id = app_id
        self._rpc: Optional[Presence] = None
        self._connected = False
        self._ready_cb: Optional[Callable[[], None]] = None
        self._update_cb: Optional[Callable[[dict], None]] = None

    def on_ready(self, cb: Callable[[], None]) -> None:
        self._ready_cb = cb

    def on_presence_update(self, cb: Callable[[dict], None]) -> None:
        self._update_cb = cb

    @property
    def connected(self) -> bool:
        return self._connected

    def initialize(self) -> None:
        if self._connected and self._rpc is not None:
            return
        self._release()
        rpc = Presence(self._app_id)
        try:
            rpc.connect()
        except Exception:
            self._discard(rpc, connected=False)
            raise
        self._rpc = rpc
        self._connected = True
        log.info("Connected to Discord RPC (app id %s)", self._app_id)
        if self._ready_cb:
            self._ready_cb()

    def set_presence(
        self,
        details: str,
        state: str,
        start: int,
        large_image: str,
        large_text: str,
    ) -> None:
        if not self._connected or self._rpc is None:
            self.initialize()
        rpc = self._rpc
        if rpc is None:
            raise RuntimeError("Discord RPC is not connected")
        payload = {
            "details": details,
            "state": state,
            "start": start,
            "large_image": large_image,
            "large_text": large_text,
        }
        try:
            rpc.update(**payload)
        except (PyPresenceException, OSError):
            self._connected = False
            raise
        if self._update_cb:
            self._update_cb(payload)

    def clear_presence(self) -> None:
        if not self._connected or self._rpc is None:
            return
        try:
            self._rpc.clear()
        except (PyPresenceException, OSError):
            self._connected = False
            raise

    def close(self) -> None:
        self._release()
        log.debug("Closed Discord RPC.")

    def _release(self) -> None:
        rpc, connected = self._rpc, self._connected
        self._rpc = None
        self._connected = False
        if rpc is not None:
            self._discard(rpc, connected)

    @staticmethod
    def _discard(rpc: Presence, connected: bool) -> None:
        # Every Presence owns its own event loop; it must be closed even if the pipe never opened.
        if connected:
            try:
                rpc.close()
            except (PyPresenceException, OSError, RuntimeError):
                log.debug("Discord RPC close failed", exc_info=True)
        loop = getattr(rpc, "loop", None)
        if loop is not None and not loop.is_closed():
            loop.close()
