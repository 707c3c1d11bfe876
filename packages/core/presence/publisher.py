from __future__ import annotations

import logging
import time
from typing import Callable

from .client import PresenceClient

log = logging.getLogger(__name__)

DETAILS_TEMPLATE = "Editing: {label}"
STATE_TEXT = "Using DaVinci Resolve"
LARGE_IMAGE_KEY = "davinci_resolve_logo"
LARGE_IMAGE_TEXT = "DaVinci Resolve"


def build_presence_payload(label: str, accumulated_seconds: float, now: float) -> dict:
    return {
        "details": DETAILS_TEMPLATE.format(label=label),
        "state": STATE_TEXT,
        "start": int(now - accumulated_seconds),
        "large_image": LARGE_IMAGE_KEY,
        "large_text": LARGE_IMAGE_TEXT,
    }


class PresencePublisher:
    """Pushes presence updates through the client without retrying; failures are only logged."""

    def __init__(self, client: PresenceClient, clock: Callable[[], float] = time.time) -> None:
        self._client = client
        self._clock = clock

    def publish(self, label: str, accumulated_seconds: float) -> dict:
        payload = build_presence_payload(label, accumulated_seconds, self._clock())
        try:
            self._client.set_presence(**payload)
        except Exception:
            log.warning("Presence update failed", exc_info=True)
        return payload

    def clear(self) -> bool:
        try:
            self._client.clear_presence()
            return True
        except Exception:
            log.warning("Presence clear failed", exc_info=True)
            return False

    def close(self) -> None:
        self.clear()
        try:
            self._client.close()
        except Exception:
            log.warning("Closing presence connection failed", exc_info=True)
