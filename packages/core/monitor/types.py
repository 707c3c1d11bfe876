from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

MonitorStatus = Literal["STOPPED", "RUNNING"]

UNKNOWN_PROJECT = "Unknown Project"


@dataclass(frozen=True)
class MonitorConfig:
    app_id: str
    process_name: str = "Resolve"
    title_marker: str = "DaVinci Resolve"
    poll_interval_seconds: int = 15


@dataclass
class SessionState:
    """Per-worker session bookkeeping, mutated once per poll tick."""
    is_target_running: bool = False
    last_transition_at: float = 0.0  # epoch seconds
    accumulated_seconds: float = 0.0


@dataclass
class MonitorState:
    """Snapshot handed to the UI."""
    status: MonitorStatus = "STOPPED"
    target_running: bool = False
    label: Optional[str] = None
    accumulated_seconds: float = 0.0
