"""
Main window title lookup for a process.

Only Windows exposes a usable title through pywin32. Elsewhere there is no
title and callers fall back to their default label.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

log = logging.getLogger(__name__)

GW_OWNER = 4


def main_window_title(pid: int) -> Optional[str]:
    """Title of the first visible, unowned top-level window owned by ``pid``."""
    if sys.platform != "win32":
        log.debug("Window titles are not available on %s", sys.platform)
        return None

    import win32gui
    import win32process

    titles: list[str] = []

    def _collect(hwnd, _extra) -> bool:
        if not win32gui.IsWindowVisible(hwnd):
            return True
        if win32gui.GetWindow(hwnd, GW_OWNER):
            return True
        _, owner_pid = win32process.GetWindowThreadProcessId(hwnd)
        if owner_pid == pid:
            text = win32gui.GetWindowText(hwnd)
            if text:
                titles.append(text)
        return True

    win32gui.EnumWindows(_collect, None)
    return titles[0] if titles else None
