"""
Derives the project label shown in the presence from Resolve's window title.

Resolve renders its main window as ``"DaVinci Resolve - <project>"``. The
text after the first separator is taken as the project name. The heuristic
depends on the exact title text; there is no project API to ask instead.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from .process_detector import matching_pids
from .types import UNKNOWN_PROJECT
from .window_titles import main_window_title

log = logging.getLogger(__name__)

SEPARATOR = " - "


def label_from_title(title: Optional[str], marker: str) -> Optional[str]:
    if not title or marker not in title:
        return None
    idx = title.find(SEPARATOR)
    if idx < 0:
        return None
    return title[idx + len(SEPARATOR):]


def extract_label(
    process_name: str,
    marker: str,
    title_lookup: Callable[[int], Optional[str]] = main_window_title,
) -> str:
    """
    Label for the first matching process whose title yields one.

    With several same-named processes the first in OS enumeration order wins;
    that order is not stable between calls.
    """
    try:
        for pid in matching_pids(process_name):
            label = label_from_title(title_lookup(pid), marker)
            if label is not None:
                return label
        return UNKNOWN_PROJECT
    except Exception:
        log.exception("Failed to read project name from %s windows", process_name)
        return UNKNOWN_PROJECT
