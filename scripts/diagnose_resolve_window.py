"""
Diagnostic script for project name detection.
Lists the Resolve processes, their main window titles and the label that
would be published, to check the title heuristic on this machine.
"""

import sys
import os
import logging

# Add parent directory to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from packages.core.monitor.activity import extract_label, label_from_title
from packages.core.monitor.process_detector import matching_pids
from packages.core.monitor.window_titles import main_window_title
from packages.shared.config import AppConfig

logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s [%(levelname)s] %(name)s: %(message)s'
)


def main():
    cfg = AppConfig()
    print("=" * 60)
    print(f"Process: {cfg.process_name!r}   marker: {cfg.title_marker!r}")
    print("=" * 60)

    pids = matching_pids(cfg.process_name)
    if not pids:
        print("✗ No matching process found. Is DaVinci Resolve running?")
        return 1

    for pid in pids:
        try:
            title = main_window_title(pid)
        except Exception as e:
            print(f"  pid {pid}: ✗ title lookup failed: {e}")
            continue
        print(f"  pid {pid}: title={title!r} -> label={label_from_title(title, cfg.title_marker)!r}")

    print()
    print(f"Published label: {extract_label(cfg.process_name, cfg.title_marker)!r}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
