from __future__ import annotations

import psutil


def _normalize(name: str) -> str:
    n = name.strip().lower()
    if n.endswith(".exe"):
        n = n[:-4]
    return n


def matching_pids(process_name: str) -> list[int]:
    """Pids whose executable name matches, in OS enumeration order."""
    target = _normalize(process_name)
    pids: list[int] = []
    for p in psutil.process_iter(attrs=["pid", "name"]):
        try:
            n = p.info.get("name")
            if n and _normalize(str(n)) == target:
                pids.append(int(p.info["pid"]))
        except (psutil.NoSuchProcess, psutil.AccessDenied):
            continue
    return pids


def is_running(process_name: str) -> bool:
    return bool(matching_pids(process_name))
