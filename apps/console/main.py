"""
Headless variant: polls in the foreground terminal until Ctrl+C.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Optional

from packages.shared.config import AppConfig, MissingCredentialError
from packages.shared.store import ConfigStore, ConfigStoreError
from packages.core.logging_ import setup_logging
from packages.core.monitor.presence_monitor import PresenceMonitor

log = logging.getLogger(__name__)


def resolve_app_id(
    cli_app_id: Optional[str],
    cfg: AppConfig,
    prompt: Optional[Callable[[str], str]] = None,
) -> str:
    """Command line first, then the config file, then ask on the terminal."""
    if prompt is None:
        prompt = input
    if cli_app_id and cli_app_id.strip():
        return cli_app_id.strip()
    if cfg.has_credential():
        return cfg.discord_app_id.strip()
    try:
        entered = prompt("Enter your Discord Application ID: ")
    except EOFError:
        entered = ""
    if not entered.strip():
        raise MissingCredentialError("DiscordAppId cannot be empty.")
    return entered.strip()


def _log_event(evt: dict) -> None:
    t = evt.get("type")
    if t == "CLIENT_READY":
        log.info("Discord RPC client ready")
    elif t == "PRESENCE_UPDATED":
        log.info("Presence has been updated: %s", evt["presence"]["details"])
    elif t == "SESSION_ENDED":
        log.info("DaVinci Resolve is not running.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Mirror the open DaVinci Resolve project to Discord Rich Presence.")
    parser.add_argument("--app-id", help="Discord application id (overrides the config file)")
    parser.add_argument("--save", action="store_true", help="Write the application id back to the config file")
    parser.add_argument("--interval", type=int, default=None, help="Seconds between checks")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(verbose=args.verbose)

    store = ConfigStore()
    try:
        cfg = store.load()
    except ConfigStoreError as e:
        log.error("%s", e)
        cfg = AppConfig()

    try:
        cfg.discord_app_id = resolve_app_id(args.app_id, cfg)
    except MissingCredentialError as e:
        raise SystemExit(f"Error: {e}") from e

    if args.interval is not None:
        cfg.poll_interval_seconds = max(1, args.interval)

    if args.save:
        try:
            store.save(cfg)
        except ConfigStoreError as e:
            log.error("%s", e)

    monitor = PresenceMonitor(config=cfg.to_monitor_config())
    monitor.on_event(_log_event)
    monitor.on_error(lambda msg: log.error("Monitor error: %s", msg))

    log.info("Watching for %s every %ss (Ctrl+C to quit)", cfg.process_name, cfg.poll_interval_seconds)
    monitor.start()
    try:
        monitor.wait()
    except KeyboardInterrupt:
        print("\nReceived interrupt signal (Ctrl+C), shutting down...")
    finally:
        monitor.stop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
