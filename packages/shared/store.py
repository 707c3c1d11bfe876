from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from packages.shared.config import AppConfig
from packages.shared.paths import config_path, ensure_app_dirs

log = logging.getLogger(__name__)


class ConfigStoreError(RuntimeError):
    """Config file could not be read or written."""


class ConfigStore:
    def __init__(self, path: Optional[Path] = None) -> None:
        if path is None:
            ensure_app_dirs()
            path = config_path()
        self._path = path

    def exists(self) -> bool:
        return self._path.exists()

    def load(self) -> AppConfig:
        if not self._path.exists():
            return AppConfig()

        try:
            raw = self._path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigStoreError(f"Could not read {self._path}: {e}") from e

        try:
            data: Any = json.loads(raw)
            return AppConfig.model_validate(data)
        except (ValueError, ValidationError):
            log.warning("Ignoring invalid config file %s, using defaults", self._path, exc_info=True)
            return AppConfig()

    def save(self, cfg: AppConfig) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(cfg.model_dump_json(by_alias=True, indent=2), encoding="utf-8")
        except OSError as e:
            raise ConfigStoreError(f"Could not write {self._path}: {e}") from e
        log.info("Config saved to %s", self._path)

    def path(self) -> str:
        return str(self._path)
