"""Unit tests for config loading and saving."""
import json
import tempfile
import unittest
from pathlib import Path

from packages.shared import store as store_mod
from packages.shared.config import AppConfig
from packages.shared.store import ConfigStore, ConfigStoreError


class TestConfigStore(unittest.TestCase):
    """JSON config file handling."""

    def setUp(self) -> None:
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        self.path = Path(self.tmp.name) / "config.json"
        self.store = ConfigStore(path=self.path)

    def test_missing_file_gives_defaults_without_writing(self) -> None:
        cfg = self.store.load()

        self.assertEqual(cfg.discord_app_id, "")
        self.assertFalse(cfg.has_credential())
        self.assertEqual(cfg.process_name, "Resolve")
        self.assertEqual(cfg.poll_interval_seconds, 15)
        self.assertFalse(self.path.exists())

    def test_reads_single_key_file(self) -> None:
        self.path.write_text('{"DiscordAppId": "1234567890"}', encoding="utf-8")

        cfg = self.store.load()

        self.assertEqual(cfg.discord_app_id, "1234567890")
        self.assertTrue(cfg.has_credential())

    def test_save_writes_json_keys(self) -> None:
        self.store.save(AppConfig(discord_app_id="42"))

        data = json.loads(self.path.read_text(encoding="utf-8"))
        self.assertEqual(data["DiscordAppId"], "42")
        self.assertEqual(data["PollIntervalSeconds"], 15)
        self.assertEqual(self.store.load().discord_app_id, "42")

    def test_unknown_keys_are_ignored(self) -> None:
        self.path.write_text('{"DiscordAppId": "7", "Theme": "dark"}', encoding="utf-8")

        self.assertEqual(self.store.load().discord_app_id, "7")

    def test_invalid_json_falls_back_and_keeps_file(self) -> None:
        self.path.write_text("{not json", encoding="utf-8")

        with self.assertLogs(store_mod.log, level="WARNING"):
            cfg = self.store.load()

        self.assertEqual(cfg.discord_app_id, "")
        self.assertEqual(self.path.read_text(encoding="utf-8"), "{not json")

    def test_invalid_values_fall_back(self) -> None:
        self.path.write_text('{"DiscordAppId": "7", "PollIntervalSeconds": 0}', encoding="utf-8")

        with self.assertLogs(store_mod.log, level="WARNING"):
            cfg = self.store.load()

        self.assertEqual(cfg, AppConfig())

    def test_unreadable_file_raises_store_error(self) -> None:
        self.path.mkdir()

        with self.assertRaises(ConfigStoreError):
            self.store.load()

    def test_unwritable_location_raises_store_error(self) -> None:
        blocker = Path(self.tmp.name) / "blocker"
        blocker.write_text("", encoding="utf-8")
        store = ConfigStore(path=blocker / "config.json")

        with self.assertRaises(ConfigStoreError):
            store.save(AppConfig(discord_app_id="1"))

    def test_monitor_config_strips_app_id(self) -> None:
        cfg = AppConfig(discord_app_id="  99 ")

        self.assertEqual(
            cfg.to_monitor_config(),
            {
                "app_id": "99",
                "process_name": "Resolve",
                "title_marker": "DaVinci Resolve",
                "poll_interval_seconds": 15,
            },
        )


if __name__ == "__main__":
    unittest.main()
