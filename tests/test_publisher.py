"""Unit tests for the presence publisher."""
import unittest
from unittest.mock import Mock

from packages.core.presence import publisher as publisher_mod
from packages.core.presence.publisher import PresencePublisher, build_presence_payload


class TestPresencePublisher(unittest.TestCase):
    """Payload shape and fire-and-forget sends."""

    def setUp(self) -> None:
        self.client = Mock()
        self.now = 1_700_000_100.0
        self.publisher = PresencePublisher(self.client, clock=lambda: self.now)

    def test_publish_sends_fixed_template(self) -> None:
        payload = self.publisher.publish("ProjectA", 100.0)

        self.client.set_presence.assert_called_once_with(
            details="Editing: ProjectA",
            state="Using DaVinci Resolve",
            start=1_700_000_000,
            large_image="davinci_resolve_logo",
            large_text="DaVinci Resolve",
        )
        self.assertEqual(payload["details"], "Editing: ProjectA")

    def test_start_is_now_minus_duration(self) -> None:
        payload = build_presence_payload("X", 15.4, 1000.0)

        self.assertEqual(payload["start"], 984)

    def test_publish_failure_is_logged_not_raised(self) -> None:
        self.client.set_presence.side_effect = ConnectionRefusedError("discord closed")

        with self.assertLogs(publisher_mod.log, level="WARNING"):
            payload = self.publisher.publish("ProjectA", 0.0)

        self.assertEqual(payload["details"], "Editing: ProjectA")

    def test_clear(self) -> None:
        self.assertTrue(self.publisher.clear())
        self.client.clear_presence.assert_called_once_with()
        self.client.set_presence.assert_not_called()

    def test_clear_failure_returns_false(self) -> None:
        self.client.clear_presence.side_effect = BrokenPipeError()

        with self.assertLogs(publisher_mod.log, level="WARNING"):
            self.assertFalse(self.publisher.clear())

    def test_close_clears_then_disconnects(self) -> None:
        self.publisher.close()

        self.assertEqual(
            [c[0] for c in self.client.method_calls],
            ["clear_presence", "close"],
        )

    def test_close_survives_client_errors(self) -> None:
        self.client.clear_presence.side_effect = OSError()
        self.client.close.side_effect = OSError()

        with self.assertLogs(publisher_mod.log, level="WARNING"):
            self.publisher.close()


if __name__ == "__main__":
    unittest.main()
