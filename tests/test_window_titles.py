"""Unit tests for main window title lookup."""
import sys
import unittest
from unittest.mock import MagicMock, patch

from packages.core.monitor import window_titles
from packages.core.monitor.window_titles import main_window_title


class TestMainWindowTitle(unittest.TestCase):
    """Title lookup with pywin32 replaced by fakes."""

    def setUp(self) -> None:
        # hwnd -> (visible, owner, pid, title)
        self.windows = {
            100: (True, 0, 42, "DaVinci Resolve - ProjectA"),
            101: (False, 0, 42, "hidden"),
            102: (True, 7, 42, "Render Settings"),
            103: (True, 0, 99, "Other App"),
        }
        win32gui = MagicMock()
        win32gui.IsWindowVisible.side_effect = lambda h: self.windows[h][0]
        win32gui.GetWindow.side_effect = lambda h, cmd: self.windows[h][1]
        win32gui.GetWindowText.side_effect = lambda h: self.windows[h][3]
        win32gui.EnumWindows.side_effect = lambda cb, extra: [cb(h, extra) for h in sorted(self.windows)]
        win32process = MagicMock()
        win32process.GetWindowThreadProcessId.side_effect = lambda h: (1, self.windows[h][2])

        modules = patch.dict(sys.modules, {"win32gui": win32gui, "win32process": win32process})
        modules.start()
        self.addCleanup(modules.stop)
        platform = patch.object(window_titles.sys, "platform", "win32")
        platform.start()
        self.addCleanup(platform.stop)

    def test_visible_unowned_window_of_process(self) -> None:
        self.assertEqual(main_window_title(42), "DaVinci Resolve - ProjectA")

    def test_process_without_windows(self) -> None:
        self.assertIsNone(main_window_title(7))

    def test_empty_titles_are_ignored(self) -> None:
        self.windows[100] = (True, 0, 42, "")

        self.assertIsNone(main_window_title(42))

    def test_other_platforms_have_no_title(self) -> None:
        with patch.object(window_titles.sys, "platform", "linux"):
            self.assertIsNone(main_window_title(42))


if __name__ == "__main__":
    unittest.main()
