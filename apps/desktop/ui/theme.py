"""
Colors and QSS for the control panel, in light and dark variants.
"""

from __future__ import annotations

from typing import Literal

FONT_FAMILY = "Segoe UI, -apple-system, BlinkMacSystemFont, sans-serif"

ACCENTS = {
    "blue": "#007ACC",
    "red": "#C00000",
    "green": "#34C759",
    "gray": "#8E8E93",
}

LIGHT_COLORS = {
    "background": "#F3F3F3",
    "surface": "#FFFFFF",
    "surface_secondary": "#F7F7F7",
    "text_primary": "#1E1E1E",
    "text_secondary": "#6E6E73",
    "text_tertiary": "#8E8E93",
    "border": "#DCDCDC",
    "log_background": "#FAFAFA",
}

DARK_COLORS = {
    "background": "#1E1E1E",
    "surface": "#252526",
    "surface_secondary": "#2D2D30",
    "text_primary": "#F1F1F1",
    "text_secondary": "#A0A0A0",
    "text_tertiary": "#6E6E6E",
    "border": "#3F3F46",
    "log_background": "#1B1B1C",
}

ThemeMode = Literal["light", "dark"]


def _rgba(hex_color: str, alpha: float) -> str:
    hex_color = hex_color.lstrip("#")
    r, g, b = int(hex_color[0:2], 16), int(hex_color[2:4], 16), int(hex_color[4:6], 16)
    return f"rgba({r}, {g}, {b}, {alpha})"


def _darken(hex_color: str, percent: int) -> str:
    hex_color = hex_color.lstrip("#")
    factor = 1 - (percent / 100)
    r, g, b = (max(0, min(255, int(int(hex_color[i:i + 2], 16) * factor))) for i in (0, 2, 4))
    return f"#{r:02x}{g:02x}{b:02x}"


class Theme:
    def __init__(self, mode: ThemeMode = "dark"):
        self.mode = mode
        self.colors = LIGHT_COLORS if mode == "light" else DARK_COLORS

    def toggle_mode(self) -> None:
        self.mode = "dark" if self.mode == "light" else "light"
        self.colors = LIGHT_COLORS if self.mode == "light" else DARK_COLORS

    def get_stylesheet(self) -> str:
        c = self.colors

        return f"""
        QMainWindow {{
            background-color: {c["background"]};
            color: {c["text_primary"]};
        }}

        QLabel#TitleLabel {{
            font-family: {FONT_FAMILY};
            font-size: 22px;
            font-weight: 700;
            color: {c["text_primary"]};
        }}

        QLabel#SubtitleLabel, QLabel#HintLabel {{
            font-family: {FONT_FAMILY};
            font-size: 13px;
            color: {c["text_secondary"]};
        }}

        QLabel#SectionLabel {{
            font-family: {FONT_FAMILY};
            font-size: 15px;
            font-weight: 600;
            color: {c["text_primary"]};
        }}

        QLabel#BodyLabel, QCheckBox {{
            font-family: {FONT_FAMILY};
            font-size: 13px;
            color: {c["text_primary"]};
        }}

        QFrame#Card {{
            background-color: {c["surface"]};
            border-radius: 10px;
            border: 1px solid {c["border"]};
        }}

        QPushButton#PrimaryButton, QPushButton#DangerButton {{
            color: #FFFFFF;
            border: none;
            border-radius: 4px;
            padding: 6px 18px;
            font-family: {FONT_FAMILY};
            font-size: 13px;
            font-weight: 600;
            min-height: 28px;
        }}

        QPushButton#PrimaryButton {{
            background-color: {ACCENTS["blue"]};
        }}

        QPushButton#PrimaryButton:hover {{
            background-color: {_darken(ACCENTS["blue"], 12)};
        }}

        QPushButton#DangerButton {{
            background-color: {ACCENTS["red"]};
        }}

        QPushButton#DangerButton:hover {{
            background-color: {_darken(ACCENTS["red"], 12)};
        }}

        QPushButton#PrimaryButton:disabled, QPushButton#DangerButton:disabled {{
            background-color: {c["border"]};
            color: {c["text_tertiary"]};
        }}

        QPushButton#SecondaryButton {{
            background-color: {c["surface_secondary"]};
            color: {c["text_primary"]};
            border: 1px solid {c["border"]};
            border-radius: 4px;
            padding: 6px 18px;
            font-family: {FONT_FAMILY};
            font-size: 13px;
            min-height: 28px;
        }}

        QLineEdit {{
            background-color: {c["surface_secondary"]};
            color: {c["text_primary"]};
            border: 1px solid {c["border"]};
            border-radius: 4px;
            padding: 4px 8px;
            font-family: {FONT_FAMILY};
            font-size: 13px;
            min-height: 26px;
        }}

        QLineEdit:focus {{
            border-color: {ACCENTS["blue"]};
        }}

        QPlainTextEdit#StatusLog {{
            background-color: {c["log_background"]};
            color: {c["text_primary"]};
            border: 1px solid {c["border"]};
            border-radius: 4px;
            font-family: Consolas, "Courier New", monospace;
            font-size: 12px;
        }}

        QLabel#StatusPill, QLabel#StatusPillActive {{
            border-radius: 10px;
            padding: 3px 12px;
            font-family: {FONT_FAMILY};
            font-size: 12px;
            font-weight: 500;
        }}

        QLabel#StatusPill {{
            background-color: {_rgba(ACCENTS["gray"], 0.15)};
            color: {c["text_secondary"]};
        }}

        QLabel#StatusPillActive {{
            background-color: {_rgba(ACCENTS["green"], 0.15)};
            color: {ACCENTS["green"]};
        }}
        """
