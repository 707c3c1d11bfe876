"""
Control panel: application id, start/stop, and a scrolling status log.
"""

from __future__ import annotations

import logging
import time

from PySide6.QtCore import QTimer
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import (
    QCheckBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QMessageBox,
    QPlainTextEdit,
    QVBoxLayout,
    QWidget,
)

from packages.shared.config import AppConfig, MissingCredentialError
from packages.shared.store import ConfigStore, ConfigStoreError
from packages.core.monitor.presence_monitor import PresenceMonitor
from packages.core.monitor.types import MonitorState

from .components import Card, DangerButton, PrimaryButton, SecondaryButton, StatusPill
from .theme import Theme

log = logging.getLogger(__name__)


def format_elapsed(seconds: float) -> str:
    total = int(seconds)
    h, rem = divmod(total, 3600)
    m, s = divmod(rem, 60)
    return f"{h:d}:{m:02d}:{s:02d}" if h else f"{m:02d}:{s:02d}"


class MainWindow(QMainWindow):
    def __init__(self) -> None:
        super().__init__()
        self.setWindowTitle("DaVinci Resolve Discord RPC")
        self.resize(560, 460)
        self.setMinimumSize(460, 380)

        self.theme = Theme("dark")

        self.store = ConfigStore()
        try:
            self.cfg: AppConfig = self.store.load()
        except ConfigStoreError as e:
            load_error = str(e)
            log.error("%s", load_error)
            self.cfg = AppConfig()
            QTimer.singleShot(0, self, lambda: self._show_error(load_error))

        self.monitor = PresenceMonitor(config=self.cfg.to_monitor_config())
        self.monitor.on_event(self._on_monitor_event)
        self.monitor.on_error(self._on_monitor_error)

        self._build_ui()
        self._apply_theme()
        self._load_to_ui()

        self._status_timer = QTimer(self)
        self._status_timer.timeout.connect(self._refresh_status)
        self._status_timer.start(1000)

    def _apply_theme(self) -> None:
        self.setStyleSheet(self.theme.get_stylesheet())

    def _toggle_dark_mode(self, checked: bool) -> None:
        if checked != (self.theme.mode == "dark"):
            self.theme.toggle_mode()
            self._apply_theme()

    def _build_ui(self) -> None:
        root = QWidget()
        self.setCentralWidget(root)
        main_layout = QVBoxLayout(root)
        main_layout.setContentsMargins(16, 16, 16, 16)
        main_layout.setSpacing(12)

        title = QLabel("DaVinci Resolve Discord RPC")
        title.setObjectName("TitleLabel")
        main_layout.addWidget(title)

        subtitle = QLabel("Shows the project open in Resolve as your Discord status.")
        subtitle.setObjectName("SubtitleLabel")
        main_layout.addWidget(subtitle)

        # Application id
        id_card = Card()
        id_label = QLabel("Discord Application ID")
        id_label.setObjectName("SectionLabel")
        id_card.layout.addWidget(id_label)

        id_row = QHBoxLayout()
        self.txt_app_id = QLineEdit()
        self.txt_app_id.setPlaceholderText("e.g. 123456789012345678")
        id_row.addWidget(self.txt_app_id, 1)
        self.btn_save = SecondaryButton("Save")
        self.btn_save.clicked.connect(self._save_app_id)
        id_row.addWidget(self.btn_save)
        id_card.layout.addLayout(id_row)

        self.chk_dark_mode = QCheckBox("Dark mode")
        self.chk_dark_mode.setChecked(self.theme.mode == "dark")
        self.chk_dark_mode.toggled.connect(self._toggle_dark_mode)
        id_card.layout.addWidget(self.chk_dark_mode)
        main_layout.addWidget(id_card)

        # Controls and status
        controls = QHBoxLayout()
        controls.setSpacing(8)
        self.btn_start = PrimaryButton("Start")
        self.btn_start.clicked.connect(self._start_rpc)
        controls.addWidget(self.btn_start)

        self.btn_stop = DangerButton("Stop")
        self.btn_stop.clicked.connect(self._stop_rpc)
        controls.addWidget(self.btn_stop)

        self.btn_minimize = SecondaryButton("Minimize")
        self.btn_minimize.clicked.connect(self.showMinimized)
        controls.addWidget(self.btn_minimize)

        controls.addStretch()

        self.status_pill = StatusPill("STOPPED")
        controls.addWidget(self.status_pill)
        self.project_pill = StatusPill("Resolve not running")
        controls.addWidget(self.project_pill)
        main_layout.addLayout(controls)

        # Status log
        log_card = Card()
        log_label = QLabel("Status")
        log_label.setObjectName("SectionLabel")
        log_card.layout.addWidget(log_label)
        self.txt_status = QPlainTextEdit()
        self.txt_status.setObjectName("StatusLog")
        self.txt_status.setReadOnly(True)
        self.txt_status.setMaximumBlockCount(500)
        log_card.layout.addWidget(self.txt_status, 1)
        main_layout.addWidget(log_card, 1)

    def _load_to_ui(self) -> None:
        self.txt_app_id.setText(self.cfg.discord_app_id)
        self._update_button_states()
        self._refresh_status()

    def _update_button_states(self) -> None:
        running = self.monitor.get_state().status == "RUNNING"
        self.btn_start.setEnabled(not running)
        self.btn_stop.setEnabled(running)

    def _refresh_status(self) -> None:
        state: MonitorState = self.monitor.get_state()
        is_running = state.status == "RUNNING"

        self.status_pill.setText(state.status)
        self.status_pill.set_active(is_running)

        if is_running and state.target_running:
            self.project_pill.setText(f"{state.label} · {format_elapsed(state.accumulated_seconds)}")
            self.project_pill.set_active(True)
        else:
            self.project_pill.setText("Resolve not running")
            self.project_pill.set_active(False)

    def _append_status(self, line: str) -> None:
        stamp = time.strftime("%H:%M:%S", time.localtime())
        self.txt_status.appendPlainText(f"[{stamp}] {line}")

    def _show_error(self, msg: str) -> None:
        QMessageBox.critical(self, "Error", msg)

    def _write_config(self) -> bool:
        self.cfg.discord_app_id = self.txt_app_id.text().strip()
        try:
            self.store.save(self.cfg)
        except ConfigStoreError as e:
            log.error("%s", e)
            self._append_status(f"ERROR: {e}")
            self._show_error(str(e))
            return False
        return True

    def _save_app_id(self) -> None:
        if self._write_config():
            self._append_status("Discord Application ID saved.")
            QMessageBox.information(self, "Success", "Discord Application ID saved successfully!")

    def _start_rpc(self) -> None:
        if self.monitor.get_state().status == "RUNNING":
            return
        if not self.txt_app_id.text().strip():
            QMessageBox.critical(self, "Error", "Please enter a Discord Application ID first.")
            return

        # a failed save is reported but does not block starting
        self._write_config()
        self.monitor.update_config(self.cfg.to_monitor_config())
        try:
            self.monitor.start()
        except MissingCredentialError as e:
            self._show_error(str(e))
            return
        self._append_status("Monitoring started.")
        self._update_button_states()
        self._refresh_status()

    def _stop_rpc(self) -> None:
        if self.monitor.get_state().status != "RUNNING":
            return
        self.monitor.stop()
        self._append_status("Monitoring stopped.")
        self._update_button_states()
        self._refresh_status()

    def closeEvent(self, event: QCloseEvent) -> None:
        self._status_timer.stop()
        self.monitor.stop()
        super().closeEvent(event)

    def _on_monitor_event(self, evt: dict) -> None:
        def handle() -> None:
            t = evt.get("type")
            if t == "CLIENT_READY":
                self._append_status("Discord RPC Client ready")
            elif t == "PRESENCE_UPDATED":
                self._append_status(f"Presence has been updated! ({evt['presence']['details']})")
            elif t == "SESSION_STARTED":
                self._append_status(f"DaVinci Resolve detected: {evt.get('label')}")
            elif t == "SESSION_ENDED":
                self._append_status("DaVinci Resolve is not running.")
            elif t == "PRESENCE_CLEARED":
                self._append_status("Presence cleared.")
            self._refresh_status()

        QTimer.singleShot(0, self, handle)

    def _on_monitor_error(self, msg: str) -> None:
        def handle() -> None:
            self._append_status(f"ERROR: {msg}")
            log.error("Monitor error: %s", msg)

        QTimer.singleShot(0, self, handle)
