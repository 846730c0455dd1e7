# -*- coding: utf-8 -*-
"""Previous / next navigation buttons."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QHBoxLayout, QPushButton, QWidget


class NavigationRow(QWidget):
    """Two buttons that request movement through the gallery."""

    previous_requested = pyqtSignal()
    next_requested = pyqtSignal()

    def __init__(
        self,
        previous_text: str = "Previous",
        next_text: str = "Next",
        hotkeys: dict[str, str] | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        hotkeys = hotkeys or {}
        layout = QHBoxLayout(self)
        layout.setContentsMargins(16, 0, 16, 0)
        layout.setSpacing(16)

        self.previous_button = self._make_button(
            previous_text, hotkeys.get("previous", ""), self.previous_requested.emit
        )
        self.next_button = self._make_button(next_text, hotkeys.get("next", ""), self.next_requested.emit)

        layout.addStretch(1)
        layout.addWidget(self.previous_button)
        layout.addWidget(self.next_button)
        layout.addStretch(1)

    def _make_button(self, text: str, hotkey: str, handler) -> QPushButton:
        button = QPushButton(text)
        button.setObjectName("navButton")
        button.setMinimumWidth(120)
        if hotkey:
            button.setToolTip(f"Shortcut: {hotkey}")
        button.clicked.connect(handler)
        return button

    def set_navigation_state(self, can_go_previous: bool, can_go_next: bool) -> None:
        """Enable or disable navigation buttons."""
        self.previous_button.setEnabled(can_go_previous)
        self.next_button.setEnabled(can_go_next)
