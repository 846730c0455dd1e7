# -*- coding: utf-8 -*-
"""Caption card with title, artist and year."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QFrame, QLabel, QVBoxLayout, QWidget


class InfoCard(QFrame):
    """Show the artwork title above an ``artist (year)`` line."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("infoCard")

        self.title_label = QLabel("-")
        self.title_label.setObjectName("artworkTitle")
        self.title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.title_label.setWordWrap(True)

        self.caption_label = QLabel("-")
        self.caption_label.setObjectName("artworkCaption")
        self.caption_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.caption_label.setWordWrap(True)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(8)
        layout.addWidget(self.title_label)
        layout.addWidget(self.caption_label)

    def set_artwork(self, title: str, caption: str) -> None:
        self.title_label.setText(title or "-")
        self.caption_label.setText(caption or "-")
