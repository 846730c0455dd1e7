# -*- coding: utf-8 -*-
"""Main gallery window."""

from __future__ import annotations

import logging
from typing import Any

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QKeySequence, QShortcut
from PyQt6.QtWidgets import QMainWindow, QScrollArea, QVBoxLayout, QWidget

from artspace.config import get_default_config
from artspace.constants import APP_VERSION
from artspace.core.gallery import Gallery, default_gallery
from artspace.core.renderer import RenderedView
from artspace.gui.controller import GalleryController
from artspace.gui.controls_widget import NavigationRow
from artspace.gui.info_card import InfoCard
from artspace.gui.picture_card import PictureCard
from artspace.strings import get_string

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Single screen: picture card, info card and the navigation row."""

    def __init__(
        self,
        settings: dict[str, Any] | None = None,
        gallery: Gallery | None = None,
        bundle: dict[str, Any] | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.settings = settings or get_default_config()
        self.gallery = gallery or default_gallery()
        self.locale = str(self.settings.get("locale", "ru"))
        self.orientation = str(self.settings.get("window", {}).get("orientation", "portrait"))
        self.controller: GalleryController | None = None

        self.setWindowTitle(f"{get_string('app_name', self.locale)} v{APP_VERSION}")
        self._apply_window_size()
        self._build_actions()
        self._build_ui(bundle)
        self._apply_styles()
        self._bind_hotkeys()

    def _apply_window_size(self) -> None:
        window = self.settings.get("window", {})
        width = int(window.get("width", 411))
        height = int(window.get("height", 891))
        if self.orientation == "landscape":
            width, height = max(width, height), min(width, height)
        else:
            width, height = min(width, height), max(width, height)
        self.resize(width, height)

    def _build_actions(self) -> None:
        self.rotate_action = QAction(get_string("rotate", self.locale), self)
        self.rotate_action.triggered.connect(self.rotate)
        toolbar = self.addToolBar("Main")
        toolbar.setMovable(False)
        toolbar.addAction(self.rotate_action)

    def _build_ui(self, bundle: dict[str, Any] | None) -> None:
        display_size = int(self.settings.get("image", {}).get("display_size", 400))

        self.controller = GalleryController(self.gallery, bundle)
        self.picture_card = PictureCard(
            display_size=display_size,
            placeholder_text=get_string("no_image", self.locale),
        )
        self.info_card = InfoCard()
        self.info_card.setFixedWidth(display_size + 32)
        self.navigation_row = NavigationRow(
            previous_text=get_string("previous", self.locale),
            next_text=get_string("next", self.locale),
            hotkeys=self.settings.get("hotkeys", {}),
        )
        self.navigation_row.previous_requested.connect(self.go_previous)
        self.navigation_row.next_requested.connect(self.go_next)
        self.controller.view_changed.connect(self._on_view_changed)

        column = QWidget()
        column_layout = QVBoxLayout(column)
        column_layout.setContentsMargins(16, 16, 16, 16)
        column_layout.setSpacing(16)
        column_layout.addWidget(self.picture_card, 0, Qt.AlignmentFlag.AlignHCenter)
        column_layout.addWidget(self.info_card, 0, Qt.AlignmentFlag.AlignHCenter)
        column_layout.addStretch(1)
        column_layout.addWidget(self.navigation_row)

        self.scroll_area = QScrollArea()
        self.scroll_area.setWidgetResizable(True)
        self.scroll_area.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAsNeeded)
        self.scroll_area.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAsNeeded)
        self.scroll_area.setWidget(column)
        self.setCentralWidget(self.scroll_area)

        self.controller.refresh()

    def _apply_styles(self) -> None:
        self.setStyleSheet(
            """
            QMainWindow, QWidget {
                background: #fffbfe;
                color: #1c1b1f;
                font-family: "Segoe UI", "Noto Sans", sans-serif;
                font-size: 14px;
            }
            QFrame#pictureCard {
                background: #f3edf7;
                border-radius: 16px;
            }
            QLabel#pictureSurface {
                background: #e7e0ec;
                color: #49454f;
                border-radius: 16px;
            }
            QFrame#infoCard {
                background: #e7e0ec;
                border-radius: 8px;
            }
            QLabel#artworkTitle {
                background: transparent;
                font-size: 22px;
                font-weight: 400;
            }
            QLabel#artworkCaption {
                background: transparent;
                font-size: 16px;
                font-weight: 700;
            }
            QPushButton#navButton {
                background: #6750a4;
                color: #ffffff;
                border: none;
                border-radius: 20px;
                padding: 10px 24px;
                font-weight: 600;
            }
            QPushButton#navButton:disabled {
                background: #ddd8e1;
                color: #938f99;
            }
            """
        )

    def _bind_hotkeys(self) -> None:
        hotkeys = self.settings.get("hotkeys", {})
        bindings = [
            (hotkeys.get("previous"), self.go_previous),
            (hotkeys.get("next"), self.go_next),
        ]
        self._shortcuts: list[QShortcut] = []
        for sequence, handler in bindings:
            if not sequence:
                continue
            shortcut = QShortcut(QKeySequence(sequence), self)
            shortcut.activated.connect(handler)
            self._shortcuts.append(shortcut)

    def _on_view_changed(self, view: RenderedView) -> None:
        self.picture_card.set_image(view.image_ref, view.content_description)
        self.info_card.set_artwork(view.title, view.caption)
        self.navigation_row.set_navigation_state(view.can_go_previous, view.can_go_next)

    def go_previous(self) -> None:
        if self.controller is not None:
            self.controller.go_previous()

    def go_next(self) -> None:
        if self.controller is not None:
            self.controller.go_next()

    def current_index(self) -> int:
        return self.controller.navigator.current_index() if self.controller else 0

    def rebuild(self) -> None:
        """Recreate the widget tree, carrying the cursor over in a state bundle."""
        bundle = self.controller.save_state() if self.controller else None
        if self.controller is not None:
            self.controller.view_changed.disconnect(self._on_view_changed)
            self.controller.deleteLater()
        logger.info("Rebuilding window (%s) with state %s", self.orientation, bundle)
        self._build_ui(bundle)

    def rotate(self) -> None:
        self.orientation = "landscape" if self.orientation == "portrait" else "portrait"
        self._apply_window_size()
        self.rebuild()
