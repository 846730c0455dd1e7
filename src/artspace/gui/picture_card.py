# -*- coding: utf-8 -*-
"""Framed artwork image."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QRect, Qt
from PyQt6.QtGui import QPainter, QPainterPath, QPixmap
from PyQt6.QtWidgets import QFrame, QLabel, QVBoxLayout, QWidget

from artspace.resources import resolve_image

logger = logging.getLogger(__name__)


def crop_to_square(pixmap: QPixmap, size: int, radius: int = 16) -> QPixmap:
    """Scale ``pixmap`` to cover a ``size`` square, crop the center and round the corners."""
    scaled = pixmap.scaled(
        size,
        size,
        Qt.AspectRatioMode.KeepAspectRatioByExpanding,
        Qt.TransformationMode.SmoothTransformation,
    )
    x = (scaled.width() - size) // 2
    y = (scaled.height() - size) // 2
    cropped = scaled.copy(QRect(x, y, size, size))

    rounded = QPixmap(size, size)
    rounded.fill(Qt.GlobalColor.transparent)
    painter = QPainter(rounded)
    painter.setRenderHint(QPainter.RenderHint.Antialiasing)
    path = QPainterPath()
    path.addRoundedRect(0, 0, size, size, radius, radius)
    painter.setClipPath(path)
    painter.drawPixmap(0, 0, cropped)
    painter.end()
    return rounded


class PictureCard(QFrame):
    """Show one artwork image in a fixed-size region."""

    def __init__(
        self,
        display_size: int = 400,
        placeholder_text: str = "Image not available",
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setObjectName("pictureCard")
        self._display_size = display_size
        self._placeholder_text = placeholder_text
        self._image_ref: str | None = None

        self.image_label = QLabel()
        self.image_label.setObjectName("pictureSurface")
        self.image_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.image_label.setFixedSize(display_size, display_size)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.addWidget(self.image_label, 0, Qt.AlignmentFlag.AlignCenter)

    @property
    def image_ref(self) -> str | None:
        return self._image_ref

    def has_image(self) -> bool:
        pixmap = self.image_label.pixmap()
        return pixmap is not None and not pixmap.isNull()

    def set_image(self, image_ref: str, content_description: str) -> None:
        """Load the bundled image for ``image_ref`` and describe it for assistive tools."""
        self._image_ref = image_ref
        self.image_label.setAccessibleName(content_description)
        self.image_label.setAccessibleDescription(content_description)
        self.image_label.setToolTip(content_description)

        path = resolve_image(image_ref)
        pixmap = QPixmap(str(path)) if path is not None else QPixmap()
        if pixmap.isNull():
            if path is not None:
                logger.warning("Failed to decode image: %s", path)
            self.image_label.clear()
            self.image_label.setText(self._placeholder_text)
            return

        self.image_label.setText("")
        self.image_label.setPixmap(crop_to_square(pixmap, self._display_size))
