# -*- coding: utf-8 -*-
"""Controller connecting navigation events to the rendered view."""

from __future__ import annotations

import logging
from typing import Any

from PyQt6.QtCore import QObject, pyqtSignal

from artspace.core.gallery import Gallery
from artspace.core.navigator import Navigator
from artspace.core.renderer import RenderedView, render
from artspace.core.state import ViewState

logger = logging.getLogger(__name__)


class GalleryController(QObject):
    """
    Own the navigator for one window.
    Every navigation call re-renders the current artwork and emits ``view_changed``.
    """

    view_changed = pyqtSignal(RenderedView)

    def __init__(self, gallery: Gallery, bundle: dict[str, Any] | None = None) -> None:
        super().__init__()
        self.gallery = gallery
        self.navigator = Navigator(gallery, ViewState.from_bundle(bundle, len(gallery)))

    def current_view(self) -> RenderedView:
        return render(self.gallery, self.navigator.current_index())

    def refresh(self) -> None:
        self.view_changed.emit(self.current_view())

    def go_previous(self) -> None:
        self.navigator.go_previous()
        self.refresh()

    def go_next(self) -> None:
        self.navigator.go_next()
        self.refresh()

    def save_state(self) -> dict[str, int]:
        bundle = self.navigator.state.to_bundle()
        logger.debug("Saved view state: %s", bundle)
        return bundle
