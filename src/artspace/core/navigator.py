# -*- coding: utf-8 -*-
"""Navigation over gallery artworks."""

from __future__ import annotations

import logging

from artspace.core.gallery import Gallery
from artspace.core.state import ViewState
from artspace.models.artwork import ArtworkRecord

logger = logging.getLogger(__name__)


class Navigator:
    """Hold the cursor and move it across the gallery without leaving its bounds."""

    def __init__(self, gallery: Gallery, state: ViewState | None = None) -> None:
        self._gallery = gallery
        self._state = state or ViewState()
        if not 0 <= self._state.cursor <= gallery.last_index:
            raise IndexError(f"Invalid cursor for gallery of {len(gallery)}: {self._state.cursor}")

    @property
    def gallery(self) -> Gallery:
        return self._gallery

    @property
    def state(self) -> ViewState:
        return self._state

    def current(self) -> ArtworkRecord:
        return self._gallery[self._state.cursor]

    def go_previous(self) -> ArtworkRecord:
        if self._state.cursor > 0:
            self._state.cursor -= 1
            logger.debug("Moved to previous artwork: %d", self._state.cursor)
        else:
            logger.debug("Already at first artwork")
        return self.current()

    def go_next(self) -> ArtworkRecord:
        if self._state.cursor < self._gallery.last_index:
            self._state.cursor += 1
            logger.debug("Moved to next artwork: %d", self._state.cursor)
        else:
            logger.debug("Already at last artwork")
        return self.current()

    def go_to(self, index: int) -> ArtworkRecord:
        if index < 0 or index > self._gallery.last_index:
            raise IndexError(f"Invalid artwork index: {index}")
        self._state.cursor = index
        return self.current()

    def current_index(self) -> int:
        return self._state.cursor

    def total_count(self) -> int:
        return len(self._gallery)

    def is_first(self) -> bool:
        return self._state.cursor == 0

    def is_last(self) -> bool:
        return self._state.cursor >= self._gallery.last_index
