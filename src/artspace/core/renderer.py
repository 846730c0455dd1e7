# -*- coding: utf-8 -*-
"""Map the current cursor to what the screen displays."""

from __future__ import annotations

from dataclasses import dataclass

from artspace.core.gallery import Gallery


@dataclass(frozen=True)
class RenderedView:
    """Everything the three display blocks need for one artwork."""

    image_ref: str
    title: str
    artist_name: str
    year: str
    caption: str
    content_description: str
    can_go_previous: bool
    can_go_next: bool
    position: int
    total: int


def content_description(title: str, artist_name: str) -> str:
    return f"{title} — {artist_name}"


def render(gallery: Gallery, cursor: int) -> RenderedView:
    """Select the record under ``cursor`` and compose its display fields.

    Raises ``IndexError`` when the cursor lies outside the gallery; negative
    values are not treated as offsets from the end.
    """
    if cursor < 0 or cursor > gallery.last_index:
        raise IndexError(f"Cursor {cursor} outside gallery of {len(gallery)}")
    record = gallery[cursor]
    return RenderedView(
        image_ref=record.image_ref,
        title=record.title,
        artist_name=record.artist_name,
        year=record.year,
        caption=f"{record.artist_name} ({record.year})",
        content_description=content_description(record.title, record.artist_name),
        can_go_previous=cursor > 0,
        can_go_next=cursor < gallery.last_index,
        position=cursor + 1,
        total=len(gallery),
    )
