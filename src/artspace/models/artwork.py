# -*- coding: utf-8 -*-
"""Artwork record data model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ArtworkRecord:
    """A single artwork shown by the viewer."""

    title: str
    artist_name: str
    year: str
    image_ref: str
