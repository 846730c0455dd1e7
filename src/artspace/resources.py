# -*- coding: utf-8 -*-
"""Resolve opaque image handles to bundled resource files."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

IMAGES_DIR = Path(__file__).resolve().parent / "images"
IMAGE_SUFFIX = ".png"


def resolve_image(image_ref: str, images_dir: Path | None = None) -> Path | None:
    """Return the bundled image for ``image_ref`` or ``None`` if it does not exist."""
    if not image_ref or "/" in image_ref or "\\" in image_ref or image_ref.startswith("."):
        logger.warning("Rejected image handle: %r", image_ref)
        return None
    path = (images_dir or IMAGES_DIR) / f"{image_ref}{IMAGE_SUFFIX}"
    if not path.is_file():
        logger.warning("Image resource missing: %s", path)
        return None
    return path
