# -*- coding: utf-8 -*-
"""Transient view state that survives window reconstruction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

CURSOR_KEY = "cursor"


@dataclass
class ViewState:
    """Cursor into the gallery. Kept in memory only."""

    cursor: int = 0

    def to_bundle(self) -> dict[str, int]:
        return {CURSOR_KEY: self.cursor}

    @classmethod
    def from_bundle(cls, bundle: dict[str, Any] | None, gallery_size: int) -> ViewState:
        """Restore a state, clamping the cursor into ``[0, gallery_size - 1]``."""
        if gallery_size < 1:
            raise ValueError("gallery_size must be at least 1")
        raw = (bundle or {}).get(CURSOR_KEY, 0)
        try:
            cursor = int(raw)
        except (TypeError, ValueError):
            cursor = 0
        return cls(cursor=max(0, min(gallery_size - 1, cursor)))
