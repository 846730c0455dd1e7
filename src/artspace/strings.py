# -*- coding: utf-8 -*-
"""Localized UI labels."""

from __future__ import annotations

import logging

from artspace.constants import DEFAULT_LOCALE

logger = logging.getLogger(__name__)

FALLBACK_LOCALE = "en"

STRINGS: dict[str, dict[str, str]] = {
    "en": {
        "app_name": "Art Space",
        "previous": "Previous",
        "next": "Next",
        "rotate": "Rotate",
        "no_image": "Image not available",
    },
    "ru": {
        "app_name": "Арт-пространство",
        "previous": "Назад",
        "next": "Далее",
        "rotate": "Повернуть",
        "no_image": "Изображение недоступно",
    },
}


def get_string(key: str, locale: str = DEFAULT_LOCALE) -> str:
    """Return the label for ``key``; unknown locales fall back to English."""
    table = STRINGS.get(locale)
    if table is None:
        logger.warning("Unknown locale %r, falling back to %r", locale, FALLBACK_LOCALE)
        table = STRINGS[FALLBACK_LOCALE]
    if key not in table:
        raise KeyError(f"Unknown string key: {key}")
    return table[key]
