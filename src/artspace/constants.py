# -*- coding: utf-8 -*-
"""Application constants."""

APP_NAME = "artspace"
APP_VERSION = "0.1.0"

DEFAULT_SETTINGS_FILE = "settings.json"
DEFAULT_LOCALE = "ru"
SUPPORTED_LOCALES = ("ru", "en")

ORIENTATIONS = ("portrait", "landscape")
DEFAULT_WINDOW_SIZE = {"width": 411, "height": 891}
DEFAULT_IMAGE_DISPLAY_SIZE = 400

DEFAULT_HOTKEYS = {
    "previous": "Left",
    "next": "Right",
}
