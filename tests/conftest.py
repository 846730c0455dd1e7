# -*- coding: utf-8 -*-
"""Shared pytest fixtures."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest


SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture
def gallery():
    from artspace.core.gallery import default_gallery

    return default_gallery()


@pytest.fixture
def small_gallery():
    from artspace.core.gallery import Gallery

    return Gallery.from_columns(
        titles=["First", "Second", "Third"],
        artist_names=["Ann", "Bob", "Cid"],
        years=["1901", "1902", "1903"],
        image_refs=["image_1", "image_2", "image_3"],
    )


@pytest.fixture
def default_config() -> dict:
    from artspace.config import get_default_config

    return get_default_config()


@pytest.fixture(scope="session")
def qt_app():
    pytest.importorskip("PyQt6")
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
