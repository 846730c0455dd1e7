# -*- coding: utf-8 -*-
"""Tests for the gallery window, its widgets and controller."""

from __future__ import annotations

import pytest

pytest.importorskip("PyQt6")

from artspace.core.gallery import Gallery
from artspace.core.renderer import RenderedView
from artspace.gui.controller import GalleryController
from artspace.gui.controls_widget import NavigationRow
from artspace.gui.info_card import InfoCard
from artspace.gui.main_window import MainWindow
from artspace.gui.picture_card import PictureCard


def test_controller_emits_view_on_every_navigation(qt_app, gallery: Gallery) -> None:
    controller = GalleryController(gallery)
    views: list[RenderedView] = []
    controller.view_changed.connect(views.append)

    controller.go_previous()
    controller.go_next()
    controller.go_next()

    assert [view.position for view in views] == [1, 2, 3]


def test_controller_restores_from_bundle(qt_app, gallery: Gallery) -> None:
    controller = GalleryController(gallery, {"cursor": 3})
    assert controller.current_view().title == gallery[3].title
    assert controller.save_state() == {"cursor": 3}


def test_navigation_row_buttons_and_signals(qt_app) -> None:
    row = NavigationRow(previous_text="Назад", next_text="Далее", hotkeys={"next": "Right"})
    calls: list[str] = []
    row.previous_requested.connect(lambda: calls.append("previous"))
    row.next_requested.connect(lambda: calls.append("next"))

    assert row.previous_button.text() == "Назад"
    assert row.next_button.toolTip() == "Shortcut: Right"
    row.previous_button.click()
    row.next_button.click()
    assert calls == ["previous", "next"]

    row.set_navigation_state(False, True)
    assert row.previous_button.isEnabled() is False
    assert row.next_button.isEnabled() is True
    row.close()


def test_info_card_shows_title_and_caption(qt_app) -> None:
    card = InfoCard()
    card.set_artwork("Звездная ночь", "Винсент Ван Гог (1889)")
    assert card.title_label.text() == "Звездная ночь"
    assert card.caption_label.text() == "Винсент Ван Гог (1889)"
    card.close()


def test_picture_card_loads_bundled_image(qt_app) -> None:
    card = PictureCard(display_size=120)
    card.set_image("image_2", "Звездная ночь — Винсент Ван Гог")
    assert card.has_image() is True
    assert card.image_label.pixmap().width() == 120
    assert card.image_label.accessibleDescription() == "Звездная ночь — Винсент Ван Гог"
    card.close()


def test_every_bundled_artwork_decodes_at_display_size(qt_app, gallery: Gallery) -> None:
    from PyQt6.QtGui import QImageReader

    from artspace.resources import resolve_image

    for record in gallery:
        image = QImageReader(str(resolve_image(record.image_ref))).read()
        assert image.isNull() is False, record.image_ref
        assert (image.width(), image.height()) == (400, 400)


def test_picture_card_placeholder_for_missing_image(qt_app) -> None:
    card = PictureCard(placeholder_text="Изображение недоступно")
    card.set_image("missing_image", "x — y")
    assert card.has_image() is False
    assert card.image_label.text() == "Изображение недоступно"
    card.close()


def test_main_window_starts_on_first_artwork(qt_app, default_config, gallery: Gallery) -> None:
    window = MainWindow(settings=default_config)
    assert window.current_index() == 0
    assert window.info_card.title_label.text() == gallery[0].title
    assert window.info_card.caption_label.text() == "Ян Вермеер (1665)"
    assert window.navigation_row.previous_button.isEnabled() is False
    assert window.navigation_row.previous_button.text() == "Назад"
    window.close()


def test_main_window_next_clicks_stop_at_last(qt_app, default_config, gallery: Gallery) -> None:
    window = MainWindow(settings=default_config)
    for _ in range(4):
        window.navigation_row.next_button.click()
    assert window.current_index() == 4
    assert window.navigation_row.next_button.isEnabled() is False

    window.go_next()
    assert window.current_index() == 4

    window.navigation_row.previous_button.click()
    assert window.current_index() == 3
    assert window.info_card.title_label.text() == gallery[3].title
    assert window.info_card.caption_label.text() == "Валентин Серов (1899)"
    window.close()


def test_main_window_uses_english_labels(qt_app, default_config) -> None:
    default_config["locale"] = "en"
    window = MainWindow(settings=default_config)
    assert window.navigation_row.next_button.text() == "Next"
    assert window.windowTitle().startswith("Art Space")
    window.close()


def test_rebuild_keeps_cursor(qt_app, default_config, gallery: Gallery) -> None:
    window = MainWindow(settings=default_config)
    window.go_next()
    window.go_next()
    old_card = window.info_card

    window.rebuild()
    qt_app.processEvents()

    assert window.info_card is not old_card
    assert window.current_index() == 2
    assert window.info_card.title_label.text() == gallery[2].title
    window.close()


def test_rotate_swaps_window_size_and_keeps_cursor(qt_app, default_config) -> None:
    window = MainWindow(settings=default_config)
    window.go_next()
    assert window.width() < window.height()

    window.rotate()
    assert window.orientation == "landscape"
    assert window.width() > window.height()
    assert window.current_index() == 1

    window.rotate()
    assert window.orientation == "portrait"
    assert window.current_index() == 1
    window.close()


def test_main_window_accepts_start_bundle(qt_app, default_config) -> None:
    window = MainWindow(settings=default_config, bundle={"cursor": 42})
    assert window.current_index() == 4
    window.close()


def test_main_window_with_custom_gallery(qt_app, default_config, small_gallery: Gallery) -> None:
    window = MainWindow(settings=default_config, gallery=small_gallery)
    window.go_next()
    window.go_next()
    window.go_next()
    assert window.current_index() == 2
    assert window.info_card.caption_label.text() == "Cid (1903)"
    window.close()
