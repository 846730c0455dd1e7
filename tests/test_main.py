# -*- coding: utf-8 -*-
"""Tests for application startup helpers."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

pytest.importorskip("PyQt6")

from artspace import main as main_module


class _FakeApplication:
    """Stand-in for the QApplication class used by main()."""

    def __init__(self, running: bool) -> None:
        self._running = running

    def instance(self):
        return self if self._running else None

    def exec(self) -> int:
        return 0


def test_global_exception_handler_writes_crash_report(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(main_module, "QApplication", _FakeApplication(running=False))
    forwarded: list[type] = []
    monkeypatch.setattr(sys, "__excepthook__", lambda exc_type, value, tb: forwarded.append(exc_type))

    try:
        raise RuntimeError("boom")
    except RuntimeError:
        main_module.global_exception_handler(*sys.exc_info())

    report = (tmp_path / "logs" / "LAST_CRASH.log").read_text(encoding="utf-8")
    assert "RuntimeError: boom" in report
    assert forwarded == [RuntimeError]


def test_main_builds_window_with_start_index(qt_app, tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    created: list[main_module.MainWindow] = []

    class _RecordingWindow(main_module.MainWindow):
        def __init__(self, *args, **kwargs) -> None:
            super().__init__(*args, **kwargs)
            created.append(self)

        def show(self) -> None:
            pass

    monkeypatch.setattr(main_module, "MainWindow", _RecordingWindow)
    monkeypatch.setattr(main_module, "setup_session_logging", lambda *args, **kwargs: None)
    monkeypatch.setattr(main_module, "QApplication", _FakeApplication(running=True))
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)

    assert main_module.main(locale="en", start_index=2) == 0
    assert created[0].current_index() == 2
    assert created[0].navigation_row.next_button.text() == "Next"
    created[0].close()


@pytest.mark.parametrize("content", ['{"locale": "de"}', '{"window": 5}', "{not json"])
def test_main_refuses_unusable_settings_file(tmp_path: Path, monkeypatch, caplog, content: str) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    monkeypatch.setattr(main_module, "setup_session_logging", lambda *args, **kwargs: None)
    settings_path = tmp_path / "settings.json"
    settings_path.write_text(content, encoding="utf-8")

    with caplog.at_level("CRITICAL"):
        assert main_module.main(config_path=settings_path) == 1

    assert sys.excepthook is main_module.global_exception_handler
    assert any(record.levelname == "CRITICAL" and "Cannot start" in record.getMessage() for record in caplog.records)
