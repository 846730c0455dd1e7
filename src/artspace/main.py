# -*- coding: utf-8 -*-
"""Application entry point."""

from __future__ import annotations

import logging
import sys
import traceback
from pathlib import Path
from typing import Any

from PyQt6.QtWidgets import QApplication, QMessageBox

from artspace.config import load_config
from artspace.constants import APP_NAME, DEFAULT_SETTINGS_FILE
from artspace.core.state import CURSOR_KEY
from artspace.gui.main_window import MainWindow
from artspace.utils.logger import setup_session_logging


def global_exception_handler(exc_type, exc_value, exc_traceback) -> None:
    """Log fatal errors and keep a copy of the last one on disk."""
    error_msg = "".join(traceback.format_exception(exc_type, exc_value, exc_traceback))
    logging.getLogger().critical("FATAL CRASH:\n%s", error_msg)

    crash_path = Path.cwd() / "logs" / "LAST_CRASH.log"
    try:
        crash_path.parent.mkdir(parents=True, exist_ok=True)
        crash_path.write_text(error_msg, encoding="utf-8")
    except OSError:
        logging.getLogger().exception("Could not write crash report to %s", crash_path)

    if QApplication.instance():
        QMessageBox.critical(None, "Application Crash", f"A fatal error occurred.\nDetails saved to: {crash_path}")

    sys.__excepthook__(exc_type, exc_value, exc_traceback)


def main(
    config_path: str | Path | None = None,
    locale: str | None = None,
    start_index: int | None = None,
) -> int:
    """Start the GUI application. Returns 1 when the settings file is unusable."""
    sys.excepthook = global_exception_handler
    logger = logging.getLogger(__name__)

    try:
        settings: dict[str, Any] = load_config(config_path)
    except ValueError as e:
        # ConfigError and malformed JSON both land here
        setup_session_logging(Path.cwd(), APP_NAME)
        logger.critical("Cannot start with settings from %s: %s", config_path or DEFAULT_SETTINGS_FILE, e)
        return 1
    if locale is not None:
        settings["locale"] = locale

    session_log_path = setup_session_logging(
        Path.cwd(), APP_NAME, log_to_file=bool(settings.get("logging", {}).get("log_to_file", True))
    )
    logger.info("Settings source: %s", config_path or DEFAULT_SETTINGS_FILE)

    app = QApplication.instance() or QApplication(sys.argv)
    if session_log_path is not None:
        logger.info("Session log file: %s", session_log_path)
    logger.info("Starting %s with locale %s", APP_NAME, settings.get("locale"))

    bundle = {CURSOR_KEY: start_index} if start_index is not None else None
    window = MainWindow(settings=settings, bundle=bundle)
    window.show()
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
