"""Application entry point and setup for Equation Pyramid."""

import logging
import sys
from pathlib import Path

from PySide6.QtGui import QIcon
from PySide6.QtWidgets import QApplication

from eqpyramid.core.engine import GameEngine
from eqpyramid.core.scoreboard import Scoreboard
from eqpyramid.core.settings import load_settings
from eqpyramid.ui.main_window import MainWindow
from eqpyramid.ui.qt_ticker import QtTicker
from eqpyramid.ui.sound import OutcomeSounds


def configure_logging() -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def run() -> None:
    """Load settings and scores, then open the game window."""
    configure_logging()
    app = QApplication(sys.argv)
    app.setApplicationName("Equation Pyramid")
    app.setApplicationDisplayName("Equation Pyramid")

    settings = load_settings()
    scoreboard = Scoreboard(storage_key=settings.storage_key)
    logging.info("Loaded %d teams from the scoreboard", len(scoreboard))

    icon_path = Path(__file__).parent / "assets" / "logo.svg"
    if icon_path.exists():
        app.setWindowIcon(QIcon(str(icon_path)))

    engine = GameEngine(settings=settings, ticker=QtTicker(parent=app))
    window = MainWindow(engine=engine, scoreboard=scoreboard, sounds=OutcomeSounds(parent=app))
    window.show()

    sys.exit(app.exec())
