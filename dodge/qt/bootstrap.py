"""Qt frontend bootstrap and runtime wiring."""

from __future__ import annotations

import random
from collections.abc import Callable
from dataclasses import dataclass

from dodge.game.app.driver import GameDriver
from dodge.game.infra.config import AppSettings
from dodge.qt.canvas import load_player_pixmap
from dodge.qt.window import MainWindow

try:
    from PyQt6.QtWidgets import QApplication
except Exception as exc:  # pragma: no cover
    raise RuntimeError("PyQt6 is required for the UI. Install dependency 'PyQt6'.") from exc


@dataclass(frozen=True, slots=True)
class FrontendBundle:
    """Window plus the blocking event-loop runner."""

    window: MainWindow
    run_event_loop: Callable[[], int]


def create_qt_frontend(driver: GameDriver, settings: AppSettings) -> FrontendBundle:
    """Build the Qt window around a driver."""
    app = QApplication.instance() or QApplication([])
    app.setStyleSheet(
        """
        QWidget { font-size: 15px; background: #0b0d17; }
        QLabel { color: #e2e8f0; }
        QPushButton { padding: 8px 16px; color: #f8fafc; background: #4c1d95; }
        QPushButton:disabled { background: #374151; color: #9ca3af; }
        """
    )
    window = MainWindow(
        driver,
        fps=settings.fps,
        render_rng=random.Random(),
        player_pixmap=load_player_pixmap(settings.player_image),
    )
    return FrontendBundle(window=window, run_event_loop=lambda: app.exec())
