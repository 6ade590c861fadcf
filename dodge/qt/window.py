"""Main Qt window: score labels, Start/Retry controls and the frame timer."""

from __future__ import annotations

from collections.abc import Callable

from dodge.game.app.driver import GameDriver
from dodge.game.core.models import RandomSource
from dodge.qt.canvas import ArcadeCanvas

try:
    from PyQt6.QtCore import QTimer
    from PyQt6.QtGui import QPixmap
    from PyQt6.QtWidgets import QHBoxLayout, QLabel, QMainWindow, QPushButton, QVBoxLayout, QWidget
except Exception as exc:  # pragma: no cover
    raise RuntimeError("PyQt6 is required for the UI. Install dependency 'PyQt6'.") from exc


class MainWindow(QMainWindow):
    def __init__(
        self,
        driver: GameDriver,
        *,
        fps: int,
        render_rng: RandomSource,
        player_pixmap: QPixmap | None = None,
    ) -> None:
        super().__init__()
        self._driver = driver
        self._canvas = ArcadeCanvas(driver, render_rng, player_pixmap)
        self._score_now = QLabel("Score: 0")
        self._best = QLabel("")
        self._start = QPushButton("Start")
        self._retry = QPushButton("Retry")
        self._start.clicked.connect(lambda: self._begin(self._driver.start))
        self._retry.clicked.connect(lambda: self._begin(self._driver.retry))

        controls = QHBoxLayout()
        controls.addWidget(self._score_now)
        controls.addWidget(self._best)
        controls.addStretch(1)
        controls.addWidget(self._start)
        controls.addWidget(self._retry)
        root = QWidget()
        layout = QVBoxLayout(root)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.addLayout(controls)
        layout.addWidget(self._canvas, 1)
        self.setCentralWidget(root)
        self.setWindowTitle("Arcade Dodge")

        driver.add_listener(self._sync_controls)
        self._sync_controls()

        self._timer = QTimer(self)
        self._timer.setInterval(max(1, round(1000 / fps)))
        self._timer.timeout.connect(self._on_frame)
        self._timer.start()

    def _begin(self, action: Callable[[], bool]) -> None:
        if action():
            self._canvas.setFocus()

    def _on_frame(self) -> None:
        self._driver.tick()
        self._score_now.setText(f"Score: {self._driver.snapshot().score}")
        self._canvas.update()

    def _sync_controls(self) -> None:
        idle = not self._driver.running
        self._start.setEnabled(idle)
        self._retry.setEnabled(idle and self._driver.sessions_started > 0)
        best = self._driver.best_score
        self._best.setText("" if best is None else f"Best: {best}")

    def closeEvent(self, event) -> None:  # type: ignore[override]
        self._timer.stop()
        super().closeEvent(event)
