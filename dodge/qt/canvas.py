"""Qt canvas: paints frame snapshots and feeds keyboard state to the driver."""

from __future__ import annotations

import logging

from dodge.game.app.driver import GameDriver
from dodge.game.app.snapshot import HINT_TEXT, FrameSnapshot, hud_lines
from dodge.game.core.models import PickupKind, RandomSource

try:
    from PyQt6.QtCore import QPointF, QRectF, Qt
    from PyQt6.QtGui import (
        QBrush,
        QColor,
        QFont,
        QFontMetricsF,
        QKeyEvent,
        QLinearGradient,
        QPainter,
        QPen,
        QPixmap,
    )
    from PyQt6.QtWidgets import QWidget
except Exception as exc:  # pragma: no cover
    raise RuntimeError("PyQt6 is required for the UI. Install dependency 'PyQt6'.") from exc

logger = logging.getLogger(__name__)

SHAKE_PIXELS = 9.0
HUD_MARGIN = 12.0
HUD_FIRST_BASELINE = 22.0
HUD_LINE_STEP = 20.0
PLAYER_IMAGE_PAD = 4.0

KEY_NAMES: dict[int, str] = {
    Qt.Key.Key_Left.value: "arrowleft",
    Qt.Key.Key_Right.value: "arrowright",
    Qt.Key.Key_A.value: "a",
    Qt.Key.Key_D.value: "d",
    Qt.Key.Key_Space.value: "space",
}


def hsl(hue: float, saturation: float, lightness: float, alpha: float = 1.0) -> QColor:
    """CSS-style hsl(): hue in degrees, saturation/lightness in percent."""
    return QColor.fromHslF((hue % 360.0) / 360.0, saturation / 100.0, lightness / 100.0, alpha)


def load_player_pixmap(path: str | None) -> QPixmap | None:
    """Load the optional player sprite; None means draw the placeholder rectangle."""
    if not path:
        return None
    pixmap = QPixmap(path)
    if pixmap.isNull():
        logger.warning("player_image_unavailable path=%s", path)
        return None
    return pixmap


def paint_frame(
    painter: QPainter,
    snapshot: FrameSnapshot,
    rng: RandomSource,
    player_pixmap: QPixmap | None = None,
) -> None:
    """Draw one full frame. Only the world layer is shaken; HUD and overlay stay put."""
    offset_x = (rng.random() * 2.0 - 1.0) * snapshot.shake * SHAKE_PIXELS
    offset_y = (rng.random() * 2.0 - 1.0) * snapshot.shake * SHAKE_PIXELS

    painter.save()
    painter.translate(offset_x, offset_y)
    _draw_background(painter, snapshot)
    _draw_blocks(painter, snapshot)
    _draw_pickups(painter, snapshot)
    _draw_particles(painter, snapshot)
    _draw_player(painter, snapshot, player_pixmap)
    painter.restore()

    _draw_hud(painter, snapshot)
    if snapshot.over:
        _draw_game_over(painter, snapshot)


def _draw_background(painter: QPainter, snapshot: FrameSnapshot) -> None:
    gradient = QLinearGradient(0.0, 0.0, 0.0, snapshot.height)
    gradient.setColorAt(0.0, hsl(snapshot.hue_base + 40.0, 55, 10))
    gradient.setColorAt(1.0, hsl(snapshot.hue_base + 300.0, 55, 6))
    painter.fillRect(QRectF(0.0, 0.0, snapshot.width, snapshot.height), QBrush(gradient))


def _draw_blocks(painter: QPainter, snapshot: FrameSnapshot) -> None:
    for b in snapshot.blocks:
        gradient = QLinearGradient(b.x, b.y, b.x + b.w, b.y + b.h)
        gradient.setColorAt(0.0, hsl(b.hue, 22, 82))
        gradient.setColorAt(1.0, hsl(b.hue + 16, 20, 72))
        painter.setBrush(QBrush(gradient))
        painter.setPen(QPen(hsl(b.hue, 18, 55), 2.0))
        radius = min(6.0, b.w / 2, b.h / 2)
        painter.drawRoundedRect(QRectF(b.x, b.y, b.w, b.h), radius, radius)


def _draw_pickups(painter: QPainter, snapshot: FrameSnapshot) -> None:
    painter.setPen(Qt.PenStyle.NoPen)
    for p in snapshot.pickups:
        color = hsl(200, 90, 60) if p.kind is PickupKind.SHIELD else hsl(48, 100, 60)
        painter.setBrush(color)
        painter.drawEllipse(QPointF(p.center_x, p.center_y), p.r, p.r)


def _draw_particles(painter: QPainter, snapshot: FrameSnapshot) -> None:
    for p in snapshot.particles:
        painter.fillRect(QRectF(p.x, p.y, 2.0, 2.0), hsl(p.hue, p.saturation, p.lightness, p.alpha))


def _draw_player(painter: QPainter, snapshot: FrameSnapshot, pixmap: QPixmap | None) -> None:
    pl = snapshot.player
    if pl.dashing:
        painter.fillRect(QRectF(pl.x - 6, pl.y - 4, pl.w + 12, pl.h + 8), hsl(snapshot.hue_base, 100, 70, 0.18))

    if pixmap is not None:
        painter.save()
        if pl.dashing:
            painter.setOpacity(0.88)
        pad = PLAYER_IMAGE_PAD
        painter.drawPixmap(QRectF(pl.x - pad, pl.y - pad, pl.w + pad * 2, pl.h + pad * 2), pixmap, QRectF(pixmap.rect()))
        painter.restore()
    else:
        painter.fillRect(QRectF(pl.x, pl.y, pl.w, pl.h), QColor("#9c7cff" if pl.dashing else "#6e38ff"))

    if pl.shielded:
        painter.setPen(QPen(QColor(100, 180, 255, 230), 3.0))
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawRect(QRectF(pl.x - 4, pl.y - 4, pl.w + 8, pl.h + 8))


def _draw_hud(painter: QPainter, snapshot: FrameSnapshot) -> None:
    painter.save()
    font = QFont("Segoe UI")
    font.setPixelSize(15)
    painter.setFont(font)
    metrics = QFontMetricsF(font)
    painter.setOpacity(0.95)
    painter.setPen(QColor("#ffffff"))
    for index, line in enumerate(hud_lines(snapshot)):
        x = snapshot.width - HUD_MARGIN - metrics.horizontalAdvance(line)
        painter.drawText(QPointF(x, HUD_FIRST_BASELINE + index * HUD_LINE_STEP), line)
    if snapshot.show_hint:
        painter.setOpacity(0.9)
        painter.drawText(QPointF(HUD_MARGIN, 24.0), HINT_TEXT)
    painter.restore()


def _draw_game_over(painter: QPainter, snapshot: FrameSnapshot) -> None:
    painter.save()
    painter.fillRect(QRectF(0.0, 0.0, snapshot.width, snapshot.height), QColor(0, 0, 0, 140))
    painter.setPen(QColor("#ffffff"))
    cx = snapshot.width / 2
    cy = snapshot.height / 2
    _draw_centered(painter, "Game Over", cx, cy - 6, 28, bold=True)
    _draw_centered(painter, "Click Retry to try again", cx, cy + 20, 16)
    painter.restore()


def _draw_centered(painter: QPainter, text: str, cx: float, baseline: float, size: int, bold: bool = False) -> None:
    font = QFont("Segoe UI")
    font.setPixelSize(size)
    font.setBold(bold)
    painter.setFont(font)
    width = QFontMetricsF(font).horizontalAdvance(text)
    painter.drawText(QPointF(cx - width / 2, baseline), text)


class ArcadeCanvas(QWidget):
    """Letterboxed play field. Reads driver snapshots; never touches the session."""

    def __init__(self, driver: GameDriver, rng: RandomSource, player_pixmap: QPixmap | None = None) -> None:
        super().__init__()
        self._driver = driver
        self._rng = rng
        self._player_pixmap = player_pixmap
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        snapshot = driver.snapshot()
        self.setMinimumSize(int(snapshot.width), int(snapshot.height))

    def paintEvent(self, event) -> None:  # type: ignore[override]
        del event
        snapshot = self._driver.snapshot()
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.fillRect(self.rect(), QColor("#05060a"))
        scale = min(self.width() / snapshot.width, self.height() / snapshot.height)
        painter.translate((self.width() - snapshot.width * scale) * 0.5, (self.height() - snapshot.height * scale) * 0.5)
        painter.scale(scale, scale)
        painter.setClipRect(QRectF(0.0, 0.0, snapshot.width, snapshot.height))
        paint_frame(painter, snapshot, self._rng, self._player_pixmap)
        painter.end()

    def keyPressEvent(self, event: QKeyEvent) -> None:  # type: ignore[override]
        name = KEY_NAMES.get(int(event.key()))
        if name is None:
            super().keyPressEvent(event)
            return
        if not event.isAutoRepeat():
            self._driver.input.key_down(name)

    def keyReleaseEvent(self, event: QKeyEvent) -> None:  # type: ignore[override]
        name = KEY_NAMES.get(int(event.key()))
        if name is None:
            super().keyReleaseEvent(event)
            return
        if not event.isAutoRepeat():
            self._driver.input.key_up(name)

    def focusOutEvent(self, event) -> None:  # type: ignore[override]
        self._driver.input.release_all()
        super().focusOutEvent(event)
