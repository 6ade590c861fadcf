"""Immutable per-frame view of the session handed to renderers."""

from __future__ import annotations

import math
from dataclasses import dataclass

from dodge.game.core.models import GameSession, PickupKind

HINT_TEXT = "Press Space to dash"


@dataclass(frozen=True, slots=True)
class BlockView:
    x: float
    y: float
    w: float
    h: float
    hue: int


@dataclass(frozen=True, slots=True)
class PickupView:
    center_x: float
    center_y: float
    r: float
    kind: PickupKind


@dataclass(frozen=True, slots=True)
class ParticleView:
    x: float
    y: float
    alpha: float
    hue: int
    saturation: int
    lightness: int


@dataclass(frozen=True, slots=True)
class PlayerView:
    x: float
    y: float
    w: float
    h: float
    dashing: bool
    shielded: bool


@dataclass(frozen=True, slots=True)
class FrameSnapshot:
    """Everything a renderer may read for one frame; detached from live session state."""

    width: float
    height: float
    hue_base: float
    shake: float
    player: PlayerView
    blocks: tuple[BlockView, ...]
    pickups: tuple[PickupView, ...]
    particles: tuple[ParticleView, ...]
    score: int
    dash_cooldown_ms: float
    shield_timer_ms: float
    show_hint: bool
    running: bool
    over: bool
    best_score: int | None = None
    frame_ms: float | None = None


def build_snapshot(
    session: GameSession,
    *,
    show_hint: bool,
    best_score: int | None = None,
    frame_ms: float | None = None,
) -> FrameSnapshot:
    ab = session.abilities
    player = session.player
    return FrameSnapshot(
        width=session.width,
        height=session.height,
        hue_base=session.hue_base,
        shake=ab.shake,
        player=PlayerView(player.x, player.y, player.w, player.h, ab.dash_active, ab.shield),
        blocks=tuple(BlockView(b.x, b.y, b.w, b.h, b.hue) for b in session.blocks),
        pickups=tuple(PickupView(p.center_x, p.center_y, p.r, p.kind) for p in session.pickups),
        particles=tuple(
            ParticleView(p.x, p.y, max(0.0, 1.0 - p.age / p.life), p.hue, p.saturation, p.lightness)
            for p in session.particles
        ),
        score=math.floor(session.score),
        dash_cooldown_ms=ab.dash_cooldown_ms,
        shield_timer_ms=ab.shield_timer_ms if ab.shield else 0.0,
        show_hint=show_hint,
        running=session.running,
        over=session.over,
        best_score=best_score,
        frame_ms=frame_ms,
    )


def dash_label(cooldown_ms: float) -> str:
    if cooldown_ms > 0.0:
        return f"Dash: {cooldown_ms / 1000:.1f}s"
    return "Dash: Ready"


def hud_lines(snapshot: FrameSnapshot) -> tuple[str, ...]:
    """Right-aligned HUD rows, top to bottom."""
    lines = [f"Score: {snapshot.score}", dash_label(snapshot.dash_cooldown_ms)]
    if snapshot.player.shielded:
        lines.append(f"Shield: {int(snapshot.shield_timer_ms // 1000)}s")
    if snapshot.frame_ms is not None:
        lines.append(f"Frame: {snapshot.frame_ms:.1f}ms")
    return tuple(lines)
