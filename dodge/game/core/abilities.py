"""Player movement plus the dash and shield state machines."""

from __future__ import annotations

from dodge.game.core.effects import SHIELD_HUE, emit_burst
from dodge.game.core.geometry import clamp
from dodge.game.core.models import ControlInput, GameSession, RandomSource
from dodge.game.core.tuning import Tuning

DASH_SHAKE = 0.45
SHIELD_PICKUP_SHAKE = 0.5
SHIELD_BREAK_SHAKE = 0.9
SHIELD_PICKUP_BURST = 26
SHIELD_BREAK_BURST = 34


def tick_timers(session: GameSession, delta_ms: float, tuning: Tuning) -> None:
    """Count every ability and pattern timer down, clamped at zero."""
    ab = session.abilities
    if ab.dash_cooldown_ms > 0.0:
        ab.dash_cooldown_ms = max(0.0, ab.dash_cooldown_ms - delta_ms)
    if ab.dash_active:
        ab.dash_timer_ms = max(0.0, ab.dash_timer_ms - delta_ms)
        if ab.dash_timer_ms == 0.0:
            ab.dash_active = False
    if ab.shield:
        ab.shield_timer_ms = max(0.0, ab.shield_timer_ms - delta_ms)
        if ab.shield_timer_ms == 0.0:
            ab.shield = False
    memory = session.patterns
    if memory.wall_cooldown_ms > 0.0:
        memory.wall_cooldown_ms = max(0.0, memory.wall_cooldown_ms - delta_ms)
    if ab.shake > 0.0:
        ab.shake = max(0.0, ab.shake - delta_ms / 1000.0 * tuning.shake_decay_per_second)


def move_player(session: GameSession, control: ControlInput, delta_seconds: float, tuning: Tuning) -> None:
    player = session.player
    direction = max(-1, min(1, control.move))
    speed = player.speed * (tuning.dash_speed_mul if session.abilities.dash_active else 1.0)
    player.x = clamp(player.x + direction * speed * delta_seconds, 0.0, session.width - player.w)


def try_dash(session: GameSession, control: ControlInput, tuning: Tuning, rng: RandomSource) -> bool:
    """Start a dash on a fresh press when ready.

    Active window and cooldown start together, so the cooldown includes the
    active time.
    """
    ab = session.abilities
    if not control.dash_pressed or not ab.dash_ready:
        return False
    ab.dash_active = True
    ab.dash_timer_ms = tuning.dash_time_ms
    ab.dash_cooldown_ms = tuning.dash_cooldown_ms
    ab.shake = max(ab.shake, DASH_SHAKE)
    session.stats.dashes += 1
    player = session.player
    emit_burst(
        session.particles,
        player.center_x,
        player.center_y,
        int(session.hue_base),
        tuning.dash_burst_amount,
        rng,
    )
    return True


def grant_shield(session: GameSession, tuning: Tuning, rng: RandomSource) -> None:
    ab = session.abilities
    ab.shield = True
    ab.shield_timer_ms = tuning.shield_time_ms
    ab.shake = max(ab.shake, SHIELD_PICKUP_SHAKE)
    session.stats.shields_collected += 1
    emit_burst(session.particles, session.player.center_x, session.player.y, SHIELD_HUE, SHIELD_PICKUP_BURST, rng)


def absorb_hit(session: GameSession, rng: RandomSource) -> None:
    """Spend the held shield on one obstacle."""
    ab = session.abilities
    ab.shield = False
    ab.shield_timer_ms = 0.0
    ab.shake = SHIELD_BREAK_SHAKE
    session.stats.shields_broken += 1
    emit_burst(session.particles, session.player.center_x, session.player.y, SHIELD_HUE, SHIELD_BREAK_BURST, rng)
