"""Session lifecycle and the per-frame step function."""

from __future__ import annotations

import math

from dodge.game.core.abilities import move_player, tick_timers, try_dash
from dodge.game.core.collisions import resolve_obstacles, resolve_pickups
from dodge.game.core.effects import advance_particles, emit_trail
from dodge.game.core.models import (
    Abilities,
    ControlInput,
    GameSession,
    PatternMemory,
    Player,
    RandomSource,
    SessionStats,
    SpawnAccumulators,
    StepOutcome,
)
from dodge.game.core.spawner import run_spawners
from dodge.game.core.tuning import DEFAULT_TUNING, Tuning

INITIAL_HUE_BASE = 260.0


def create_session(width: float, height: float, tuning: Tuning = DEFAULT_TUNING) -> GameSession:
    """Create an idle session sized to the play field."""
    if width <= tuning.player_size or height <= tuning.player_bottom_offset:
        raise ValueError(f"play field {width}x{height} is too small for the player")
    if width < tuning.min_gap_px:
        raise ValueError(f"play field width {width} cannot hold a {tuning.min_gap_px}px wall gap")
    return GameSession(width=width, height=height, player=_initial_player(width, height, tuning))


def reset_session(session: GameSession, tuning: Tuning = DEFAULT_TUNING) -> None:
    """Restore the initial state in place. Calling it repeatedly changes nothing further."""
    session.player = _initial_player(session.width, session.height, tuning)
    session.blocks = []
    session.pickups = []
    session.particles = []
    session.abilities = Abilities()
    session.accumulators = SpawnAccumulators()
    session.patterns = PatternMemory()
    session.stats = SessionStats()
    session.score = 0.0
    session.elapsed_seconds = 0.0
    session.hue_base = INITIAL_HUE_BASE
    session.running = False
    session.over = False


def start_session(session: GameSession, tuning: Tuning = DEFAULT_TUNING) -> None:
    reset_session(session, tuning)
    session.running = True


def step_session(
    session: GameSession,
    control: ControlInput,
    delta_seconds: float,
    tuning: Tuning,
    rng: RandomSource,
) -> StepOutcome:
    """Advance the simulation by one frame.

    Order: curves/hue, timers, score, movement, dash, spawns, entity motion and
    pruning, pickups, obstacles. Steps on an idle or finished session do nothing.
    """
    if not session.running or session.over:
        return StepOutcome(game_over=session.over, stepped=False)
    if delta_seconds < 0.0:
        raise ValueError("delta_seconds must be >= 0")

    delta_ms = delta_seconds * 1000.0
    session.elapsed_seconds += delta_seconds
    session.hue_base = 220.0 + (session.score / 14.0) % 140.0

    tick_timers(session, delta_ms, tuning)
    session.score += delta_seconds * tuning.score_per_second

    move_player(session, control, delta_seconds, tuning)
    try_dash(session, control, tuning, rng)

    run_spawners(session, delta_ms, tuning, rng)

    limit = session.height + tuning.prune_margin
    for block in session.blocks:
        block.y += block.vy * delta_seconds
    for pickup in session.pickups:
        pickup.y += pickup.vy * delta_seconds
    session.blocks = [b for b in session.blocks if b.y < limit]
    session.pickups = [p for p in session.pickups if p.y < limit]
    session.particles = advance_particles(session.particles, delta_seconds)

    if session.abilities.dash_active:
        player = session.player
        emit_trail(
            session.particles,
            player.center_x,
            player.center_y,
            int(session.hue_base),
            tuning.dash_trail_per_frame,
            rng,
        )

    resolve_pickups(session, tuning, rng)
    if resolve_obstacles(session, rng):
        session.running = False
        session.over = True
        return StepOutcome(game_over=True)
    return StepOutcome()


def final_score(session: GameSession) -> int:
    return math.floor(session.score)


def _initial_player(width: float, height: float, tuning: Tuning) -> Player:
    size = tuning.player_size
    return Player(
        x=width / 2 - size / 2,
        y=height - tuning.player_bottom_offset,
        w=size,
        h=size,
        speed=tuning.player_speed,
    )
