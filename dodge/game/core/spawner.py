"""Accumulator-driven spawn scheduling for drips, waves, coins and shields."""

from __future__ import annotations

from dataclasses import dataclass

from dodge.game.core.curves import drip_interval, fall_speed
from dodge.game.core.effects import COIN_HUE, SHIELD_HUE
from dodge.game.core.models import Block, GameSession, Pickup, PickupKind, RandomSource
from dodge.game.core.patterns import block_hue, spawn_pattern
from dodge.game.core.tuning import Tuning

COIN_FALL_SCALE = 0.9
SHIELD_FALL_SCALE = 0.85


@dataclass(frozen=True, slots=True)
class SpawnCounts:
    """How many times each spawn class fired during one step."""

    drips: int = 0
    waves: int = 0
    coins: int = 0
    shields: int = 0
    shields_suppressed: int = 0


def drain_accumulator(accumulated_ms: float, delta_ms: float, interval_ms: float) -> tuple[int, float]:
    """Add ``delta_ms`` and subtract ``interval_ms`` per firing, keeping the overrun.

    Returns ``(fires, remaining_ms)``. A long frame fires several times in a row
    rather than losing spawns.
    """
    if interval_ms <= 0.0:
        raise ValueError("interval_ms must be > 0")
    accumulated_ms += delta_ms
    fires = 0
    while accumulated_ms >= interval_ms:
        accumulated_ms -= interval_ms
        fires += 1
    return fires, accumulated_ms


def run_spawners(session: GameSession, delta_ms: float, tuning: Tuning, rng: RandomSource) -> SpawnCounts:
    """Advance all four accumulators and create the entities they fire.

    The drip interval is evaluated once at step start and reused for every
    catch-up firing within the step; it drifts far slower than a frame.
    """
    acc = session.accumulators
    t = session.elapsed_seconds

    drips, acc.drip_ms = drain_accumulator(acc.drip_ms, delta_ms, drip_interval(t, session.score, tuning))
    for _ in range(drips):
        spawn_drip(session, tuning, rng)

    waves, acc.pattern_ms = drain_accumulator(acc.pattern_ms, delta_ms, tuning.pattern_every_ms)
    for _ in range(waves):
        spawn_pattern(session, tuning, rng)

    coins, acc.coin_ms = drain_accumulator(acc.coin_ms, delta_ms, tuning.coin_every_ms)
    for _ in range(coins):
        spawn_coin(session, tuning, rng)

    shield_fires, acc.shield_ms = drain_accumulator(acc.shield_ms, delta_ms, tuning.shield_every_ms)
    shields = 0
    for _ in range(shield_fires):
        # No stacking: the firing is consumed but nothing spawns while one is held.
        if session.abilities.shield:
            continue
        spawn_shield(session, tuning, rng)
        shields += 1

    return SpawnCounts(
        drips=drips,
        waves=waves,
        coins=coins,
        shields=shields,
        shields_suppressed=shield_fires - shields,
    )


def spawn_drip(session: GameSession, tuning: Tuning, rng: RandomSource) -> None:
    fall = fall_speed(session.elapsed_seconds, tuning)
    session.blocks.append(
        Block(
            x=rng.uniform(0.0, max(0.0, session.width - 40.0)),
            y=-30.0,
            w=rng.uniform(22.0, 38.0),
            h=rng.uniform(16.0, 26.0),
            vy=fall,
            hue=block_hue(session.hue_base, rng),
        )
    )


def spawn_coin(session: GameSession, tuning: Tuning, rng: RandomSource) -> None:
    fall = fall_speed(session.elapsed_seconds, tuning) * COIN_FALL_SCALE
    session.pickups.append(
        Pickup(
            x=rng.uniform(12.0, max(12.0, session.width - 24.0)),
            y=-18.0,
            r=rng.uniform(8.0, 11.0),
            vy=fall,
            kind=PickupKind.COIN,
            hue=COIN_HUE,
        )
    )


def spawn_shield(session: GameSession, tuning: Tuning, rng: RandomSource) -> None:
    fall = fall_speed(session.elapsed_seconds, tuning) * SHIELD_FALL_SCALE
    session.pickups.append(
        Pickup(
            x=rng.uniform(14.0, max(14.0, session.width - 28.0)),
            y=-20.0,
            r=11.0,
            vy=fall,
            kind=PickupKind.SHIELD,
            hue=SHIELD_HUE,
        )
    )
