"""Collision tests and their ability-aware resolution."""

from __future__ import annotations

from dodge.game.core.abilities import absorb_hit, grant_shield
from dodge.game.core.effects import COIN_HUE, emit_burst
from dodge.game.core.geometry import rect_hits_circle, rect_overlaps
from dodge.game.core.models import GameSession, Pickup, PickupKind, RandomSource
from dodge.game.core.tuning import Tuning

COIN_BURST = 12


def resolve_pickups(session: GameSession, tuning: Tuning, rng: RandomSource) -> list[Pickup]:
    """Collect every pickup touching the player and return the collected ones."""
    collected: list[Pickup] = []
    remaining: list[Pickup] = []
    for pickup in session.pickups:
        if not rect_hits_circle(session.player, pickup):
            remaining.append(pickup)
            continue
        collected.append(pickup)
        if pickup.kind is PickupKind.SHIELD:
            if not session.abilities.shield:
                grant_shield(session, tuning, rng)
            continue
        session.score += tuning.coin_value
        session.stats.coins += 1
        emit_burst(session.particles, pickup.center_x, pickup.center_y, COIN_HUE, COIN_BURST, rng)
    session.pickups = remaining
    return collected


def resolve_obstacles(session: GameSession, rng: RandomSource) -> bool:
    """Resolve obstacle hits in order; return True when a hit ends the session.

    Dash ignores hits and leaves the obstacle in place. A held shield absorbs
    one hit and removes that obstacle; later hits in the same step see the
    shield already spent.
    """
    player = session.player
    survivors = []
    for index, block in enumerate(session.blocks):
        if session.abilities.dash_active or not rect_overlaps(player, block):
            survivors.append(block)
            continue
        if session.abilities.shield:
            absorb_hit(session, rng)
            continue
        survivors.extend(session.blocks[index:])
        session.blocks = survivors
        return True
    session.blocks = survivors
    return False
