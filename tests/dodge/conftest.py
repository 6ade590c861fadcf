from __future__ import annotations

import dataclasses
import random

import pytest

from dodge.game.core.models import Block, GameSession
from dodge.game.core.simulation import create_session, start_session
from dodge.game.core.tuning import DEFAULT_TUNING, Tuning

NEVER_MS = 1e12


def make_quiet_tuning(**overrides: object) -> Tuning:
    """Default tuning with every spawner pushed out of reach."""
    quiet = dataclasses.replace(
        DEFAULT_TUNING,
        drip_base_ms=NEVER_MS,
        drip_min_ms=NEVER_MS,
        pattern_every_ms=NEVER_MS,
        coin_every_ms=NEVER_MS,
        shield_every_ms=NEVER_MS,
    )
    return dataclasses.replace(quiet, **overrides) if overrides else quiet


def make_running_session(tuning: Tuning = DEFAULT_TUNING, width: float = 480, height: float = 640) -> GameSession:
    session = create_session(width, height, tuning)
    start_session(session, tuning)
    return session


def block_on_player(session: GameSession) -> Block:
    player = session.player
    return Block(x=player.x + 4, y=player.y + 4, w=20, h=20, vy=0.0, hue=0)


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1337)


@pytest.fixture
def quiet_tuning() -> Tuning:
    return make_quiet_tuning()


@pytest.fixture
def running_session(quiet_tuning) -> GameSession:
    return make_running_session(quiet_tuning)
