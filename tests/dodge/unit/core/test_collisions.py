from __future__ import annotations

from dodge.game.core.collisions import resolve_obstacles, resolve_pickups
from dodge.game.core.models import ControlInput, Pickup, PickupKind
from dodge.game.core.simulation import step_session
from tests.dodge.conftest import block_on_player, make_quiet_tuning, make_running_session


def _pickup_on_player(session, kind: PickupKind) -> Pickup:
    player = session.player
    return Pickup(x=player.center_x - 9, y=player.center_y - 9, r=9, vy=0.0, kind=kind, hue=0)


def test_unprotected_hit_ends_the_session(seeded_rng) -> None:
    tuning = make_quiet_tuning()
    session = make_running_session(tuning)
    session.blocks.append(block_on_player(session))

    outcome = step_session(session, ControlInput(), 0.0, tuning, seeded_rng)

    assert outcome.game_over
    assert session.over
    assert not session.running


def test_dash_passes_through_and_keeps_the_obstacle(seeded_rng) -> None:
    tuning = make_quiet_tuning()
    session = make_running_session(tuning)
    block = block_on_player(session)
    session.blocks.append(block)

    outcome = step_session(session, ControlInput(dash_pressed=True), 0.0, tuning, seeded_rng)

    assert not outcome.game_over
    assert session.running
    assert session.blocks == [block]


def test_shield_absorbs_one_hit_and_removes_the_obstacle(seeded_rng) -> None:
    tuning = make_quiet_tuning()
    session = make_running_session(tuning)
    session.abilities.shield = True
    session.abilities.shield_timer_ms = 3000.0
    session.blocks.append(block_on_player(session))

    outcome = step_session(session, ControlInput(), 0.0, tuning, seeded_rng)

    assert not outcome.game_over
    assert session.blocks == []
    assert not session.abilities.shield
    assert session.abilities.shake == 0.9
    assert session.stats.shields_broken == 1


def test_second_hit_in_the_same_step_is_fatal(seeded_rng) -> None:
    tuning = make_quiet_tuning()
    session = make_running_session(tuning)
    session.abilities.shield = True
    session.abilities.shield_timer_ms = 3000.0
    first = block_on_player(session)
    second = block_on_player(session)
    session.blocks.extend([first, second])

    assert resolve_obstacles(session, seeded_rng)
    assert session.blocks == [second]
    assert session.stats.shields_broken == 1


def test_coin_adds_score(seeded_rng) -> None:
    tuning = make_quiet_tuning()
    session = make_running_session(tuning)
    session.pickups.append(_pickup_on_player(session, PickupKind.COIN))

    collected = resolve_pickups(session, tuning, seeded_rng)

    assert [p.kind for p in collected] == [PickupKind.COIN]
    assert session.score == 35.0
    assert session.stats.coins == 1
    assert session.pickups == []


def test_shield_pickup_grants_and_second_one_is_wasted(seeded_rng) -> None:
    tuning = make_quiet_tuning()
    session = make_running_session(tuning)
    session.pickups.append(_pickup_on_player(session, PickupKind.SHIELD))
    resolve_pickups(session, tuning, seeded_rng)
    assert session.abilities.shield
    assert session.abilities.shield_timer_ms == tuning.shield_time_ms

    session.abilities.shield_timer_ms = 1000.0
    session.pickups.append(_pickup_on_player(session, PickupKind.SHIELD))
    collected = resolve_pickups(session, tuning, seeded_rng)

    assert len(collected) == 1
    assert session.pickups == []
    assert session.abilities.shield_timer_ms == 1000.0
    assert session.stats.shields_collected == 1


def test_pickup_far_from_player_stays(seeded_rng) -> None:
    tuning = make_quiet_tuning()
    session = make_running_session(tuning)
    far = Pickup(x=0.0, y=0.0, r=9, vy=0.0, kind=PickupKind.COIN, hue=0)
    session.pickups.append(far)
    assert resolve_pickups(session, tuning, seeded_rng) == []
    assert session.pickups == [far]
