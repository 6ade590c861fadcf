from __future__ import annotations

import pytest

from dodge.game.core.abilities import grant_shield, move_player, tick_timers, try_dash
from dodge.game.core.models import ControlInput
from dodge.game.core.simulation import step_session
from tests.dodge.conftest import make_quiet_tuning, make_running_session

DASH = ControlInput(dash_pressed=True)
IDLE = ControlInput()
STEP = 1.0 / 16.0


def test_dash_active_window_then_cooldown_elapses(seeded_rng) -> None:
    tuning = make_quiet_tuning(dash_time_ms=250.0, dash_cooldown_ms=1000.0)
    session = make_running_session(tuning)

    step_session(session, DASH, STEP, tuning, seeded_rng)
    assert session.abilities.dash_active
    assert session.stats.dashes == 1

    for _ in range(3):
        step_session(session, IDLE, STEP, tuning, seeded_rng)
    assert session.abilities.dash_active
    step_session(session, IDLE, STEP, tuning, seeded_rng)
    assert not session.abilities.dash_active

    for _ in range(10):
        step_session(session, DASH, STEP, tuning, seeded_rng)
    assert session.stats.dashes == 1
    assert not session.abilities.dash_ready

    # 16 steps of 62.5 ms after the dash the cooldown has fully run down.
    for _ in range(2):
        step_session(session, IDLE, STEP, tuning, seeded_rng)
    assert session.abilities.dash_ready
    step_session(session, DASH, STEP, tuning, seeded_rng)
    assert session.stats.dashes == 2


def test_dash_needs_a_press(seeded_rng) -> None:
    tuning = make_quiet_tuning()
    session = make_running_session(tuning)
    assert not try_dash(session, IDLE, tuning, seeded_rng)
    assert try_dash(session, DASH, tuning, seeded_rng)
    assert not try_dash(session, DASH, tuning, seeded_rng)
    assert session.abilities.dash_cooldown_ms == tuning.dash_cooldown_ms
    assert len(session.particles) == tuning.dash_burst_amount


def test_dash_multiplies_movement_speed(seeded_rng) -> None:
    tuning = make_quiet_tuning()
    session = make_running_session(tuning)
    start_x = session.player.x
    move_player(session, ControlInput(move=-1), 0.1, tuning)
    walked = start_x - session.player.x

    session.abilities.dash_active = True
    start_x = session.player.x
    move_player(session, ControlInput(move=-1), 0.1, tuning)
    dashed = start_x - session.player.x

    assert dashed == pytest.approx(walked * tuning.dash_speed_mul)


def test_player_is_clamped_to_the_field(seeded_rng) -> None:
    tuning = make_quiet_tuning()
    session = make_running_session(tuning)
    move_player(session, ControlInput(move=1), 10.0, tuning)
    assert session.player.x == session.width - session.player.w
    move_player(session, ControlInput(move=-1), 10.0, tuning)
    assert session.player.x == 0.0


def test_shield_expires_after_its_duration(seeded_rng) -> None:
    tuning = make_quiet_tuning()
    session = make_running_session(tuning)
    grant_shield(session, tuning, seeded_rng)
    assert session.abilities.shield
    assert session.abilities.shield_timer_ms == 6500.0

    tick_timers(session, 6000.0, tuning)
    assert session.abilities.shield
    tick_timers(session, 600.0, tuning)
    assert not session.abilities.shield
    assert session.abilities.shield_timer_ms == 0.0


def test_shake_decays_to_zero(seeded_rng) -> None:
    tuning = make_quiet_tuning()
    session = make_running_session(tuning)
    session.abilities.shake = 0.9
    tick_timers(session, 50.0, tuning)
    assert 0.0 < session.abilities.shake < 0.9
    tick_timers(session, 1000.0, tuning)
    assert session.abilities.shake == 0.0
