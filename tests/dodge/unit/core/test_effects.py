from __future__ import annotations

from dodge.game.core.effects import advance_particles, emit_burst, emit_trail


def test_burst_particles_live_and_expire(seeded_rng) -> None:
    particles = []
    emit_burst(particles, 100.0, 100.0, 48, 12, seeded_rng)
    assert len(particles) == 12
    assert all(0.28 <= p.life <= 0.6 for p in particles)

    survivors = advance_particles(particles, 0.1)
    assert len(survivors) == 12
    assert all(p.age == 0.1 for p in survivors)
    assert advance_particles(survivors, 1.0) == []


def test_trail_particles_start_near_origin(seeded_rng) -> None:
    particles = []
    emit_trail(particles, 50.0, 60.0, 260, 10, seeded_rng)
    assert len(particles) == 10
    assert all(abs(p.x - 50.0) <= 3.0 and abs(p.y - 60.0) <= 3.0 for p in particles)
    assert all(p.lightness == 72 for p in particles)
