"""Particle effects. Purely cosmetic; nothing here feeds back into gameplay."""

from __future__ import annotations

import math

from dodge.game.core.models import Particle, RandomSource

COIN_HUE = 48
SHIELD_HUE = 200


def emit_burst(
    particles: list[Particle],
    x: float,
    y: float,
    hue: int,
    amount: int,
    rng: RandomSource,
) -> None:
    """Radial burst of particles from one point."""
    for _ in range(amount):
        angle = rng.random() * math.tau
        speed = rng.uniform(110.0, 260.0)
        particles.append(
            Particle(
                x=x,
                y=y,
                vx=math.cos(angle) * speed,
                vy=math.sin(angle) * speed,
                life=rng.uniform(0.28, 0.6),
                age=0.0,
                hue=hue,
                saturation=95,
                lightness=65,
            )
        )


def emit_trail(
    particles: list[Particle],
    x: float,
    y: float,
    hue: int,
    count: int,
    rng: RandomSource,
) -> None:
    """Short-lived jittered particles left behind while dashing."""
    for _ in range(count):
        particles.append(
            Particle(
                x=x + rng.uniform(-3.0, 3.0),
                y=y + rng.uniform(-3.0, 3.0),
                vx=rng.uniform(-60.0, 60.0),
                vy=rng.uniform(-20.0, 10.0),
                life=rng.uniform(0.22, 0.4),
                age=0.0,
                hue=hue,
                saturation=90,
                lightness=72,
            )
        )


def advance_particles(particles: list[Particle], delta_seconds: float) -> list[Particle]:
    """Age and move particles, returning the survivors."""
    for p in particles:
        p.age += delta_seconds
        p.x += p.vx * delta_seconds
        p.y += p.vy * delta_seconds
    return [p for p in particles if p.age < p.life]
