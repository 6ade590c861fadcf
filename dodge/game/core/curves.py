"""Difficulty curves: pure functions of session time and score."""

from __future__ import annotations

import math

from dodge.game.core.tuning import DEFAULT_TUNING, Tuning


def fall_speed(elapsed_seconds: float, tuning: Tuning = DEFAULT_TUNING) -> float:
    """Obstacle fall speed in px/s: ``base + A*ln(1+k*t) + B*sqrt(t)``."""
    t = max(0.0, elapsed_seconds)
    return (
        tuning.base_fall
        + tuning.fall_log_gain * math.log1p(t * tuning.fall_log_rate)
        + tuning.fall_sqrt_gain * math.sqrt(t)
    )


def drip_interval(elapsed_seconds: float, score: float, tuning: Tuning = DEFAULT_TUNING) -> float:
    """Milliseconds between drip spawns, shrinking with time and score, floored at the minimum."""
    t = max(0.0, elapsed_seconds)
    reduce = (
        tuning.drip_log_gain * math.log1p(t * tuning.drip_log_rate)
        + tuning.drip_sqrt_gain * math.sqrt(t)
        + tuning.drip_score_gain * max(0.0, score)
    )
    return max(tuning.drip_min_ms, tuning.drip_base_ms - reduce)
