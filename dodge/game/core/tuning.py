"""Gameplay tuning constants."""

from __future__ import annotations

from dataclasses import dataclass, fields


@dataclass(frozen=True, slots=True)
class Tuning:
    """Immutable gameplay tuning. Times are milliseconds, speeds pixels/second."""

    # difficulty curves
    base_fall: float = 145.0
    fall_log_gain: float = 60.0
    fall_log_rate: float = 0.45
    fall_sqrt_gain: float = 16.0
    drip_base_ms: float = 900.0
    drip_min_ms: float = 210.0
    drip_log_gain: float = 90.0
    drip_log_rate: float = 0.35
    drip_sqrt_gain: float = 20.0
    drip_score_gain: float = 0.20

    # spawn pacing
    pattern_every_ms: float = 2600.0
    coin_every_ms: float = 1600.0
    shield_every_ms: float = 7000.0

    # abilities
    dash_cooldown_ms: float = 1800.0
    dash_time_ms: float = 350.0
    dash_speed_mul: float = 2.25
    shield_time_ms: float = 6500.0

    # scoring
    score_per_second: float = 10.5
    coin_value: float = 35.0

    # lanes and gaps
    base_lanes: int = 6
    max_extra_lanes: int = 6
    seconds_per_extra_lane: float = 7.0
    gap_cols_min: int = 1
    gap_cols_max: int = 2
    min_gap_px: float = 48.0
    wall_cooldown_ms: float = 2600.0

    # player
    player_size: float = 32.0
    player_speed: float = 335.0
    player_bottom_offset: float = 54.0

    # world
    prune_margin: float = 64.0
    shake_decay_per_second: float = 8.0

    # effects
    dash_trail_per_frame: int = 10
    dash_burst_amount: int = 20

    def __post_init__(self) -> None:
        for name in (
            "drip_base_ms",
            "drip_min_ms",
            "pattern_every_ms",
            "coin_every_ms",
            "shield_every_ms",
            "dash_time_ms",
            "shield_time_ms",
            "player_size",
            "seconds_per_extra_lane",
        ):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be > 0")
        if self.dash_cooldown_ms < self.dash_time_ms:
            raise ValueError("dash_cooldown_ms must cover dash_time_ms")
        if not 1 <= self.gap_cols_min <= self.gap_cols_max:
            raise ValueError("gap column range must satisfy 1 <= min <= max")
        if self.base_lanes <= self.gap_cols_max:
            raise ValueError("base_lanes must exceed gap_cols_max")

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))


DEFAULT_TUNING = Tuning()
