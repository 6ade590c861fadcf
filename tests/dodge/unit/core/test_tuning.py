from __future__ import annotations

import dataclasses

import pytest

from dodge.game.core.tuning import DEFAULT_TUNING, Tuning


def test_default_tuning_values() -> None:
    assert DEFAULT_TUNING.dash_cooldown_ms == 1800
    assert DEFAULT_TUNING.dash_time_ms == 350
    assert DEFAULT_TUNING.shield_time_ms == 6500
    assert DEFAULT_TUNING.score_per_second == 10.5
    assert DEFAULT_TUNING.coin_value == 35
    assert DEFAULT_TUNING.min_gap_px == 48


def test_tuning_is_immutable() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_TUNING.coin_value = 1  # type: ignore[misc]


@pytest.mark.parametrize(
    "overrides",
    [
        {"coin_every_ms": 0},
        {"dash_time_ms": 2000, "dash_cooldown_ms": 1000},
        {"gap_cols_min": 3, "gap_cols_max": 2},
        {"gap_cols_min": 0},
        {"base_lanes": 2},
    ],
)
def test_invalid_tuning_is_rejected(overrides) -> None:
    with pytest.raises(ValueError):
        Tuning(**overrides)


def test_field_names_cover_every_constant() -> None:
    names = Tuning.field_names()
    assert "pattern_every_ms" in names
    assert "dash_speed_mul" in names
    assert len(names) == len(set(names))
