from __future__ import annotations

import os

import pytest

from dodge.game.core.tuning import DEFAULT_TUNING
from dodge.game.infra.config import (
    AppSettings,
    load_app_settings,
    load_default_env_files,
    load_env_file,
    load_tuning,
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    for key in list(os.environ):
        if key.startswith("DODGE_"):
            monkeypatch.delenv(key, raising=False)


def test_load_env_file_sets_values_with_overwrite_by_default(tmp_path, monkeypatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("A_DODGE=1\nB_DODGE='two'\n#comment\nINVALID\nC_DODGE=three\n", encoding="utf-8")
    monkeypatch.setenv("C_DODGE", "already")
    monkeypatch.setenv("A_DODGE", "unset")
    monkeypatch.setenv("B_DODGE", "unset")
    load_env_file(str(env_file))
    assert os.environ.get("A_DODGE") == "1"
    assert os.environ.get("B_DODGE") == "two"
    assert os.environ.get("C_DODGE") == "three"


def test_load_default_env_files_later_files_win(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("DODGE_FPS", "60")
    monkeypatch.setenv("DODGE_WIDTH", "480")
    first = tmp_path / "first.env"
    second = tmp_path / "second.env"
    first.write_text("DODGE_FPS=30\nDODGE_WIDTH=400\n", encoding="utf-8")
    second.write_text("DODGE_FPS=90\n", encoding="utf-8")
    load_default_env_files(paths=[str(first), str(second)])
    assert os.environ["DODGE_FPS"] == "90"
    assert os.environ["DODGE_WIDTH"] == "400"


def test_app_settings_defaults() -> None:
    assert load_app_settings() == AppSettings()


def test_app_settings_from_env(monkeypatch) -> None:
    monkeypatch.setenv("DODGE_SCORE_URL", " http://localhost:3000/api/score ")
    monkeypatch.setenv("DODGE_SEED", "42")
    monkeypatch.setenv("DODGE_FPS", "0")
    monkeypatch.setenv("DODGE_WIDTH", "600")
    monkeypatch.setenv("DODGE_MAX_FRAME_DELTA", "0.1")

    settings = load_app_settings()

    assert settings.score_url == "http://localhost:3000/api/score"
    assert settings.seed == 42
    assert settings.fps == 1
    assert settings.width == 600
    assert settings.max_frame_delta_seconds == 0.1


def test_bad_seed_is_ignored(monkeypatch) -> None:
    monkeypatch.setenv("DODGE_SEED", "lucky")
    assert load_app_settings().seed is None


def test_tuning_overrides(monkeypatch) -> None:
    monkeypatch.setenv("DODGE_TUNING_COIN_VALUE", "50")
    monkeypatch.setenv("DODGE_TUNING_BASE_LANES", "8")
    monkeypatch.setenv("DODGE_TUNING_DASH_SPEED_MUL", "fast")

    tuning = load_tuning()

    assert tuning.coin_value == 50.0
    assert tuning.base_lanes == 8
    assert tuning.dash_speed_mul == DEFAULT_TUNING.dash_speed_mul


def test_tuning_without_overrides_is_unchanged() -> None:
    assert load_tuning() == DEFAULT_TUNING


def test_inconsistent_tuning_override_raises(monkeypatch) -> None:
    monkeypatch.setenv("DODGE_TUNING_DASH_TIME_MS", "5000")
    with pytest.raises(ValueError):
        load_tuning()
