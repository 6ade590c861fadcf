from __future__ import annotations

from engine.runtime.debug_config import env_flag, env_float, env_int, load_debug_config, resolve_log_level_name


def test_load_debug_config_parses_overlay_and_level(monkeypatch) -> None:
    monkeypatch.setenv("ENGINE_DEBUG_OVERLAY", "true")
    monkeypatch.setenv("ENGINE_LOG_LEVEL", "debug")

    cfg = load_debug_config()
    assert cfg.overlay_enabled is True
    assert cfg.log_level == "DEBUG"


def test_resolve_log_level_prefers_engine_prefix(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.setenv("ENGINE_LOG_LEVEL", "ERROR")
    assert resolve_log_level_name() == "ERROR"
    monkeypatch.delenv("ENGINE_LOG_LEVEL")
    assert resolve_log_level_name() == "WARNING"


def test_env_parsers_fall_back_on_bad_values(monkeypatch) -> None:
    monkeypatch.setenv("DODGE_T_FLAG", "on")
    monkeypatch.setenv("DODGE_T_INT", "12x")
    monkeypatch.setenv("DODGE_T_FLOAT", "0.5")
    monkeypatch.delenv("DODGE_T_MISSING", raising=False)
    assert env_flag("DODGE_T_FLAG") is True
    assert env_flag("DODGE_T_MISSING", True) is True
    assert env_int("DODGE_T_INT", 3) == 3
    assert env_float("DODGE_T_FLOAT", 1.0) == 0.5
