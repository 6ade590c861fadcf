"""Application configuration and env loading."""

from __future__ import annotations

import dataclasses
import logging
import os
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from dodge.game.core.tuning import Tuning
from engine.runtime.debug_config import env_float, env_int

logger = logging.getLogger(__name__)

TUNING_ENV_PREFIX = "DODGE_TUNING_"


def load_env_file(path: str = ".env", *, override_existing: bool = True) -> None:
    """Load KEY=VALUE pairs from an env file into process environment.

    By default, values from the env file overwrite existing environment variables.
    """
    env_path = _resolve_env_path(path)
    if not env_path.exists():
        return

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue

        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue

        if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
            value = value[1:-1]

        if override_existing or key not in os.environ:
            os.environ[key] = value


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str] | None = None
) -> None:
    """Load env files left to right; later files win.

    Default order: appdata/config/.env.app, appdata/config/.env.app.local,
    .env.app, .env.app.local.
    """
    to_load = (
        tuple(paths)
        if paths is not None
        else (
            "appdata/config/.env.app",
            "appdata/config/.env.app.local",
            ".env.app",
            ".env.app.local",
        )
    )
    for path in to_load:
        load_env_file(path, override_existing=override_existing)


@dataclass(frozen=True, slots=True)
class AppSettings:
    """Runtime settings for the arcade frontend."""

    width: int = 480
    height: int = 640
    fps: int = 60
    seed: int | None = None
    score_url: str | None = None
    score_timeout_seconds: float = 5.0
    player_image: str | None = None
    max_frame_delta_seconds: float = 1.0


def load_app_settings() -> AppSettings:
    """Read `AppSettings` from ``DODGE_*`` environment variables."""
    defaults = AppSettings()
    raw_seed = os.getenv("DODGE_SEED", "").strip()
    seed: int | None = None
    if raw_seed:
        try:
            seed = int(raw_seed)
        except ValueError:
            logger.warning("invalid_seed value=%r", raw_seed)
    return AppSettings(
        width=max(160, env_int("DODGE_WIDTH", defaults.width)),
        height=max(240, env_int("DODGE_HEIGHT", defaults.height)),
        fps=max(1, env_int("DODGE_FPS", defaults.fps)),
        seed=seed,
        score_url=os.getenv("DODGE_SCORE_URL", "").strip() or None,
        score_timeout_seconds=max(0.1, env_float("DODGE_SCORE_TIMEOUT", defaults.score_timeout_seconds)),
        player_image=os.getenv("DODGE_PLAYER_IMAGE", "").strip() or None,
        max_frame_delta_seconds=max(0.01, env_float("DODGE_MAX_FRAME_DELTA", defaults.max_frame_delta_seconds)),
    )


def load_tuning(base: Tuning | None = None) -> Tuning:
    """Apply ``DODGE_TUNING_<FIELD>`` overrides onto the default tuning.

    Unparseable values are skipped with a warning; a combination that fails
    tuning validation raises ``ValueError``.
    """
    tuning = base or Tuning()
    overrides: dict[str, object] = {}
    for name in Tuning.field_names():
        raw = os.getenv(TUNING_ENV_PREFIX + name.upper())
        if raw is None:
            continue
        current = getattr(tuning, name)
        try:
            overrides[name] = int(raw) if isinstance(current, int) else float(raw)
        except ValueError:
            logger.warning("invalid_tuning_override field=%s value=%r", name, raw)
    if not overrides:
        return tuning
    logger.info("tuning_overrides %s", ", ".join(f"{k}={v}" for k, v in sorted(overrides.items())))
    return dataclasses.replace(tuning, **overrides)


def _resolve_env_path(path: str) -> Path:
    """Resolve env path from cwd, frozen exe dir, then project root."""
    candidate = Path(path)
    if candidate.exists():
        return candidate

    if getattr(sys, "frozen", False):
        executable = getattr(sys, "executable", "")
        if executable:
            frozen_dir_candidate = Path(executable).resolve().parent / path
            if frozen_dir_candidate.exists():
                return frozen_dir_candidate

    # Fallback for IDE run configs with different working directory.
    project_root = Path(__file__).resolve().parents[3]
    return project_root / path
