"""Arcade app-data paths."""

from __future__ import annotations

import os
import sys
from pathlib import Path


def resolve_game_root() -> Path:
    """Resolve the runtime game root directory."""
    if getattr(sys, "frozen", False):
        executable = getattr(sys, "executable", "")
        if executable:
            return Path(executable).resolve().parent
    return Path(__file__).resolve().parents[3]


def resolve_app_data_root() -> Path:
    """Resolve app-data root; relative overrides are taken from the game root."""
    configured = os.getenv("DODGE_APP_DATA_DIR", "").strip()
    if configured:
        candidate = Path(configured)
        if candidate.is_absolute():
            return candidate
        return resolve_game_root() / candidate
    return resolve_game_root() / "appdata"


def resolve_logs_dir() -> Path:
    return resolve_app_data_root() / "logs"


def resolve_scores_file() -> Path:
    """Local best-score book used when no score endpoint is configured."""
    return resolve_app_data_root() / "scores" / "best.json"


def ensure_app_data_dirs() -> dict[str, Path]:
    """Create app-data directories and return resolved paths."""
    root = resolve_app_data_root()
    logs = resolve_logs_dir()
    scores = resolve_scores_file().parent
    for path in (root, logs, scores):
        path.mkdir(parents=True, exist_ok=True)
    return {"root": root, "logs": logs, "scores": scores}
