"""Public engine API contracts."""

from engine.api.logging import EngineLoggingConfig, JsonFormatter, configure_logging

__all__ = [
    "EngineLoggingConfig",
    "JsonFormatter",
    "configure_logging",
]
