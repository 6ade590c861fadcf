"""Engine runtime modules."""

from engine.runtime.debug_config import DebugConfig, load_debug_config
from engine.runtime.logging import configure_engine_logging, shutdown_engine_logging
from engine.runtime.time import FrameClock, TimeContext

__all__ = [
    "DebugConfig",
    "FrameClock",
    "TimeContext",
    "configure_engine_logging",
    "load_debug_config",
    "shutdown_engine_logging",
]
