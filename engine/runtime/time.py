"""Engine runtime timing primitives."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from time import monotonic


@dataclass(frozen=True, slots=True)
class TimeContext:
    """Per-frame timing context handed to the simulation driver."""

    frame_index: int
    delta_seconds: float
    elapsed_seconds: float

    @property
    def delta_ms(self) -> float:
        return self.delta_seconds * 1000.0


class FrameClock:
    """Monotonic frame clock with bounded deltas and a restartable origin.

    The first tick after construction or `reset()` always reports a zero delta,
    so a session never inherits time spent idling in menus.
    """

    def __init__(
        self,
        *,
        time_source: Callable[[], float] | None = None,
        max_delta_seconds: float | None = 0.25,
    ) -> None:
        if max_delta_seconds is not None and max_delta_seconds <= 0.0:
            raise ValueError("max_delta_seconds must be > 0")
        self._time_source = time_source or monotonic
        self._max_delta_seconds = max_delta_seconds
        self._last_seconds: float | None = None
        self._elapsed_seconds = 0.0
        self._frame_index = 0

    @property
    def frame_index(self) -> int:
        return self._frame_index

    @property
    def elapsed_seconds(self) -> float:
        return self._elapsed_seconds

    def reset(self) -> None:
        """Restart elapsed time and frame numbering from the next tick."""
        self._last_seconds = None
        self._elapsed_seconds = 0.0
        self._frame_index = 0

    def tick(self) -> TimeContext:
        """Advance the clock and return the next frame context."""
        now = self._time_source()
        if self._last_seconds is None:
            delta = 0.0
        else:
            delta = max(0.0, now - self._last_seconds)
            if self._max_delta_seconds is not None:
                delta = min(delta, self._max_delta_seconds)
        self._last_seconds = now
        self._elapsed_seconds += delta
        context = TimeContext(
            frame_index=self._frame_index,
            delta_seconds=delta,
            elapsed_seconds=self._elapsed_seconds,
        )
        self._frame_index += 1
        return context
