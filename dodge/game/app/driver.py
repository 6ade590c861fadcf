"""Frame driver: owns one session and runs the tick/step/render loop."""

from __future__ import annotations

import logging
import random
from collections.abc import Callable

from dodge.game.app.input_state import InputState
from dodge.game.app.score_sink import ScoreReporter, ScoreResult
from dodge.game.app.snapshot import FrameSnapshot, build_snapshot
from dodge.game.core.models import GameSession, RandomSource, StepOutcome
from dodge.game.core.simulation import create_session, final_score, start_session, step_session
from dodge.game.core.tuning import DEFAULT_TUNING, Tuning
from engine.runtime.time import FrameClock

logger = logging.getLogger(__name__)

Listener = Callable[[], None]


class GameDriver:
    """Drives the simulation from frame callbacks.

    The frontend calls `tick()` once per display refresh and renders
    `snapshot()`; `run()` is the same loop for headless callers. Score reports
    are fire-and-forget and only ever change the displayed best score.
    """

    def __init__(
        self,
        *,
        width: float,
        height: float,
        reporter: ScoreReporter,
        tuning: Tuning = DEFAULT_TUNING,
        rng: RandomSource | None = None,
        clock: FrameClock | None = None,
        input_state: InputState | None = None,
        best_score: int | None = None,
        debug_overlay: bool = False,
    ) -> None:
        self._tuning = tuning
        self._session = create_session(width, height, tuning)
        self._reporter = reporter
        self._rng = rng or random.Random()
        self._clock = clock or FrameClock()
        self._input = input_state or InputState()
        self._best_score = best_score
        self._debug_overlay = debug_overlay
        self._hint_dismissed = False
        self._last_frame_ms: float | None = None
        self._sessions_started = 0
        self._listeners: list[Listener] = []

    @property
    def session(self) -> GameSession:
        return self._session

    @property
    def input(self) -> InputState:
        return self._input

    @property
    def tuning(self) -> Tuning:
        return self._tuning

    @property
    def running(self) -> bool:
        return self._session.running

    @property
    def over(self) -> bool:
        return self._session.over

    @property
    def best_score(self) -> int | None:
        return self._best_score

    @property
    def sessions_started(self) -> int:
        return self._sessions_started

    def add_listener(self, listener: Listener) -> None:
        """Register a callback fired on session start, game over and best-score updates."""
        self._listeners.append(listener)

    def start(self) -> bool:
        return self._begin("start")

    def retry(self) -> bool:
        return self._begin("retry")

    def tick(self) -> StepOutcome:
        """Run one frame: deliver finished score reports, advance the clock, step."""
        self._reporter.drain()
        frame = self._clock.tick()
        if not self._session.running:
            return StepOutcome(game_over=self._session.over, stepped=False)
        outcome = step_session(self._session, self._input.sample(), frame.delta_seconds, self._tuning, self._rng)
        self._last_frame_ms = frame.delta_ms
        if self._session.stats.dashes:
            self._hint_dismissed = True
        if outcome.game_over:
            self._finish()
        return outcome

    def run(
        self,
        render: Callable[[FrameSnapshot], None],
        *,
        should_continue: Callable[[], bool] | None = None,
        max_frames: int | None = None,
    ) -> int:
        """Tick and render until the session ends; return the number of frames run."""
        frames = 0
        while self._session.running:
            if max_frames is not None and frames >= max_frames:
                break
            if should_continue is not None and not should_continue():
                break
            self.tick()
            render(self.snapshot())
            frames += 1
        return frames

    def snapshot(self) -> FrameSnapshot:
        return build_snapshot(
            self._session,
            show_hint=not self._hint_dismissed,
            best_score=self._best_score,
            frame_ms=self._last_frame_ms if self._debug_overlay else None,
        )

    def _begin(self, action: str) -> bool:
        if self._session.running:
            logger.debug("session_begin_ignored action=%s", action)
            return False
        start_session(self._session, self._tuning)
        self._clock.reset()
        self._input.clear_pending()
        self._last_frame_ms = None
        self._sessions_started += 1
        logger.info("session_started action=%s session=%d", action, self._sessions_started)
        self._notify()
        return True

    def _finish(self) -> None:
        score = final_score(self._session)
        stats = self._session.stats
        logger.info(
            "session_over score=%d elapsed=%.2f dashes=%d coins=%d shields=%d/%d",
            score,
            self._session.elapsed_seconds,
            stats.dashes,
            stats.coins,
            stats.shields_broken,
            stats.shields_collected,
        )
        self._reporter.submit(score, self._on_score_result)
        self._notify()

    def _on_score_result(self, result: ScoreResult | None) -> None:
        if result is None or result.best is None:
            return
        self._best_score = result.best
        self._notify()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener()
