"""Application entry point."""

from __future__ import annotations

import logging
import random

from dodge.game.app.driver import GameDriver
from dodge.game.app.score_sink import HttpScoreSink, LocalScoreSink, ScoreReporter, ScoreSink, ScoreSinkError
from dodge.game.infra.app_data import ensure_app_data_dirs, resolve_scores_file
from dodge.game.infra.config import AppSettings, load_app_settings, load_default_env_files, load_tuning
from dodge.game.infra.logging import setup_logging
from engine.runtime.debug_config import load_debug_config
from engine.runtime.logging import shutdown_engine_logging
from engine.runtime.time import FrameClock

logger = logging.getLogger(__name__)


def build_score_sink(settings: AppSettings) -> tuple[ScoreSink, int | None]:
    """Pick the HTTP sink when a URL is configured, else the local best-score file."""
    if settings.score_url:
        return HttpScoreSink(settings.score_url, timeout_seconds=settings.score_timeout_seconds), None
    sink = LocalScoreSink(resolve_scores_file())
    try:
        best = sink.load_best()
    except ScoreSinkError:
        logger.exception("local_best_unreadable path=%s", sink.path)
        best = None
    return sink, best


def build_driver(settings: AppSettings, reporter: ScoreReporter, best_score: int | None) -> GameDriver:
    return GameDriver(
        width=settings.width,
        height=settings.height,
        reporter=reporter,
        tuning=load_tuning(),
        rng=random.Random(settings.seed),
        clock=FrameClock(max_delta_seconds=settings.max_frame_delta_seconds),
        best_score=best_score,
        debug_overlay=load_debug_config().overlay_enabled,
    )


def main() -> None:
    """Run the arcade."""
    load_default_env_files()
    paths = ensure_app_data_dirs()
    setup_logging()
    settings = load_app_settings()
    logger.info(
        "app_start root=%s size=%dx%d fps=%d seed=%s sink=%s",
        paths["root"],
        settings.width,
        settings.height,
        settings.fps,
        settings.seed,
        settings.score_url or "local",
    )
    sink, best = build_score_sink(settings)
    reporter = ScoreReporter(sink)
    driver = build_driver(settings, reporter, best)

    from dodge.qt.bootstrap import create_qt_frontend

    frontend = create_qt_frontend(driver, settings)
    frontend.window.show()
    try:
        frontend.run_event_loop()
    finally:
        reporter.wait_idle()
        shutdown_engine_logging()


if __name__ == "__main__":
    main()
