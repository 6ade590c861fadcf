from __future__ import annotations

import random

from dodge.game.app.driver import GameDriver
from dodge.game.app.score_sink import ScoreReporter, ScoreResult, ScoreSinkError
from engine.runtime.time import FrameClock
from tests.dodge.conftest import block_on_player, make_quiet_tuning


class FakeSink:
    def __init__(self, result: ScoreResult | Exception = ScoreResult(ok=True, best=500)) -> None:
        self.result = result
        self.scores: list[int] = []

    def submit(self, score: int) -> ScoreResult:
        self.scores.append(score)
        if isinstance(self.result, Exception):
            raise self.result
        return self.result


class ManualTime:
    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now


def make_driver(sink: FakeSink, *, best_score: int | None = None, time: ManualTime | None = None) -> GameDriver:
    return GameDriver(
        width=480,
        height=640,
        reporter=ScoreReporter(sink, background=False),
        tuning=make_quiet_tuning(),
        rng=random.Random(4),
        clock=FrameClock(time_source=time or ManualTime(), max_delta_seconds=1.0),
        best_score=best_score,
    )


def test_start_is_ignored_while_running() -> None:
    driver = make_driver(FakeSink())
    assert not driver.running
    assert driver.start()
    assert not driver.start()
    assert not driver.retry()
    assert driver.sessions_started == 1


def test_first_frame_after_start_has_zero_delta() -> None:
    time = ManualTime()
    driver = make_driver(FakeSink(), time=time)
    driver.tick()
    time.now += 30.0
    driver.start()
    driver.tick()
    assert driver.session.elapsed_seconds == 0.0
    time.now += 0.5
    driver.tick()
    assert driver.session.elapsed_seconds == 0.5


def test_game_over_reports_floored_score_and_updates_best() -> None:
    sink = FakeSink(ScoreResult(ok=True, best=500))
    driver = make_driver(sink, best_score=10)
    events = []
    driver.add_listener(lambda: events.append(driver.running))
    driver.start()
    driver.session.score = 12.9
    driver.session.blocks.append(block_on_player(driver.session))

    outcome = driver.tick()

    assert outcome.game_over
    assert driver.over
    assert sink.scores == [12]
    assert driver.best_score == 10

    driver.tick()
    assert driver.best_score == 500
    assert events == [True, False, False]


def test_immediate_termination_reports_zero() -> None:
    sink = FakeSink()
    driver = make_driver(sink)
    driver.start()
    driver.session.blocks.append(block_on_player(driver.session))
    driver.tick()
    assert sink.scores == [0]


def test_failed_report_keeps_best_and_allows_retry() -> None:
    sink = FakeSink(ScoreSinkError("offline"))
    driver = make_driver(sink, best_score=77)
    driver.start()
    driver.session.blocks.append(block_on_player(driver.session))
    driver.tick()
    driver.tick()

    assert driver.best_score == 77
    assert driver.retry()
    assert driver.running
    assert driver.session.score == 0.0


def test_hint_disappears_after_first_dash() -> None:
    driver = make_driver(FakeSink())
    assert driver.snapshot().show_hint
    driver.start()
    driver.input.key_down("space")
    driver.tick()
    assert driver.session.stats.dashes == 1
    assert not driver.snapshot().show_hint


def test_dash_pressed_before_start_is_discarded() -> None:
    driver = make_driver(FakeSink())
    driver.input.key_down("space")
    driver.input.key_up("space")
    driver.start()
    driver.tick()
    assert driver.session.stats.dashes == 0


def test_run_stops_on_game_over() -> None:
    driver = make_driver(FakeSink())
    driver.start()
    driver.session.blocks.append(block_on_player(driver.session))
    frames = []
    assert driver.run(frames.append, max_frames=50) == 1
    assert frames[-1].over


def test_run_honours_frame_limit() -> None:
    driver = make_driver(FakeSink())
    driver.start()
    assert driver.run(lambda snapshot: None, max_frames=5) == 5
    assert driver.running
