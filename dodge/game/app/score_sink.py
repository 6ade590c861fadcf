"""Score sink port, its HTTP and local-file adapters, and the async reporter."""

from __future__ import annotations

import json
import logging
import queue
import threading
from collections.abc import Callable
from dataclasses import dataclass
from http.client import HTTPException
from pathlib import Path
from typing import Protocol
from urllib.request import Request, urlopen

logger = logging.getLogger(__name__)


class ScoreSinkError(RuntimeError):
    """Score submission failed in transport or returned an unreadable response."""


@dataclass(frozen=True, slots=True)
class ScoreResult:
    """Sink response: whether the score was accepted and the best score to display."""

    ok: bool
    best: int | None = None


class ScoreSink(Protocol):
    """Receives one final score per session."""

    def submit(self, score: int) -> ScoreResult: ...


def parse_score_response(payload: object) -> ScoreResult:
    """Validate a ``{"ok": bool, "best": int}`` response body."""
    if not isinstance(payload, dict):
        raise ScoreSinkError("score response must be a JSON object")
    ok = payload.get("ok")
    if not isinstance(ok, bool):
        raise ScoreSinkError("score response is missing boolean 'ok'")
    if not ok:
        return ScoreResult(ok=False)
    best = payload.get("best")
    if isinstance(best, bool) or not isinstance(best, (int, float)):
        raise ScoreSinkError("score response is missing numeric 'best'")
    return ScoreResult(ok=True, best=int(best))


class HttpScoreSink:
    """POST the final score as JSON to a web endpoint."""

    def __init__(self, url: str, *, timeout_seconds: float = 5.0, headers: dict[str, str] | None = None) -> None:
        self._url = url
        self._timeout_seconds = timeout_seconds
        self._headers = dict(headers or {})

    @property
    def url(self) -> str:
        return self._url

    def submit(self, score: int) -> ScoreResult:
        body = json.dumps({"score": int(score)}).encode("utf-8")
        request = Request(
            self._url,
            data=body,
            method="POST",
            headers={"Content-Type": "application/json", **self._headers},
        )
        try:
            with urlopen(request, timeout=self._timeout_seconds) as response:
                payload = json.loads(response.read().decode("utf-8"))
        except (OSError, ValueError, HTTPException) as exc:
            raise ScoreSinkError(f"score submit to {self._url} failed: {exc}") from exc
        return parse_score_response(payload)


class LocalScoreSink:
    """Offline best-score book stored as a JSON file."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def load_best(self) -> int | None:
        """Best score on file, or None when nothing has been recorded yet."""
        payload = self._read()
        best = payload.get("best")
        return int(best) if isinstance(best, int) else None

    def submit(self, score: int) -> ScoreResult:
        payload = self._read()
        previous = payload.get("best")
        best = max(int(score), previous) if isinstance(previous, int) else int(score)
        plays = payload.get("plays")
        payload = {"best": best, "last": int(score), "plays": (plays if isinstance(plays, int) else 0) + 1}
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with self._path.open("w", encoding="utf-8") as handle:
                json.dump(payload, handle, indent=2)
        except OSError as exc:
            raise ScoreSinkError(f"could not write {self._path}: {exc}") from exc
        return ScoreResult(ok=True, best=best)

    def _read(self) -> dict[str, object]:
        if not self._path.exists():
            return {}
        try:
            with self._path.open("r", encoding="utf-8") as handle:
                payload = json.load(handle)
        except (OSError, ValueError) as exc:
            raise ScoreSinkError(f"could not read {self._path}: {exc}") from exc
        if not isinstance(payload, dict):
            raise ScoreSinkError(f"{self._path} does not hold a JSON object")
        return payload


ScoreCallback = Callable[[ScoreResult | None], None]


class ScoreReporter:
    """Fire-and-forget score submission.

    Submissions run on a daemon thread; outcomes wait in a queue until the
    frame thread calls `drain()`, so callbacks never run concurrently with the
    simulation. A failed or rejected submission reaches its callback as None.
    """

    def __init__(self, sink: ScoreSink, *, background: bool = True) -> None:
        self._sink = sink
        self._background = background
        self._completed: queue.SimpleQueue[tuple[ScoreCallback, ScoreResult | None]] = queue.SimpleQueue()
        self._threads: list[threading.Thread] = []

    @property
    def sink(self) -> ScoreSink:
        return self._sink

    def submit(self, score: int, on_done: ScoreCallback) -> None:
        if not self._background:
            self._completed.put((on_done, self._deliver(score)))
            return
        thread = threading.Thread(
            target=lambda: self._completed.put((on_done, self._deliver(score))),
            name="score-submit",
            daemon=True,
        )
        self._threads = [t for t in self._threads if t.is_alive()]
        self._threads.append(thread)
        thread.start()

    def drain(self) -> int:
        """Run callbacks for every finished submission; return how many ran."""
        handled = 0
        while True:
            try:
                on_done, result = self._completed.get_nowait()
            except queue.Empty:
                return handled
            on_done(result)
            handled += 1

    def wait_idle(self, timeout_seconds: float = 5.0) -> None:
        """Block until in-flight submissions finish (shutdown and tests)."""
        for thread in list(self._threads):
            thread.join(timeout=timeout_seconds)
        self._threads = [t for t in self._threads if t.is_alive()]

    def _deliver(self, score: int) -> ScoreResult | None:
        try:
            result = self._sink.submit(score)
        except ScoreSinkError:
            logger.exception("score_submit_failed score=%d", score)
            return None
        if not result.ok:
            logger.warning("score_submit_rejected score=%d", score)
            return None
        logger.info("score_submitted score=%d best=%s", score, result.best)
        return result
