"""Held-key tracking and per-step input sampling."""

from __future__ import annotations

from dataclasses import dataclass

from dodge.game.core.models import ControlInput


@dataclass(frozen=True, slots=True)
class KeyBindings:
    """Normalized key names for each control; two names per control by default."""

    left: frozenset[str] = frozenset({"arrowleft", "a"})
    right: frozenset[str] = frozenset({"arrowright", "d"})
    dash: frozenset[str] = frozenset({"space", " "})


def normalize_key(name: str) -> str:
    # " " must survive normalization; it is a dash key name.
    return name if name == " " else name.strip().lower()


class InputState:
    """Set of held keys plus a latched dash edge.

    The dash edge is raised on the key-down transition of a dash key and cleared
    by `sample()`, so holding the key never retriggers a dash.
    """

    def __init__(self, bindings: KeyBindings | None = None) -> None:
        self._bindings = bindings or KeyBindings()
        self._held: set[str] = set()
        self._dash_edge = False

    @property
    def bindings(self) -> KeyBindings:
        return self._bindings

    @property
    def held(self) -> frozenset[str]:
        return frozenset(self._held)

    def key_down(self, name: str) -> None:
        key = normalize_key(name)
        if key in self._bindings.dash and not self._dash_held():
            self._dash_edge = True
        self._held.add(key)

    def key_up(self, name: str) -> None:
        self._held.discard(normalize_key(name))

    def release_all(self) -> None:
        self._held.clear()
        self._dash_edge = False

    def clear_pending(self) -> None:
        """Drop a dash press that arrived while no session was running."""
        self._dash_edge = False

    def sample(self) -> ControlInput:
        """Snapshot controls for one step and consume the pending dash press."""
        move = 0
        if self._held & self._bindings.left:
            move -= 1
        if self._held & self._bindings.right:
            move += 1
        pressed = self._dash_edge
        self._dash_edge = False
        return ControlInput(move=move, dash_pressed=pressed)

    def _dash_held(self) -> bool:
        return bool(self._held & self._bindings.dash)
