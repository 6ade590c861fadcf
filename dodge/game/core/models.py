"""Core domain models used by the arcade simulation."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum, StrEnum
from typing import Protocol, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """Seedable randomness injected into the simulation (``random.Random`` fits)."""

    def random(self) -> float: ...

    def uniform(self, a: float, b: float) -> float: ...

    def randrange(self, start: int, stop: int | None = None, step: int = 1) -> int: ...

    def choice(self, seq: Sequence[T]) -> T: ...


class PickupKind(StrEnum):
    """Collectible variants."""

    COIN = "coin"
    SHIELD = "shield"


class PatternKind(IntEnum):
    """Obstacle wave layouts."""

    LANE_RAIN = 0
    STAGGERED = 1
    WALL = 2
    FAT_CHUNK = 3


@dataclass(slots=True)
class Player:
    """Player rectangle; only x changes during a session."""

    x: float
    y: float
    w: float
    h: float
    speed: float

    @property
    def center_x(self) -> float:
        return self.x + self.w / 2

    @property
    def center_y(self) -> float:
        return self.y + self.h / 2


@dataclass(slots=True)
class Block:
    """Falling obstacle."""

    x: float
    y: float
    w: float
    h: float
    vy: float
    hue: int


@dataclass(slots=True)
class Pickup:
    """Falling collectible. ``x``/``y`` is the top-left of the circle's bounding box."""

    x: float
    y: float
    r: float
    vy: float
    kind: PickupKind
    hue: int

    @property
    def center_x(self) -> float:
        return self.x + self.r

    @property
    def center_y(self) -> float:
        return self.y + self.r


@dataclass(slots=True)
class Particle:
    """Cosmetic particle; ``life`` and ``age`` are in seconds."""

    x: float
    y: float
    vx: float
    vy: float
    life: float
    age: float
    hue: int
    saturation: int
    lightness: int


@dataclass(slots=True)
class Abilities:
    """Dash, shield and screen-shake timers. Millisecond counters never go below zero."""

    dash_cooldown_ms: float = 0.0
    dash_active: bool = False
    dash_timer_ms: float = 0.0
    shield: bool = False
    shield_timer_ms: float = 0.0
    shake: float = 0.0

    @property
    def dash_ready(self) -> bool:
        return self.dash_cooldown_ms == 0.0 and not self.dash_active


@dataclass(slots=True)
class SpawnAccumulators:
    """Millisecond accumulators for the four spawn classes."""

    drip_ms: float = 0.0
    pattern_ms: float = 0.0
    coin_ms: float = 0.0
    shield_ms: float = 0.0


@dataclass(slots=True)
class PatternMemory:
    """Anti-repetition state for the wave generator."""

    last_pattern: PatternKind | None = None
    last_gap_col: int | None = None
    wall_cooldown_ms: float = 0.0


@dataclass(slots=True)
class SessionStats:
    """Per-session counters reported at game over."""

    dashes: int = 0
    coins: int = 0
    shields_collected: int = 0
    shields_broken: int = 0


@dataclass(frozen=True, slots=True)
class ControlInput:
    """Input sampled once per step."""

    move: int = 0  # -1 left, 0 idle, +1 right
    dash_pressed: bool = False


@dataclass(frozen=True, slots=True)
class StepOutcome:
    """Result of one simulation step."""

    game_over: bool = False
    stepped: bool = True


@dataclass(slots=True)
class GameSession:
    """Runtime session state, owned by the driver and passed to the step function."""

    width: float
    height: float
    player: Player
    blocks: list[Block] = field(default_factory=list)
    pickups: list[Pickup] = field(default_factory=list)
    particles: list[Particle] = field(default_factory=list)
    abilities: Abilities = field(default_factory=Abilities)
    accumulators: SpawnAccumulators = field(default_factory=SpawnAccumulators)
    patterns: PatternMemory = field(default_factory=PatternMemory)
    stats: SessionStats = field(default_factory=SessionStats)
    score: float = 0.0
    elapsed_seconds: float = 0.0
    hue_base: float = 260.0
    running: bool = False
    over: bool = False
