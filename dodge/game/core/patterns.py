"""Obstacle wave generator with anti-repetition rules and a guaranteed wall gap."""

from __future__ import annotations

from dodge.game.core.curves import fall_speed
from dodge.game.core.geometry import widest_opening
from dodge.game.core.models import Block, GameSession, PatternKind, PatternMemory, RandomSource
from dodge.game.core.tuning import Tuning

WAVE_SPAWN_Y = -40.0
CHUNK_SPAWN_Y = -48.0
STAGGER_SKIP_CHANCE = 0.2

WAVE_SPEED_SCALE: dict[PatternKind, float] = {
    PatternKind.LANE_RAIN: 1.0,
    PatternKind.STAGGERED: 0.95,
    PatternKind.WALL: 1.02,
    PatternKind.FAT_CHUNK: 0.92,
}

_NON_WALL = (PatternKind.LANE_RAIN, PatternKind.STAGGERED, PatternKind.FAT_CHUNK)


def eligible_patterns(memory: PatternMemory) -> tuple[PatternKind, ...]:
    """Walls are out while their cooldown runs and right after another wall."""
    if memory.wall_cooldown_ms > 0.0 or memory.last_pattern is PatternKind.WALL:
        return _NON_WALL
    return tuple(PatternKind)


def choose_pattern(memory: PatternMemory, rng: RandomSource) -> PatternKind:
    return rng.choice(eligible_patterns(memory))


def lane_count(elapsed_seconds: float, tuning: Tuning) -> int:
    extra = min(float(tuning.max_extra_lanes), max(0.0, elapsed_seconds) / tuning.seconds_per_extra_lane)
    return tuning.base_lanes + int(extra)


def block_hue(hue_base: float, rng: RandomSource) -> int:
    return (int(hue_base) + rng.randrange(60)) % 360


def build_wave(
    kind: PatternKind,
    elapsed_seconds: float,
    width: float,
    hue_base: float,
    memory: PatternMemory,
    tuning: Tuning,
    rng: RandomSource,
) -> list[Block]:
    """Lay out one wave. Building a wall updates the gap memory and starts the wall cooldown."""
    fall = fall_speed(elapsed_seconds, tuning) * WAVE_SPEED_SCALE[kind]
    cols = lane_count(elapsed_seconds, tuning)
    lane_w = width / cols
    if kind is PatternKind.LANE_RAIN:
        return _lane_rain(cols, lane_w, fall, hue_base, rng)
    if kind is PatternKind.STAGGERED:
        return _staggered(cols, lane_w, fall, hue_base, rng)
    if kind is PatternKind.WALL:
        return _wall(cols, lane_w, width, fall, hue_base, memory, tuning, rng)
    return _fat_chunk(width, fall, hue_base, rng)


def spawn_pattern(session: GameSession, tuning: Tuning, rng: RandomSource) -> PatternKind:
    """Choose, build and enqueue one wave."""
    memory = session.patterns
    kind = choose_pattern(memory, rng)
    wave = build_wave(kind, session.elapsed_seconds, session.width, session.hue_base, memory, tuning, rng)
    session.blocks.extend(wave)
    memory.last_pattern = kind
    return kind


def _lane_rain(cols: int, lane_w: float, fall: float, hue_base: float, rng: RandomSource) -> list[Block]:
    blocks: list[Block] = []
    for _ in range(1 + rng.randrange(2)):
        col = rng.randrange(cols)
        w = max(18.0, min(lane_w - 10.0, rng.uniform(22.0, 44.0)))
        x = col * lane_w + rng.uniform(0.0, max(0.0, lane_w - w))
        blocks.append(Block(x, WAVE_SPAWN_Y, w, rng.uniform(18.0, 24.0), fall, block_hue(hue_base, rng)))
    return blocks


def _staggered(cols: int, lane_w: float, fall: float, hue_base: float, rng: RandomSource) -> list[Block]:
    blocks: list[Block] = []
    w = max(16.0, min(lane_w - 8.0, rng.uniform(22.0, 32.0)))
    for col in range(0, cols, 2):
        if rng.random() < STAGGER_SKIP_CHANCE:
            continue
        x = col * lane_w + rng.uniform(0.0, max(0.0, lane_w - w))
        blocks.append(Block(x, WAVE_SPAWN_Y, w, rng.uniform(16.0, 22.0), fall, block_hue(hue_base, rng)))
    return blocks


def _wall(
    cols: int,
    lane_w: float,
    width: float,
    fall: float,
    hue_base: float,
    memory: PatternMemory,
    tuning: Tuning,
    rng: RandomSource,
) -> list[Block]:
    span = rng.randrange(tuning.gap_cols_min, tuning.gap_cols_max + 1)
    starts = [col for col in range(cols - span + 1) if col != memory.last_gap_col]
    gap = rng.choice(starts)
    memory.last_gap_col = gap

    by_col: dict[int, Block] = {}
    w = max(16.0, lane_w - 6.0)
    for col in range(cols):
        if gap <= col < gap + span:
            continue
        by_col[col] = Block(col * lane_w, WAVE_SPAWN_Y, w, rng.uniform(16.0, 24.0), fall, block_hue(hue_base, rng))

    # Widen the gap one neighbour at a time, left first, until the opening clears the minimum.
    left, right = gap - 1, gap + span
    take_left = True
    while widest_opening(by_col.values(), width) < tuning.min_gap_px and (left >= 0 or right < cols):
        if (take_left and left >= 0) or right >= cols:
            by_col.pop(left, None)
            left -= 1
        else:
            by_col.pop(right, None)
            right += 1
        take_left = not take_left

    memory.wall_cooldown_ms = tuning.wall_cooldown_ms
    return list(by_col.values())


def _fat_chunk(width: float, fall: float, hue_base: float, rng: RandomSource) -> list[Block]:
    w = rng.uniform(46.0, 76.0)
    h = rng.uniform(24.0, 32.0)
    x = rng.uniform(0.0, max(0.0, width - w))
    return [Block(x, CHUNK_SPAWN_Y, w, h, fall, block_hue(hue_base, rng))]
