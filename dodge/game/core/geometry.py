"""Collision geometry helpers."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol


class Box(Protocol):
    x: float
    y: float
    w: float
    h: float


class Circle(Protocol):
    r: float

    @property
    def center_x(self) -> float: ...

    @property
    def center_y(self) -> float: ...


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def rect_overlaps(a: Box, b: Box) -> bool:
    """Strict AABB overlap; touching edges do not collide."""
    return a.x < b.x + b.w and a.x + a.w > b.x and a.y < b.y + b.h and a.y + a.h > b.y


def rect_hits_circle(rect: Box, circle: Circle) -> bool:
    """Closest point on the rectangle to the circle centre, compared against the radius."""
    cx = circle.center_x
    cy = circle.center_y
    nearest_x = clamp(cx, rect.x, rect.x + rect.w)
    nearest_y = clamp(cy, rect.y, rect.y + rect.h)
    dx = cx - nearest_x
    dy = cy - nearest_y
    return dx * dx + dy * dy <= circle.r * circle.r


def widest_opening(boxes: Iterable[Box], width: float) -> float:
    """Widest horizontal span in ``[0, width]`` not covered by any box."""
    spans = sorted((max(0.0, b.x), min(width, b.x + b.w)) for b in boxes)
    best = 0.0
    cursor = 0.0
    for left, right in spans:
        if left > cursor:
            best = max(best, left - cursor)
        cursor = max(cursor, right)
    return max(best, width - cursor)
