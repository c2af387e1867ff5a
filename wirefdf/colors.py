"""Colour constants and gradient interpolation between coloured points."""

from __future__ import annotations

from .geometry import Point

RED = 0xFFA500
DRED = 0x660000
GREEN = 0x00FF00
BLUE = 0x008080
DBLUE = 0x000066
PURPLE = 0xB491C8
WHITE = 0xFFFFFF
DGREEN = 0x006600
BLACK = 0x000000
GREY = 0x888888
DGREY = 0x333333

GROUND_COLOR = RED
HIGH_COLOR = PURPLE
LOW_COLOR = DBLUE


def get_percentage(start: int, end: int, cur: int) -> float:
    """Relative position of ``cur`` between ``start`` and ``end``; 1.0 if they coincide."""
    delta = end - start
    if delta == 0:
        return 1.0
    return (cur - start) / delta


def mix_channel(start: int, end: int, percentage: float) -> int:
    """Linear mix of one colour channel, truncated towards zero."""
    return int((1 - percentage) * start + percentage * end)


def _blend(start_color: int, end_color: int, percentage: float) -> int:
    channels = (
        mix_channel((start_color >> shift) & 0xFF, (end_color >> shift) & 0xFF, percentage)
        for shift in (16, 8, 0)
    )
    red, green, blue = channels
    return (red << 16) | (green << 8) | blue


def line_color(cur: Point, start: Point, end: Point, delta: Point) -> int:
    """Colour of ``cur`` on a line from ``start`` to ``end`` stepping along the major axis."""
    if cur.color == end.color:
        return cur.color
    if delta.x > delta.y:
        percentage = get_percentage(int(start.x), int(end.x), int(cur.x))
    else:
        percentage = get_percentage(int(start.y), int(end.y), int(cur.y))
    return _blend(start.color, end.color, percentage)


def height_gradient_color(cur: Point, start: Point, end: Point) -> int:
    """Colour of ``cur`` by its absolute height between ``start`` and ``end``."""
    percentage = get_percentage(int(abs(start.z)), int(abs(end.z)), int(abs(cur.z)))
    return _blend(start.color, end.color, percentage)