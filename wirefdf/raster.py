"""Pixel canvas and the line rasteriser that draws a wireframe onto it."""

from __future__ import annotations

import math
from array import array
from dataclasses import replace

from .colors import line_color
from .geometry import WINDOW_HEIGHT, WINDOW_WIDTH, Point
from .model import Wireframe

_COLOR_MASK = 0xFFFFFFFF


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class Canvas:
    """A fixed size grid of 32-bit colour values, all black to begin with."""

    def __init__(self, width: int = WINDOW_WIDTH, height: int = WINDOW_HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("canvas dimensions must be positive")
        self.width = width
        self.height = height
        self.pixels = array("I", [0]) * (width * height)

    def put(self, point: Point) -> None:
        """Set the pixel nearest to ``point``; points off the canvas are ignored."""
        x = _round_half_away(point.x)
        y = _round_half_away(point.y)
        if 0 <= x < self.width and 0 <= y < self.height:
            self.pixels[y * self.width + x] = point.color & _COLOR_MASK

    def get(self, x: int, y: int) -> int:
        """Colour of the pixel at ``(x, y)``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) lies outside the canvas")
        return self.pixels[y * self.width + x]

    def fill(self, color: int) -> None:
        """Paint every pixel with ``color``."""
        self.pixels = array("I", [color & _COLOR_MASK]) * (self.width * self.height)


def _draw_low(canvas: Canvas, start: Point, end: Point) -> None:
    """Lines whose slope lies between -1 and 1, drawn left to right."""
    delta = end - start
    step = -1 if delta.y < 0 else 1
    delta = replace(delta, y=abs(delta.y))
    err = int(2 * delta.y - delta.x)
    x, y, color = start.x, start.y, start.color
    while x < end.x:
        canvas.put(Point(x, y, start.z, color))
        if err > 0:
            y += step
            err = int(err + 2 * (delta.y - delta.x))
        else:
            err = int(err + 2 * delta.y)
        color = line_color(Point(x, y, start.z, color), start, end, delta)
        x += 1


def _draw_high(canvas: Canvas, start: Point, end: Point) -> None:
    """Steep lines, drawn top to bottom."""
    delta = end - start
    step = -1 if delta.x < 0 else 1
    delta = replace(delta, x=abs(delta.x))
    err = int(2 * delta.x - delta.y)
    x, y, color = start.x, start.y, start.color
    while y < end.y:
        canvas.put(Point(x, y, start.z, color))
        if err > 0:
            x += step
            err = int(err + 2 * (delta.x - delta.y))
        else:
            err = int(err + 2 * delta.x)
        color = line_color(Point(x, y, start.z, color), start, end, delta)
        y += 1


def draw_line(canvas: Canvas, start: Point, end: Point) -> None:
    """Draw a colour-graded line from ``start`` up to, but not including, ``end``."""
    if abs(end.y - start.y) < abs(end.x - start.x):
        if start.x > end.x:
            _draw_low(canvas, end, start)
        else:
            _draw_low(canvas, start, end)
    elif start.y > end.y:
        _draw_high(canvas, end, start)
    else:
        _draw_high(canvas, start, end)


def draw_map(canvas: Canvas, wireframe: Wireframe, offset: Point) -> None:
    """Draw each grid point's edges to its right and lower neighbours, shifted by ``offset``."""
    points = wireframe.points
    width = wireframe.width
    last_row_start = len(points) - width
    for index, point in enumerate(points):
        shifted = point + offset
        if index % width != width - 1:
            draw_line(canvas, shifted, points[index + 1] + offset)
        if index < last_row_start:
            draw_line(canvas, shifted, points[index + width] + offset)