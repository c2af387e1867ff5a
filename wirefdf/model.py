"""The wireframe model: a grid of coloured points and the transforms applied to it."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace

from .colors import GROUND_COLOR, HIGH_COLOR, LOW_COLOR, height_gradient_color
from .geometry import (
    ISO_ANGLE,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    Matrix3,
    Point,
    rotation_x,
    rotation_y,
    scale_matrix,
)

GRID_SPACE = 10
_MARGIN = 30


@dataclass
class Wireframe:
    """A ``width`` by ``height`` grid of points stored row by row."""

    width: int
    height: int
    points: list[Point]
    min_height: int = 0
    max_height: int = 0
    space: int = GRID_SPACE
    base_i: Point = field(default_factory=lambda: Point(1.0, 0.0, 0.0))
    base_j: Point = field(default_factory=lambda: Point(0.0, 1.0, 0.0))
    base_k: Point = field(default_factory=lambda: Point(0.0, 0.0, 1.0))

    @classmethod
    def from_heights(cls, heights: list[list[int]]) -> Wireframe:
        """Lay the heights out on a grid centred on the origin and colour them by height."""
        rows = [list(row) for row in heights]
        if not rows or not rows[0]:
            raise ValueError("a wireframe needs at least one point")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("all rows must have the same length")
        height = len(rows)
        space = GRID_SPACE

        x0 = int(-space * width / 2)
        y0 = int(-space * height / 2)
        flat = [z for row in rows for z in row]
        min_height = min(0, *flat)
        max_height = max(0, *flat)

        ground = Point(0.0, 0.0, 0.0, GROUND_COLOR)
        high = Point(0.0, 0.0, float(max_height), HIGH_COLOR)
        low = Point(0.0, 0.0, float(min_height), LOW_COLOR)

        points = []
        for r, row in enumerate(rows):
            for c, z in enumerate(row):
                point = Point(float(x0 + c * space), float(y0 + r * space), float(z), GROUND_COLOR)
                if z > 0:
                    point = replace(point, color=height_gradient_color(point, ground, high))
                elif z < 0:
                    point = replace(point, color=height_gradient_color(point, ground, low))
                points.append(point)

        return cls(
            width=width,
            height=height,
            points=points,
            min_height=min_height,
            max_height=max_height,
            space=space,
        )

    def copy(self) -> Wireframe:
        """An independent copy of the wireframe."""
        return replace(self, points=list(self.points))

    def transform(self, matrix: Matrix3) -> Wireframe:
        """Apply ``matrix`` to every point and to the basis vectors."""
        self.points = [matrix.apply(point) for point in self.points]
        self.base_i = matrix.apply(self.base_i)
        self.base_j = matrix.apply(self.base_j)
        self.base_k = matrix.apply(self.base_k)
        return self

    def zoom(self, factor: float) -> Wireframe:
        return self.transform(scale_matrix(factor))

    def rotate_x(self, angle: float) -> Wireframe:
        return self.transform(rotation_x(angle))

    def rotate_y(self, angle: float) -> Wireframe:
        return self.transform(rotation_y(angle))

    def iso_view(self) -> Wireframe:
        """Turn the grid into the isometric projection."""
        self.rotate_x(-math.pi / 2)
        self.rotate_y(math.pi / 4)
        self.rotate_x(ISO_ANGLE)
        return self

    def xy_bounds(self) -> tuple[int, int, int, int]:
        """Integer ``(min_x, max_x, min_y, max_y)`` of the points, always including 0."""
        min_x = max_x = min_y = max_y = 0
        for point in self.points:
            if point.x < min_x:
                min_x = int(point.x)
            if point.x > max_x:
                max_x = int(point.x)
            if point.y < min_y:
                min_y = int(point.y)
            if point.y > max_y:
                max_y = int(point.y)
        return min_x, max_x, min_y, max_y

    def autoscale(self) -> float:
        """Zoom so the projection fills the window less a margin; return the factor used."""
        min_x, max_x, min_y, max_y = self.xy_bounds()
        extent_x = max(abs(max_x), abs(min_x))
        extent_y = max(abs(max_y), abs(min_y))
        scale_x = (WINDOW_WIDTH // 2 - _MARGIN) / extent_x if extent_x else math.inf
        scale_y = (WINDOW_HEIGHT // 2 - _MARGIN) / extent_y if extent_y else math.inf
        factor = min(scale_x, scale_y)
        if math.isinf(factor):
            return 1.0
        self.zoom(factor)
        return factor