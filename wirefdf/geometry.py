"""Points, 3x3 matrices and the rotations used to place a wireframe in space."""

from __future__ import annotations

import math
from dataclasses import dataclass

WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720
ISO_ANGLE = 0.6154

Vector3 = tuple[float, float, float]


@dataclass(frozen=True)
class Point:
    """A coloured point in three dimensions."""

    x: float
    y: float
    z: float = 0.0
    color: int = 0

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y, self.z + other.z, self.color)

    def __sub__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y, self.z - other.z, self.color)


@dataclass(frozen=True)
class Matrix3:
    """A 3x3 matrix stored as three columns."""

    columns: tuple[Vector3, Vector3, Vector3]

    def __post_init__(self) -> None:
        if len(self.columns) != 3 or any(len(col) != 3 for col in self.columns):
            raise ValueError("a 3x3 matrix needs three columns of three values")

    def apply(self, point: Point) -> Point:
        """Multiply the matrix by the point, keeping the point's colour."""
        c1, c2, c3 = self.columns
        x, y, z = point.x, point.y, point.z
        return Point(
            x * c1[0] + y * c2[0] + z * c3[0],
            x * c1[1] + y * c2[1] + z * c3[1],
            x * c1[2] + y * c2[2] + z * c3[2],
            point.color,
        )


def scale_matrix(factor: float) -> Matrix3:
    """Uniform scaling by ``factor`` on every axis."""
    return Matrix3(((factor, 0.0, 0.0), (0.0, factor, 0.0), (0.0, 0.0, factor)))


def rotation_x(angle: float) -> Matrix3:
    """Rotation about the x axis by ``angle`` radians."""
    c, s = math.cos(angle), math.sin(angle)
    return Matrix3(((1.0, 0.0, 0.0), (0.0, c, -s), (0.0, s, c)))


def rotation_y(angle: float) -> Matrix3:
    """Rotation about the y axis by ``angle`` radians."""
    c, s = math.cos(angle), math.sin(angle)
    return Matrix3(((c, 0.0, s), (0.0, 1.0, 0.0), (-s, 0.0, c)))