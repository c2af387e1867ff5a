import math

import pytest

from wirefdf.geometry import (
    ISO_ANGLE,
    Matrix3,
    Point,
    rotation_x,
    rotation_y,
    scale_matrix,
)


def _norm(p):
    return math.sqrt(p.x * p.x + p.y * p.y + p.z * p.z)


def test_add_keeps_left_color():
    result = Point(1, 2, 3, 0xFF) + Point(4, 5, 6, 0x11)
    assert (result.x, result.y, result.z, result.color) == (5, 7, 9, 0xFF)


def test_sub_keeps_left_color():
    result = Point(4, 5, 6, 0x22) - Point(1, 2, 3, 0x33)
    assert (result.x, result.y, result.z, result.color) == (3, 3, 3, 0x22)


def test_add_then_sub_round_trip():
    a = Point(1.5, -2.0, 3.25, 7)
    b = Point(0.5, 4.0, -1.0, 9)
    assert (a + b) - b == a


def test_add_rejects_non_point():
    with pytest.raises(TypeError):
        Point(1, 1, 1) + 3


def test_matrix_needs_three_columns():
    with pytest.raises(ValueError):
        Matrix3(((1, 0, 0), (0, 1, 0)))


def test_scale_matrix_scales_and_keeps_color():
    p = Point(1, -2, 3, 0xABCDEF)
    result = scale_matrix(2).apply(p)
    assert result == Point(2, -4, 6, 0xABCDEF)


def test_scale_by_one_is_identity():
    p = Point(3.5, -1.25, 8, 5)
    assert scale_matrix(1).apply(p) == p


@pytest.mark.parametrize("angle", [0.3, -1.1, math.pi / 2, ISO_ANGLE])
def test_rotation_x_round_trip(angle):
    p = Point(1.0, 2.0, -3.0, 4)
    back = rotation_x(-angle).apply(rotation_x(angle).apply(p))
    assert back.x == pytest.approx(p.x)
    assert back.y == pytest.approx(p.y)
    assert back.z == pytest.approx(p.z)
    assert back.color == 4


@pytest.mark.parametrize("angle", [0.3, -1.1, math.pi / 4])
def test_rotation_y_round_trip(angle):
    p = Point(-5.0, 0.5, 2.0, 1)
    back = rotation_y(-angle).apply(rotation_y(angle).apply(p))
    assert back.x == pytest.approx(p.x)
    assert back.y == pytest.approx(p.y)
    assert back.z == pytest.approx(p.z)


@pytest.mark.parametrize("angle", [0.7, 2.0, -0.4])
def test_rotations_preserve_length_and_axis(angle):
    p = Point(3.0, -4.0, 12.0)
    rx = rotation_x(angle).apply(p)
    ry = rotation_y(angle).apply(p)
    assert _norm(rx) == pytest.approx(_norm(p))
    assert _norm(ry) == pytest.approx(_norm(p))
    assert rx.x == pytest.approx(p.x)
    assert ry.y == pytest.approx(p.y)


def test_rotation_x_quarter_turn_direction():
    result = rotation_x(math.pi / 2).apply(Point(0, 1, 0))
    assert result.y == pytest.approx(0.0, abs=1e-12)
    assert result.z == pytest.approx(-1.0)


def test_rotation_y_quarter_turn_direction():
    result = rotation_y(math.pi / 2).apply(Point(1, 0, 0))
    assert result.x == pytest.approx(0.0, abs=1e-12)
    assert result.z == pytest.approx(1.0)