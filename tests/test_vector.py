import math
import pytest
from raycaster.core.color import Color
from raycaster.core.ray import Ray
from raycaster.core.vector import Point, Vector3


def test_vector_arithmetic():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(4.0, -5.0, 6.0)
    s = a + b
    d = a - b
    assert (s.x, s.y, s.z) == (5.0, -3.0, 9.0)
    assert (d.x, d.y, d.z) == (-3.0, 7.0, -3.0)
    m = a * 2
    assert (m.x, m.y, m.z) == (2.0, 4.0, 6.0)
    n = -a
    assert (n.x, n.y, n.z) == (-1.0, -2.0, -3.0)


def test_dot_and_cross():
    x = Vector3(1.0, 0.0, 0.0)
    y = Vector3(0.0, 1.0, 0.0)
    z = x.cross(y)
    assert (z.x, z.y, z.z) == (0.0, 0.0, 1.0)
    assert x.dot(y) == 0.0
    assert Vector3(1.0, 2.0, 3.0).dot(Vector3(4.0, 5.0, 6.0)) == 32.0


def test_length_and_normalize():
    v = Vector3(3.0, 0.0, 4.0)
    assert v.length() == 5.0
    assert v.norm() == 25.0
    u = v.normalize()
    assert u.length() == pytest.approx(1.0)
    assert (u.x, u.z) == pytest.approx((0.6, 0.8))


def test_normalize_zero_vector_stays_zero():
    u = Vector3.zero().normalize()
    assert (u.x, u.y, u.z) == (0.0, 0.0, 0.0)
    assert not any(math.isnan(c) for c in (u.x, u.y, u.z))


def test_point_vector_conversions():
    p = Point(1.0, 1.0, 1.0)
    q = Point(4.0, 5.0, 6.0)
    v = q - p
    assert isinstance(v, Vector3)
    assert (v.x, v.y, v.z) == (3.0, 4.0, 5.0)

    moved = p + Vector3(0.0, 0.0, -2.0)
    assert isinstance(moved, Point)
    assert (moved.x, moved.y, moved.z) == (1.0, 1.0, -1.0)

    back = q - Vector3(4.0, 5.0, 6.0)
    assert isinstance(back, Point)
    assert (back.x, back.y, back.z) == (0.0, 0.0, 0.0)


def test_invalid_point_vector_mixes_are_rejected():
    p = Point(1.0, 2.0, 3.0)
    v = Vector3(1.0, 2.0, 3.0)
    with pytest.raises(TypeError):
        p + p
    with pytest.raises(TypeError):
        v + p
    with pytest.raises(TypeError):
        v - p
    assert not hasattr(p, "normalize")


def test_from_one():
    p = Point.from_one(2.5)
    v = Vector3.from_one(-1.0)
    assert (p.x, p.y, p.z) == (2.5, 2.5, 2.5)
    assert (v.x, v.y, v.z) == (-1.0, -1.0, -1.0)


def test_ray_at():
    ray = Ray(Point(0.0, 1.0, 0.0), Vector3(0.0, 0.0, -1.0))
    p = ray.at(3.0)
    assert isinstance(p, Point)
    assert (p.x, p.y, p.z) == (0.0, 1.0, -3.0)


def test_color_to_rgba_rounds_and_clamps():
    assert Color(0.0, 1.0, 0.0).to_rgba() == (0, 255, 0, 255)
    assert Color(0.2, 0.4, 0.6).to_rgba() == (51, 102, 153, 255)
    assert Color(-0.5, 1.5, 0.999).to_rgba() == (0, 255, 255, 255)
