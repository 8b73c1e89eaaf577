import math

import numpy as np
import pytest

from catalyst.gizmos import Color, Gizmos
from catalyst.gizmos2d import add_2d_aabb, add_2d_aabb_filled, add_2d_circle

RED = Color(1.0, 0.0, 0.0, 1.0)


def make():
    return Gizmos(100, 100, 100, 100)


def endpoints(lines):
    return {(round(v.x, 6), round(v.y, 6)) for line in lines for v in line}


def test_aabb_outline_corners():
    g = make()
    add_2d_aabb(g, (3.0, 4.0), (1.0, 2.0), RED)
    assert len(g.lines_2d) == 4
    expected = {(3.0 + sx * 1.0, 4.0 + sy * 2.0) for sx in (-1, 1) for sy in (-1, 1)}
    assert endpoints(g.lines_2d) == expected
    for line in g.lines_2d:
        for v in line:
            assert v.z == 1.0
            assert v.color == RED


def test_aabb_each_edge_is_axis_aligned():
    g = make()
    add_2d_aabb(g, (0.0, 0.0), (1.0, 2.0), RED)
    for a, b in g.lines_2d:
        assert a.x == b.x or a.y == b.y


def test_aabb_transform_translation_ignored():
    plain = make()
    moved = make()
    translation = np.identity(4)
    translation[:3, 3] = (5.0, 6.0, 7.0)
    add_2d_aabb(plain, (1.0, 1.0), (2.0, 3.0), RED)
    add_2d_aabb(moved, (1.0, 1.0), (2.0, 3.0), RED, translation)
    assert plain.lines_2d == moved.lines_2d


def test_aabb_rotated_quarter_turn_swaps_extents():
    g = make()
    rot = np.array([[0, -1, 0, 0], [1, 0, 0, 0], [0, 0, 1, 0], [0, 0, 0, 1]], dtype=float)
    add_2d_aabb(g, (0.0, 0.0), (1.0, 2.0), RED, rot)
    expected = {(sx * 2.0, sy * 1.0) for sx in (-1, 1) for sy in (-1, 1)}
    assert endpoints(g.lines_2d) == expected


def test_aabb_filled_covers_box_area():
    g = make()
    add_2d_aabb_filled(g, (0.0, 0.0), (1.5, 2.5), RED)
    assert len(g.tris_2d) == 2
    area = 0.0
    for tri in g.tris_2d:
        (x0, y0), (x1, y1), (x2, y2) = [(v.x, v.y) for v in tri]
        area += abs((x1 - x0) * (y2 - y0) - (x2 - x0) * (y1 - y0)) / 2
    assert area == pytest.approx(4 * 1.5 * 2.5)
    assert not g.lines_2d


def test_circle_filled_makes_double_sided_triangles():
    g = make()
    add_2d_circle(g, (1.0, 1.0), 2.0, 6, Color(0.0, 1.0, 0.0, 0.5))
    assert len(g.tris_2d) == 12
    assert not g.lines_2d
    for tri in g.tris_2d:
        assert tri[0].a == 0.5


def test_circle_outline_when_alpha_zero():
    g = make()
    add_2d_circle(g, (1.0, -1.0), 2.0, 8, Color(0.2, 0.3, 0.4, 0.0))
    assert len(g.lines_2d) == 8
    assert not g.tris_2d
    for line in g.lines_2d:
        for v in line:
            assert v.a == 1.0
            assert math.hypot(v.x - 1.0, v.y + 1.0) == pytest.approx(2.0)


def test_circle_outline_is_closed():
    g = make()
    add_2d_circle(g, (0.0, 0.0), 1.0, 5, Color(1, 1, 1, 0))
    first = g.lines_2d[0][0]
    last = g.lines_2d[-1][1]
    assert (first.x, first.y) == pytest.approx((last.x, last.y), abs=1e-9)


def test_circle_respects_capacity():
    g = Gizmos(0, 0, 2, 0)
    add_2d_circle(g, (0.0, 0.0), 1.0, 5, Color(1, 1, 1, 0))
    assert len(g.lines_2d) == 2


def test_circle_zero_segments_adds_nothing():
    g = make()
    add_2d_circle(g, (0.0, 0.0), 1.0, 0, RED)
    assert g.lines_2d == () and g.tris_2d == ()


def test_circle_negative_segments_rejected():
    with pytest.raises(ValueError):
        add_2d_circle(make(), (0.0, 0.0), 1.0, -1, RED)