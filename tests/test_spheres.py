import math

import numpy as np
import pytest

from catalyst.gizmos import Color, Gizmos
from catalyst.spheres import add_capsule, add_sphere

FILL = Color(0.1, 0.5, 0.9, 1.0)


@pytest.fixture
def gizmos():
    return Gizmos(100000, 100000, 10, 10)


def _all_points(gizmos):
    points = [np.array(v.position) for line in gizmos.lines for v in line]
    points += [np.array(v.position) for tri in gizmos.tris for v in tri]
    return np.array(points)


def test_full_sphere_counts(gizmos):
    add_sphere(gizmos, (0, 0, 0), 1.0, 4, 6, FILL)
    assert len(gizmos.lines) == 2 * 4 * 6
    assert len(gizmos.tris) == 2 * 4 * 6


def test_sphere_points_on_surface(gizmos):
    center = (1.0, -2.0, 0.5)
    add_sphere(gizmos, center, 2.0, 5, 7, FILL)
    distances = np.linalg.norm(_all_points(gizmos) - np.array(center), axis=1)
    assert np.allclose(distances, 2.0)


def test_sphere_spans_poles(gizmos):
    add_sphere(gizmos, (0, 0, 0), 3.0, 6, 8, FILL)
    ys = _all_points(gizmos)[:, 1]
    assert ys.min() == pytest.approx(-3.0)
    assert ys.max() == pytest.approx(3.0)


def test_partial_longitude_leaves_seam(gizmos):
    rows, cols = 3, 5
    add_sphere(gizmos, (0, 0, 0), 1.0, rows, cols, FILL, None, 0.0, 180.0)
    assert len(gizmos.lines) == 2 * rows * cols - rows
    assert len(gizmos.tris) == 2 * (rows * cols - rows)


def test_sphere_transform_translates(gizmos):
    matrix = np.identity(4)
    matrix[:3, 3] = (0.0, 5.0, 0.0)
    add_sphere(gizmos, (1.0, 0.0, 0.0), 1.0, 4, 4, FILL, matrix)
    distances = np.linalg.norm(_all_points(gizmos) - np.array([1.0, 5.0, 0.0]), axis=1)
    assert np.allclose(distances, 1.0)


def test_sphere_transparent_fill(gizmos):
    add_sphere(gizmos, (0, 0, 0), 1.0, 2, 3, Color(1, 1, 1, 0.25))
    assert gizmos.tris == ()
    assert len(gizmos.transparent_tris) == 2 * 2 * 3


def test_sphere_lines_are_white(gizmos):
    add_sphere(gizmos, (0, 0, 0), 1.0, 3, 3, FILL)
    colours = {v.color for line in gizmos.lines for v in line}
    assert colours == {Color(1.0, 1.0, 1.0, 1.0)}


@pytest.mark.parametrize("rows, cols", [(0, 4), (4, 0), (-1, 3)])
def test_sphere_rejects_empty_grid(gizmos, rows, cols):
    with pytest.raises(ValueError):
        add_sphere(gizmos, (0, 0, 0), 1.0, rows, cols, FILL)


def test_capsule_counts(gizmos):
    rows, cols = 4, 8
    add_capsule(gizmos, (0, 0, 0), 4.0, 1.0, rows, cols, FILL)
    assert len(gizmos.tris) == 2 * rows * cols + 2 * cols
    assert len(gizmos.lines) == 2 * rows * cols + 3 * cols


def test_capsule_height_bounds(gizmos):
    add_capsule(gizmos, (0, 0, 0), 4.0, 1.0, 6, 8, FILL)
    points = _all_points(gizmos)
    assert points[:, 1].min() == pytest.approx(-2.0)
    assert points[:, 1].max() == pytest.approx(2.0)
    radial = np.hypot(points[:, 0], points[:, 2])
    assert radial.max() <= 1.0 + 1e-9


def test_capsule_center_offsets(gizmos):
    add_capsule(gizmos, (3.0, 1.0, -2.0), 4.0, 1.0, 4, 6, FILL)
    points = _all_points(gizmos)
    assert points[:, 1].min() == pytest.approx(1.0 - 2.0)
    assert points[:, 1].max() == pytest.approx(1.0 + 2.0)
    assert np.hypot(points[:, 0] - 3.0, points[:, 2] + 2.0).max() <= 1.0 + 1e-9


def test_capsule_rotation_lays_it_along_x(gizmos):
    angle = math.pi / 2
    rotation = np.identity(4)
    rotation[0, 0] = math.cos(angle)
    rotation[0, 1] = -math.sin(angle)
    rotation[1, 0] = math.sin(angle)
    rotation[1, 1] = math.cos(angle)
    add_capsule(gizmos, (0, 0, 0), 4.0, 1.0, 4, 8, FILL, rotation)
    points = _all_points(gizmos)
    assert np.abs(points[:, 0]).max() == pytest.approx(2.0)
    assert np.abs(points[:, 1]).max() <= 1.0 + 1e-9


def test_capsule_rejects_empty_grid(gizmos):
    with pytest.raises(ValueError):
        add_capsule(gizmos, (0, 0, 0), 4.0, 1.0, 0, 8, FILL)