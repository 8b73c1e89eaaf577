"""Sphere and capsule debug primitives built from latitude/longitude grids."""

from __future__ import annotations

import math
from typing import Callable, List, Optional, Sequence

import numpy as np

from catalyst.gizmos import WHITE, Color, Gizmos, _direction, _matrix, _vec

Transform = Optional[Sequence[Sequence[float]]]

_DEG2RAD = math.pi / 180.0


def _check_grid(rows: int, columns: int) -> None:
    if rows < 1 or columns < 1:
        raise ValueError("rows and columns must be at least 1")


def _grid_points(radius: float, rows: int, columns: int, lat_min: float, lat_max: float,
                 long_min: float, long_max: float,
                 matrix: Optional[np.ndarray]) -> List[np.ndarray]:
    """Grid vertices indexed ``row * columns + col % columns``.

    The last column of each row wraps onto the slot of the first.
    """
    lat_range = (lat_max - lat_min) * _DEG2RAD
    long_range = (long_max - long_min) * _DEG2RAD
    points: List[np.ndarray] = [np.zeros(3) for _ in range(rows * columns + columns)]

    for row in range(rows + 1):
        about_x = row / rows * lat_range + lat_min * _DEG2RAD
        y = radius * math.sin(about_x)
        z = radius * math.cos(about_x)
        for col in range(columns + 1):
            theta = col / columns * long_range + long_min * _DEG2RAD
            point = np.array([-z * math.sin(theta), y, -z * math.cos(theta)])
            if matrix is not None:
                point = _direction(matrix, point)
            points[row * columns + col % columns] = point
    return points


def _emit_faces(gizmos: Gizmos, points: List[np.ndarray], rows: int, columns: int,
                fill_colour: Color, center_for: Callable[[int], np.ndarray],
                wraps: bool) -> None:
    for face in range(rows * columns):
        next_face = face + 1
        if next_face % columns == 0:
            next_face -= columns
        c = center_for(face)

        gizmos.add_line(c + points[face], c + points[face + columns], WHITE, WHITE)

        if face % columns == 0 and not wraps:
            continue

        gizmos.add_line(c + points[next_face + columns], c + points[face + columns], WHITE, WHITE)
        gizmos.add_tri(c + points[next_face + columns], c + points[face],
                       c + points[next_face], fill_colour)
        gizmos.add_tri(c + points[next_face + columns], c + points[face + columns],
                       c + points[face], fill_colour)


def add_sphere(gizmos: Gizmos, center: Sequence[float], radius: float, rows: int,
               columns: int, fill_colour: Color, transform: Transform = None,
               long_min: float = 0.0, long_max: float = 360.0,
               lat_min: float = -90.0, lat_max: float = 90.0) -> None:
    """Add a sphere (or a longitude/latitude section of one) with white grid lines.

    Angles are in degrees. A longitude span under 360 degrees leaves the
    seam between the first and last columns open.
    """
    rows, columns = int(rows), int(columns)
    _check_grid(rows, columns)
    fill_colour = Color(*fill_colour)
    c = _vec(center, 3)
    matrix = None if transform is None else _matrix(transform)
    if matrix is not None:
        c = matrix[:3, 3] + c

    points = _grid_points(radius, rows, columns, lat_min, lat_max, long_min, long_max, matrix)
    wraps = (long_max - long_min) >= 360.0
    _emit_faces(gizmos, points, rows, columns, fill_colour, lambda face: c, wraps)


def add_capsule(gizmos: Gizmos, center: Sequence[float], height: float, radius: float,
                rows: int, cols: int, fill_colour: Color, rotation: Transform = None) -> None:
    """Add a capsule of total ``height`` along the Y axis: two hemispheres and a tube."""
    rows, cols = int(rows), int(cols)
    _check_grid(rows, cols)
    fill_colour = Color(*fill_colour)
    c = _vec(center, 3)
    matrix = None if rotation is None else _matrix(rotation)

    sphere_centers = height * 0.5 - radius
    top = np.array([0.0, sphere_centers, 0.0, 0.0])
    bottom = np.array([0.0, -sphere_centers, 0.0, 0.0])
    if matrix is not None:
        top = matrix @ top + matrix[:, 3]
        bottom = matrix @ bottom + matrix[:, 3]

    top_center = c + top[:3]
    bottom_center = c + bottom[:3]

    points = _grid_points(radius, rows, cols, -90.0, 90.0, 0.0, 360.0, matrix)
    lower_faces = rows // 2 * cols
    _emit_faces(
        gizmos, points, rows, cols, fill_colour,
        lambda face: bottom_center if face < lower_faces else top_center,
        True,
    )

    for i in range(cols):
        x = i / cols * 2.0 * math.pi
        x1 = (i + 1) / cols * 2.0 * math.pi
        pos = np.array([math.cos(x), 0.0, math.sin(x)]) * radius
        pos1 = np.array([math.cos(x1), 0.0, math.sin(x1)]) * radius
        if matrix is not None:
            pos = _direction(matrix, pos)
            pos1 = _direction(matrix, pos1)

        gizmos.add_tri(top_center + pos1, bottom_center + pos1, bottom_center + pos, fill_colour)
        gizmos.add_tri(top_center + pos1, bottom_center + pos, top_center + pos, fill_colour)

        gizmos.add_line(top_center + pos, top_center + pos1, WHITE, WHITE)
        gizmos.add_line(bottom_center + pos, bottom_center + pos1, WHITE, WHITE)
        gizmos.add_line(top_center + pos, bottom_center + pos, WHITE, WHITE)