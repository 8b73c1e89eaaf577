"""Two-dimensional debug primitives: boxes and circles in screen space."""

from __future__ import annotations

import math
from typing import Optional, Sequence, Tuple

import numpy as np

from catalyst.gizmos import Color, Gizmos, _matrix, _vec

Transform = Optional[Sequence[Sequence[float]]]


def _flat(matrix: Optional[np.ndarray], vector: np.ndarray) -> np.ndarray:
    """``vector`` rotated and scaled by ``matrix`` in the XY plane, ignoring translation."""
    if matrix is None:
        return vector
    return (matrix @ np.array([vector[0], vector[1], 0.0, 0.0]))[:2]


def _axes(extents: Sequence[float], transform: Transform) -> Tuple[np.ndarray, np.ndarray]:
    e = _vec(extents, 2)
    matrix = None if transform is None else _matrix(transform)
    vx = _flat(matrix, np.array([e[0], 0.0]))
    vy = _flat(matrix, np.array([0.0, e[1]]))
    return vx, vy


def add_2d_aabb(gizmos: Gizmos, center: Sequence[float], extents: Sequence[float],
                colour: Color, transform: Transform = None) -> None:
    """Add a 2-D box outline; ``transform`` rotates and scales it, its translation is ignored."""
    c = _vec(center, 2)
    vx, vy = _axes(extents, transform)
    corners = (c - vx - vy, c + vx - vy, c - vx + vy, c + vx + vy)
    for a, b in ((0, 1), (1, 3), (2, 3), (2, 0)):
        gizmos.add_2d_line(corners[a], corners[b], colour, colour)


def add_2d_aabb_filled(gizmos: Gizmos, center: Sequence[float], extents: Sequence[float],
                       colour: Color, transform: Transform = None) -> None:
    """Add a filled 2-D box made of two triangles."""
    c = _vec(center, 2)
    vx, vy = _axes(extents, transform)
    corners = (c - vx - vy, c + vx - vy, c + vx + vy, c - vx + vy)
    gizmos.add_2d_tri(corners[0], corners[1], corners[2], colour)
    gizmos.add_2d_tri(corners[0], corners[2], corners[3], colour)


def add_2d_circle(gizmos: Gizmos, center: Sequence[float], radius: float, segments: int,
                  colour: Color, transform: Transform = None) -> None:
    """Add a 2-D circle of ``segments`` pieces.

    A colour with positive alpha fills it double-sided; otherwise only an
    opaque outline is drawn.
    """
    segments = int(segments)
    if segments < 0:
        raise ValueError("segments must not be negative")
    colour = Color(*colour)
    c = _vec(center, 2)
    matrix = None if transform is None else _matrix(transform)
    if segments == 0:
        return
    solid = colour._replace(a=1.0)
    segment_size = 2 * math.pi / segments

    for i in range(segments):
        a1 = i * segment_size
        a2 = (i + 1) * segment_size
        outer1 = _flat(matrix, np.array([math.sin(a1) * radius, math.cos(a1) * radius]))
        outer2 = _flat(matrix, np.array([math.sin(a2) * radius, math.cos(a2) * radius]))

        if colour.a > 0:
            gizmos.add_2d_tri(c, c + outer1, c + outer2, colour)
            gizmos.add_2d_tri(c + outer2, c + outer1, c, colour)
        else:
            gizmos.add_2d_line(c + outer1, c + outer2, solid, solid)