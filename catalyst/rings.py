"""Round debug primitives: cylinders, rings, disks and arcs around the Y axis."""

from __future__ import annotations

import math
from typing import Optional, Sequence, Tuple

import numpy as np

from catalyst.gizmos import (
    FLT_EPSILON,
    WHITE,
    Color,
    Gizmos,
    _direction,
    _matrix,
    _vec,
)

Transform = Optional[Sequence[Sequence[float]]]


def _prepare(center: Sequence[float], transform: Transform) -> Tuple[np.ndarray, Optional[np.ndarray]]:
    """The effective centre and the transform matrix (if any)."""
    c = _vec(center, 3)
    matrix = None if transform is None else _matrix(transform)
    if matrix is not None:
        c = matrix[:3, 3] + c
    return c, matrix


def _flat_point(angle: float, radius: float, matrix: Optional[np.ndarray],
                y: float = 0.0) -> np.ndarray:
    """A point at ``angle`` around the Y axis, rotated by ``matrix`` if given."""
    point = np.array([math.sin(angle) * radius, y, math.cos(angle) * radius])
    return point if matrix is None else _direction(matrix, point)


def _segment_count(segments: int) -> int:
    segments = int(segments)
    if segments < 0:
        raise ValueError("segments must not be negative")
    return segments


def _solid(colour: Color) -> Color:
    return Color(*colour)._replace(a=1.0)


def add_cylinder_filled(gizmos: Gizmos, center: Sequence[float], radius: float,
                        half_length: float, segments: int, fill_colour: Color,
                        transform: Transform = None) -> None:
    """Add a filled cylinder along the Y axis with white outlines."""
    segments = _segment_count(segments)
    fill_colour = Color(*fill_colour)
    c, matrix = _prepare(center, transform)
    if segments == 0:
        return
    segment_size = 2 * math.pi / segments

    for i in range(segments):
        a1 = i * segment_size
        a2 = (i + 1) * segment_size
        top0 = _flat_point(0.0, 0.0, matrix, half_length)
        top1 = _flat_point(a1, radius, matrix, half_length)
        top2 = _flat_point(a2, radius, matrix, half_length)
        bottom0 = _flat_point(0.0, 0.0, matrix, -half_length)
        bottom1 = _flat_point(a1, radius, matrix, -half_length)
        bottom2 = _flat_point(a2, radius, matrix, -half_length)

        gizmos.add_tri(c + top0, c + top1, c + top2, fill_colour)
        gizmos.add_tri(c + bottom0, c + bottom2, c + bottom1, fill_colour)
        gizmos.add_tri(c + top2, c + top1, c + bottom1, fill_colour)
        gizmos.add_tri(c + bottom1, c + bottom2, c + top2, fill_colour)

        gizmos.add_line(c + top1, c + top2, WHITE, WHITE)
        gizmos.add_line(c + top1, c + bottom1, WHITE, WHITE)
        gizmos.add_line(c + bottom1, c + bottom2, WHITE, WHITE)


def _ring_segments(gizmos: Gizmos, c: np.ndarray, matrix: Optional[np.ndarray],
                   inner_radius: float, outer_radius: float, start: float,
                   segment_size: float, segments: int, fill_colour: Color) -> None:
    solid = _solid(fill_colour)
    for i in range(segments):
        a1 = start + i * segment_size
        a2 = start + (i + 1) * segment_size
        outer1 = _flat_point(a1, outer_radius, matrix)
        outer2 = _flat_point(a2, outer_radius, matrix)
        inner1 = _flat_point(a1, inner_radius, matrix)
        inner2 = _flat_point(a2, inner_radius, matrix)

        if fill_colour.a > 0:
            gizmos.add_tri(c + outer2, c + outer1, c + inner1, fill_colour)
            gizmos.add_tri(c + inner1, c + inner2, c + outer2, fill_colour)
            gizmos.add_tri(c + inner1, c + outer1, c + outer2, fill_colour)
            gizmos.add_tri(c + outer2, c + inner2, c + inner1, fill_colour)
        else:
            gizmos.add_line(c + inner1, c + inner2, solid, solid)
            gizmos.add_line(c + outer1, c + outer2, solid, solid)


def _disk_segments(gizmos: Gizmos, c: np.ndarray, matrix: Optional[np.ndarray],
                   radius: float, start: float, segment_size: float, segments: int,
                   fill_colour: Color) -> None:
    solid = _solid(fill_colour)
    for i in range(segments):
        outer1 = _flat_point(start + i * segment_size, radius, matrix)
        outer2 = _flat_point(start + (i + 1) * segment_size, radius, matrix)

        if fill_colour.a > 0:
            gizmos.add_tri(c, c + outer1, c + outer2, fill_colour)
            gizmos.add_tri(c + outer2, c + outer1, c, fill_colour)
        else:
            gizmos.add_line(c + outer1, c + outer2, solid, solid)


def add_ring(gizmos: Gizmos, center: Sequence[float], inner_radius: float,
             outer_radius: float, segments: int, fill_colour: Color,
             transform: Transform = None) -> None:
    """Add a double-sided ring in the XZ plane.

    With a fill alpha of zero or less only the inner and outer outlines are drawn.
    """
    segments = _segment_count(segments)
    fill_colour = Color(*fill_colour)
    c, matrix = _prepare(center, transform)
    if segments == 0:
        return
    _ring_segments(gizmos, c, matrix, inner_radius, outer_radius, 0.0,
                   2 * math.pi / segments, segments, fill_colour)


def add_disk(gizmos: Gizmos, center: Sequence[float], radius: float, segments: int,
             fill_colour: Color, transform: Transform = None) -> None:
    """Add a double-sided disk in the XZ plane.

    With a fill alpha of zero or less only the outline is drawn.
    """
    segments = _segment_count(segments)
    fill_colour = Color(*fill_colour)
    c, matrix = _prepare(center, transform)
    if segments == 0:
        return
    _disk_segments(gizmos, c, matrix, radius, 0.0, 2 * math.pi / segments,
                   segments, fill_colour)


def add_arc(gizmos: Gizmos, center: Sequence[float], rotation: float, radius: float,
            half_angle: float, segments: int, fill_colour: Color,
            transform: Transform = None) -> None:
    """Add an arc around the Y axis spanning ``rotation`` ± ``half_angle``.

    With a zero fill alpha the outline and the two edge lines are drawn.
    """
    segments = _segment_count(segments)
    fill_colour = Color(*fill_colour)
    c, matrix = _prepare(center, transform)
    start = rotation - half_angle
    if segments > 0:
        _disk_segments(gizmos, c, matrix, radius, start, 2 * half_angle / segments,
                       segments, fill_colour)

    if abs(fill_colour.a) < FLT_EPSILON:
        solid = _solid(fill_colour)
        edge1 = _flat_point(-half_angle + rotation, radius, matrix)
        edge2 = _flat_point(half_angle + rotation, radius, matrix)
        gizmos.add_line(c, c + edge1, solid, solid)
        gizmos.add_line(c, c + edge2, solid, solid)


def add_arc_ring(gizmos: Gizmos, center: Sequence[float], rotation: float,
                 inner_radius: float, outer_radius: float, arc_half_angle: float,
                 segments: int, fill_colour: Color, transform: Transform = None) -> None:
    """Add a section of a ring between two radii spanning ``rotation`` ± ``arc_half_angle``.

    With a zero fill alpha the outlines and the two edge lines are drawn.
    """
    segments = _segment_count(segments)
    fill_colour = Color(*fill_colour)
    c, matrix = _prepare(center, transform)
    start = rotation - arc_half_angle
    if segments > 0:
        _ring_segments(gizmos, c, matrix, inner_radius, outer_radius, start,
                       2 * arc_half_angle / segments, segments, fill_colour)

    if abs(fill_colour.a) < FLT_EPSILON:
        solid = _solid(fill_colour)
        outer1 = _flat_point(-arc_half_angle + rotation, outer_radius, matrix)
        outer2 = _flat_point(arc_half_angle + rotation, outer_radius, matrix)
        inner1 = _flat_point(-arc_half_angle + rotation, inner_radius, matrix)
        inner2 = _flat_point(arc_half_angle + rotation, inner_radius, matrix)
        gizmos.add_line(c + inner1, c + outer1, solid, solid)
        gizmos.add_line(c + inner2, c + outer2, solid, solid)