"""Immediate-mode debug primitives collected into bounded line and triangle lists."""

from __future__ import annotations

from typing import List, NamedTuple, Optional, Sequence, Tuple

import numpy as np

FLT_EPSILON = 1.1920928955078125e-07


class Color(NamedTuple):
    """An RGBA colour with components normally in [0, 1]."""

    r: float
    g: float
    b: float
    a: float = 1.0


WHITE = Color(1.0, 1.0, 1.0, 1.0)
RED = Color(1.0, 0.0, 0.0, 1.0)
GREEN = Color(0.0, 1.0, 0.0, 1.0)
BLUE = Color(0.0, 0.0, 1.0, 1.0)


class GizmoVertex(NamedTuple):
    """A homogeneous position and its colour."""

    x: float
    y: float
    z: float
    w: float
    r: float
    g: float
    b: float
    a: float

    @property
    def position(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    @property
    def color(self) -> Color:
        return Color(self.r, self.g, self.b, self.a)


GizmoLine = Tuple[GizmoVertex, GizmoVertex]
GizmoTri = Tuple[GizmoVertex, GizmoVertex, GizmoVertex]


def ortho(left: float, right: float, bottom: float, top: float) -> np.ndarray:
    """An orthographic projection with a near plane of -1 and a far plane of 1."""
    if right == left or top == bottom:
        raise ValueError("the projection must have a non-zero width and height")
    matrix = np.identity(4, dtype=float)
    matrix[0, 0] = 2.0 / (right - left)
    matrix[1, 1] = 2.0 / (top - bottom)
    matrix[2, 2] = -1.0
    matrix[0, 3] = -(right + left) / (right - left)
    matrix[1, 3] = -(top + bottom) / (top - bottom)
    return matrix


def _vec(value: Sequence[float], size: int) -> np.ndarray:
    array = np.asarray(value, dtype=float).reshape(-1)
    if array.shape[0] < size:
        raise ValueError(f"expected at least {size} components, got {array.shape[0]}")
    return array[:size].copy()


def _matrix(value: Sequence[Sequence[float]]) -> np.ndarray:
    matrix = np.asarray(value, dtype=float)
    if matrix.shape != (4, 4):
        raise ValueError("a transform must be a 4x4 matrix")
    return matrix


def _direction(transform: np.ndarray, vector: np.ndarray) -> np.ndarray:
    """``vector`` rotated and scaled by ``transform``, ignoring its translation."""
    return (transform @ np.append(vector, 0.0))[:3]


def _vertex(position: np.ndarray, color: Color, z: Optional[float] = None) -> GizmoVertex:
    c = Color(*color)
    z_value = float(position[2]) if z is None else z
    return GizmoVertex(
        float(position[0]), float(position[1]), z_value, 1.0,
        float(c.r), float(c.g), float(c.b), float(c.a),
    )


def _box_corners(center: np.ndarray, extents: np.ndarray,
                 transform: Optional[Sequence[Sequence[float]]]) -> List[np.ndarray]:
    vx = np.array([extents[0], 0.0, 0.0])
    vy = np.array([0.0, extents[1], 0.0])
    vz = np.array([0.0, 0.0, extents[2]])
    c = center
    if transform is not None:
        matrix = _matrix(transform)
        vx = _direction(matrix, vx)
        vy = _direction(matrix, vy)
        vz = _direction(matrix, vz)
        c = matrix[:3, 3] + c
    return [
        c - vx - vz - vy,
        c - vx + vz - vy,
        c + vx + vz - vy,
        c + vx - vz - vy,
        c - vx - vz + vy,
        c - vx + vz + vy,
        c + vx + vz + vy,
        c + vx - vz + vy,
    ]


_BOX_EDGES = (
    (0, 1), (1, 2), (2, 3), (3, 0),
    (4, 5), (5, 6), (6, 7), (7, 4),
    (0, 4), (1, 5), (2, 6), (3, 7),
)

_BOX_FACES = (
    (2, 1, 0), (3, 2, 0),  # top
    (5, 6, 4), (6, 7, 4),  # bottom
    (4, 3, 0), (7, 3, 4),  # front
    (1, 2, 5), (2, 6, 5),  # back
    (0, 1, 4), (1, 5, 4),  # left
    (2, 3, 7), (6, 2, 7),  # right
)


class Gizmos:
    """Bounded buffers of 3-D and 2-D debug lines and triangles.

    Primitives added once a buffer is full are dropped. Triangles whose
    alpha is below one go to a separate transparent buffer that shares the
    triangle limit.
    """

    def __init__(self, max_lines: int, max_tris: int, max_2d_lines: int, max_2d_tris: int) -> None:
        for name, limit in (("max_lines", max_lines), ("max_tris", max_tris),
                            ("max_2d_lines", max_2d_lines), ("max_2d_tris", max_2d_tris)):
            if limit < 0:
                raise ValueError(f"{name} must not be negative")
        self.max_lines = max_lines
        self.max_tris = max_tris
        self.max_2d_lines = max_2d_lines
        self.max_2d_tris = max_2d_tris
        self._lines: List[GizmoLine] = []
        self._tris: List[GizmoTri] = []
        self._transparent_tris: List[GizmoTri] = []
        self._lines_2d: List[GizmoLine] = []
        self._tris_2d: List[GizmoTri] = []

    def clear(self) -> None:
        """Remove every primitive."""
        self._lines.clear()
        self._tris.clear()
        self._transparent_tris.clear()
        self._lines_2d.clear()
        self._tris_2d.clear()

    @property
    def lines(self) -> Tuple[GizmoLine, ...]:
        return tuple(self._lines)

    @property
    def tris(self) -> Tuple[GizmoTri, ...]:
        return tuple(self._tris)

    @property
    def transparent_tris(self) -> Tuple[GizmoTri, ...]:
        return tuple(self._transparent_tris)

    @property
    def lines_2d(self) -> Tuple[GizmoLine, ...]:
        return tuple(self._lines_2d)

    @property
    def tris_2d(self) -> Tuple[GizmoTri, ...]:
        return tuple(self._tris_2d)

    def add_line(self, v0: Sequence[float], v1: Sequence[float], color0: Color,
                 color1: Optional[Color] = None) -> bool:
        """Add a 3-D line; returns False if the line buffer is full."""
        if len(self._lines) >= self.max_lines:
            return False
        color1 = color0 if color1 is None else color1
        self._lines.append((_vertex(_vec(v0, 3), color0), _vertex(_vec(v1, 3), color1)))
        return True

    def add_tri(self, v0: Sequence[float], v1: Sequence[float], v2: Sequence[float],
                color: Color) -> bool:
        """Add a 3-D triangle; returns False if its buffer is full."""
        color = Color(*color)
        target = self._tris if color.a > 1 - FLT_EPSILON else self._transparent_tris
        if len(target) >= self.max_tris:
            return False
        target.append(tuple(_vertex(_vec(v, 3), color) for v in (v0, v1, v2)))  # type: ignore[arg-type]
        return True

    def add_2d_line(self, start: Sequence[float], end: Sequence[float], colour0: Color,
                    colour1: Optional[Color] = None) -> bool:
        """Add a 2-D line; returns False if the 2-D line buffer is full."""
        if len(self._lines_2d) >= self.max_2d_lines:
            return False
        colour1 = colour0 if colour1 is None else colour1
        self._lines_2d.append((
            _vertex(_vec(start, 2), colour0, z=1.0),
            _vertex(_vec(end, 2), colour1, z=1.0),
        ))
        return True

    def add_2d_tri(self, v0: Sequence[float], v1: Sequence[float], v2: Sequence[float],
                   colour0: Color, colour1: Optional[Color] = None,
                   colour2: Optional[Color] = None) -> bool:
        """Add a 2-D triangle with a colour per corner; returns False when full."""
        if len(self._tris_2d) >= self.max_2d_tris:
            return False
        colour1 = colour0 if colour1 is None else colour1
        colour2 = colour0 if colour2 is None else colour2
        self._tris_2d.append((
            _vertex(_vec(v0, 2), colour0, z=1.0),
            _vertex(_vec(v1, 2), colour1, z=1.0),
            _vertex(_vec(v2, 2), colour2, z=1.0),
        ))
        return True

    def add_transform(self, transform: Sequence[Sequence[float]], scale: float = 1.0) -> None:
        """Add red, green and blue lines along a transform's X, Y and Z axes."""
        matrix = _matrix(transform)
        origin = matrix[:3, 3]
        for column, colour in ((0, RED), (1, GREEN), (2, BLUE)):
            self.add_line(origin, origin + matrix[:3, column] * scale, colour, colour)

    def add_aabb(self, center: Sequence[float], extents: Sequence[float], color: Color,
                 transform: Optional[Sequence[Sequence[float]]] = None) -> None:
        """Add a wire-frame box, optionally rotated and moved by ``transform``."""
        corners = _box_corners(_vec(center, 3), _vec(extents, 3), transform)
        for a, b in _BOX_EDGES:
            self.add_line(corners[a], corners[b], color, color)

    def add_aabb_filled(self, center: Sequence[float], extents: Sequence[float],
                        fill_colour: Color,
                        transform: Optional[Sequence[Sequence[float]]] = None) -> None:
        """Add a filled box with white edges."""
        corners = _box_corners(_vec(center, 3), _vec(extents, 3), transform)
        for a, b in _BOX_EDGES:
            self.add_line(corners[a], corners[b], WHITE, WHITE)
        for a, b, c in _BOX_FACES:
            self.add_tri(corners[a], corners[b], corners[c], fill_colour)

    def add_hermite_spline(self, start: Sequence[float], end: Sequence[float],
                           tangent_start: Sequence[float], tangent_end: Sequence[float],
                           segments: int, colour: Color) -> None:
        """Add a Hermite curve drawn as ``segments`` lines (at least one)."""
        p0 = _vec(start, 3)
        p1 = _vec(end, 3)
        t0 = _vec(tangent_start, 3)
        t1 = _vec(tangent_end, 3)
        segments = max(int(segments), 1)

        prev = p0
        for i in range(1, segments + 1):
            s = i / segments
            s2 = s * s
            s3 = s2 * s
            h1 = 2.0 * s3 - 3.0 * s2 + 1.0
            h2 = -2.0 * s3 + 3.0 * s2
            h3 = s3 - 2.0 * s2 + s
            h4 = s3 - s2
            point = p0 * h1 + p1 * h2 + t0 * h3 + t1 * h4
            self.add_line(prev, point, colour, colour)
            prev = point