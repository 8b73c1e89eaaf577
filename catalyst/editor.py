"""Editor helpers: the preview sphere mesh and the viewport ground grid."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from catalyst.gizmos import Color, Gizmos

GRID_MAJOR = Color(0.5, 0.5, 0.5, 0.5)
GRID_MINOR = Color(0.0, 0.0, 0.0, 1.0)
GRID_HALF_SIZE = 100


@dataclass(frozen=True)
class SphereMesh:
    """Per-vertex data of a unit UV sphere, stacks from the +Z pole downwards."""

    sector_count: int
    stack_count: int
    positions: np.ndarray
    normals: np.ndarray
    uvs: np.ndarray
    tangents: np.ndarray
    bitangents: np.ndarray

    @property
    def vertex_count(self) -> int:
        return int(self.positions.shape[0])


def _normalize(vectors: np.ndarray) -> np.ndarray:
    return vectors / np.linalg.norm(vectors, axis=1, keepdims=True)


def generate_sphere(sector_count: int = 36, stack_count: int = 18) -> SphereMesh:
    """Positions, normals, UVs, tangents and bitangents of a unit sphere.

    Vertices run stack by stack, each stack holding ``sector_count + 1``
    vertices so the seam is duplicated.
    """
    if sector_count < 1 or stack_count < 1:
        raise ValueError("sector and stack counts must be at least 1")

    stacks = np.arange(stack_count + 1)
    sectors = np.arange(sector_count + 1)
    stack_angle = math.pi / 2 - stacks * math.pi / stack_count
    sector_angle = sectors * 2 * math.pi / sector_count

    xy = np.cos(stack_angle)[:, None]
    z = np.broadcast_to(np.sin(stack_angle)[:, None], (stack_count + 1, sector_count + 1))
    x = xy * np.cos(sector_angle)[None, :]
    y = xy * np.sin(sector_angle)[None, :]

    normals = np.column_stack((x.ravel(), y.ravel(), z.ravel()))
    positions = np.column_stack((normals, np.ones(normals.shape[0])))

    u = np.broadcast_to((sectors / sector_count)[None, :], x.shape)
    v = np.broadcast_to((stacks / stack_count)[:, None], x.shape)
    uvs = np.column_stack((u.ravel(), v.ravel()))

    tangent_row = np.column_stack((-np.sin(sector_angle), np.cos(sector_angle),
                                   np.zeros(sector_count + 1)))
    tangents = _normalize(np.tile(tangent_row, (stack_count + 1, 1)))
    bitangents = _normalize(np.cross(normals, tangents))

    return SphereMesh(sector_count, stack_count, positions, normals, uvs, tangents, bitangents)


def add_editor_grid(gizmos: Gizmos) -> None:
    """Add the ground grid on the XZ plane, every tenth line highlighted."""
    size = GRID_HALF_SIZE
    for i in range(2 * size + 1):
        colour = GRID_MAJOR if i % 10 == 0 else GRID_MINOR
        offset = -size + i
        gizmos.add_line((offset, 0, size), (offset, 0, -size), colour, colour)
        gizmos.add_line((size, 0, offset), (-size, 0, offset), colour, colour)