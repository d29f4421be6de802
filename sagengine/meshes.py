"""Vertex, normal, texture-coordinate and index data for the built-in shapes."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from .errors import InvalidArgumentException


@dataclass(frozen=True)
class MeshData:
    """Per-vertex attributes and a flat triangle index list."""

    vertices: np.ndarray
    normals: np.ndarray
    tex_coords: np.ndarray
    elements: np.ndarray

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def element_count(self) -> int:
        return len(self.elements)

    @property
    def triangles(self) -> np.ndarray:
        """Indices grouped as one row per triangle."""
        return self.elements.reshape(-1, 3)


_CUBE_CORNERS = (
    # front
    (-1, -1, 1), (1, -1, 1), (1, 1, 1), (-1, 1, 1),
    # right
    (1, -1, 1), (1, -1, -1), (1, 1, -1), (1, 1, 1),
    # back
    (-1, -1, -1), (-1, 1, -1), (1, 1, -1), (1, -1, -1),
    # left
    (-1, -1, 1), (-1, 1, 1), (-1, 1, -1), (-1, -1, -1),
    # bottom
    (-1, -1, 1), (-1, -1, -1), (1, -1, -1), (1, -1, 1),
    # top
    (-1, 1, 1), (1, 1, 1), (1, 1, -1), (-1, 1, -1),
)

_CUBE_FACE_NORMALS = (
    (0, 0, 1),
    (1, 0, 0),
    (0, 0, -1),
    (-1, 0, 0),
    (0, -1, 0),
    (0, 1, 0),
)

_QUAD_TEX = ((0, 0), (1, 0), (1, 1), (0, 1))


def cube_mesh(side_length: float = 0.5) -> MeshData:
    """An axis-aligned cube with 4 vertices per face, spanning ±``side_length``."""
    vertices = np.array(_CUBE_CORNERS, dtype=np.float32) * np.float32(side_length)
    normals = np.repeat(np.array(_CUBE_FACE_NORMALS, dtype=np.float32), 4, axis=0)
    tex_coords = np.tile(np.array(_QUAD_TEX, dtype=np.float32), (6, 1))
    elements = np.array(
        [base + offset for base in range(0, 24, 4) for offset in (0, 1, 2, 0, 2, 3)],
        dtype=np.uint32,
    )
    return MeshData(vertices, normals, tex_coords, elements)


def _sphere_elements(axis_subdivision: int, height_subdivision: int):
    for i in range(axis_subdivision):
        start = i * (height_subdivision + 1)
        next_start = (i + 1) * (height_subdivision + 1)
        for j in range(height_subdivision):
            if j == 0:
                yield from (start, start + 1, next_start + 1)
            elif j == height_subdivision - 1:
                yield from (start + j, start + j + 1, next_start + j)
            else:
                yield from (
                    start + j, start + j + 1, next_start + j + 1,
                    next_start + j, start + j, next_start + j + 1,
                )


def sphere_mesh(radius: float, axis_subdivision: int, height_subdivision: int) -> MeshData:
    """A UV sphere around the origin, with the poles on the z axis."""
    if axis_subdivision < 1:
        raise InvalidArgumentException("A sphere needs at least one axis subdivision.")
    if height_subdivision < 2:
        raise InvalidArgumentException("A sphere needs at least two height subdivisions.")

    theta = np.arange(axis_subdivision + 1) * (2.0 * math.pi / axis_subdivision)
    phi = np.arange(height_subdivision + 1) * (math.pi / height_subdivision)
    theta_grid, phi_grid = np.meshgrid(theta, phi, indexing="ij")
    theta_flat = theta_grid.ravel()
    phi_flat = phi_grid.ravel()

    normals = np.stack(
        [
            np.sin(phi_flat) * np.cos(theta_flat),
            np.sin(phi_flat) * np.sin(theta_flat),
            np.cos(phi_flat),
        ],
        axis=1,
    ).astype(np.float32)
    vertices = (normals * np.float32(radius)).astype(np.float32)

    s = np.arange(axis_subdivision + 1) / axis_subdivision
    t = np.arange(height_subdivision + 1) / height_subdivision
    s_grid, t_grid = np.meshgrid(s, t, indexing="ij")
    tex_coords = np.stack([s_grid.ravel(), t_grid.ravel()], axis=1).astype(np.float32)

    elements = np.fromiter(
        _sphere_elements(axis_subdivision, height_subdivision), dtype=np.uint32
    )
    return MeshData(vertices, normals, tex_coords, elements)