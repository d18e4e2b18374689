"""Shared helpers for building indexed triangle meshes."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

Vec3 = tuple[float, float, float]
Vec2 = tuple[float, float]

#: Smallest cross-product length treated as a real surface.
EPSILON = 0.000001

#: Floats per interleaved vertex: position (3), normal (3), tex coord (2).
FLOATS_PER_VERTEX = 8

#: Bytes per interleaved vertex.
STRIDE = FLOATS_PER_VERTEX * np.dtype(np.float32).itemsize

#: Largest index that fits in the 16-bit element buffer.
MAX_INDEX = np.iinfo(np.uint16).max


def face_normal(v1: Vec3, v2: Vec3, v3: Vec3) -> Vec3:
    """Return the unit normal of triangle v1-v2-v3, or a zero vector if it has no area."""
    ex1, ey1, ez1 = (b - a for a, b in zip(v1, v2))
    ex2, ey2, ez2 = (b - a for a, b in zip(v1, v3))

    nx = ey1 * ez2 - ez1 * ey2
    ny = ez1 * ex2 - ex1 * ez2
    nz = ex1 * ey2 - ey1 * ex2

    length = math.sqrt(nx * nx + ny * ny + nz * nz)
    if length > EPSILON:
        inv = 1.0 / length
        return (nx * inv, ny * inv, nz * inv)
    return (0.0, 0.0, 0.0)


def unit_circle(sector_count: int) -> list[Vec3]:
    """Return sector_count + 1 points on the unit circle in the XY plane.

    The last point repeats the first so that texture coordinates can wrap.
    """
    if sector_count < 1:
        raise ValueError(f"sector count must be positive, got {sector_count}")
    step = 2 * math.pi / sector_count
    return [
        (math.cos(i * step), math.sin(i * step), 0.0)
        for i in range(sector_count + 1)
    ]


@dataclass
class MeshBuffers:
    """Vertex attributes, triangle indices and wireframe line indices of a mesh."""

    positions: list[Vec3] = field(default_factory=list)
    normals: list[Vec3] = field(default_factory=list)
    tex_coords: list[Vec2] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)
    line_indices: list[int] = field(default_factory=list)

    def clear(self) -> None:
        """Drop all vertex and index data."""
        self.positions.clear()
        self.normals.clear()
        self.tex_coords.clear()
        self.indices.clear()
        self.line_indices.clear()

    def add_vertex(self, position: Vec3, normal: Vec3, tex_coord: Vec2) -> int:
        """Append one vertex and return its index."""
        x, y, z = position
        nx, ny, nz = normal
        s, t = tex_coord
        self.positions.append((float(x), float(y), float(z)))
        self.normals.append((float(nx), float(ny), float(nz)))
        self.tex_coords.append((float(s), float(t)))
        return len(self.positions) - 1

    def add_triangle(self, i1: int, i2: int, i3: int) -> None:
        """Append the three indices of one triangle."""
        triangle = (i1, i2, i3)
        for index in triangle:
            if not 0 <= index <= MAX_INDEX:
                raise OverflowError(f"index {index} does not fit in 16 bits")
        self.indices.extend(triangle)

    def add_line(self, i1: int, i2: int) -> None:
        """Append the two indices of one wireframe line."""
        self.line_indices.extend((i1, i2))

    def vertex_count(self) -> int:
        return len(self.positions)

    def normal_count(self) -> int:
        return len(self.normals)

    def tex_coord_count(self) -> int:
        return len(self.tex_coords)

    def index_count(self) -> int:
        return len(self.indices)

    def line_index_count(self) -> int:
        return len(self.line_indices)

    def triangle_count(self) -> int:
        return self.index_count() // 3

    def vertex_size(self) -> int:
        """Size in bytes of the interleaved vertex array."""
        return self.vertex_count() * STRIDE

    def index_size(self) -> int:
        """Size in bytes of the 16-bit index array."""
        return self.index_count() * np.dtype(np.uint16).itemsize

    @property
    def interleaved(self) -> np.ndarray:
        """Vertices as a flat float32 array laid out x, y, z, nx, ny, nz, s, t."""
        rows = [
            (*p, *n, *uv)
            for p, n, uv in zip(self.positions, self.normals, self.tex_coords)
        ]
        return np.array(rows, dtype=np.float32).reshape(-1)

    @property
    def index_array(self) -> np.ndarray:
        """Triangle indices as a uint16 array."""
        return np.array(self.indices, dtype=np.uint16)