"""UV sphere mesh centred on the origin."""

from __future__ import annotations

import math

from .meshutil import MeshBuffers, Vec2, Vec3, face_normal

MIN_SECTOR_COUNT = 3
MIN_STACK_COUNT = 2


class Sphere:
    """Indexed triangle mesh of a sphere built from sectors (longitude) and stacks (latitude).

    Sector counts below 3 and stack counts below 2 are raised to those minimums.
    """

    def __init__(
        self,
        radius: float = 1.0,
        sector_count: int = 36,
        stack_count: int = 18,
        smooth: bool = True,
    ) -> None:
        self._buffers = MeshBuffers()
        self.set(radius, sector_count, stack_count, smooth)

    def set(
        self,
        radius: float,
        sector_count: int,
        stack_count: int,
        smooth: bool = True,
    ) -> None:
        """Replace every parameter and rebuild the mesh."""
        self._radius = float(radius)
        self._sector_count = max(int(sector_count), MIN_SECTOR_COUNT)
        self._stack_count = max(int(stack_count), MIN_STACK_COUNT)
        self._smooth = bool(smooth)
        self._build()

    # parameters -----------------------------------------------------------

    @property
    def radius(self) -> float:
        return self._radius

    @radius.setter
    def radius(self, value: float) -> None:
        if value != self._radius:
            self.set(value, self._sector_count, self._stack_count, self._smooth)

    @property
    def sector_count(self) -> int:
        return self._sector_count

    @sector_count.setter
    def sector_count(self, value: int) -> None:
        if value != self._sector_count:
            self.set(self._radius, value, self._stack_count, self._smooth)

    @property
    def stack_count(self) -> int:
        return self._stack_count

    @stack_count.setter
    def stack_count(self, value: int) -> None:
        if value != self._stack_count:
            self.set(self._radius, self._sector_count, value, self._smooth)

    @property
    def smooth(self) -> bool:
        return self._smooth

    @smooth.setter
    def smooth(self, value: bool) -> None:
        if bool(value) == self._smooth:
            return
        self._smooth = bool(value)
        self._build()

    @property
    def buffers(self) -> MeshBuffers:
        """The generated vertex and index data."""
        return self._buffers

    def __str__(self) -> str:
        b = self._buffers
        return "\n".join([
            "===== Sphere =====",
            f"        Radius: {self._radius:g}",
            f"  Sector Count: {self._sector_count}",
            f"   Stack Count: {self._stack_count}",
            f"Smooth Shading: {'true' if self._smooth else 'false'}",
            f"Triangle Count: {b.triangle_count()}",
            f"   Index Count: {b.index_count()}",
            f"  Vertex Count: {b.vertex_count()}",
            f"  Normal Count: {b.normal_count()}",
            f"TexCoord Count: {b.tex_coord_count()}",
        ])

    # building -------------------------------------------------------------

    def _build(self) -> None:
        self._buffers.clear()
        if self._smooth:
            self._build_smooth()
        else:
            self._build_flat()

    def _grid(self) -> list[list[tuple[Vec3, Vec3, Vec2]]]:
        """Return rings of (position, unit direction, tex coord), north pole first."""
        sector_step = 2 * math.pi / self._sector_count
        stack_step = math.pi / self._stack_count
        rings = []
        for i in range(self._stack_count + 1):
            stack_angle = math.pi / 2 - i * stack_step
            cos_u = math.cos(stack_angle)
            sin_u = math.sin(stack_angle)
            ring = []
            for j in range(self._sector_count + 1):
                sector_angle = j * sector_step
                direction = (
                    cos_u * math.cos(sector_angle),
                    cos_u * math.sin(sector_angle),
                    sin_u,
                )
                position = tuple(self._radius * c for c in direction)
                uv = (j / self._sector_count, i / self._stack_count)
                ring.append((position, direction, uv))
            rings.append(ring)
        return rings

    def _build_smooth(self) -> None:
        b = self._buffers
        sectors = self._sector_count
        stacks = self._stack_count

        for ring in self._grid():
            for position, direction, uv in ring:
                b.add_vertex(position, direction, uv)

        for i in range(stacks):
            k1 = i * (sectors + 1)
            k2 = k1 + sectors + 1
            for _ in range(sectors):
                if i != 0:
                    b.add_triangle(k1, k2, k1 + 1)
                if i != stacks - 1:
                    b.add_triangle(k1 + 1, k2, k2 + 1)
                b.add_line(k1, k2)
                if i != 0:
                    b.add_line(k1, k1 + 1)
                k1 += 1
                k2 += 1

    def _build_flat(self) -> None:
        b = self._buffers
        stacks = self._stack_count
        rings = self._grid()

        for i, (upper, lower) in enumerate(zip(rings, rings[1:])):
            for j in range(self._sector_count):
                v1, v2, v3, v4 = upper[j], lower[j], upper[j + 1], lower[j + 1]
                index = b.vertex_count()
                if i == 0:
                    corners = (v1, v2, v4)
                    normal = face_normal(v1[0], v2[0], v4[0])
                    for position, _, uv in corners:
                        b.add_vertex(position, normal, uv)
                    b.add_triangle(index, index + 1, index + 2)
                    b.add_line(index, index + 1)
                elif i == stacks - 1:
                    corners = (v1, v2, v3)
                    normal = face_normal(v1[0], v2[0], v3[0])
                    for position, _, uv in corners:
                        b.add_vertex(position, normal, uv)
                    b.add_triangle(index, index + 1, index + 2)
                    b.add_line(index, index + 1)
                    b.add_line(index, index + 2)
                else:
                    corners = (v1, v2, v3, v4)
                    normal = face_normal(v1[0], v2[0], v3[0])
                    for position, _, uv in corners:
                        b.add_vertex(position, normal, uv)
                    b.add_triangle(index, index + 1, index + 2)
                    b.add_triangle(index + 2, index + 1, index + 3)
                    b.add_line(index, index + 1)
                    b.add_line(index, index + 2)