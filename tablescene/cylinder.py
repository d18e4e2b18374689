"""Cylinder (and truncated cone) mesh along the z axis."""

from __future__ import annotations

import math

from .meshutil import MeshBuffers, Vec3, face_normal, unit_circle

MIN_SECTOR_COUNT = 3
MIN_STACK_COUNT = 1


class Cylinder:
    """Indexed triangle mesh of a cylinder centred on the origin.

    The base cap lies at z = -height / 2 and the top cap at z = height / 2.
    Sector counts below 3 and stack counts below 1 are raised to those minimums.
    """

    def __init__(
        self,
        base_radius: float = 1.0,
        top_radius: float = 1.0,
        height: float = 1.0,
        sector_count: int = 36,
        stack_count: int = 1,
        smooth: bool = True,
    ) -> None:
        self._buffers = MeshBuffers()
        self._base_index = 0
        self._top_index = 0
        self.set(base_radius, top_radius, height, sector_count, stack_count, smooth)

    def set(
        self,
        base_radius: float,
        top_radius: float,
        height: float,
        sector_count: int,
        stack_count: int,
        smooth: bool = True,
    ) -> None:
        """Replace every parameter and rebuild the mesh."""
        self._base_radius = float(base_radius)
        self._top_radius = float(top_radius)
        self._height = float(height)
        self._sector_count = max(int(sector_count), MIN_SECTOR_COUNT)
        self._stack_count = max(int(stack_count), MIN_STACK_COUNT)
        self._smooth = bool(smooth)
        self._circle = unit_circle(self._sector_count)
        self._build()

    # parameters -----------------------------------------------------------

    @property
    def base_radius(self) -> float:
        return self._base_radius

    @base_radius.setter
    def base_radius(self, value: float) -> None:
        if value != self._base_radius:
            self.set(value, self._top_radius, self._height,
                     self._sector_count, self._stack_count, self._smooth)

    @property
    def top_radius(self) -> float:
        return self._top_radius

    @top_radius.setter
    def top_radius(self, value: float) -> None:
        if value != self._top_radius:
            self.set(self._base_radius, value, self._height,
                     self._sector_count, self._stack_count, self._smooth)

    @property
    def height(self) -> float:
        return self._height

    @height.setter
    def height(self, value: float) -> None:
        if value != self._height:
            self.set(self._base_radius, self._top_radius, value,
                     self._sector_count, self._stack_count, self._smooth)

    @property
    def sector_count(self) -> int:
        return self._sector_count

    @sector_count.setter
    def sector_count(self, value: int) -> None:
        if value != self._sector_count:
            self.set(self._base_radius, self._top_radius, self._height,
                     value, self._stack_count, self._smooth)

    @property
    def stack_count(self) -> int:
        return self._stack_count

    @stack_count.setter
    def stack_count(self, value: int) -> None:
        if value != self._stack_count:
            self.set(self._base_radius, self._top_radius, self._height,
                     self._sector_count, value, self._smooth)

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

    # index ranges of the parts ---------------------------------------------

    def base_index_count(self) -> int:
        return (self._buffers.index_count() - self._base_index) // 2

    def top_index_count(self) -> int:
        return (self._buffers.index_count() - self._base_index) // 2

    def side_index_count(self) -> int:
        return self._base_index

    def base_start_index(self) -> int:
        return self._base_index

    def top_start_index(self) -> int:
        return self._top_index

    def __str__(self) -> str:
        b = self._buffers
        return "\n".join([
            "===== Cylinder =====",
            f"   Base Radius: {self._base_radius:g}",
            f"    Top Radius: {self._top_radius:g}",
            f"        Height: {self._height:g}",
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
            self._build_side_smooth()
        else:
            self._build_side_flat()
        self._build_caps()

    def _side_rings(self):
        """Yield (i, z, radius, t) for each ring of side vertices, bottom to top."""
        for i in range(self._stack_count + 1):
            frac = i / self._stack_count
            z = -(self._height * 0.5) + frac * self._height
            radius = self._base_radius + frac * (self._top_radius - self._base_radius)
            yield i, z, radius, 1.0 - frac

    def _side_normals(self) -> list[Vec3]:
        z_angle = math.atan2(self._base_radius - self._top_radius, self._height)
        x0 = math.cos(z_angle)
        z0 = math.sin(z_angle)
        return [(cx * x0, cy * x0, z0) for cx, cy, _ in self._circle]

    def _build_side_smooth(self) -> None:
        b = self._buffers
        normals = self._side_normals()
        sectors = self._sector_count

        for _, z, radius, t in self._side_rings():
            for j, ((cx, cy, _), normal) in enumerate(zip(self._circle, normals)):
                b.add_vertex((cx * radius, cy * radius, z), normal, (j / sectors, t))

        for i in range(self._stack_count):
            k1 = i * (sectors + 1)
            k2 = k1 + sectors + 1
            for _ in range(sectors):
                b.add_triangle(k1, k1 + 1, k2)
                b.add_triangle(k2, k1 + 1, k2 + 1)
                b.add_line(k1, k2)
                b.add_line(k2, k2 + 1)
                if i == 0:
                    b.add_line(k1, k1 + 1)
                k1 += 1
                k2 += 1

    def _build_side_flat(self) -> None:
        b = self._buffers
        sectors = self._sector_count

        rings = [
            [((cx * radius, cy * radius, z), (j / sectors, t))
             for j, (cx, cy, _) in enumerate(self._circle)]
            for _, z, radius, t in self._side_rings()
        ]

        for i, (lower, upper) in enumerate(zip(rings, rings[1:])):
            for j in range(sectors):
                v1, v2, v3, v4 = lower[j], upper[j], lower[j + 1], upper[j + 1]
                normal = face_normal(v1[0], v3[0], v2[0])
                index = b.vertex_count()
                for position, uv in (v1, v2, v3, v4):
                    b.add_vertex(position, normal, uv)
                b.add_triangle(index, index + 2, index + 1)
                b.add_triangle(index + 1, index + 2, index + 3)
                b.add_line(index, index + 1)
                b.add_line(index + 1, index + 3)
                if i == 0:
                    b.add_line(index, index + 2)

    def _build_caps(self) -> None:
        b = self._buffers
        sectors = self._sector_count
        rim = self._circle[:-1]

        self._base_index = b.index_count()
        z = -self._height * 0.5
        centre = b.add_vertex((0.0, 0.0, z), (0.0, 0.0, -1.0), (0.5, 0.5))
        for cx, cy, _ in rim:
            b.add_vertex(
                (cx * self._base_radius, cy * self._base_radius, z),
                (0.0, 0.0, -1.0),
                (-cx * 0.5 + 0.5, -cy * 0.5 + 0.5),
            )
        for i in range(sectors):
            k = centre + 1 + i
            if i < sectors - 1:
                b.add_triangle(centre, k + 1, k)
            else:
                b.add_triangle(centre, centre + 1, k)

        self._top_index = b.index_count()
        z = self._height * 0.5
        centre = b.add_vertex((0.0, 0.0, z), (0.0, 0.0, 1.0), (0.5, 0.5))
        for cx, cy, _ in rim:
            b.add_vertex(
                (cx * self._top_radius, cy * self._top_radius, z),
                (0.0, 0.0, 1.0),
                (cx * 0.5 + 0.5, -cy * 0.5 + 0.5),
            )
        for i in range(sectors):
            k = centre + 1 + i
            if i < sectors - 1:
                b.add_triangle(centre, k, k + 1)
            else:
                b.add_triangle(centre, k, centre + 1)