import math

import pytest

from tablescene.meshutil import MeshBuffers, face_normal, unit_circle


def _length(v):
    return math.sqrt(sum(c * c for c in v))


def test_face_normal_xy_triangle_points_up():
    n = face_normal((0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0))
    assert n == pytest.approx((0.0, 0.0, 1.0))


def test_face_normal_reversed_winding_flips():
    a, b, c = (0.0, 0.0, 0.0), (2.0, 1.0, 0.5), (-1.0, 3.0, 2.0)
    n1 = face_normal(a, b, c)
    n2 = face_normal(a, c, b)
    assert n1 == pytest.approx(tuple(-x for x in n2))


def test_face_normal_is_unit_and_perpendicular():
    a, b, c = (1.0, 2.0, 3.0), (4.0, -1.0, 0.5), (0.0, 5.0, -2.0)
    n = face_normal(a, b, c)
    assert _length(n) == pytest.approx(1.0)
    e1 = tuple(q - p for p, q in zip(a, b))
    e2 = tuple(q - p for p, q in zip(a, c))
    assert sum(x * y for x, y in zip(n, e1)) == pytest.approx(0.0, abs=1e-9)
    assert sum(x * y for x, y in zip(n, e2)) == pytest.approx(0.0, abs=1e-9)


def test_face_normal_degenerate_is_zero():
    n = face_normal((0.0, 0.0, 0.0), (1.0, 1.0, 1.0), (2.0, 2.0, 2.0))
    assert n == (0.0, 0.0, 0.0)


@pytest.mark.parametrize("sectors", [3, 4, 36])
def test_unit_circle_points(sectors):
    points = unit_circle(sectors)
    assert len(points) == sectors + 1
    assert points[0] == pytest.approx((1.0, 0.0, 0.0))
    assert points[-1] == pytest.approx(points[0], abs=1e-9)
    for x, y, z in points:
        assert math.hypot(x, y) == pytest.approx(1.0)
        assert z == 0.0


def test_unit_circle_quarter_turn():
    points = unit_circle(4)
    assert points[1] == pytest.approx((0.0, 1.0, 0.0), abs=1e-12)


def test_unit_circle_rejects_zero():
    with pytest.raises(ValueError):
        unit_circle(0)


def _triangle_mesh():
    mesh = MeshBuffers()
    mesh.add_vertex((0, 0, 0), (0, 0, 1), (0, 0))
    mesh.add_vertex((1, 0, 0), (0, 0, 1), (1, 0))
    mesh.add_vertex((0, 1, 0), (0, 0, 1), (0, 1))
    mesh.add_triangle(0, 1, 2)
    mesh.add_line(0, 1)
    return mesh


def test_add_vertex_returns_sequential_indices():
    mesh = MeshBuffers()
    first = mesh.add_vertex((0, 0, 0), (0, 0, 1), (0, 0))
    second = mesh.add_vertex((1, 0, 0), (0, 0, 1), (1, 0))
    assert (first, second) == (0, 1)


def test_counts():
    mesh = _triangle_mesh()
    assert mesh.vertex_count() == 3
    assert mesh.normal_count() == 3
    assert mesh.tex_coord_count() == 3
    assert mesh.index_count() == 3
    assert mesh.triangle_count() == 1
    assert mesh.line_index_count() == 2


def test_sizes_follow_stride_and_short_indices():
    mesh = _triangle_mesh()
    assert mesh.vertex_size() == 32 * mesh.vertex_count()
    assert mesh.index_size() == 2 * mesh.index_count()


def test_interleaved_layout():
    mesh = _triangle_mesh()
    data = mesh.interleaved
    assert data.shape == (3 * 8,)
    assert data.nbytes == mesh.vertex_size()
    second = data[8:16].tolist()
    assert second == [1.0, 0.0, 0.0, 0.0, 0.0, 1.0, 1.0, 0.0]


def test_index_array_round_trip():
    mesh = _triangle_mesh()
    arr = mesh.index_array
    assert arr.tolist() == mesh.indices
    assert arr.nbytes == mesh.index_size()


def test_add_triangle_rejects_out_of_range_index():
    mesh = MeshBuffers()
    with pytest.raises(OverflowError):
        mesh.add_triangle(0, 1, 70000)
    assert mesh.index_count() == 0


def test_add_triangle_rejects_negative_index():
    mesh = MeshBuffers()
    with pytest.raises(OverflowError):
        mesh.add_triangle(-1, 0, 1)


def test_clear_empties_everything():
    mesh = _triangle_mesh()
    mesh.clear()
    assert mesh.vertex_count() == 0
    assert mesh.index_count() == 0
    assert mesh.line_index_count() == 0
    assert mesh.vertex_size() == 0
    assert mesh.interleaved.size == 0