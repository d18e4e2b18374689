# tablescene

This package provides geometry and camera code for a small 3D scene. It
includes procedurally generated cylinder and sphere meshes, a
first-person camera, handling for keyboard, mouse and scroll input, and
the 4×4 matrix helpers these parts share. All of it is plain Python and
NumPy, so the output can be sent to any renderer.

## Installation

```
pip install .
```

To install and run the test suite:

```
pip install ".[test]"
pytest
```

## Meshes

`tablescene.cylinder.Cylinder` and `tablescene.sphere.Sphere` build
indexed triangle meshes. Each shape holds a `MeshBuffers` object
(from `tablescene.meshutil`) in its `buffers` property. The buffers
store:

- a position, a normal and a texture coordinate for each vertex
- triangle indices
- wireframe line indices

```python
from tablescene.cylinder import Cylinder
from tablescene.sphere import Sphere

can = Cylinder(0.27, 0.27, 0.9, 36, 1, True)
print(can)                                   # summary of parameters and counts
print(can.base_start_index(), can.top_start_index())

ball = Sphere(0.4, 36, 18, True)
print(ball.sector_count, ball.stack_count)

data = ball.buffers.interleaved              # float32: x, y, z, nx, ny, nz, s, t per vertex
indices = ball.buffers.index_array           # uint16
print(ball.buffers.vertex_size(), ball.buffers.index_size())   # sizes in bytes
```

The cylinder stands along the z axis. Its base cap is at `-height / 2`
and its top cap at `height / 2`. When the two radii differ, it forms a
truncated cone. The side triangles come first in the index list, then
the base cap, then the top cap. `side_index_count()`,
`base_start_index()`, `top_start_index()` and `base_index_count()`
give these ranges.

Values below the minimums are raised to them:

- Cylinders: at least 3 sectors and 1 stack.
- Spheres: at least 3 sectors and 2 stacks.

To rebuild a shape, you can:

- call `set(...)` with new parameters, or
- assign one of the parameter properties, such as `radius`,
  `sector_count` or `smooth`.

Setting `smooth` to `False` builds flat shading: each face gets its own
vertices with its face normal.

`tablescene.meshutil` also provides `face_normal(v1, v2, v3)` and
`unit_circle(sector_count)`. Triangle indices must fit in 16 bits. A
larger index raises `OverflowError`.

## Camera and controls

```python
from tablescene.camera import Camera, CameraMovement
from tablescene.controls import InputController, Key

camera = Camera((2.0, 2.0, 12.0), (0.0, 1.0, 0.0), -90.0, 0.0)
controls = InputController(camera, 1024, 768)

controls.process_keys({Key.W}, 0.016)        # returns True once Escape was seen
controls.mouse_moved(512.0, 384.0)
controls.scroll(1.0)

view = camera.view_matrix()
projection = controls.projection
mvp = projection @ view
```

| Input | Effect |
| --- | --- |
| W, S | Move forward, back |
| A, D | Move left, right |
| Q, E | Move up, down along the camera's up vector |
| Escape | Sets `should_close` |
| Mouse | Turns the camera (yaw and pitch) |
| Scroll wheel | Changes movement speed, kept between 1 and 50 |

Pitch stays between -89 and 89 degrees.

The P key alternates the projection. Odd presses select a perspective
projection based on the camera's `zoom`. Even presses select an
orthographic projection of the box from -5 to 5, with depth from 2
to 100. `InputController.orthographic` reports which projection is
active.

The helpers `perspective_projection(camera, width, height)` and
`ortho_projection()` build these two matrices directly.

## Matrices

`tablescene.transforms` contains helpers for column-vector 4×4
matrices:

- `perspective(fovy, aspect, near, far)`, with `fovy` in radians
- `ortho(left, right, bottom, top, near, far)`
- `look_at(eye, center, up)`
- `rotate(angle, axis)`, with `angle` in radians
- `translate(offset)`
- `scale(factors)`
- `normalize(v)`

Degenerate inputs raise `ValueError`. Examples are a zero-length
vector or an empty viewing volume.

## What this package does not do

The package does not:

- open a window or draw anything
- load textures
- provide the fixed plane, tri-case and cube meshes or a scene layout
- provide a command-line program

It produces vertex data, index data and matrices, and leaves rendering
to you.