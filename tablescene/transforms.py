"""4x4 transformation matrices for column vectors (M @ v)."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np


def normalize(v: Sequence[float]) -> np.ndarray:
    """Return v scaled to unit length."""
    arr = np.asarray(v, dtype=float)
    length = float(np.linalg.norm(arr))
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return arr / length


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed perspective projection mapping depth to [-1, 1]; fovy in radians."""
    if aspect == 0 or near == far:
        raise ValueError("degenerate perspective frustum")
    f = 1.0 / math.tan(fovy / 2.0)
    m = np.zeros((4, 4))
    m[0, 0] = f / aspect
    m[1, 1] = f
    m[2, 2] = -(far + near) / (far - near)
    m[2, 3] = -(2.0 * far * near) / (far - near)
    m[3, 2] = -1.0
    return m


def ortho(left: float, right: float, bottom: float, top: float,
          near: float, far: float) -> np.ndarray:
    """Right-handed orthographic projection mapping the box to [-1, 1] on each axis."""
    if left == right or bottom == top or near == far:
        raise ValueError("degenerate orthographic volume")
    m = np.identity(4)
    m[0, 0] = 2.0 / (right - left)
    m[1, 1] = 2.0 / (top - bottom)
    m[2, 2] = -2.0 / (far - near)
    m[0, 3] = -(right + left) / (right - left)
    m[1, 3] = -(top + bottom) / (top - bottom)
    m[2, 3] = -(far + near) / (far - near)
    return m


def look_at(eye: Sequence[float], center: Sequence[float],
            up: Sequence[float]) -> np.ndarray:
    """Right-handed view matrix looking from eye towards center."""
    eye_v = np.asarray(eye, dtype=float)
    f = normalize(np.asarray(center, dtype=float) - eye_v)
    s = normalize(np.cross(f, np.asarray(up, dtype=float)))
    u = np.cross(s, f)
    m = np.identity(4)
    m[0, :3] = s
    m[1, :3] = u
    m[2, :3] = -f
    m[0, 3] = -float(np.dot(s, eye_v))
    m[1, 3] = -float(np.dot(u, eye_v))
    m[2, 3] = float(np.dot(f, eye_v))
    return m


def rotate(angle: float, axis: Sequence[float]) -> np.ndarray:
    """Rotation by angle radians about axis (normalized first)."""
    x, y, z = normalize(axis)
    c = math.cos(angle)
    s = math.sin(angle)
    t = 1.0 - c
    m = np.identity(4)
    m[:3, :3] = [
        [t * x * x + c, t * x * y - s * z, t * x * z + s * y],
        [t * x * y + s * z, t * y * y + c, t * y * z - s * x],
        [t * x * z - s * y, t * y * z + s * x, t * z * z + c],
    ]
    return m


def translate(offset: Sequence[float]) -> np.ndarray:
    """Translation by offset."""
    m = np.identity(4)
    m[:3, 3] = np.asarray(offset, dtype=float)
    return m


def scale(factors: Sequence[float]) -> np.ndarray:
    """Scaling by per-axis factors; a single number scales uniformly."""
    arr = np.broadcast_to(np.asarray(factors, dtype=float), (3,))
    m = np.identity(4)
    m[0, 0], m[1, 1], m[2, 2] = arr
    return m