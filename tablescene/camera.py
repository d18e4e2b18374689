"""Fly-through camera driven by keyboard, mouse movement and the scroll wheel."""

from __future__ import annotations

import math
from enum import Enum, auto
from typing import Sequence

import numpy as np

from .transforms import look_at, normalize

#: Default yaw in degrees; -90 looks down the negative z axis.
YAW = -90.0
#: Default pitch in degrees.
PITCH = 0.0
#: Default movement speed in units per second.
SPEED = 2.5
#: Degrees of rotation per unit of mouse offset.
SENSITIVITY = 0.1
#: Field of view in degrees.
ZOOM = 45.0

#: Pitch is kept inside this many degrees of straight up or down.
PITCH_LIMIT = 89.0
#: Bounds of the movement speed set with the scroll wheel.
MIN_SPEED = 1.0
MAX_SPEED = 50.0


class CameraMovement(Enum):
    """Directions the camera can be moved in."""

    FORWARD = auto()
    BACKWARD = auto()
    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()


class Camera:
    """Camera that keeps its orientation as yaw and pitch angles in degrees."""

    def __init__(
        self,
        position: Sequence[float] = (0.0, 0.0, 0.0),
        up: Sequence[float] = (0.0, 1.0, 0.0),
        yaw: float = YAW,
        pitch: float = PITCH,
    ) -> None:
        self.position = np.asarray(position, dtype=float).copy()
        self.world_up = np.asarray(up, dtype=float).copy()
        self.yaw = float(yaw)
        self.pitch = float(pitch)
        self.movement_speed = SPEED
        self.mouse_sensitivity = SENSITIVITY
        self.zoom = ZOOM
        self.front = np.array([0.0, 0.0, -1.0])
        self.right = np.array([1.0, 0.0, 0.0])
        self.up = np.array([0.0, 1.0, 0.0])
        self._update_vectors()

    def view_matrix(self) -> np.ndarray:
        """Return the view matrix looking along the front vector."""
        return look_at(self.position, self.position + self.front, self.up)

    def process_keyboard(self, direction: CameraMovement, delta_time: float) -> None:
        """Move the camera in a direction for delta_time seconds."""
        velocity = self.movement_speed * delta_time
        if direction is CameraMovement.FORWARD:
            self.position = self.position + self.front * velocity
        elif direction is CameraMovement.BACKWARD:
            self.position = self.position - self.front * velocity
        elif direction is CameraMovement.LEFT:
            self.position = self.position - self.right * velocity
        elif direction is CameraMovement.RIGHT:
            self.position = self.position + self.right * velocity
        elif direction is CameraMovement.UP:
            self.position = self.position + self.up * velocity
        elif direction is CameraMovement.DOWN:
            self.position = self.position - self.up * velocity
        else:
            raise ValueError(f"unknown camera movement: {direction!r}")

    def process_mouse_movement(
        self, xoffset: float, yoffset: float, constrain_pitch: bool = True
    ) -> None:
        """Turn the camera by a mouse offset; pitch is clamped unless told otherwise."""
        self.yaw += xoffset * self.mouse_sensitivity
        self.pitch += yoffset * self.mouse_sensitivity
        if constrain_pitch:
            self.pitch = min(max(self.pitch, -PITCH_LIMIT), PITCH_LIMIT)
        self._update_vectors()

    def process_mouse_scroll(self, yoffset: float) -> None:
        """Change the movement speed by the scroll offset, within its bounds."""
        self.movement_speed = min(
            max(self.movement_speed + yoffset, MIN_SPEED), MAX_SPEED
        )

    def _update_vectors(self) -> None:
        yaw = math.radians(self.yaw)
        pitch = math.radians(self.pitch)
        front = (
            math.cos(yaw) * math.cos(pitch),
            math.sin(pitch),
            math.sin(yaw) * math.cos(pitch),
        )
        self.front = normalize(front)
        self.right = normalize(np.cross(self.front, self.world_up))
        self.up = normalize(np.cross(self.right, self.front))