"""Keyboard, mouse and scroll handling for the scene viewer."""

from __future__ import annotations

import logging
import math
from enum import Enum, auto
from typing import Iterable

import numpy as np

from .camera import Camera, CameraMovement
from .transforms import ortho, perspective

log = logging.getLogger(__name__)

#: Near and far clipping planes of the perspective view.
PERSPECTIVE_NEAR = 0.1
PERSPECTIVE_FAR = 100.0

#: Viewing box of the orthographic view: left, right, bottom, top, near, far.
ORTHO_BOX = (-5.0, 5.0, -5.0, 5.0, 2.0, 100.0)


class Key(Enum):
    """Keys the viewer reacts to."""

    ESCAPE = auto()
    W = auto()
    S = auto()
    A = auto()
    D = auto()
    Q = auto()
    E = auto()
    P = auto()


_MOVEMENT_KEYS = (
    (Key.W, CameraMovement.FORWARD),
    (Key.S, CameraMovement.BACKWARD),
    (Key.A, CameraMovement.LEFT),
    (Key.D, CameraMovement.RIGHT),
    (Key.Q, CameraMovement.UP),
    (Key.E, CameraMovement.DOWN),
)


def perspective_projection(camera: Camera, width: int, height: int) -> np.ndarray:
    """Perspective projection using the camera's zoom as field of view."""
    if width <= 0 or height <= 0:
        raise ValueError(f"window size must be positive, got {width}x{height}")
    return perspective(
        math.radians(camera.zoom), width / height, PERSPECTIVE_NEAR, PERSPECTIVE_FAR
    )


def ortho_projection() -> np.ndarray:
    """Orthographic projection of the fixed viewing box."""
    return ortho(*ORTHO_BOX)


class InputController:
    """Turns per-frame input into camera motion and projection changes."""

    def __init__(self, camera: Camera, width: int = 1024, height: int = 768) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"window size must be positive, got {width}x{height}")
        self.camera = camera
        self.width = width
        self.height = height
        self.last_x = width / 2.0
        self.last_y = height / 2.0
        self.first_mouse = True
        self.toggle_count = 0
        self.should_close = False
        self._projection = perspective_projection(camera, width, height)

    @property
    def projection(self) -> np.ndarray:
        """The current projection matrix."""
        return self._projection

    @property
    def orthographic(self) -> bool:
        """Whether the orthographic view is active."""
        return self.toggle_count % 2 == 0 and self.toggle_count > 0

    def process_keys(self, pressed: Iterable[Key], delta_time: float) -> bool:
        """Handle the keys held in this frame; return whether the viewer should close."""
        keys = set(pressed)

        if Key.ESCAPE in keys:
            self.should_close = True

        for key, movement in _MOVEMENT_KEYS:
            if key in keys:
                self.camera.process_keyboard(movement, delta_time)

        if Key.P in keys:
            if self.toggle_count % 2:
                self._projection = ortho_projection()
                log.debug("orthographic view on")
            else:
                self._projection = perspective_projection(
                    self.camera, self.width, self.height
                )
                log.debug("perspective view on")
            self.toggle_count += 1

        return self.should_close

    def mouse_moved(self, xpos: float, ypos: float) -> None:
        """Turn the camera by the cursor's movement since the last call."""
        if self.first_mouse:
            self.last_x = xpos
            self.last_y = ypos
            self.first_mouse = False

        xoffset = xpos - self.last_x
        yoffset = self.last_y - ypos  # screen y grows downwards

        self.last_x = xpos
        self.last_y = ypos
        self.camera.process_mouse_movement(xoffset, yoffset)

    def scroll(self, yoffset: float) -> None:
        """Change the camera's movement speed by the wheel offset."""
        self.camera.process_mouse_scroll(yoffset)