import numpy as np
import pytest

from tablescene.camera import (
    MAX_SPEED,
    MIN_SPEED,
    PITCH_LIMIT,
    SENSITIVITY,
    SPEED,
    ZOOM,
    Camera,
    CameraMovement,
)


def test_default_orientation_looks_down_negative_z():
    cam = Camera()
    assert cam.front == pytest.approx([0.0, 0.0, -1.0], abs=1e-12)
    assert cam.right == pytest.approx([1.0, 0.0, 0.0], abs=1e-12)
    assert cam.up == pytest.approx([0.0, 1.0, 0.0], abs=1e-12)


def test_defaults():
    cam = Camera((2.0, 2.0, 12.0))
    assert cam.movement_speed == SPEED
    assert cam.mouse_sensitivity == SENSITIVITY
    assert cam.zoom == ZOOM
    assert list(cam.position) == [2.0, 2.0, 12.0]


@pytest.mark.parametrize(
    "forward,backward",
    [
        (CameraMovement.FORWARD, CameraMovement.BACKWARD),
        (CameraMovement.LEFT, CameraMovement.RIGHT),
        (CameraMovement.UP, CameraMovement.DOWN),
    ],
)
def test_opposite_moves_cancel(forward, backward):
    cam = Camera((1.0, 2.0, 3.0))
    cam.process_mouse_movement(37.0, -12.0)
    start = cam.position.copy()
    cam.process_keyboard(forward, 0.4)
    assert not np.allclose(cam.position, start)
    cam.process_keyboard(backward, 0.4)
    assert cam.position == pytest.approx(start)


def test_forward_moves_along_front_by_speed_times_time():
    cam = Camera()
    cam.process_keyboard(CameraMovement.FORWARD, 2.0)
    assert cam.position == pytest.approx(cam.front * cam.movement_speed * 2.0)


def test_left_moves_against_right_vector():
    cam = Camera()
    cam.process_keyboard(CameraMovement.LEFT, 1.0)
    assert float(np.dot(cam.position, cam.right)) < 0


def test_mouse_movement_changes_yaw_and_pitch():
    cam = Camera()
    start_yaw = cam.yaw
    cam.process_mouse_movement(100.0, 50.0)
    assert cam.yaw - start_yaw == pytest.approx(100.0 * SENSITIVITY)
    assert cam.pitch == pytest.approx(50.0 * SENSITIVITY)


def test_pitch_is_clamped():
    cam = Camera()
    cam.process_mouse_movement(0.0, 10_000.0)
    assert cam.pitch == PITCH_LIMIT
    cam.process_mouse_movement(0.0, -100_000.0)
    assert cam.pitch == -PITCH_LIMIT


def test_pitch_unclamped_when_asked():
    cam = Camera()
    cam.process_mouse_movement(0.0, 1000.0, constrain_pitch=False)
    assert cam.pitch > PITCH_LIMIT


def test_vectors_stay_orthonormal():
    cam = Camera()
    cam.process_mouse_movement(321.0, -77.0)
    for v in (cam.front, cam.right, cam.up):
        assert np.linalg.norm(v) == pytest.approx(1.0)
    assert float(np.dot(cam.front, cam.right)) == pytest.approx(0.0, abs=1e-12)
    assert float(np.dot(cam.front, cam.up)) == pytest.approx(0.0, abs=1e-12)
    assert float(np.dot(cam.right, cam.up)) == pytest.approx(0.0, abs=1e-12)


def test_scroll_changes_speed_within_bounds():
    cam = Camera()
    cam.process_mouse_scroll(1.0)
    assert cam.movement_speed == pytest.approx(SPEED + 1.0)
    cam.process_mouse_scroll(-1000.0)
    assert cam.movement_speed == MIN_SPEED
    cam.process_mouse_scroll(1000.0)
    assert cam.movement_speed == MAX_SPEED


def test_view_matrix_maps_eye_to_origin():
    cam = Camera((2.0, 2.0, 12.0))
    cam.process_mouse_movement(40.0, 15.0)
    eye = np.append(cam.position, 1.0)
    assert cam.view_matrix() @ eye == pytest.approx([0.0, 0.0, 0.0, 1.0], abs=1e-9)


def test_view_matrix_puts_front_on_negative_z():
    cam = Camera((0.0, 1.0, 5.0))
    cam.process_mouse_movement(-60.0, 20.0)
    target = np.append(cam.position + cam.front, 1.0)
    result = cam.view_matrix() @ target
    assert result[:3] == pytest.approx([0.0, 0.0, -1.0], abs=1e-9)


def test_unknown_direction_raises():
    cam = Camera()
    with pytest.raises(ValueError):
        cam.process_keyboard("sideways", 1.0)