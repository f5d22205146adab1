import math

import pytest

from term3d.camera import Camera
from term3d.math_utils import Vec3, ScreenPoint, rotate_2d
from term3d.projector import to_camera_space, perspective, project_vertices


def test_point_straight_ahead_lands_on_center():
    cam_space, screen = project_vertices([Vec3(0, 0, 5)], Camera(), 80, 24, 200.0)
    assert cam_space[0] == Vec3(0, 0, 5)
    assert screen[0] == ScreenPoint(40, 12)


def test_perspective_divide():
    p = perspective(Vec3(1, -1, 10), 40.0, 12.0, 200.0)
    assert p == ScreenPoint(60, -8)


def test_zero_depth_has_no_screen_point():
    assert perspective(Vec3(3, 3, 0), 40.0, 12.0, 200.0) is None
    _, screen = project_vertices([Vec3(0, 0, 0)], Camera(), 80, 24)
    assert screen == [None]
    # tiny but nonzero depth overflows the divide
    assert perspective(Vec3(1, 0, 1e-310), 40.0, 12.0, 200.0) is None
    assert perspective(Vec3(0, -1, -1e-310), 40.0, 12.0, 200.0) is None


def test_translation_is_camera_relative():
    cam = Camera(position=Vec3(1, 2, 3))
    assert to_camera_space(Vec3(1, 2, 8), cam) == Vec3(0, 0, 5)


def test_yaw_then_pitch_order():
    cam = Camera(position=Vec3(0.5, -1, 2), pitch=0.4, yaw=1.1)
    v = Vec3(2, 3, 7)
    x, y, z = v.x - 0.5, v.y + 1, v.z - 2
    x, z = rotate_2d((x, z), 1.1)
    y, z = rotate_2d((y, z), 0.4)
    assert tuple(to_camera_space(v, cam)) == pytest.approx((x, y, z))


def test_yaw_quarter_turn_brings_side_point_in_front():
    cam = Camera(yaw=math.pi / 2)
    v = to_camera_space(Vec3(1, 0, 0), cam)
    assert v.z == pytest.approx(1.0)
    assert v.x == pytest.approx(0.0, abs=1e-12)


def test_center_follows_display_size():
    _, screen = project_vertices([Vec3(0, 0, 5)], Camera(), 100, 40)
    assert screen[0] == ScreenPoint(50, 20)
