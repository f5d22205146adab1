#
# PROJECT: term3d
# MODULE: term3d/projector.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import math

from .math_utils import Vec3, ScreenPoint, rotate_2d


def to_camera_space(v: Vec3, camera) -> Vec3:
    """
    World -> camera space: translate by -position, then yaw on (x, z),
    then pitch on (y, z). The order matters; the result's z is depth.
    """
    x = v.x - camera.position.x
    y = v.y - camera.position.y
    z = v.z - camera.position.z
    x, z = rotate_2d((x, z), camera.yaw)
    y, z = rotate_2d((y, z), camera.pitch)
    return Vec3(x, y, z)


def perspective(v: Vec3, center_x: float, center_y: float, focal_length: float):
    """
    Perspective divide. Returns None when the point sits on (or so close to)
    the camera plane that the divide has no finite answer.
    """
    if v.z == 0:
        return None
    f = focal_length / v.z
    sx = center_x + v.x * f
    sy = center_y + v.y * f
    if not (math.isfinite(sx) and math.isfinite(sy)):
        return None
    return ScreenPoint(int(sx), int(sy))


def project_vertices(vertices, camera, width: int, height: int,
                     focal_length: float = 200.0):
    """
    Transform every vertex. Returns (camera_space, screen) lists of equal
    length; screen entries are ScreenPoint or None.
    """
    cx, cy = width / 2.0, height / 2.0
    cam_space = [to_camera_space(v, camera) for v in vertices]
    screen = [perspective(v, cx, cy, focal_length) for v in cam_space]
    return cam_space, screen
