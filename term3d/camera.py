#
# PROJECT: term3d
# MODULE: term3d/camera.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import math

from .events import Key
from .math_utils import Vec3


class Camera:
    """
    First-person camera: a world position plus pitch/yaw angles (radians).

    Only update() and the game hook mutate it. Angles are not wrapped.
    """
    __slots__ = ('position', 'pitch', 'yaw', 'speed')

    def __init__(self, position=None, pitch: float = 0.0, yaw: float = 0.0,
                 speed: float = 10.0):
        self.position = position if position is not None else Vec3(0, 0, 0)
        self.pitch = pitch
        self.yaw = yaw
        self.speed = speed       # units (or radians) per second

    def __repr__(self):
        return f"Camera({self.position!r}, pitch={self.pitch:.2f}, yaw={self.yaw:.2f})"

    def heading(self, step: float):
        """Horizontal (dx, dz) of a forward step of length `step` at current yaw."""
        return (step * math.sin(self.yaw), step * math.cos(self.yaw))

    def update(self, delta: float, key):
        """Apply one input event scaled by the elapsed time. None is a no-op."""
        if key is None:
            return
        s = self.speed * delta
        p = self.position

        if key is Key.MOVE_UP:
            self.position = p.replace(y=p.y + s)
        elif key is Key.MOVE_DOWN:
            self.position = p.replace(y=p.y - s)
        elif key in (Key.FORWARD, Key.BACKWARD, Key.STRAFE_LEFT, Key.STRAFE_RIGHT):
            dx, dz = self.heading(s)
            if key is Key.FORWARD:
                self.position = p.replace(x=p.x + dx, z=p.z + dz)
            elif key is Key.BACKWARD:
                self.position = p.replace(x=p.x - dx, z=p.z - dz)
            elif key is Key.STRAFE_LEFT:
                self.position = p.replace(x=p.x - dz, z=p.z + dx)
            else:
                self.position = p.replace(x=p.x + dz, z=p.z - dx)
        elif key is Key.LOOK_UP:
            self.pitch -= s
        elif key is Key.LOOK_DOWN:
            self.pitch += s
        elif key is Key.LOOK_LEFT:
            self.yaw -= s
        elif key is Key.LOOK_RIGHT:
            self.yaw += s
