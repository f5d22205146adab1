#
# PROJECT: term3d
# MODULE: term3d/math_utils.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import functools
import math


def rotate_2d(point, rad: float):
    """Rotate an (x, y) pair by `rad` radians around the origin."""
    x, y = point
    s, c = math.sin(rad), math.cos(rad)
    return (x * c - y * s, y * c + x * s)


def perp_dot(a, b):
    """2D cross product of (a.x, a.y) and (b.x, b.y)."""
    return a[0] * b[1] - a[1] * b[0]


class Vec3:
    """Immutable 3-component vector."""
    __slots__ = ('x', 'y', 'z')

    def __init__(self, x: float, y: float, z: float):
        object.__setattr__(self, 'x', float(x))
        object.__setattr__(self, 'y', float(y))
        object.__setattr__(self, 'z', float(z))

    def __setattr__(self, name, value):
        raise AttributeError("Vec3 is immutable")

    def __repr__(self):
        return f"Vec3({self.x:.2f}, {self.y:.2f}, {self.z:.2f})"

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index):
        if index == 0: return self.x
        if index == 1: return self.y
        if index == 2: return self.z
        raise IndexError("Vec3 index out of range")

    def __eq__(self, other):
        if isinstance(other, Vec3):
            return (self.x, self.y, self.z) == (other.x, other.y, other.z)
        return NotImplemented

    def __hash__(self):
        return hash((self.x, self.y, self.z))

    def __add__(self, other):
        if isinstance(other, Vec3):
            return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vec3):
            return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def __mul__(self, scalar):
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def replace(self, x=None, y=None, z=None) -> 'Vec3':
        """Copy with some components swapped out."""
        return Vec3(self.x if x is None else x,
                    self.y if y is None else y,
                    self.z if z is None else z)


@functools.total_ordering
class ScreenPoint:
    """Integer character-cell coordinate. Compares by (x, y) only."""
    __slots__ = ('x', 'y')

    def __init__(self, x: int, y: int):
        object.__setattr__(self, 'x', int(x))
        object.__setattr__(self, 'y', int(y))

    def __setattr__(self, name, value):
        raise AttributeError("ScreenPoint is immutable")

    def __repr__(self):
        return f"ScreenPoint({self.x}, {self.y})"

    def __iter__(self):
        yield self.x
        yield self.y

    def __getitem__(self, index):
        if index == 0: return self.x
        if index == 1: return self.y
        raise IndexError("ScreenPoint index out of range")

    def _key(self):
        return (self.x, self.y)

    def __eq__(self, other):
        if isinstance(other, ScreenPoint):
            return self._key() == other._key()
        return NotImplemented

    def __lt__(self, other):
        if isinstance(other, ScreenPoint):
            return self._key() < other._key()
        return NotImplemented

    def __hash__(self):
        return hash(self._key())

    def __sub__(self, other):
        if isinstance(other, ScreenPoint):
            return ScreenPoint(self.x - other.x, self.y - other.y)
        return NotImplemented
