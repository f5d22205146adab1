#
# PROJECT: term3d
# MODULE: term3d/mesh.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

from typing import NamedTuple, Tuple

from .color import Color
from .errors import MeshError
from .math_utils import Vec3

FACE_ARITY = 4


class Face(NamedTuple):
    """A planar quad: four vertex indices and one display color."""
    indices: Tuple[int, int, int, int]
    color: Color


class Mesh:
    """
    Immutable polyhedral mesh. Vertices are world-space Vec3s, faces are
    quads. Validated once at construction.
    """
    __slots__ = ('_vertices', '_faces')

    def __init__(self, vertices, faces):
        verts = tuple(v if isinstance(v, Vec3) else Vec3(*v) for v in vertices)
        checked = []
        for n, face in enumerate(faces):
            indices, color = face
            indices = tuple(int(i) for i in indices)
            if len(indices) != FACE_ARITY:
                raise MeshError(f"face {n} has {len(indices)} vertices, expected {FACE_ARITY}")
            for i in indices:
                if i < 0 or i >= len(verts):
                    raise MeshError(f"face {n} references vertex {i}, mesh has {len(verts)}")
            if not isinstance(color, Color):
                raise MeshError(f"face {n} color must be a Color, got {color!r}")
            checked.append(Face(indices, color))
        self._vertices = verts
        self._faces = tuple(checked)

    @property
    def vertices(self):
        return self._vertices

    @property
    def faces(self):
        return self._faces

    def __repr__(self):
        return f"Mesh(vertices={len(self._vertices)}, faces={len(self._faces)})"

    @classmethod
    def cube(cls):
        """Unit cube centered at origin, one color per side."""
        return cls(CUBE_VERTICES, CUBE_FACES)


CUBE_VERTICES = (
    Vec3(-1, -1, -1), Vec3( 1, -1, -1), Vec3( 1,  1, -1), Vec3(-1,  1, -1),
    Vec3(-1, -1,  1), Vec3( 1, -1,  1), Vec3( 1,  1,  1), Vec3(-1,  1,  1),
)

CUBE_FACES = (
    ((0, 1, 2, 3), Color.RED),      # z = -1
    ((4, 5, 6, 7), Color.GREEN),    # z = +1
    ((0, 1, 5, 4), Color.BLUE),     # y = -1
    ((2, 3, 7, 6), Color.YELLOW),   # y = +1
    ((0, 3, 7, 4), Color.WHITE),    # x = -1
    ((1, 2, 6, 5), Color.MAGENTA),  # x = +1
)
