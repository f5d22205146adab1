#
# PROJECT: term3d
# MODULE: term3d/visibility.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#


def vertex_on_screen(cam_v, point, width: int, height: int) -> bool:
    """In front of the camera and inside [0, width) x [0, height)."""
    if point is None or cam_v.z <= 0:
        return False
    return 0 <= point.x < width and 0 <= point.y < height


def face_on_screen(indices, cam_space, screen, width: int, height: int) -> bool:
    """
    A face counts as visible if any one corner is on screen. This is a
    coarse test; the rasterizer still clips what actually gets drawn.
    Faces with an unprojectable corner (depth exactly 0) are never visible.
    """
    if any(screen[i] is None for i in indices):
        return False
    return any(vertex_on_screen(cam_space[i], screen[i], width, height)
               for i in indices)


def depth_key(indices, cam_space) -> float:
    """
    Ordering proxy: sum over axes of (sum of that coordinate over the face)^2.
    Grows with distance for small convex scenes; not a true mean depth.
    """
    return sum(sum(cam_space[i][axis] for i in indices) ** 2
               for axis in range(3))


def visible_faces(faces, cam_space, screen, width: int, height: int):
    """
    Cull and sort. Returns [(face_index, key)] farthest key first, i.e. the
    painter's draw order.
    """
    entries = []
    for n, face in enumerate(faces):
        if face_on_screen(face.indices, cam_space, screen, width, height):
            entries.append((n, depth_key(face.indices, cam_space)))

    entries.sort(key=lambda e: e[1])
    entries.reverse()
    return entries
