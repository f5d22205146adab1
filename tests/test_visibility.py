import pytest

from term3d.camera import Camera
from term3d.color import Color
from term3d.math_utils import Vec3, ScreenPoint
from term3d.mesh import Mesh, Face
from term3d.projector import project_vertices
from term3d.visibility import (vertex_on_screen, face_on_screen, depth_key,
                               visible_faces)

QUAD = (0, 1, 2, 3)


def test_vertex_must_be_in_front_and_inside():
    assert vertex_on_screen(Vec3(0, 0, 1), ScreenPoint(0, 0), 80, 24)
    assert not vertex_on_screen(Vec3(0, 0, 0), ScreenPoint(5, 5), 80, 24)
    assert not vertex_on_screen(Vec3(0, 0, -1), ScreenPoint(5, 5), 80, 24)
    assert not vertex_on_screen(Vec3(0, 0, 1), ScreenPoint(80, 5), 80, 24)
    assert not vertex_on_screen(Vec3(0, 0, 1), ScreenPoint(5, 24), 80, 24)
    assert not vertex_on_screen(Vec3(0, 0, 1), ScreenPoint(-1, 5), 80, 24)
    assert not vertex_on_screen(Vec3(0, 0, 1), None, 80, 24)


def test_face_with_all_corners_off_screen_is_culled():
    cam_space = [Vec3(0, 0, 1)] * 4
    screen = [ScreenPoint(-5, -5), ScreenPoint(100, -5),
              ScreenPoint(100, 50), ScreenPoint(-5, 50)]
    assert not face_on_screen(QUAD, cam_space, screen, 80, 24)


def test_face_behind_camera_is_culled():
    cam_space = [Vec3(0, 0, -1), Vec3(0, 0, 0), Vec3(0, 0, -2), Vec3(0, 0, -3)]
    screen = [ScreenPoint(10, 10)] * 4
    assert not face_on_screen(QUAD, cam_space, screen, 80, 24)


def test_one_visible_corner_is_enough():
    cam_space = [Vec3(0, 0, 1)] * 4
    screen = [ScreenPoint(-5, -5), ScreenPoint(100, -5),
              ScreenPoint(10, 10), ScreenPoint(-5, 50)]
    assert face_on_screen(QUAD, cam_space, screen, 80, 24)


def test_face_with_unprojectable_corner_is_culled():
    cam_space = [Vec3(0, 0, 1)] * 3 + [Vec3(0, 0, 0)]
    screen = [ScreenPoint(10, 10)] * 3 + [None]
    assert not face_on_screen(QUAD, cam_space, screen, 80, 24)


def test_depth_key_is_sum_of_squared_axis_sums():
    cam_space = [Vec3(1, 0, 2), Vec3(1, 1, 2), Vec3(0, 1, 3), Vec3(0, 0, 3)]
    # axis sums: x=2, y=2, z=10
    assert depth_key(QUAD, cam_space) == pytest.approx(4 + 4 + 100)


def test_cube_faces_sorted_far_to_near():
    mesh = Mesh.cube()
    cam = Camera(position=Vec3(0, 0, -20))
    cam_space, screen = project_vertices(mesh.vertices, cam, 80, 24)
    order = visible_faces(mesh.faces, cam_space, screen, 80, 24)

    assert len(order) == 6
    keys = [k for _, k in order]
    assert keys == sorted(keys, reverse=True)
    # back face (z=+1) is farthest, front face (z=-1) is drawn last
    assert mesh.faces[order[0][0]].color is Color.GREEN
    assert mesh.faces[order[-1][0]].color is Color.RED
    assert order[0][1] == pytest.approx(84 ** 2)
    assert order[-1][1] == pytest.approx(76 ** 2)


def test_faces_behind_camera_are_dropped():
    mesh = Mesh.cube()
    cam = Camera(position=Vec3(0, 0, 20))
    cam_space, screen = project_vertices(mesh.vertices, cam, 80, 24)
    assert visible_faces(mesh.faces, cam_space, screen, 80, 24) == []


def test_only_visible_faces_are_keyed():
    faces = [Face(QUAD, Color.RED), Face((4, 5, 6, 7), Color.BLUE)]
    cam_space = [Vec3(0, 0, 1)] * 8
    screen = [ScreenPoint(10, 10)] * 4 + [ScreenPoint(-1, -1)] * 4
    order = visible_faces(faces, cam_space, screen, 80, 24)
    assert [n for n, _ in order] == [0]
