import math

import pytest

from wirefdf.cube import CUBE_EDGES, CubeScene, cube_vertices, perspective
from wirefdf.geometry import Point


def test_cube_vertices_layout():
    vertices = cube_vertices(1000, 400, 0xFF0000)
    assert len(vertices) == 8
    assert (vertices[0].x, vertices[0].y, vertices[0].z) == (0, 0, 400)
    assert (vertices[1].x, vertices[1].y, vertices[1].z) == (0, 0, 1400)
    assert {p.x for p in vertices} == {0, 1000}
    assert {p.color for p in vertices} == {0xFF0000}


def test_cube_edges_join_neighbours():
    vertices = cube_vertices(10, 0, 0xFFFFFF)
    for a, b in CUBE_EDGES:
        pa, pb = vertices[a], vertices[b]
        diffs = [abs(pa.x - pb.x), abs(pa.y - pb.y), abs(pa.z - pb.z)]
        assert sorted(diffs) == [0, 0, 10]


def test_perspective_divides_by_depth():
    points = [Point(10, -6, 2)]
    perspective(points, math.pi / 2)
    assert (points[0].x, points[0].y) == (5, -3)


def test_perspective_leaves_near_points():
    points = [Point(10, 20, 0)]
    perspective(points, math.pi / 2)
    assert (points[0].x, points[0].y) == (10, 20)


def test_frame_points_do_not_mutate_vertices():
    scene = CubeScene()
    before = [(p.x, p.y, p.z) for p in scene.vertices]
    scene.frame_points()
    assert [(p.x, p.y, p.z) for p in scene.vertices] == before


def test_frame_is_mirror_symmetric_at_rest():
    points = CubeScene().frame_points()
    xs = {p.x for p in points}
    ys = {p.y for p in points}
    assert all(1900 - x in xs for x in xs)
    assert all(1000 - y in ys for y in ys)


def test_step_advances_angle():
    scene = CubeScene()
    for _ in range(100):
        scene.step()
    assert scene.angle_y == pytest.approx(-0.1)
    assert scene.angle_x == 0.0


def test_render_marks_corners():
    scene = CubeScene(color=0x00FF00)
    canvas = scene.render()
    for p in scene.frame_points():
        assert canvas.get_pixel(p.x, p.y) == 0x00FF00