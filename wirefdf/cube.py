"""A spinning wireframe cube seen in perspective."""

from __future__ import annotations

import dataclasses
import math
from collections.abc import Iterable, Sequence

from wirefdf.canvas import Canvas
from wirefdf.geometry import (
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    Point,
    _trunc_div,
    rotate_x,
    rotate_y,
    rotate_z,
)

DEFAULT_FOV = 3.14 / 150.0
SCREEN_OFFSET = (950, 500)
ANGLE_STEP = 0.001
CUBE_EDGES = (
    (0, 1), (1, 2), (2, 3), (3, 0),
    (4, 5), (5, 6), (6, 7), (7, 4),
    (0, 4), (1, 5), (2, 6), (3, 7),
)


def cube_vertices(size: int = 1000, depth: int = 400, color: int = 0xFF0000) -> list[Point]:
    """Return the eight corners of an axis-aligned cube whose near face sits at ``depth``."""
    corners = (
        (0, 0, 0), (0, 0, size), (size, 0, size), (size, 0, 0),
        (0, size, 0), (0, size, size), (size, size, size), (size, size, 0),
    )
    return [Point(x, y, z + depth, color) for x, y, z in corners]


def perspective(points: Iterable[Point], fov: float = DEFAULT_FOV) -> None:
    """Project points in place; points nearer than the focal length stay as they are."""
    focal = 1 / math.tan(fov / 2)
    for p in points:
        if p.z >= focal:
            p.x = int(p.x * focal / p.z)
            p.y = int(p.y * focal / p.z)


def _shift(points: Iterable[Point], dx: int, dy: int, dz: int) -> None:
    for p in points:
        p.x += dx
        p.y += dy
        p.z += dz


def _center3(points: Sequence[Point]) -> tuple[int, int, int]:
    return tuple(
        _trunc_div(max(values) + min(values), 2)
        for values in (
            [p.x for p in points],
            [p.y for p in points],
            [p.z for p in points],
        )
    )


class CubeScene:
    """A cube turning about its own centre, one small step per frame."""

    def __init__(self, size: int = 1000, depth: int = 400, color: int = 0xFF0000) -> None:
        self.vertices = cube_vertices(size, depth, color)
        self.angle_x = 0.0
        self.angle_y = 0.0
        self.angle_z = 0.0

    def frame_points(self) -> list[Point]:
        """Return the screen positions of the corners for the current angles."""
        points = [dataclasses.replace(p) for p in self.vertices]
        cx, cy, cz = _center3(points)
        _shift(points, -cx, -cy, -cz)
        rotate_y(points, self.angle_y)
        rotate_x(points, self.angle_x)
        rotate_z(points, self.angle_z)
        _shift(points, cx, cy, cz)
        _shift(points, -cx, -cy, 0)
        perspective(points)
        _shift(points, SCREEN_OFFSET[0], SCREEN_OFFSET[1], 0)
        return points

    def render(self, width: int = WINDOW_WIDTH, height: int = WINDOW_HEIGHT) -> Canvas:
        """Draw the current frame onto a new canvas."""
        canvas = Canvas(width, height)
        points = self.frame_points()
        for start, end in CUBE_EDGES:
            canvas.draw_line(points[start], points[end])
        return canvas

    def step(self) -> None:
        """Advance the spin by one frame."""
        self.angle_y -= ANGLE_STEP