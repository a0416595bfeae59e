"""Interactive height-map view: rising animation, rotation, zoom, panning and perspective."""

from __future__ import annotations

import dataclasses
import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import IntEnum

from wirefdf.canvas import Canvas
from wirefdf.geometry import ISO_X, ISO_Y, WINDOW_HEIGHT, WINDOW_WIDTH, Point, _trunc_div
from wirefdf.parsing import HeightMap
from wirefdf.wireframe import draw_map

VIEW_WIDTH = WINDOW_WIDTH // 2
VIEW_HEIGHT = WINDOW_HEIGHT
FILL_RATIO = 0.8
ANGLE_STEP = 0.01
SCALE_STEP = 0.01
PAN_STEP = 10
FOCAL_FACTOR = 280
TOP_VIEW_ANGLE = 3.14 / 2
ANIMATION_DIVISOR = 100
# Height changes use whole-number factors: '[' flattens the current heights
# so they rise again, ']' leaves them as they are.
FLATTEN_FACTOR = 0
KEEP_FACTOR = 1


class Key(IntEnum):
    """Key symbols the viewer reacts to."""

    MINUS = 45
    EQUAL = 61
    BRACKET_LEFT = 91
    BRACKET_RIGHT = 93
    A = 97
    D = 100
    F = 102
    P = 112
    R = 114
    S = 115
    W = 119
    ESCAPE = 65307
    LEFT = 65361
    UP = 65362
    RIGHT = 65363
    DOWN = 65364
    PAGE_UP = 65365
    PAGE_DOWN = 65366


@dataclass
class ViewPoint:
    """A vertex whose drawn height ``y`` moves towards its ``target_y``."""

    x: int
    y: int
    target_y: int
    z: int
    color: int


def _rotate_x(points: Iterable[ViewPoint], angle: float) -> None:
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    for p in points:
        p.y, p.target_y, p.z = (
            int(cos_a * p.y - sin_a * p.z),
            int(cos_a * p.target_y - sin_a * p.z),
            int(sin_a * p.y + cos_a * p.z),
        )


def _rotate_y(points: Iterable[ViewPoint], angle: float) -> None:
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    for p in points:
        p.x, p.z = int(cos_a * p.x + sin_a * p.z), int(-sin_a * p.x + cos_a * p.z)


def _rotate_z(points: Iterable[ViewPoint], angle: float) -> None:
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    for p in points:
        p.x, p.y, p.target_y = (
            int(cos_a * p.x - sin_a * p.y),
            int(sin_a * p.x + cos_a * p.y),
            int(sin_a * p.x + cos_a * p.target_y),
        )


def _shift(points: Iterable[ViewPoint], dx: int, dy: int, dtarget: int, dz: int) -> None:
    for p in points:
        p.x += dx
        p.y += dy
        p.target_y += dtarget
        p.z += dz


def _center(points: Sequence[ViewPoint]) -> tuple[int, int, int]:
    """Centre of the bounding box in x, target height and z, rounded toward zero."""
    return tuple(
        _trunc_div(max(values) + min(values), 2)
        for values in (
            [p.x for p in points],
            [p.target_y for p in points],
            [p.z for p in points],
        )
    )


def _perspective(points: Sequence[ViewPoint], focal: float) -> None:
    nearest = min(p.z for p in points)
    for p in points:
        depth = p.z + 1 + abs(nearest) if nearest <= 0 else p.z
        if p.z != 0:
            p.x = int(p.x * focal / depth)
            p.y = int(p.y * focal / depth)


class ViewState:
    """Everything the interactive viewer keeps between frames."""

    def __init__(self, heightmap: HeightMap) -> None:
        if not heightmap.points:
            raise ValueError("height map has no points")
        self.grid_width = heightmap.width
        self.grid_height = heightmap.height
        self.points = [
            ViewPoint(x=p.x, y=0, target_y=p.y, z=p.z, color=p.color)
            for p in heightmap.points
        ]
        self.base_scale: float | None = None
        self.reset()

    def reset(self) -> None:
        """Return to the isometric view with no zoom, panning or perspective."""
        self.perspective = 0
        self.offset_x = 0
        self.offset_y = 0
        self.angle_x = ISO_X
        self.angle_y = ISO_Y
        self.angle_z = 0.0
        self.scale = 0.0

    def handle_key(self, keycode: int) -> bool:
        """Apply a key press; return False when the viewer should close."""
        if keycode == Key.ESCAPE:
            return False
        if keycode == Key.UP:
            self.angle_x += ANGLE_STEP
        if keycode == Key.DOWN:
            self.angle_x -= ANGLE_STEP
        if keycode == Key.PAGE_UP:
            self.angle_z += ANGLE_STEP
        if keycode == Key.PAGE_DOWN:
            self.angle_z -= ANGLE_STEP
        if keycode == Key.LEFT:
            self.angle_y -= ANGLE_STEP
        if keycode == Key.RIGHT:
            self.angle_y += ANGLE_STEP
        if keycode == Key.EQUAL:
            self.scale += SCALE_STEP
        if keycode == Key.MINUS and self.scale + (self.base_scale or 0.0) >= SCALE_STEP:
            self.scale -= SCALE_STEP
        if keycode == Key.W:
            self.offset_y -= PAN_STEP
        if keycode == Key.S:
            self.offset_y += PAN_STEP
        if keycode == Key.D:
            self.offset_x += PAN_STEP
        if keycode == Key.A:
            self.offset_x -= PAN_STEP
        if keycode == Key.BRACKET_LEFT:
            self.change_heights(FLATTEN_FACTOR)
        if keycode == Key.BRACKET_RIGHT:
            self.change_heights(KEEP_FACTOR)
        if keycode == Key.P:
            self.perspective += 1
        if keycode == Key.R:
            self.reset()
        if keycode == Key.F:
            self.angle_x, self.angle_y, self.angle_z = TOP_VIEW_ANGLE, 0.0, 0.0
        return True

    def change_heights(self, factor: int) -> None:
        """Multiply the current drawn heights by ``factor``."""
        for p in self.points:
            p.y = int(p.y * factor)

    def step_animation(self) -> bool:
        """Move drawn heights one step towards their targets; return whether any moved."""
        targets = [p.target_y for p in self.points]
        rise = max(_trunc_div(max(0, *targets), ANIMATION_DIVISOR), 1)
        fall = min(_trunc_div(min(0, *targets), ANIMATION_DIVISOR), -1)
        moved = False
        for p in self.points:
            if p.y < p.target_y:
                p.y = min(p.y + rise, p.target_y)
                moved = True
            elif p.y > p.target_y:
                p.y = max(p.y + fall, p.target_y)
                moved = True
        return moved

    def _ensure_base_scale(self, points: Sequence[ViewPoint], width: int, height: int) -> None:
        if self.base_scale is not None:
            return
        if self.grid_width == 1 and self.grid_height == 1:
            self.base_scale = 1.0
            return
        dx = max(p.x for p in points) - min(p.x for p in points)
        dy = max(p.target_y for p in points) - min(p.target_y for p in points)
        factor = min(
            FILL_RATIO * width / dx if dx else math.inf,
            FILL_RATIO * height / dy if dy else math.inf,
        )
        if math.isinf(factor):
            raise ValueError("map has no extent to scale")
        self.base_scale = factor

    def project(self, width: int = VIEW_WIDTH, height: int = VIEW_HEIGHT) -> list[ViewPoint]:
        """Return screen points for the current frame.

        The base zoom that fits the map in the area is fixed by the first call.
        """
        points = [dataclasses.replace(p) for p in self.points]
        cx, cy, cz = _center(points)
        _shift(points, -cx, -cy, -cy, -cz)
        _rotate_y(points, self.angle_y)
        _rotate_x(points, self.angle_x)
        _rotate_z(points, self.angle_z)
        _shift(points, cx, cy, cy, cz)
        _shift(points, -cx, -cy, -cy, 0)
        if self.perspective % 2 == 1:
            self._ensure_base_scale(points, width, height)
            _perspective(points, FOCAL_FACTOR / self.base_scale)
        self._ensure_base_scale(points, width, height)
        factor = self.base_scale + self.scale
        for p in points:
            p.x = int(factor * p.x)
            p.y = int(factor * p.y)
            p.z = int(factor * p.z)
        cx, cy, _ = _center(points)
        _shift(points, width // 2 - cx, height // 2 - cy, 0, 0)
        _shift(points, self.offset_x, self.offset_y, self.offset_y, 0)
        return points

    def render(self, width: int = VIEW_WIDTH, height: int = VIEW_HEIGHT) -> Canvas:
        """Draw the current frame onto a new canvas."""
        canvas = Canvas(width, height)
        screen = [Point(p.x, p.y, p.z, p.color) for p in self.project(width, height)]
        draw_map(canvas, screen, self.grid_width, self.grid_height)
        return canvas