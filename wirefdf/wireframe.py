"""Projecting a height map to the screen and drawing its grid."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterator, Sequence

from wirefdf.canvas import Canvas
from wirefdf.geometry import (
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    Point,
    fit_scale,
    isometric,
    translate_to_center,
)
from wirefdf.parsing import HeightMap

ESCAPE_KEY = 65307
FILL_RATIO = 0.9


def edges(width: int, height: int) -> Iterator[tuple[int, int]]:
    """Yield index pairs joining each grid point to its right and lower neighbours."""
    for x in range(width):
        for y in range(height):
            here = y * width + x
            right = here + 1
            below = (y + 1) * width + x
            if y < height - 1 and x < width - 1:
                yield here, right
                yield here, below
            elif y < height - 1 or x < width - 1:
                if x == width - 1:
                    yield here, below
                if y == height - 1:
                    yield here, right


def draw_map(canvas: Canvas, points: Sequence[Point], width: int, height: int) -> None:
    """Draw the grid of ``points`` (``width`` per row) onto ``canvas``."""
    if width == 1 and height == 1:
        only = points[0]
        canvas.put_pixel(only.x, only.y, only.color)
    for start, end in edges(width, height):
        canvas.draw_line(points[start], points[end])


def project(
    heightmap: HeightMap, width: int = WINDOW_WIDTH, height: int = WINDOW_HEIGHT
) -> list[Point]:
    """Return screen points for the map: isometric, scaled to fit and centred."""
    points = [dataclasses.replace(p) for p in heightmap.points]
    isometric(points)
    fit_scale(points, width, height, FILL_RATIO)
    translate_to_center(points, width, height)
    return points


def render(
    heightmap: HeightMap, width: int = WINDOW_WIDTH, height: int = WINDOW_HEIGHT
) -> Canvas:
    """Draw the projected map onto a new canvas of the given size."""
    canvas = Canvas(width, height)
    draw_map(canvas, project(heightmap, width, height), heightmap.width, heightmap.height)
    return canvas


def is_quit_key(keycode: int) -> bool:
    """Tell whether the key code is the one that closes the viewer."""
    return keycode == ESCAPE_KEY