"""Points and the in-place transforms that place a wireframe on screen."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

WINDOW_WIDTH = 1920
WINDOW_HEIGHT = 1020
ISO_Y = 0.785398
ISO_X = 0.615472907
HIGH_COLOR = 0xFF4400
LOW_COLOR = 0x00A2FF
DEFAULT_COLOR = 0xFFFFFF


@dataclass
class Point:
    """A vertex with integer coordinates and a packed 0xRRGGBB colour."""

    x: int
    y: int
    z: int = 0
    color: int = DEFAULT_COLOR


def _trunc_div(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def rotate_x(points: Iterable[Point], angle: float) -> None:
    """Rotate points about the x axis, in place."""
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    for p in points:
        p.y, p.z = int(cos_a * p.y - sin_a * p.z), int(sin_a * p.y + cos_a * p.z)


def rotate_y(points: Iterable[Point], angle: float) -> None:
    """Rotate points about the y axis, in place."""
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    for p in points:
        p.x, p.z = int(cos_a * p.x + sin_a * p.z), int(-sin_a * p.x + cos_a * p.z)


def rotate_z(points: Iterable[Point], angle: float) -> None:
    """Rotate points about the z axis, in place."""
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    for p in points:
        p.x, p.y = int(cos_a * p.x - sin_a * p.y), int(sin_a * p.x + cos_a * p.y)


def isometric(points: Sequence[Point]) -> None:
    """Apply the isometric view: a turn about y, then a tilt about x."""
    rotate_y(points, ISO_Y)
    rotate_x(points, ISO_X)


def translate(points: Iterable[Point], dx: int, dy: int) -> None:
    """Shift points on the screen plane, in place."""
    for p in points:
        p.x += dx
        p.y += dy


def scale(points: Iterable[Point], factor: float) -> None:
    """Multiply every coordinate by ``factor``, truncating to integers."""
    for p in points:
        p.x = int(p.x * factor)
        p.y = int(p.y * factor)
        p.z = int(p.z * factor)


def _require(points: Sequence[Point]) -> None:
    if not points:
        raise ValueError("no points")


def bounds_min(points: Sequence[Point]) -> tuple[int, int]:
    """Return the smallest x and y among the points."""
    _require(points)
    return min(p.x for p in points), min(p.y for p in points)


def bounds_max(points: Sequence[Point]) -> tuple[int, int]:
    """Return the largest x and y among the points."""
    _require(points)
    return max(p.x for p in points), max(p.y for p in points)


def center(points: Sequence[Point]) -> tuple[int, int]:
    """Return the centre of the bounding box, rounded toward zero."""
    (min_x, min_y), (max_x, max_y) = bounds_min(points), bounds_max(points)
    return _trunc_div(max_x + min_x, 2), _trunc_div(max_y + min_y, 2)


def translate_to_center(points: Sequence[Point], width: int, height: int) -> None:
    """Move the points so their bounding box is centred in a width x height area."""
    cx, cy = center(points)
    translate(points, _trunc_div(width, 2) - cx, _trunc_div(height, 2) - cy)


def fit_scale(points: Sequence[Point], width: int, height: int, ratio: float) -> float:
    """Scale points so they fill ``ratio`` of the area; return the factor used.

    A single point keeps a factor of 1. Raises ValueError when several points
    have no extent at all.
    """
    (min_x, min_y), (max_x, max_y) = bounds_min(points), bounds_max(points)
    if len(points) == 1:
        factor = 1.0
    else:
        spans = [(max_x - min_x, width), (max_y - min_y, height)]
        candidates = [ratio * size / span for span, size in spans if span]
        if not candidates:
            raise ValueError("points have no extent to scale")
        factor = min(candidates)
    scale(points, factor)
    return factor