"""An in-memory pixel buffer with gradient line drawing."""

from __future__ import annotations

import sys
from array import array
from collections.abc import Iterator

from wirefdf.coloring import gradient_color
from wirefdf.geometry import Point

_PIXEL_MASK = 0xFFFFFFFF


def line_pixels(a: Point, b: Point) -> Iterator[tuple[int, int, int]]:
    """Yield ``(x, y, color)`` for each pixel of the line from ``a`` to ``b``.

    The colour fades from ``a.color`` towards ``b.color``; the last pixel is
    always ``b`` in its own colour.
    """
    dx, dy = abs(b.x - a.x), abs(b.y - a.y)
    sx = 1 if b.x > a.x else -1
    sy = 1 if b.y > a.y else -1
    steps = max(dx, dy)
    err = dx - dy
    x, y = a.x, a.y
    index = 0
    while x != b.x or y != b.y:
        yield x, y, gradient_color(steps, index, a.color, b.color)
        err2 = 2 * err
        if err2 > -dy:
            err -= dy
            x += sx
        if err2 < dx:
            err += dx
            y += sy
        index += 1
    yield b.x, b.y, b.color


class Canvas:
    """A width x height grid of packed 32-bit colours, initially black."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid canvas size {width}x{height}")
        self.width = width
        self.height = height
        self._pixels = array("I", bytes(4 * width * height))

    def _contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel; coordinates outside the canvas are ignored."""
        if self._contains(x, y):
            self._pixels[y * self.width + x] = color & _PIXEL_MASK

    def get_pixel(self, x: int, y: int) -> int:
        """Return the colour at ``(x, y)``; raises IndexError outside the canvas."""
        if not self._contains(x, y):
            raise IndexError(f"pixel ({x}, {y}) is outside the canvas")
        return self._pixels[y * self.width + x]

    def clear(self) -> None:
        """Reset every pixel to black."""
        self._pixels = array("I", bytes(4 * self.width * self.height))

    def draw_line(self, a: Point, b: Point) -> None:
        """Draw a colour-gradient line from ``a`` to ``b``, clipped to the canvas."""
        for x, y, color in line_pixels(a, b):
            self.put_pixel(x, y, color)

    def to_bytes(self) -> bytes:
        """Return the pixels row by row as little-endian 32-bit values (B, G, R, 0)."""
        pixels = array("I", self._pixels)
        if sys.byteorder == "big":
            pixels.byteswap()
        return pixels.tobytes()