"""Colour channel helpers and linear colour gradients for line drawing."""

from __future__ import annotations

_SHIFTS = {"r": 16, "g": 8}


def channel(rgb: int, name: str) -> int:
    """Return one 8-bit channel of a packed 0xRRGGBB colour.

    ``name`` is ``"r"`` or ``"g"``; any other name selects blue.
    """
    return (rgb >> _SHIFTS.get(name, 0)) & 0xFF


def color_distance(color1: int, color2: int) -> tuple[int, int, int]:
    """Return the per-channel difference ``color1 - color2`` as (r, g, b)."""
    return tuple(channel(color1, name) - channel(color2, name) for name in "rgb")


def gradient_color(steps: int, index: int, color1: int, color2: int) -> int:
    """Return the colour ``index`` steps along a ``steps``-long fade from color1 to color2.

    Raises ZeroDivisionError when ``steps`` is zero.
    """
    distance = color_distance(color1, color2)
    red, green, blue = (
        int(channel(color1, name) - (delta / steps) * index)
        for name, delta in zip("rgb", distance)
    )
    return red << 16 | green << 8 | blue