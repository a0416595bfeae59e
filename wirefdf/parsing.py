"""Reading ``.fdf`` height maps into grids of points."""

from __future__ import annotations

import itertools
import os
from collections.abc import Iterable
from dataclasses import dataclass, field

from wirefdf.geometry import DEFAULT_COLOR, HIGH_COLOR, LOW_COLOR, Point

_SPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"
_HEX_DIGITS = "0123456789abcdef"
_GRID_STEP = 100
_HEIGHT_STEP = 10


class MapError(ValueError):
    """Raised when a map file cannot be used."""


@dataclass
class HeightMap:
    """A grid of points, stored row by row, ``width`` points to a row."""

    width: int
    height: int
    points: list[Point] = field(default_factory=list)
    colored: bool = False


def _parse_signed(text: str, digits: str) -> int:
    rest = text.lstrip(_SPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    base = len(digits)
    result = 0
    for char in itertools.takewhile(lambda c: c in digits, rest):
        result = result * base + digits.index(char)
    return sign * result


def parse_int(text: str) -> int:
    """Parse a leading decimal integer, after optional blanks and sign.

    Parsing stops at the first non-digit; no digits at all gives 0.
    """
    return _parse_signed(text, _DIGITS)


def parse_hex(text: str) -> int:
    """Parse a leading hexadecimal integer written in lower-case digits.

    Blanks and a sign may come first; parsing stops at the first character
    that is not a lower-case hex digit.
    """
    return _parse_signed(text, _HEX_DIGITS)


def count_words(text: str, separators: str) -> int:
    """Count the runs of characters that are not in ``separators``."""
    return sum(
        1 for is_sep, _ in itertools.groupby(text, key=lambda c: c in separators) if not is_sep
    )


def has_fdf_extension(path: str | os.PathLike[str]) -> bool:
    """Tell whether the second dot-separated part of ``path`` starts with ``fdf``."""
    parts = [part for part in os.fspath(path).split(".") if part]
    return len(parts) >= 2 and parts[1].startswith("fdf")


def apply_height_colors(points: Iterable[Point]) -> None:
    """Colour points by elevation: white at zero, warm above, cool below."""
    for p in points:
        if p.y == 0:
            p.color = DEFAULT_COLOR
        elif p.y < 0:
            p.color = HIGH_COLOR
        else:
            p.color = LOW_COLOR


def _measure(lines: list[str]) -> int:
    if not lines:
        raise MapError("map is empty")
    counts = {count_words(line, " \n") for line in lines}
    if len(counts) != 1:
        raise MapError("rows have different lengths")
    width = counts.pop()
    if not width:
        raise MapError("map has no columns")
    return width


def _make_point(token: str, row: int, col: int, rows: int) -> tuple[Point, bool]:
    pair = [part for part in token.split(",") if part]
    if not pair:
        raise MapError(f"row {row + 1}, column {col + 1}: missing value")
    point = Point(
        x=col * _GRID_STEP,
        y=-parse_int(pair[0]) * _HEIGHT_STEP,
        z=(rows - row - 1) * _GRID_STEP,
    )
    if len(pair) > 1:
        point.color = parse_hex(pair[1].lower()[2:])
        return point, True
    return point, False


def parse_map(lines: Iterable[str]) -> HeightMap:
    """Build a height map from the lines of a map file.

    Each line holds the same number of values separated by spaces; a value
    may carry a colour as ``height,0xRRGGBB``. When no value has a colour the
    points are coloured by height.
    """
    rows = list(lines)
    width = _measure(rows)
    heightmap = HeightMap(width=width, height=len(rows))
    for row_index, line in enumerate(rows):
        tokens = [token for token in line.split(" ") if token][:width]
        for col_index, token in enumerate(tokens):
            point, has_color = _make_point(token, row_index, col_index, len(rows))
            heightmap.points.append(point)
            heightmap.colored |= has_color
    if not heightmap.colored:
        apply_height_colors(heightmap.points)
    return heightmap


def read_map(path: str | os.PathLike[str]) -> HeightMap:
    """Read and parse a ``.fdf`` map file."""
    if not has_fdf_extension(path):
        raise MapError(f"{os.fspath(path)}: not an .fdf file")
    try:
        with open(path, encoding="latin-1", newline="\n") as handle:
            lines = list(handle)
    except OSError as exc:
        raise MapError(f"{os.fspath(path)}: {exc.strerror or exc}") from exc
    return parse_map(lines)