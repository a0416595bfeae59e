import pytest

from wirefdf.geometry import DEFAULT_COLOR, HIGH_COLOR, LOW_COLOR, Point
from wirefdf.parsing import (
    HeightMap,
    MapError,
    apply_height_colors,
    count_words,
    has_fdf_extension,
    parse_hex,
    parse_int,
    parse_map,
    read_map,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  -17abc", -17),
        ("+5", 5),
        ("\t\n 8", 8),
        ("abc", 0),
        ("", 0),
        ("--3", 0),
        ("12 34", 12),
    ],
)
def test_parse_int(text, expected):
    assert parse_int(text) == expected


@pytest.mark.parametrize("value", [0, 1, 9, 10, 255, 0xFF4400, 0x00A2FF, 0xFFFFFF])
def test_parse_hex_round_trip(value):
    assert parse_hex(format(value, "x")) == value


def test_parse_hex_stops_at_non_hex():
    assert parse_hex("ff\n") == parse_hex("ff")
    assert parse_hex("-a") == -parse_hex("a")


def test_parse_hex_rejects_upper_case_digits():
    assert parse_hex("FF") == 0


@pytest.mark.parametrize(
    "text, seps, expected",
    [
        ("  hello world  ", " ", 2),
        ("1 2 3\n", " \n", 3),
        ("", " ", 0),
        ("   ", " ", 0),
        ("a,b,,c", ",", 3),
        ("word", "", 1),
    ],
)
def test_count_words(text, seps, expected):
    assert count_words(text, seps) == expected


@pytest.mark.parametrize(
    "path, expected",
    [
        ("maps/42.fdf", True),
        ("./maps/a.fdf", True),
        ("../maps/a.fdf", True),
        ("a.fdfx", True),
        ("test.txt", False),
        ("noext", False),
        ("a.b.fdf", False),
        ("a.fd", False),
    ],
)
def test_has_fdf_extension(path, expected):
    assert has_fdf_extension(path) is expected


def test_apply_height_colors():
    points = [Point(0, 0), Point(0, -10), Point(0, 10)]
    apply_height_colors(points)
    assert [p.color for p in points] == [DEFAULT_COLOR, HIGH_COLOR, LOW_COLOR]


def test_parse_map_dimensions_and_layout():
    hm = parse_map(["0 1 2\n", "3 4 5\n"])
    assert (hm.width, hm.height) == (3, 2)
    assert len(hm.points) == hm.width * hm.height
    first_row, second_row = hm.points[:3], hm.points[3:]
    assert [p.x for p in first_row] == [p.x for p in second_row]
    assert first_row[0].x == 0
    assert all(p.z == 0 for p in second_row)
    assert all(p.z > 0 for p in first_row)


def test_parse_map_heights_are_negated_and_scaled():
    hm = parse_map(["0 1\n", "-2 0\n"])
    assert hm.points[0].y == 0
    assert hm.points[1].y == -10
    assert hm.points[2].y == 20


def test_parse_map_uncoloured_gets_height_colors():
    hm = parse_map(["0 5\n", "-5 0\n"])
    assert hm.colored is False
    assert [p.color for p in hm.points] == [DEFAULT_COLOR, HIGH_COLOR, LOW_COLOR, DEFAULT_COLOR]


def test_parse_map_keeps_explicit_colors():
    hm = parse_map(["0,0xFF0000 5\n"])
    assert hm.colored is True
    assert hm.points[0].color == 0xFF0000
    assert hm.points[1].color == DEFAULT_COLOR


def test_parse_map_ignores_trailing_space_and_missing_newline():
    hm = parse_map(["1 2 \n", "3 4"])
    assert (hm.width, hm.height) == (2, 2)
    assert [p.y for p in hm.points] == [-10, -20, -30, -40]


def test_parse_map_single_point():
    hm = parse_map(["7\n"])
    assert hm == HeightMap(width=1, height=1, points=[Point(0, -70, 0, HIGH_COLOR)], colored=False)


@pytest.mark.parametrize(
    "lines",
    [
        [],
        ["\n"],
        ["\n", "\n"],
        ["0 0\n", "0\n"],
        ["0 0\n", "\n"],
        ["0 , 0\n"],
    ],
)
def test_parse_map_errors(lines):
    with pytest.raises(MapError):
        parse_map(lines)


def test_read_map(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "grid.fdf").write_text("0 0 0\n0 10 0\n0 0 0\n")
    hm = read_map("grid.fdf")
    assert (hm.width, hm.height) == (3, 3)
    assert hm.points[4].y == -100
    assert hm.points[4].color == HIGH_COLOR
    assert hm == parse_map(["0 0 0\n", "0 10 0\n", "0 0 0\n"])


def test_read_map_rejects_wrong_extension(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "grid.txt").write_text("0 0\n")
    with pytest.raises(MapError):
        read_map("grid.txt")


def test_read_map_missing_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(MapError):
        read_map("absent.fdf")


def test_read_map_inconsistent_rows(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "bad.fdf").write_text("0 0 0\n0 0\n")
    with pytest.raises(MapError):
        read_map("bad.fdf")