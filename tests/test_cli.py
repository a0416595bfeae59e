import pytest

from wirefdf.cli import UsageError, main, parse_args


def test_parse_single_path():
    options = parse_args(["maps/pyramid.fdf"])
    assert options.path == "maps/pyramid.fdf"
    assert options.interactive is False


def test_parse_interactive_flag_anywhere():
    assert parse_args(["--interactive", "a.fdf"]).interactive is True
    assert parse_args(["a.fdf", "--interactive"]).path == "a.fdf"


@pytest.mark.parametrize("argv", [[], ["a.fdf", "b.fdf"], ["--interactive"]])
def test_parse_wrong_count(argv):
    with pytest.raises(UsageError):
        parse_args(argv)


def test_main_wrong_count_prints_message(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out == "Invalid number of args!\n"


def test_main_rejects_wrong_extension(tmp_path, capsys):
    path = tmp_path / "map.txt"
    path.write_text("0 0\n0 0\n")
    assert main([str(path)]) == 1
    assert capsys.readouterr().out == ""


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "absent.fdf")]) == 1


def test_main_ragged_map(tmp_path, capsys):
    path = tmp_path / "ragged.fdf"
    path.write_text("0 0 0\n0 0\n")
    assert main([str(path)]) == 1
    assert "ragged.fdf" not in capsys.readouterr().out