import pytest

from raycube.cli import (
    has_cub_extension,
    is_file_readable,
    main,
    validate_arguments,
)

VALID_SCENE = (
    "NO ./missing_no.xpm\n"
    "SO ./missing_so.xpm\n"
    "WE ./missing_we.xpm\n"
    "EA ./missing_ea.xpm\n"
    "F 220,100,0\n"
    "C 225,30,0\n"
    "\n"
    "111\n"
    "1N1\n"
    "111\n"
)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("map.cub", True),
        ("maps/level.cub", True),
        (".cub", False),
        ("map.txt", False),
        ("map.cub.bak", False),
        ("cub", False),
    ],
)
def test_has_cub_extension(name, expected):
    assert has_cub_extension(name) is expected


def test_is_file_readable(tmp_path):
    existing = tmp_path / "scene.cub"
    existing.write_text("x")
    assert is_file_readable(str(existing)) is True
    assert is_file_readable(str(tmp_path / "absent.cub")) is False


def test_validate_arguments_returns_single_file():
    assert validate_arguments(["level.cub"]) == "level.cub"


def test_validate_arguments_without_file():
    with pytest.raises(ValueError, match="no .cub file provided"):
        validate_arguments([])


def test_validate_arguments_too_many():
    with pytest.raises(ValueError, match="too many arguments"):
        validate_arguments(["a.cub", "b.cub"])


def test_main_without_arguments(capsys):
    assert main([]) == 1
    out = capsys.readouterr().out
    assert "Error: no .cub file provided" in out
    assert "Usage:" in out


def test_main_with_too_many_arguments(capsys):
    assert main(["a.cub", "b.cub"]) == 1
    assert "Error: too many arguments" in capsys.readouterr().out


def test_main_rejects_wrong_extension(tmp_path, capsys):
    path = tmp_path / "scene.txt"
    path.write_text(VALID_SCENE)
    assert main([str(path)]) == 1
    assert "Error: file must have .cub extension" in capsys.readouterr().out


def test_main_rejects_missing_file(tmp_path, capsys):
    path = tmp_path / "absent.cub"
    assert main([str(path)]) == 1
    assert f"Error: could not open file {path}" in capsys.readouterr().out


def test_main_reports_invalid_map(tmp_path, capsys):
    path = tmp_path / "open.cub"
    path.write_text(VALID_SCENE.replace("111\n1N1\n111\n", "111\n1N0\n111\n"))
    assert main([str(path)]) == 1
    assert "Error: map is not surrounded by walls" in capsys.readouterr().out


def test_main_reports_missing_texture(tmp_path, capsys, monkeypatch):
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "scene.cub"
    path.write_text(VALID_SCENE)
    assert main([str(path)]) == 1
    assert "failed to load texture './missing_no.xpm'" in capsys.readouterr().out