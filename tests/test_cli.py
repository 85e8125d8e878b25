import pytest

from minirt.cli import main


@pytest.mark.parametrize("argv", [[], ["one.rt", "two.rt"]])
def test_wrong_argument_count(argv, capsys):
    assert main(argv) == 1
    assert "One scene requires" in capsys.readouterr().err


def test_wrong_extension(tmp_path, capsys):
    path = tmp_path / "scene.txt"
    path.write_text("A 0.2 255,255,255\n")
    assert main([str(path)]) == 1
    assert "The file is only .rt format" in capsys.readouterr().err


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.rt")]) == 1
    assert capsys.readouterr().err.strip()


def test_scene_without_camera(tmp_path, capsys):
    path = tmp_path / "scene.rt"
    path.write_text("A 0.2 255,255,255\n")
    assert main([str(path)]) == 1
    assert "Program needs one camera" in capsys.readouterr().err


def test_scene_with_bad_color(tmp_path, capsys):
    path = tmp_path / "scene.rt"
    path.write_text("A 0.2 300,255,255\nC 0,0,0 0,0,-1 70\n")
    assert main([str(path)]) == 1
    assert "Color admit numbers 0 to 255" in capsys.readouterr().err