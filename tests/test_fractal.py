import PIL.Image
import pytest

import fractal

SMALL = ["--pixels-per-unit", "2", "--x-res", "8", "--y-res", "6"]


def test_renders_default_roots_to_ppm(tmp_path, capsys):
    output = tmp_path / "img.ppm"
    fractal.main([*SMALL, "--output", str(output)])

    data = output.read_bytes()
    assert data.startswith(b"P6\n8 6\n255\n")
    assert len(data) == len(b"P6\n8 6\n255\n") + 8 * 6 * 3

    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("Pol: 5: (1+0i) 4: (")
    assert lines[1].startswith("Der: 4: (5+0i) 3: (")


def test_default_size_follows_scale():
    opt = fractal.build_parser().parse_args(["--pixels-per-unit", "10"])
    config = fractal.build_config(opt, fractal.build_parser())
    assert (config.x_res, config.y_res) == (80, 60)


def test_custom_roots_and_colors(tmp_path):
    output = tmp_path / "img.ppm"
    fractal.main([
        *SMALL,
        "--root", "1", "--root", "-1",
        "--color", "#ff0000", "--color", "#0000ff",
        "--output", str(output),
    ])
    with PIL.Image.open(output) as image:
        colors = {color for _, color in image.getcolors()}
    assert colors <= {(255, 0, 0), (0, 0, 255)}


def test_colormap_palette_and_png_format(tmp_path):
    output = tmp_path / "img"
    fractal.main([*SMALL, "--colormap", "viridis", "--format", "png", "--output", str(output)])
    with PIL.Image.open(tmp_path / "img.png") as image:
        assert image.format == "PNG"
        assert image.size == (8, 6)


def test_single_precision(tmp_path):
    output = tmp_path / "img.ppm"
    fractal.main([*SMALL, "--precision", "single", "--output", str(output)])
    assert output.read_bytes().startswith(b"P6\n8 6\n255\n")


def test_verbose_reports_progress(tmp_path, capsys, monkeypatch):
    monkeypatch.setattr(fractal, "VERBOSE", False)
    fractal.main([*SMALL, "-v", "--output", str(tmp_path / "img.ppm")])
    out = capsys.readouterr().out
    assert "row 6 out of 6" in out
    assert "Root 0: -1+0i -> RGB(74, 11, 88)" in out
    assert "Wrote" in out


@pytest.mark.parametrize("args", [
    ["--root", "5"],
    ["--root", "1", "--root", "-1", "--color", "#ff0000"],
    ["--root", "nonsense"],
    ["--root", "nan"],
    ["--color", "#zzzzzz"],
    ["--colormap", "no-such-colormap"],
    ["--max-steps", "0"],
    ["--format", "png", "--output", "img.ppm"],
])
def test_configuration_errors_exit_with_usage(args, capsys):
    with pytest.raises(SystemExit) as excinfo:
        fractal.main([*SMALL, *args])
    assert excinfo.value.code == 2
    assert "error:" in capsys.readouterr().err


def test_color_and_colormap_are_exclusive():
    with pytest.raises(SystemExit):
        fractal.main([*SMALL, "--color", "#ffffff", "--colormap", "viridis"])
