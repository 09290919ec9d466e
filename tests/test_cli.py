import pytest

from imgconv.bmp import load_bmp
from imgconv.cli import Format, format_for_path, load_image, main, save_image
from imgconv.image import Color, Image, ImageError
from imgconv.jpeg import load_jpeg
from imgconv.ppm import load_ppm, save_ppm


def _sample() -> Image:
    image = Image(5, 3, Color(10, 20, 30))
    image[0, 0] = Color(255, 0, 0)
    image[4, 2] = Color(0, 0, 255)
    return image


@pytest.mark.parametrize(
    "name, expected",
    [
        ("a.jpg", Format.JPEG),
        ("a.jpeg", Format.JPEG),
        ("dir/a.ppm", Format.PPM),
        ("a.bmp", Format.BMP),
        ("a.png", Format.UNKNOWN),
        ("a.JPG", Format.UNKNOWN),
        ("noext", Format.UNKNOWN),
        (".jpg", Format.UNKNOWN),
    ],
)
def test_format_for_path(name, expected):
    assert format_for_path(name) is expected


def test_save_and_load_by_extension(tmp_path):
    path = tmp_path / "x.bmp"
    save_image(path, _sample())
    assert load_image(path) == _sample()
    assert load_bmp(path) == _sample()


def test_load_unknown_format(tmp_path):
    with pytest.raises(ImageError):
        load_image(tmp_path / "x.gif")


def test_save_unknown_format(tmp_path):
    with pytest.raises(ImageError):
        save_image(tmp_path / "x.gif", _sample())


def test_usage(capsys):
    assert main(["only_one.ppm"]) == 1
    assert "Usage:" in capsys.readouterr().err


def test_unknown_input(tmp_path, capsys):
    assert main([str(tmp_path / "a.txt"), str(tmp_path / "b.ppm")]) == 2
    assert "Unknown format of the input file" in capsys.readouterr().err


def test_unknown_output(tmp_path, capsys):
    assert main([str(tmp_path / "a.ppm"), str(tmp_path / "b.txt")]) == 3
    assert "Unknown format of the output file" in capsys.readouterr().err


def test_loading_failed(tmp_path, capsys):
    assert main([str(tmp_path / "missing.ppm"), str(tmp_path / "b.bmp")]) == 4
    assert "Loading failed" in capsys.readouterr().err


def test_empty_image_counts_as_loading_failure(tmp_path):
    src = tmp_path / "empty.ppm"
    save_ppm(src, Image())
    assert main([str(src), str(tmp_path / "b.bmp")]) == 4


def test_saving_failed(tmp_path, capsys):
    src = tmp_path / "a.ppm"
    save_ppm(src, _sample())
    assert main([str(src), str(tmp_path / "nowhere" / "b.bmp")]) == 5
    assert "Saving failed" in capsys.readouterr().err


def test_ppm_to_bmp(tmp_path, capsys):
    src = tmp_path / "a.ppm"
    dst = tmp_path / "b.bmp"
    save_ppm(src, _sample())
    assert main([str(src), str(dst)]) == 0
    assert "Successfully converted" in capsys.readouterr().out
    assert load_bmp(dst) == _sample()


def test_bmp_to_ppm(tmp_path):
    bmp = tmp_path / "a.bmp"
    ppm = tmp_path / "b.ppm"
    save_image(bmp, _sample())
    assert main([str(bmp), str(ppm)]) == 0
    assert load_ppm(ppm) == _sample()


def test_ppm_to_jpeg_keeps_size(tmp_path):
    src = tmp_path / "a.ppm"
    dst = tmp_path / "b.jpg"
    save_ppm(src, _sample())
    assert main([str(src), str(dst)]) == 0
    loaded = load_jpeg(dst)
    assert (loaded.width, loaded.height) == (5, 3)