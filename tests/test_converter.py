import pytest
from PIL import Image

from asciify.charsets import GLYPH_RAMP
from asciify.converter import convert_image, image_to_ascii
from asciify.errors import ImageDecodeError, ImageNotFoundError
from asciify.writer import artifact_path


def test_solid_black_maps_to_lightest(make_image):
    path = make_image(colour=(0, 0, 0))
    out = convert_image(path)
    row = (GLYPH_RAMP[0] * 4 + "\n").encode()
    assert out.read_bytes() == row * 2


def test_solid_white_maps_to_densest(make_image):
    path = make_image(colour=(255, 255, 255))
    out = convert_image(path)
    row = (GLYPH_RAMP[-1] * 4 + "\n").encode()
    assert out.read_bytes() == row * 2


def test_output_path_is_full_path_plus_txt(make_image):
    path = make_image(name="photo.png")
    assert convert_image(path) == path.parent / "photo.png.txt"


def test_output_dimensions(make_image):
    path = make_image(size=(7, 3), colour=(90, 90, 90))
    lines = convert_image(path).read_bytes().split(b"\n")
    assert lines[-1] == b""
    assert len(lines[:-1]) == 3
    assert all(len(line) == 14 for line in lines[:-1])


def test_large_image_is_capped(make_image):
    path = make_image(size=(400, 200), colour=(255, 255, 255))
    lines = convert_image(path).read_bytes().splitlines()
    assert len(lines) == 100
    assert all(len(line) == 400 for line in lines)


def test_idempotent(make_image):
    path = make_image(size=(30, 20), colour=(12, 200, 99))
    first = convert_image(path).read_bytes()
    second = convert_image(path).read_bytes()
    assert first == second


def test_rerun_overwrites(make_image):
    path = make_image(size=(5, 5))
    out = convert_image(path)
    size = out.stat().st_size
    convert_image(path)
    assert out.stat().st_size == size == 5 * 11


def test_missing_path_creates_nothing(tmp_path):
    path = tmp_path / "nothing.png"
    with pytest.raises(ImageNotFoundError):
        convert_image(path)
    assert not artifact_path(path).exists()


def test_directory_is_not_found(tmp_path):
    with pytest.raises(ImageNotFoundError):
        convert_image(tmp_path)


def test_decode_error_creates_nothing(tmp_path):
    path = tmp_path / "broken.png"
    path.write_bytes(b"\x89PNG not really")
    with pytest.raises(ImageDecodeError):
        convert_image(path)
    assert not artifact_path(path).exists()


def test_jpeg_input(make_image):
    path = make_image(name="photo.jpg", size=(4, 2), colour=(255, 255, 255))
    lines = convert_image(path).read_bytes().splitlines()
    assert len(lines) == 2
    assert all(len(line) == 8 for line in lines)


def test_image_to_ascii():
    img = Image.new("RGB", (2, 1))
    img.putpixel((1, 0), (255, 255, 255))
    dark, light = GLYPH_RAMP[0], GLYPH_RAMP[-1]
    assert image_to_ascii(img) == f"{dark}{dark}{light}{light}\n"
