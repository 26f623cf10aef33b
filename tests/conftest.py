import pytest
from PIL import Image


@pytest.fixture
def make_image(tmp_path):
    """Save a solid image to ``tmp_path`` and return its path."""

    def _make(name="image.png", size=(2, 2), colour=(0, 0, 0), mode="RGB", format=None):
        path = tmp_path / name
        Image.new(mode, size, colour).save(path, format=format)
        return path

    return _make
