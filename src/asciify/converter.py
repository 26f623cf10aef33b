import logging
import os
from pathlib import Path

from PIL import Image

from asciify.errors import ImageNotFoundError
from asciify.glyphs import map_glyphs
from asciify.sampling import RESIZE_LIMIT, cap_size, sample_pixels, to_brightness, to_rgb_array
from asciify.writer import write_artifact

log = logging.getLogger(__name__)


def image_to_ascii(image: Image.Image, limit: int = RESIZE_LIMIT) -> str:
    """Render an in-memory image as ASCII art text."""
    pixels = to_rgb_array(cap_size(image, limit))
    return b"".join(map_glyphs(to_brightness(pixels))).decode("ascii")


def convert_image(path: str | Path) -> Path:
    """Convert the image at ``path`` and write it to ``<path>.txt``.

    Returns the path of the written file.
    """
    path = Path(path)
    if not path.is_file() or not os.access(path, os.R_OK):
        raise ImageNotFoundError(f"Could not find image file to read in: {path}")

    pixels = sample_pixels(path)
    brightness = to_brightness(pixels)
    rows = map_glyphs(brightness)
    log.debug("Rendered %d rows", len(rows))
    return write_artifact(path, rows)
