import logging
from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from asciify.errors import ImageDecodeError, ImageNotFoundError

log = logging.getLogger(__name__)

# Larger side of the sampled image, in pixels
RESIZE_LIMIT = 200

FORMATS = ("PNG", "JPEG")

# Modes holding one wide integer channel, reduced to 8 bits by dividing by 257
_WIDE_MODES = ("I", "I;16", "I;16B", "I;16L", "I;16N")


def fit_size(width: int, height: int, limit: int = RESIZE_LIMIT) -> tuple[int, int]:
    """Return the size an image should be sampled at.

    When either side exceeds ``limit`` the larger side becomes exactly
    ``limit`` and the other keeps the aspect ratio. Smaller images are
    returned unchanged.
    """
    if width <= limit and height <= limit:
        return width, height
    if width > height:
        return limit, max(1, int(height * limit / width + 0.5))
    return max(1, int(width * limit / height + 0.5)), limit


def load_image(path: str | Path) -> Image.Image:
    """Open and fully decode a PNG or JPEG file."""
    try:
        image = Image.open(path, formats=FORMATS)
    except (FileNotFoundError, IsADirectoryError, PermissionError) as exc:
        raise ImageNotFoundError(f"Could not read image file: {path}") from exc
    except UnidentifiedImageError as exc:
        raise ImageDecodeError(f"Not a PNG or JPEG image: {path}") from exc

    try:
        image.load()
    except (OSError, SyntaxError) as exc:
        image.close()
        raise ImageDecodeError(f"Could not decode image {path}: {exc}") from exc
    return image


def cap_size(image: Image.Image, limit: int = RESIZE_LIMIT) -> Image.Image:
    size = fit_size(image.width, image.height, limit)
    if size == image.size:
        return image
    log.debug("Resizing %dx%d image to %dx%d", image.width, image.height, *size)
    if image.mode in _WIDE_MODES:
        # Lanczos is only implemented for 32-bit integer data
        image = image.convert("I")
    elif image.mode != "RGB":
        # Pillow point-samples "P" and "1" images whatever filter is asked for
        image = image.convert("RGB")
    return image.resize(size, Image.LANCZOS)


def to_rgb_array(image: Image.Image) -> np.ndarray:
    """Reduce an image to 8-bit RGB. Returns array of shape (height, width, 3).

    Alpha is dropped without blending.
    """
    if image.mode in _WIDE_MODES:
        wide = np.asarray(image).astype(np.int64) // 257
        channel = np.clip(wide, 0, 255)
        return np.repeat(channel[:, :, None], 3, axis=2)
    return np.asarray(image.convert("RGB"), dtype=np.int64)


def sample_pixels(path: str | Path, limit: int = RESIZE_LIMIT) -> np.ndarray:
    log.info("Reading in image pixel values")
    image = load_image(path)
    return to_rgb_array(cap_size(image, limit))


def to_brightness(pixels: np.ndarray) -> np.ndarray:
    """Truncated mean of the R, G and B channels, shape (height, width)."""
    return pixels[..., :3].astype(np.int64).sum(axis=-1) // 3
