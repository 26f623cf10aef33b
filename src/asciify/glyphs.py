import logging
import math

import numpy as np

from asciify.charsets import GLYPH_RAMP, MAX_BRIGHTNESS

log = logging.getLogger(__name__)

# Each sample is written this many times so glyphs, which are taller than
# wide, keep the image's aspect ratio
REPEAT = 2


def glyph_index(value: float, max_value: float = MAX_BRIGHTNESS, length: int = len(GLYPH_RAMP)) -> int:
    """Index into a ramp of ``length`` characters for a brightness value.

    Scalar form of the lookup ``map_glyphs`` applies to a whole grid.
    """
    idx = math.floor(length * (value / max_value))
    return min(max(idx, 0), length - 1)


def map_glyphs(
    brightness: np.ndarray,
    ramp: str = GLYPH_RAMP,
    max_value: float = MAX_BRIGHTNESS,
) -> list[bytes]:
    """Map a (rows, cols) brightness grid to lines of ramp characters.

    Every line holds ``REPEAT * cols`` characters followed by a newline.
    """
    log.info("Converting brightness matrix to ascii")
    table = np.frombuffer(ramp.encode("ascii"), dtype=np.uint8)
    idx = np.floor(len(ramp) * (np.asarray(brightness) / max_value)).astype(np.int64)
    idx = np.clip(idx, 0, len(ramp) - 1)
    chars = np.repeat(table[idx], REPEAT, axis=1)
    return [row.tobytes() + b"\n" for row in chars]
