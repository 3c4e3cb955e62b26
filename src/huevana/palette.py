from __future__ import annotations

import io
import logging
from typing import BinaryIO

from colorthief import ColorThief
from PIL import Image, ImageChops

from .colors import rgb_to_hex

log = logging.getLogger(__name__)

# camera frames are shrunk to this before quantizing
MAX_SIDE = 200


class PaletteError(ValueError):
    """The uploaded data could not be turned into a palette."""


def _has_usable_pixels(image: Image.Image) -> bool:
    # colorthief skips pixels with alpha < 125 and pixels with every channel > 250
    r, g, b, a = image.split()
    darkest = ImageChops.darker(ImageChops.darker(r, g), b)
    coloured = darkest.point(lambda v: 255 if v <= 250 else 0)
    opaque = a.point(lambda v: 255 if v >= 125 else 0)
    return ImageChops.multiply(coloured, opaque).getbbox() is not None


def extract_palette(stream: BinaryIO, count: int = 5) -> list[str]:
    """Dominant colours of an image as '#rrggbb' strings (at most `count`)."""
    try:
        image = Image.open(stream)
        image = image.convert("RGBA")
        image.thumbnail((MAX_SIDE, MAX_SIDE))
    except OSError as exc:
        raise PaletteError(f"not a readable image: {exc}") from exc

    if not _has_usable_pixels(image):
        raise PaletteError("no colours found")

    buf = io.BytesIO()
    image.save(buf, format="PNG")
    buf.seek(0)

    # colorthief's quantizer can return one more or one fewer swatch than asked
    swatches = ColorThief(buf).get_palette(color_count=max(2, count), quality=1)
    palette = [rgb_to_hex(r, g, b) for r, g, b in swatches[:count]]
    log.debug("Extracted palette %s", palette)
    return palette
