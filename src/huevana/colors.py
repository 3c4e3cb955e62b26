from __future__ import annotations

import random
import re
import string
from typing import Optional

from coloraide import Color

Hex = str
Rgb = str

DEFAULT_COLOR: Hex = "#98FB98"

_HEX_RE = re.compile(r"#([0-9a-fA-F]{6}|[0-9a-fA-F]{3})")
_RGB_RE = re.compile(r"rgb\(([0-9]{1,3}),\s*([0-9]{1,3}),\s*([0-9]{1,3})\)")

# Foregrounds offered for the preview card
_LIGHT_TEXT: Hex = "#f8fafc"
_DARK_TEXT: Hex = "#0f172a"


class ColorFormatError(ValueError):
    """Raised when a hex string has neither the short nor the long form."""


def _rgb_channels(color: str) -> Optional[tuple[int, int, int]]:
    m = _RGB_RE.fullmatch(color)
    if m is None:
        return None
    r, g, b = (int(v) for v in m.groups())
    if r > 255 or g > 255 or b > 255:
        return None
    return r, g, b


def is_valid_hex(color: str) -> bool:
    """True for '#rgb' or '#rrggbb' (any case). No trimming."""
    return _HEX_RE.fullmatch(color) is not None


def is_valid_rgb(color: str) -> bool:
    """True for 'rgb(r, g, b)' with every channel in [0, 255]."""
    return _rgb_channels(color) is not None


def is_valid_hex_or_rgb(color: str) -> bool:
    color = color.strip().lower()
    if color.startswith("#"):
        return is_valid_hex(color)
    # anything starting with 'r' is left for the rgb pattern to reject
    if color.startswith("r"):
        return is_valid_rgb(color)
    return False


def rgb_to_hex(r: int, g: int, b: int) -> Hex:
    """Channels are expected in [0, 255]; callers validate."""
    return f"#{r:02x}{g:02x}{b:02x}"


def hex_to_rgb(hex_str: Hex) -> Rgb:
    """Convert '#rgb' or '#rrggbb' to 'rgb(r, g, b)'."""
    if len(hex_str) == 4:
        pairs = [ch * 2 for ch in hex_str[1:]]
    elif len(hex_str) == 7:
        pairs = [hex_str[i : i + 2] for i in (1, 3, 5)]
    else:
        raise ColorFormatError(f"Incorrect hex string: {hex_str}")
    if not all(c in string.hexdigits for c in "".join(pairs)):
        raise ColorFormatError(f"Incorrect hex string: {hex_str}")
    r, g, b = (int(p, 16) for p in pairs)
    return f"rgb({r}, {g}, {b})"


def try_parse_rgb(color: str) -> Optional[Hex]:
    channels = _rgb_channels(color)
    if channels is None:
        return None
    return rgb_to_hex(*channels)


def try_parse_input_color(color: str) -> Optional[Hex]:
    """Hex input comes back as typed (trimmed only); rgb input becomes hex."""
    color = color.strip()
    if is_valid_hex(color):
        return color
    return try_parse_rgb(color)


def _random_channel() -> str:
    return f"{round(random.random() * 255):02x}"


def generate_random_hex_color() -> Hex:
    return "#" + "".join(_random_channel() for _ in range(3))


def color_from_query(value: Optional[str], default: Hex = DEFAULT_COLOR) -> Hex:
    """Initial page color from a '?color=rrggbb' query value."""
    color = f"#{value or ''}"
    return color if is_valid_hex(color) else default


def readable_text_color(background: Hex) -> Hex:
    """Light or dark foreground, whichever contrasts more (WCAG 2.1)."""
    bg = Color(background)
    light = bg.contrast(_LIGHT_TEXT, method="wcag21")
    dark = bg.contrast(_DARK_TEXT, method="wcag21")
    return _LIGHT_TEXT if light >= dark else _DARK_TEXT


__all__ = [
    "DEFAULT_COLOR",
    "ColorFormatError",
    "color_from_query",
    "generate_random_hex_color",
    "hex_to_rgb",
    "is_valid_hex",
    "is_valid_hex_or_rgb",
    "is_valid_rgb",
    "readable_text_color",
    "rgb_to_hex",
    "try_parse_input_color",
    "try_parse_rgb",
]
