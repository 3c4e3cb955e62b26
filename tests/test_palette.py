import io
import re

import pytest
from PIL import Image

from huevana.palette import PaletteError, extract_palette


def quadrant_png(colors=((200, 30, 30), (30, 160, 40), (20, 40, 200), (230, 200, 20))):
    img = Image.new("RGB", (40, 40))
    for i, color in enumerate(colors):
        x, y = (i % 2) * 20, (i // 2) * 20
        img.paste(color, (x, y, x + 20, y + 20))
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    buf.seek(0)
    return buf


def test_palette_is_hex_list():
    palette = extract_palette(quadrant_png())
    assert 1 <= len(palette) <= 5
    assert all(re.fullmatch(r"#[0-9a-f]{6}", c) for c in palette)


def test_palette_respects_count():
    assert len(extract_palette(quadrant_png(), count=2)) <= 2


def test_palette_rejects_non_images():
    with pytest.raises(PaletteError):
        extract_palette(io.BytesIO(b"definitely not a png"))


def solid_png(color, size=20, mode="RGB"):
    buf = io.BytesIO()
    Image.new(mode, (size, size), color).save(buf, format="PNG")
    return buf.getvalue()


def truncated_png():
    data = io.BytesIO()
    Image.linear_gradient("L").convert("RGB").save(data, format="PNG")
    raw = data.getvalue()
    return io.BytesIO(raw[: len(raw) // 2])


def test_palette_rejects_truncated_image():
    with pytest.raises(PaletteError, match="not a readable image"):
        extract_palette(truncated_png())


@pytest.mark.parametrize(
    "data",
    [
        solid_png((255, 255, 255)),
        solid_png((252, 253, 251)),
        solid_png((200, 30, 30, 0), mode="RGBA"),
    ],
)
def test_palette_without_usable_pixels(data):
    with pytest.raises(PaletteError, match="no colours found"):
        extract_palette(io.BytesIO(data))


def test_palette_large_frame_is_downscaled():
    img = Image.new("RGB", (1280, 720), (200, 30, 30))
    img.paste((20, 40, 200), (0, 0, 640, 720))
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    buf.seek(0)
    palette = extract_palette(buf)
    assert 1 <= len(palette) <= 5
