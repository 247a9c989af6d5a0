"""Solid-color raster images encoded as PNG."""

import io
from typing import Tuple

from PIL import Image

RGBA = Tuple[int, int, int, int]


def solid_png(width: int, height: int, color: RGBA) -> bytes:
    """Return PNG bytes of a width x height RGBA image filled with color."""
    img = Image.new("RGBA", (width, height), color)
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()
