"""Render arbitrary bytes as an RGBA PNG.

Every 4 input bytes become one pixel (R, G, B, A). The image is
`width` pixels wide and as tall as needed; the last row is padded with
zero bytes, i.e. transparent black. Useful for eyeballing how much
structure survives compression: a well-compressed buffer looks like
noise.
"""
from __future__ import annotations

import io
import math
from pathlib import Path

from PIL import Image

from wordsketch.sketch.errors import InvalidParameter

BYTES_PER_PIXEL = 4  # RGBA
DEFAULT_WIDTH = 150


def image_height(length: int, width: int = DEFAULT_WIDTH) -> int:
    return max(1, math.ceil(length / (width * BYTES_PER_PIXEL)))


def to_image(buffer: bytes, width: int = DEFAULT_WIDTH) -> Image.Image:
    """Wrap buffer as a width-pixel-wide RGBA image."""
    if not isinstance(width, int) or width <= 0:
        raise InvalidParameter(f"width must be a positive int, got {width!r}")
    height = image_height(len(buffer), width)
    pixels = bytes(buffer).ljust(width * height * BYTES_PER_PIXEL, b"\x00")
    return Image.frombytes("RGBA", (width, height), pixels)


def create_png(buffer: bytes, width: int = DEFAULT_WIDTH) -> bytes:
    """Encode buffer as a width-pixel-wide RGBA PNG."""
    out = io.BytesIO()
    to_image(buffer, width=width).save(out, format="PNG")
    return out.getvalue()


def write_png(path: str | Path, buffer: bytes, width: int = DEFAULT_WIDTH) -> Path:
    path = Path(path)
    path.write_bytes(create_png(buffer, width=width))
    return path
