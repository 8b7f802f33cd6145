"""Byte-level sinks for a finished sketch.

Public API:
    to_bytes / from_bytes / counters_bytes: flat binary layout
    compress / decompress, compress_sketch / decompress_sketch,
    compress_counts: Zstandard compression
    create_png / write_png / to_image: render bytes as an RGBA image (Pillow)
"""

from wordsketch.codec.compress import (
    compress,
    compress_counts,
    compress_sketch,
    decompress,
    decompress_sketch,
)
from wordsketch.codec.image import create_png, to_image, write_png
from wordsketch.codec.serialize import counters_bytes, from_bytes, to_bytes

__all__ = [
    "compress",
    "compress_counts",
    "compress_sketch",
    "counters_bytes",
    "create_png",
    "decompress",
    "decompress_sketch",
    "from_bytes",
    "to_bytes",
    "to_image",
    "write_png",
]
