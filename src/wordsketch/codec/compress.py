"""Zstandard compression for sketches and exact counts.

Mostly used to answer "how big would this be on the wire?". A freshly
filled sketch is dominated by small counters and zero cells, so it
compresses well; the exact-count map compresses as JSON text, which is
the honest baseline to compare against.
"""
from __future__ import annotations

import json
import logging
from collections.abc import Mapping

import zstandard

from wordsketch.codec.serialize import from_bytes, to_bytes
from wordsketch.sketch.countmin import CountMinSketch
from wordsketch.sketch.errors import InvalidParameter
from wordsketch.sketch.hasher import Hasher

log = logging.getLogger(__name__)

DEFAULT_LEVEL = 3


def compress(data: bytes, level: int = DEFAULT_LEVEL) -> bytes:
    return zstandard.ZstdCompressor(level=level).compress(data)


def decompress(data: bytes) -> bytes:
    try:
        return zstandard.ZstdDecompressor().decompress(data)
    except zstandard.ZstdError as exc:
        raise InvalidParameter(f"not a zstd frame: {exc}") from exc


def compress_sketch(sketch: CountMinSketch, level: int = DEFAULT_LEVEL) -> bytes:
    raw = to_bytes(sketch)
    blob = compress(raw, level=level)
    log.debug("sketch %d -> %d bytes compressed", len(raw), len(blob))
    return blob


def decompress_sketch(blob: bytes, hasher: Hasher | None = None) -> CountMinSketch:
    return from_bytes(decompress(blob), hasher=hasher)


def compress_counts(counts: Mapping[str, int], level: int = DEFAULT_LEVEL) -> bytes:
    """Compress an exact-count map serialized as compact JSON."""
    payload = json.dumps(dict(counts), separators=(",", ":")).encode("utf-8")
    return compress(payload, level=level)
