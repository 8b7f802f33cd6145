"""Binary format for a Count-Min Sketch.

Layout:
    4 bytes: magic b"CMS1"
    4 bytes: rows    (big-endian uint32)
    4 bytes: columns (big-endian uint32)
    rows * columns * 4 bytes: counters, row-major, little-endian uint32

The header is big-endian like every other length field we write. The
counter block is little-endian so it is byte-for-byte what a
little-endian machine holds in memory; on those machines dumping and
loading the block is a straight copy.

The hasher is not stored. A sketch can only be queried with the hash
it was built with, so the reader has to pass the same one back in.
"""
from __future__ import annotations

import array
import struct
import sys

from wordsketch.sketch.countmin import COUNTER_BYTES, COUNTER_TYPECODE, CountMinSketch
from wordsketch.sketch.errors import InvalidParameter
from wordsketch.sketch.hasher import Hasher

MAGIC = b"CMS1"
_HEADER = struct.Struct("!4sII")
HEADER_SIZE = _HEADER.size  # 12


def counters_bytes(sketch: CountMinSketch) -> bytes:
    """Raw counter block: rows * columns little-endian uint32."""
    counters = sketch.counters  # already a copy, safe to byteswap
    if sys.byteorder == "big":
        counters.byteswap()
    return counters.tobytes()


def to_bytes(sketch: CountMinSketch) -> bytes:
    header = _HEADER.pack(MAGIC, sketch.rows, sketch.columns)
    return header + counters_bytes(sketch)


def from_bytes(data: bytes, hasher: Hasher | None = None) -> CountMinSketch:
    """Inverse of to_bytes()."""
    if len(data) < HEADER_SIZE:
        raise InvalidParameter(
            f"sketch payload too short: {len(data)} bytes, header is {HEADER_SIZE}"
        )
    magic, rows, columns = _HEADER.unpack_from(data)
    if magic != MAGIC:
        raise InvalidParameter(f"bad magic {magic!r}, expected {MAGIC!r}")
    body = memoryview(data)[HEADER_SIZE:]
    expected = rows * columns * COUNTER_BYTES
    if len(body) != expected:
        raise InvalidParameter(
            f"{rows}x{columns} sketch needs {expected} counter bytes, got {len(body)}"
        )
    counters = array.array(COUNTER_TYPECODE)
    counters.frombytes(body)
    if sys.byteorder == "big":
        counters.byteswap()
    return CountMinSketch.from_counters(rows, columns, counters, hasher=hasher)
