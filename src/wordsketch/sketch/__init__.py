"""Count-Min Sketch core.

Public API:
    CountMinSketch: flat uint32 counter grid with add/estimate
    LockedCountMinSketch: same, with per-row locks for threaded adds
    dimensions / sketch_with_bounds: size a sketch from (error_rate, confidence)
    Xxh3Hasher, Murmur3Hasher, Blake2bHasher: seeded 64-bit row hashes
    InvalidParameter: raised for out-of-range construction inputs
"""

from wordsketch.sketch.concurrent import LockedCountMinSketch
from wordsketch.sketch.countmin import COUNTER_MAX, CountMinSketch
from wordsketch.sketch.errors import InvalidParameter, SketchError
from wordsketch.sketch.hasher import (
    DEFAULT_HASHER,
    Blake2bHasher,
    Hasher,
    Murmur3Hasher,
    Xxh3Hasher,
    available_hashers,
    get_hasher,
)
from wordsketch.sketch.sizing import SketchDimensions, dimensions, sketch_with_bounds

__all__ = [
    "COUNTER_MAX",
    "DEFAULT_HASHER",
    "Blake2bHasher",
    "CountMinSketch",
    "Hasher",
    "InvalidParameter",
    "LockedCountMinSketch",
    "Murmur3Hasher",
    "SketchDimensions",
    "SketchError",
    "Xxh3Hasher",
    "available_hashers",
    "dimensions",
    "get_hasher",
    "sketch_with_bounds",
]
