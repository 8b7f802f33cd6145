"""Size a Count-Min Sketch from accuracy targets.

    columns = ceil(e / error_rate)
    rows    = ceil(ln(1 / (1 - confidence)))

With columns = ceil(e / eps), the expected collision mass landing on a
token's cell in one row is at most eps * N / e, so by Markov the chance
that a single row overshoots by more than eps * N is at most 1/e. Rows
hash independently, so the minimum overshoots only if every row does:
probability (1/e)^rows <= 1 - confidence.

For error_rate=0.0005, confidence=0.99:
    columns = ceil(2.71828 / 0.0005) = 5437
    rows    = ceil(ln(100))          = 5
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real

from wordsketch.sketch.countmin import COUNTER_BYTES, COUNTER_MAX, CountMinSketch
from wordsketch.sketch.errors import InvalidParameter
from wordsketch.sketch.hasher import Hasher


# the saved header stores columns as a uint32
MAX_COLUMNS = COUNTER_MAX


@dataclass(frozen=True, slots=True)
class SketchDimensions:
    rows: int
    columns: int

    @property
    def memory_bytes(self) -> int:
        return self.rows * self.columns * COUNTER_BYTES


def _check_unit_interval(name: str, value: object) -> float:
    if not isinstance(value, Real) or isinstance(value, bool):
        raise InvalidParameter(f"{name} must be a number, got {type(value).__name__}")
    # NaN fails both comparisons and lands here too
    if not (0.0 < value < 1.0):
        raise InvalidParameter(f"{name} must be in (0, 1), got {value}")
    return float(value)


def dimensions(error_rate: float, confidence: float) -> SketchDimensions:
    """Rows and columns that meet the (error_rate, confidence) target."""
    eps = _check_unit_interval("error_rate", error_rate)
    conf = _check_unit_interval("confidence", confidence)
    ratio = math.e / eps
    if not math.isfinite(ratio) or ratio > MAX_COLUMNS:
        raise InvalidParameter(
            f"error_rate {error_rate} too small: needs more than {MAX_COLUMNS} columns"
        )
    columns = math.ceil(ratio)
    # ln(1 / (1 - c)) == -log1p(-c); log1p stays positive for tiny c where
    # 1.0 - c would round to exactly 1.0 and give zero rows.
    rows = max(1, math.ceil(-math.log1p(-conf)))
    return SketchDimensions(rows=rows, columns=columns)


def sketch_with_bounds(
    error_rate: float,
    confidence: float,
    hasher: Hasher | None = None,
) -> CountMinSketch:
    """Build an empty sketch sized by dimensions()."""
    dims = dimensions(error_rate, confidence)
    return CountMinSketch(dims.rows, dims.columns, hasher=hasher)
