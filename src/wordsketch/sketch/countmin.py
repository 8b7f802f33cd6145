"""Count-Min Sketch for token frequency estimation.

Answers the question: "How many times has this word appeared?" using a
fixed block of memory, no matter how many distinct words pass through.
The tradeoff: it never underestimates, but it can overestimate by a
bounded amount.

Layout: rows x columns uint32 counters held in ONE flat array, row
major, so the counter for (row, column) lives at row * columns + column.
Keeping it flat means the whole sketch can be handed to a compressor or
written to disk as a single contiguous buffer without reshaping.

To add a token, hash it once per row (the row index is the hash seed),
reduce the hash modulo the column count and bump that counter. To
query, visit the same cells and return the smallest one. Any single row
can be inflated by collisions; the minimum across independent rows is
unlikely to be inflated by much.

Counters saturate at 2**32 - 1 instead of wrapping. A wrapped counter
would drop below the true count and break the one guarantee this
structure makes (estimate >= true count), so pinning at the max is the
only overflow behaviour that keeps the guarantee.

References:
    Cormode & Muthukrishnan, "An Improved Data Stream Summary:
    The Count-Min Sketch and its Applications", 2005.
"""
from __future__ import annotations

import array
import logging
import math
from collections.abc import Iterable

from wordsketch.sketch.errors import InvalidParameter
from wordsketch.sketch.hasher import DEFAULT_HASHER, Hasher, Token, to_bytes

log = logging.getLogger(__name__)

COUNTER_TYPECODE = "I"      # uint32
COUNTER_BYTES = 4
COUNTER_MAX = 2**32 - 1


def _check_dimension(name: str, value: object) -> int:
    # bool is an int subclass; CountMinSketch(True, True) is a bug, not a 1x1 sketch
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidParameter(f"{name} must be an int, got {type(value).__name__}")
    if value <= 0:
        raise InvalidParameter(f"{name} must be positive, got {value}")
    return value


def _check_count(count: object) -> None:
    if not isinstance(count, int) or isinstance(count, bool) or count < 0:
        raise InvalidParameter(f"count must be a non-negative int, got {count!r}")


class CountMinSketch:
    """Count-Min Sketch with saturating uint32 counters.

    Parameters:
        rows: Number of rows, i.e. independent hash functions.
        columns: Number of counters per row.
        counters: Optional initial counters in flat row-major order
            (length rows * columns). Used to restore a saved sketch.
        hasher: Seeded 64-bit hash; defaults to xxHash3. A restored
            sketch must use the same hasher it was built with.

    Memory: rows * columns * 4 bytes.
    """

    def __init__(
        self,
        rows: int,
        columns: int,
        counters: Iterable[int] | None = None,
        hasher: Hasher | None = None,
    ) -> None:
        self._rows = _check_dimension("rows", rows)
        self._columns = _check_dimension("columns", columns)
        self._hasher = hasher if hasher is not None else DEFAULT_HASHER
        size = rows * columns

        if counters is None:
            self._counters = array.array(COUNTER_TYPECODE, bytes(size * COUNTER_BYTES))
            self._total = 0
        else:
            try:
                self._counters = array.array(COUNTER_TYPECODE, counters)
            except (OverflowError, TypeError) as exc:
                raise InvalidParameter(
                    f"counters must be ints in [0, {COUNTER_MAX}]: {exc}"
                ) from exc
            if len(self._counters) != size:
                raise InvalidParameter(
                    f"expected {size} counters for {rows}x{columns}, "
                    f"got {len(self._counters)}"
                )
            # Every add() bumps exactly one cell per row, so each row sums
            # to the total. Saturated rows undercount, hence max().
            self._total = max(
                sum(self._counters[r * columns:(r + 1) * columns])
                for r in range(rows)
            )

        log.debug(
            "count-min sketch %dx%d (%d bytes, hasher=%s)",
            rows, columns, self.memory_bytes(), getattr(self._hasher, "name", self._hasher),
        )

    @classmethod
    def from_counters(
        cls,
        rows: int,
        columns: int,
        counters: Iterable[int],
        hasher: Hasher | None = None,
    ) -> CountMinSketch:
        """Rebuild a sketch from its dimensions and flat counters."""
        return cls(rows, columns, counters=counters, hasher=hasher)

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def hasher(self) -> Hasher:
        return self._hasher

    @property
    def total(self) -> int:
        """Number of token occurrences added (N in the error bound)."""
        return self._total

    @property
    def counters(self) -> array.array:
        """Copy of the flat row-major uint32 counter array."""
        return array.array(COUNTER_TYPECODE, self._counters)

    def row(self, index: int) -> list[int]:
        if not 0 <= index < self._rows:
            raise IndexError(f"row {index} out of range for {self._rows} rows")
        start = index * self._columns
        return self._counters[start:start + self._columns].tolist()

    def cells(self, token: Token) -> list[int]:
        """Flat counter indices the token maps to, one per row."""
        data = to_bytes(token)
        columns = self._columns
        return [
            r * columns + self._hasher(data, r) % columns
            for r in range(self._rows)
        ]

    def add(self, token: Token, count: int = 1) -> None:
        """Record count more occurrences of token."""
        _check_count(count)
        for idx in self.cells(token):
            self._bump(idx, count)
        self._total += count

    def _bump(self, idx: int, count: int) -> None:
        # saturating increment of one cell; callers handle locking
        counters = self._counters
        value = counters[idx] + count
        if value > COUNTER_MAX:
            if counters[idx] != COUNTER_MAX:
                log.debug("counter %d saturated", idx)
            value = COUNTER_MAX
        counters[idx] = value

    def estimate(self, token: Token) -> int:
        """Estimated occurrences of token.

        Always >= the true count. With probability >= 1 - delta() it is
        also <= true count + epsilon() * total.
        """
        counters = self._counters
        return min(counters[idx] for idx in self.cells(token))

    def __contains__(self, token: Token) -> bool:
        return self.estimate(token) > 0

    def __len__(self) -> int:
        return self._rows * self._columns

    def __repr__(self) -> str:
        return (
            f"CountMinSketch(rows={self._rows}, columns={self._columns}, "
            f"total={self._total})"
        )

    def memory_bytes(self) -> int:
        """Size of the counter array."""
        return self._rows * self._columns * COUNTER_BYTES

    def epsilon(self) -> float:
        """Error bound: overestimate <= epsilon * total with prob >= 1 - delta."""
        return math.e / self._columns

    def delta(self) -> float:
        """Failure probability: P(overestimate > epsilon * total) <= delta."""
        return math.e ** (-self._rows)

    def saturated_cells(self) -> int:
        return sum(1 for value in self._counters if value == COUNTER_MAX)
