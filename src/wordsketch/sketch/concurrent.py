"""Thread-safe Count-Min Sketch with one lock per row.

A plain CountMinSketch does read-increment-write on each row's cell.
Two threads adding tokens that collide in the same cell can interleave
and lose an increment, and a lost increment can push an estimate below
the true count.

Rows are disjoint slices of the counter array, so each row gets its own
lock (the same striping idea as a striped hash map, with the stripe
chosen by row instead of by key hash). An add() holds one row lock at a
time; two adds only contend while they are on the same row.

estimate() takes no locks. A concurrent reader can see a row that has
been bumped and another that has not yet been, i.e. a slightly stale,
lower value. That is fine: it was a valid answer a moment ago.
"""
from __future__ import annotations

import threading
from collections.abc import Iterable

from wordsketch.sketch.countmin import CountMinSketch, _check_count
from wordsketch.sketch.hasher import Hasher, Token


class LockedCountMinSketch(CountMinSketch):
    """CountMinSketch whose add() is safe to call from many threads."""

    def __init__(
        self,
        rows: int,
        columns: int,
        counters: Iterable[int] | None = None,
        hasher: Hasher | None = None,
    ) -> None:
        super().__init__(rows, columns, counters=counters, hasher=hasher)
        self._row_locks = [threading.Lock() for _ in range(self._rows)]
        self._total_lock = threading.Lock()

    def add(self, token: Token, count: int = 1) -> None:
        _check_count(count)
        # hashing happens outside the locks
        cells = self.cells(token)
        for lock, idx in zip(self._row_locks, cells):
            with lock:
                self._bump(idx, count)
        with self._total_lock:
            self._total += count
