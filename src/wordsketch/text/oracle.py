"""Exact word counts, used as ground truth when checking a sketch."""
from __future__ import annotations

from collections import Counter
from collections.abc import Iterable


def exact_counts(words: Iterable[str]) -> Counter[str]:
    return Counter(words)
