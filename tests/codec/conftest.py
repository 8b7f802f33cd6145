"""Shared fixtures for codec tests."""
from __future__ import annotations

import random

import pytest

from wordsketch.sketch.countmin import CountMinSketch

SEED = 42


@pytest.fixture()
def words() -> list[str]:
    rng = random.Random(SEED)
    vocab = [f"word{i}" for i in range(300)]
    return rng.choices(vocab, weights=[1 / (i + 1) for i in range(300)], k=5_000)


@pytest.fixture()
def filled_sketch(words) -> CountMinSketch:
    cms = CountMinSketch(rows=4, columns=211)
    for w in words:
        cms.add(w)
    return cms
