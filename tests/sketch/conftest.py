"""Shared fixtures for sketch tests."""
from __future__ import annotations

import random

import pytest

SEED = 42


def zipf_tokens(n: int, vocab: int = 500, seed: int = SEED) -> list[str]:
    """n tokens drawn from a Zipf-like distribution over vocab words."""
    rng = random.Random(seed)
    words = [f"word{i}" for i in range(vocab)]
    weights = [1.0 / (i + 1) for i in range(vocab)]
    return rng.choices(words, weights=weights, k=n)


@pytest.fixture()
def corpus() -> list[str]:
    return zipf_tokens(20_000)


@pytest.fixture()
def small_corpus() -> list[str]:
    return zipf_tokens(2_000, vocab=100)
