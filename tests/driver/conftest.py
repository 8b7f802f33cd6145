"""Shared fixtures for driver and CLI tests."""
from __future__ import annotations

import random

import pytest

SEED = 42

_VOCAB = [
    "jeeves", "bertie", "wooster", "aunt", "agatha", "dahlia", "gussie",
    "fink", "nottle", "newt", "castle", "beetle", "spode", "tuppy",
    "glossop", "bingo", "little", "drone", "club", "butler", "valet",
    "walking", "walked", "quickly", "fastest", "what", "ho", "rather",
]


@pytest.fixture()
def text() -> str:
    """A few thousand words of deterministic pseudo-prose."""
    rng = random.Random(SEED)
    weights = [1 / (i + 1) for i in range(len(_VOCAB))]
    lines = []
    for _ in range(400):
        words = rng.choices(_VOCAB, weights=weights, k=12)
        lines.append(" ".join(words).capitalize() + ".")
    return "\n".join(lines)


@pytest.fixture()
def text_file(tmp_path, text):
    path = tmp_path / "corpus.txt"
    path.write_text(text, encoding="utf-8")
    return path
