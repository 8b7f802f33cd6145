"""Turn raw text into normalized word tokens.

The sketch does not care how tokens are produced, only that the same
word always normalizes to the same token. This module supplies the
default policy: lower-case, strip everything outside a-z, then chop a
single common English suffix. It is a crude stemmer, not Porter; it
just folds "castle"/"castles" and "walking"/"walked" together.

Suffix rules, first match wins:

    -ing  (len > 4)   walking -> walk
    -ed   (len > 3)   walked  -> walk
    -s    (len > 3, not -ss)  castles -> castle, but glass stays
    -ly   (len > 3)   quickly -> quick
    -er   (len > 4)   faster  -> fast
    -est  (len > 4)   fastest -> fast
"""
from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Iterator

Tokenizer = Callable[[str], list[str]]

_NON_ALPHA = re.compile(r"[^a-z]")

# (suffix, minimum word length, excluded ending)
_SUFFIX_RULES: tuple[tuple[str, int, str | None], ...] = (
    ("ing", 5, None),
    ("ed", 4, None),
    ("s", 4, "ss"),
    ("ly", 4, None),
    ("er", 5, None),
    ("est", 5, None),
)


def stem(word: str) -> str:
    """Normalize one word. May return "" for punctuation-only input."""
    w = _NON_ALPHA.sub("", word.lower())
    for suffix, min_len, unless in _SUFFIX_RULES:
        if w.endswith(suffix) and len(w) >= min_len:
            if unless is not None and w.endswith(unless):
                continue
            return w[: -len(suffix)]
    return w


def iter_words(lines: Iterable[str]) -> Iterator[str]:
    """Yield stemmed, non-empty words from an iterable of lines."""
    for line in lines:
        for raw in line.split(" "):
            w = stem(raw)
            if w:
                yield w


def to_words(text: str) -> list[str]:
    """Split text on newlines and single spaces, stem, drop empties."""
    return list(iter_words(text.split("\n")))
