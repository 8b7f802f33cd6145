"""Count a corpus with a sketch and check it against exact counts.

The pipeline for one corpus:
  1. Tokenize the text (default: to_words)
  2. Count every token exactly with a Counter (the oracle)
  3. Size a sketch from (error_rate, confidence) and add every token
  4. Query the sketch for each distinct token and measure overestimates
  5. Compress both the sketch and the exact counts to compare sizes

Steps are timed individually so the report can show where time goes.
"""
from __future__ import annotations

import logging
import time
from collections import Counter
from collections.abc import Mapping
from dataclasses import dataclass

from wordsketch.codec.compress import compress_counts, compress_sketch
from wordsketch.sketch.countmin import CountMinSketch
from wordsketch.sketch.hasher import Hasher
from wordsketch.sketch.sizing import sketch_with_bounds
from wordsketch.text.oracle import exact_counts
from wordsketch.text.tokenizer import Tokenizer, to_words

log = logging.getLogger(__name__)

DEFAULT_ERROR_RATE = 0.0005
DEFAULT_CONFIDENCE = 0.99


@dataclass(slots=True)
class CorpusResult:
    """Accuracy, size and timing numbers from one corpus run."""
    total_tokens: int
    distinct_tokens: int
    rows: int
    columns: int
    error_rate: float
    confidence: float
    sketch_bytes: int
    compressed_sketch_bytes: int
    compressed_counts_bytes: int
    max_overestimate: int
    mean_overestimate: float
    within_bound: float
    tokenize_time_ms: float
    count_time_ms: float
    sketch_time_ms: float
    compress_time_ms: float

    @property
    def error_budget(self) -> float:
        """Largest overestimate the sizing promises: error_rate * N."""
        return self.error_rate * self.total_tokens


def overestimates(sketch: CountMinSketch, counts: Mapping[str, int]) -> dict[str, int]:
    """estimate - true count for every token in counts. Never negative."""
    return {token: sketch.estimate(token) - true for token, true in counts.items()}


def _share_within(over: Mapping[str, int], budget: float) -> float:
    if not over:
        return 1.0
    return sum(1 for v in over.values() if v <= budget) / len(over)


def within_bound_fraction(
    sketch: CountMinSketch,
    counts: Mapping[str, int],
    error_rate: float,
) -> float:
    """Share of tokens whose overestimate is at most error_rate * N.

    N is the sketch's total. The sizing promises at least `confidence`
    of queried tokens land inside this bound.
    """
    return _share_within(overestimates(sketch, counts), error_rate * sketch.total)


def run_corpus(
    text: str,
    error_rate: float = DEFAULT_ERROR_RATE,
    confidence: float = DEFAULT_CONFIDENCE,
    tokenizer: Tokenizer = to_words,
    hasher: Hasher | None = None,
) -> tuple[CorpusResult, CountMinSketch, Counter[str]]:
    """Run the full pipeline on one text.

    Returns the result summary along with the filled sketch and the
    exact counts, so callers can run their own lookups.
    """
    # size first: bad parameters should fail before any work is done
    sketch = sketch_with_bounds(error_rate, confidence, hasher=hasher)

    t0 = time.perf_counter()
    words = tokenizer(text)
    tokenize_ms = (time.perf_counter() - t0) * 1000

    t0 = time.perf_counter()
    counts = exact_counts(words)
    count_ms = (time.perf_counter() - t0) * 1000

    t0 = time.perf_counter()
    for word in words:
        sketch.add(word)
    sketch_ms = (time.perf_counter() - t0) * 1000
    log.info(
        "added %d tokens (%d distinct) to %dx%d sketch in %.1f ms",
        len(words), len(counts), sketch.rows, sketch.columns, sketch_ms,
    )

    t0 = time.perf_counter()
    compressed_sketch = compress_sketch(sketch)
    compressed_counts = compress_counts(counts)
    compress_ms = (time.perf_counter() - t0) * 1000

    over = overestimates(sketch, counts)
    budget = error_rate * sketch.total
    within = _share_within(over, budget)

    result = CorpusResult(
        total_tokens=sketch.total,
        distinct_tokens=len(counts),
        rows=sketch.rows,
        columns=sketch.columns,
        error_rate=error_rate,
        confidence=confidence,
        sketch_bytes=sketch.memory_bytes(),
        compressed_sketch_bytes=len(compressed_sketch),
        compressed_counts_bytes=len(compressed_counts),
        max_overestimate=max(over.values(), default=0),
        mean_overestimate=sum(over.values()) / len(over) if over else 0.0,
        within_bound=within,
        tokenize_time_ms=tokenize_ms,
        count_time_ms=count_ms,
        sketch_time_ms=sketch_ms,
        compress_time_ms=compress_ms,
    )
    if within < confidence:
        log.warning(
            "only %.2f%% of tokens within error budget %.1f (target %.2f%%)",
            within * 100, budget, confidence * 100,
        )
    return result, sketch, counts
