"""Report formatting for corpus runs.

Formats CorpusResult data into human-readable blocks for terminal
output.
"""
from __future__ import annotations

from collections.abc import Mapping

from wordsketch.driver.pipeline import CorpusResult
from wordsketch.sketch.countmin import CountMinSketch
from wordsketch.sketch.sizing import SketchDimensions


def _ratio(old: int, new: int) -> str:
    if new <= 0:
        return "inf"
    return f"{old / new:.1f}x"


def format_report(result: CorpusResult, label: str = "Corpus") -> str:
    """Format a CorpusResult as a readable report string."""
    total_ms = (
        result.tokenize_time_ms + result.count_time_ms
        + result.sketch_time_ms + result.compress_time_ms
    )
    lines = [
        f"=== {label} ===",
        f"Tokens:            {result.total_tokens:,}",
        f"Distinct tokens:   {result.distinct_tokens:,}",
        f"Sketch:            {result.rows} rows x {result.columns:,} columns",
        f"Target:            error_rate={result.error_rate:g} "
        f"confidence={result.confidence:g}",
        f"",
        f"Accuracy:",
        f"  Error budget:    {result.error_budget:,.1f} (error_rate * N)",
        f"  Max overshoot:   {result.max_overestimate:,}",
        f"  Mean overshoot:  {result.mean_overestimate:.3f}",
        f"  Within budget:   {result.within_bound * 100:.2f}%",
        f"",
        f"Size:",
        f"  Sketch raw:      {result.sketch_bytes:,} bytes",
        f"  Sketch zstd:     {result.compressed_sketch_bytes:,} bytes "
        f"({_ratio(result.sketch_bytes, result.compressed_sketch_bytes)})",
        f"  Counts zstd:     {result.compressed_counts_bytes:,} bytes",
        f"",
        f"Time:              {total_ms:.1f} ms",
        f"  Tokenize:        {result.tokenize_time_ms:.1f} ms",
        f"  Exact count:     {result.count_time_ms:.1f} ms",
        f"  Sketch add:      {result.sketch_time_ms:.1f} ms",
        f"  Compress:        {result.compress_time_ms:.1f} ms",
    ]
    return "\n".join(lines)


def format_lookup(
    words: list[str],
    sketch: CountMinSketch,
    counts: Mapping[str, int],
) -> str:
    """Table of sketch estimate vs exact count for a few tokens."""
    lines = [
        f"{'Token':<20} {'Exact':>10} {'Estimate':>10} {'Over':>8}",
        "-" * 51,
    ]
    for word in words:
        exact = counts.get(word, 0)
        est = sketch.estimate(word)
        lines.append(f"{word:<20} {exact:>10,} {est:>10,} {est - exact:>8,}")
    return "\n".join(lines)


def format_dimensions(dims: SketchDimensions) -> str:
    return "\n".join([
        f"Rows:     {dims.rows}",
        f"Columns:  {dims.columns:,}",
        f"Counters: {dims.rows * dims.columns:,}",
        f"Memory:   {dims.memory_bytes:,} bytes",
    ])
