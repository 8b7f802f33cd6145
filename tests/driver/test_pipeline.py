"""Tests for the corpus pipeline and report formatting."""
from __future__ import annotations

import logging

import pytest

from wordsketch.driver.pipeline import (
    CorpusResult,
    overestimates,
    run_corpus,
    within_bound_fraction,
)
from wordsketch.driver.report import format_dimensions, format_lookup, format_report
from wordsketch.sketch.countmin import CountMinSketch
from wordsketch.sketch.errors import InvalidParameter
from wordsketch.sketch.hasher import Blake2bHasher
from wordsketch.sketch.sizing import dimensions
from wordsketch.text.tokenizer import to_words


class TestRunCorpus:
    def test_counts_match_tokenizer(self, text):
        result, sketch, counts = run_corpus(text)
        words = to_words(text)
        assert result.total_tokens == len(words) == sketch.total
        assert result.distinct_tokens == len(counts) == len(set(words))
        assert (result.rows, result.columns) == (5, 5437)

    def test_never_underestimates(self, text):
        result, sketch, counts = run_corpus(text, error_rate=0.05, confidence=0.9)
        for token, true_count in counts.items():
            assert sketch.estimate(token) >= true_count
        assert result.max_overestimate >= 0
        assert result.mean_overestimate >= 0

    def test_large_sketch_is_exact_on_small_vocab(self, text):
        # 28 words in 5437 columns x 5 rows: a collision in every row is
        # practically impossible
        result, sketch, counts = run_corpus(text)
        assert result.max_overestimate == 0
        assert result.within_bound == 1.0

    def test_sizes_reported(self, text):
        result, sketch, _ = run_corpus(text)
        assert result.sketch_bytes == sketch.memory_bytes() == 5 * 5437 * 4
        assert 0 < result.compressed_sketch_bytes < result.sketch_bytes
        assert result.compressed_counts_bytes > 0

    def test_custom_tokenizer_and_hasher(self):
        hasher = Blake2bHasher()
        result, sketch, counts = run_corpus(
            "a,b,a,c,a", tokenizer=lambda s: s.split(","), hasher=hasher,
        )
        assert sketch.hasher is hasher
        assert counts == {"a": 3, "b": 1, "c": 1}
        assert sketch.estimate("a") >= 3
        assert result.total_tokens == 5

    def test_empty_text(self):
        result, sketch, counts = run_corpus("")
        assert result.total_tokens == 0
        assert result.distinct_tokens == 0
        assert result.within_bound == 1.0
        assert result.max_overestimate == 0

    def test_bad_parameters_fail_first(self):
        def exploding_tokenizer(text):
            raise AssertionError("tokenizer should not run")

        with pytest.raises(InvalidParameter):
            run_corpus("x", error_rate=0, tokenizer=exploding_tokenizer)

    def test_logs_progress(self, caplog, text):
        with caplog.at_level(logging.INFO, logger="wordsketch.driver.pipeline"):
            run_corpus(text)
        assert "to 5x5437 sketch" in caplog.text


class TestAccuracyHelpers:
    def test_overestimates(self):
        cms = CountMinSketch(rows=2, columns=1)
        for w in ["a", "a", "b"]:
            cms.add(w)
        assert overestimates(cms, {"a": 2, "b": 1}) == {"a": 1, "b": 2}

    def test_within_bound_fraction(self):
        cms = CountMinSketch(rows=1, columns=1)
        for w in ["a"] * 9 + ["b"]:
            cms.add(w)
        # N=10, budget 0.5*10=5: "a" over by 1, "b" over by 9
        assert within_bound_fraction(cms, {"a": 9, "b": 1}, 0.5) == 0.5
        assert within_bound_fraction(cms, {}, 0.5) == 1.0


class TestReport:
    def _result(self) -> CorpusResult:
        return CorpusResult(
            total_tokens=1000, distinct_tokens=120, rows=5, columns=5437,
            error_rate=0.0005, confidence=0.99, sketch_bytes=108_740,
            compressed_sketch_bytes=2_000, compressed_counts_bytes=900,
            max_overestimate=3, mean_overestimate=0.25, within_bound=1.0,
            tokenize_time_ms=1.0, count_time_ms=0.5,
            sketch_time_ms=4.0, compress_time_ms=0.5,
        )

    def test_error_budget(self):
        assert self._result().error_budget == pytest.approx(0.5)

    def test_format_report(self):
        report = format_report(self._result(), label="wodehouse.txt")
        assert report.startswith("=== wodehouse.txt ===")
        assert "1,000" in report
        assert "5 rows x 5,437 columns" in report
        assert "100.00%" in report
        assert "54.4x" in report
        assert "6.0 ms" in report

    def test_format_lookup(self):
        cms = CountMinSketch(rows=3, columns=50)
        cms.add("beetle", count=4)
        table = format_lookup(["beetle", "newt"], cms, {"beetle": 4})
        lines = table.splitlines()
        assert lines[0].split() == ["Token", "Exact", "Estimate", "Over"]
        assert lines[2].split() == ["beetle", "4", "4", "0"]
        assert lines[3].split()[:2] == ["newt", "0"]

    def test_format_dimensions(self):
        out = format_dimensions(dimensions(0.0005, 0.99))
        assert "Rows:     5" in out
        assert "Columns:  5,437" in out
        assert "Memory:   108,740 bytes" in out
