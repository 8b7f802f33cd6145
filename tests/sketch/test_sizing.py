"""Tests for sizing a sketch from (error_rate, confidence)."""
from __future__ import annotations

import math

import pytest

from wordsketch.sketch.countmin import CountMinSketch
from wordsketch.sketch.errors import InvalidParameter
from wordsketch.sketch.hasher import Murmur3Hasher
from wordsketch.sketch.sizing import SketchDimensions, dimensions, sketch_with_bounds


class TestDimensions:
    def test_reference_target(self):
        dims = dimensions(0.0005, 0.99)
        assert dims == SketchDimensions(rows=5, columns=5437)
        assert dims.columns == math.ceil(math.e / 0.0005)
        assert dims.memory_bytes == 5 * 5437 * 4

    @pytest.mark.parametrize("confidence, rows", [
        (0.5, 1),    # ln 2 = 0.69
        (0.9, 3),    # ln 10 = 2.30
        (0.99, 5),   # ln 100 = 4.61
        (0.999, 7),  # ln 1000 = 6.91
    ])
    def test_rows(self, confidence, rows):
        assert dimensions(0.01, confidence).rows == rows

    @pytest.mark.parametrize("error_rate, columns", [
        (0.5, 6),
        (0.1, 28),
        (0.01, 272),
        (0.001, 2719),
    ])
    def test_columns(self, error_rate, columns):
        assert dimensions(error_rate, 0.9).columns == columns

    def test_tiny_confidence_still_one_row(self):
        assert dimensions(0.01, 1e-20).rows == 1

    def test_deterministic(self):
        assert dimensions(0.003, 0.95) == dimensions(0.003, 0.95)

    def test_bound_matches_target(self):
        dims = dimensions(0.0005, 0.99)
        assert math.e / dims.columns <= 0.0005
        assert math.exp(-dims.rows) <= 1 - 0.99


class TestInvalidInput:
    @pytest.mark.parametrize("error_rate, confidence", [
        (0, 0.99), (1, 0.99), (0.01, 0), (0.01, 1),
        (-0.1, 0.5), (0.01, 1.5), (float("nan"), 0.5), (0.01, float("nan")),
    ])
    def test_out_of_range(self, error_rate, confidence):
        with pytest.raises(InvalidParameter):
            dimensions(error_rate, confidence)

    @pytest.mark.parametrize("bad", ["0.1", None, True])
    def test_not_a_number(self, bad):
        with pytest.raises(InvalidParameter):
            dimensions(bad, 0.9)

    @pytest.mark.parametrize("error_rate", [5e-324, 1e-300, 1e-12])
    def test_error_rate_too_small(self, error_rate):
        # e / 5e-324 overflows to inf; the others need more columns than fit
        with pytest.raises(InvalidParameter, match="too small"):
            dimensions(error_rate, 0.99)

    def test_largest_column_count_accepted(self):
        # e / 1e-9 ~= 2.7e9 columns still fits the uint32 header field
        assert dimensions(1e-9, 0.5).columns == math.ceil(math.e / 1e-9)

    def test_sketch_with_bounds_rejects(self):
        with pytest.raises(InvalidParameter):
            sketch_with_bounds(0.01, 1.0)


class TestSketchWithBounds:
    def test_builds_empty_sketch(self):
        cms = sketch_with_bounds(0.0005, 0.99)
        assert isinstance(cms, CountMinSketch)
        assert (cms.rows, cms.columns) == (5, 5437)
        assert cms.total == 0
        assert sum(cms.counters) == 0

    def test_passes_hasher(self):
        hasher = Murmur3Hasher()
        cms = sketch_with_bounds(0.01, 0.9, hasher=hasher)
        assert cms.hasher is hasher
