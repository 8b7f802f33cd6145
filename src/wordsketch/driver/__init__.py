"""Corpus driver: tokenize, count, compare, report.

Public API:
    run_corpus: full pipeline on one text
    CorpusResult: accuracy/size/timing summary
    within_bound_fraction, overestimates: accuracy checks
    format_report, format_lookup, format_dimensions: terminal output
"""

from wordsketch.driver.pipeline import (
    CorpusResult,
    overestimates,
    run_corpus,
    within_bound_fraction,
)
from wordsketch.driver.report import format_dimensions, format_lookup, format_report

__all__ = [
    "CorpusResult",
    "format_dimensions",
    "format_lookup",
    "format_report",
    "overestimates",
    "run_corpus",
    "within_bound_fraction",
]
