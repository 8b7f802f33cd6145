"""Text normalization and exact counting.

Public API:
    stem, to_words, iter_words: default tokenizer
    Tokenizer: type of any text -> tokens function
    exact_counts: Counter-based ground truth
"""

from wordsketch.text.oracle import exact_counts
from wordsketch.text.tokenizer import Tokenizer, iter_words, stem, to_words

__all__ = [
    "Tokenizer",
    "exact_counts",
    "iter_words",
    "stem",
    "to_words",
]
