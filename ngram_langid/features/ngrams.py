"""
Character n-gram extraction and histogram accumulation.
"""
from __future__ import annotations

from collections import Counter
from typing import Iterable, Iterator

from ngram_langid.config.settings import validate_n
from ngram_langid.features.tokenizer import iter_tokens

Histogram = Counter


def extract_ngrams(word: str, n: int) -> Iterator[str]:
    """
    Yield the sliding-window substrings ``word[i:i + n]``.

    Words shorter than ``n`` (including the empty word) yield nothing.
    """
    for i in range(max(len(word) - n + 1, 0)):
        yield word[i:i + n]


def iter_text_ngrams(lines: Iterable[str], n: int) -> Iterator[str]:
    validate_n(n)
    for word in iter_tokens(lines):
        yield from extract_ngrams(word, n)


def build_histogram(ngrams: Iterable[str]) -> Histogram:
    """Count every n-gram occurrence."""
    histogram: Histogram = Counter()
    for ngram in ngrams:
        histogram[ngram] += 1
    return histogram


def text_histogram(lines: Iterable[str], n: int) -> Histogram:
    return build_histogram(iter_text_ngrams(lines, n))


def merge_histograms(histograms: Iterable[Histogram]) -> Histogram:
    merged: Histogram = Counter()
    for histogram in histograms:
        merged.update(histogram)
    return merged


__all__ = [
    "Histogram",
    "extract_ngrams",
    "iter_text_ngrams",
    "build_histogram",
    "text_histogram",
    "merge_histograms",
]
