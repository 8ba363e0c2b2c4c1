"""
Cosine similarity between sparse n-gram histograms.
"""
from __future__ import annotations

import math
from typing import Mapping

import numpy as np

from ngram_langid.errors import UndefinedSimilarityError


def squared_magnitude(histogram: Mapping[str, int]) -> float:
    """Sum of squared counts over every key of ``histogram``."""
    counts = np.fromiter(histogram.values(), dtype=np.float64, count=len(histogram))
    return float(np.dot(counts, counts))


def dot_product(h1: Mapping[str, int], h2: Mapping[str, int]) -> float:
    # Keys missing from either side contribute nothing, so walk the smaller one.
    if len(h2) < len(h1):
        h1, h2 = h2, h1
    return float(sum(count * h2.get(ngram, 0) for ngram, count in h1.items()))


def cosine_similarity(h1: Mapping[str, int], h2: Mapping[str, int]) -> float:
    """
    Cosine of the angle between two histograms treated as sparse vectors.

    Raises UndefinedSimilarityError when either histogram is empty, since the
    denominator would be zero.
    """
    magnitude1 = squared_magnitude(h1)
    magnitude2 = squared_magnitude(h2)
    if magnitude1 == 0 or magnitude2 == 0:
        raise UndefinedSimilarityError(
            "Cosine similarity is undefined for a histogram without n-grams."
        )
    return dot_product(h1, h2) / math.sqrt(magnitude1 * magnitude2)


__all__ = ["squared_magnitude", "dot_product", "cosine_similarity"]
