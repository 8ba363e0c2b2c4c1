import math

import pytest

from ngram_langid.errors import UndefinedSimilarityError
from ngram_langid.features.ngrams import text_histogram
from ngram_langid.models.similarity import cosine_similarity, squared_magnitude


def test_squared_magnitude_is_not_square_rooted():
    assert squared_magnitude({"ab": 3, "cd": 4}) == 25.0


def test_self_similarity_is_one():
    histogram = text_histogram(["the quick brown fox"], 2)
    assert cosine_similarity(histogram, histogram) == pytest.approx(1.0)


def test_similarity_is_symmetric():
    h1 = text_histogram(["the cat sat on the mat"], 2)
    h2 = text_histogram(["le chat est sur le tapis"], 2)
    assert cosine_similarity(h1, h2) == cosine_similarity(h2, h1)


def test_similarity_uses_both_full_magnitudes():
    h1 = {"ab": 1}
    h2 = {"ab": 1, "cd": 1}
    assert cosine_similarity(h1, h2) == pytest.approx(1 / math.sqrt(2))


def test_disjoint_histograms_score_zero():
    assert cosine_similarity({"ab": 2}, {"cd": 5}) == 0.0


def test_empty_histogram_similarity_is_undefined():
    with pytest.raises(UndefinedSimilarityError):
        cosine_similarity({}, {"ab": 1})
    with pytest.raises(UndefinedSimilarityError):
        cosine_similarity({"ab": 1}, {})
