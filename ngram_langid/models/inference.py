"""
Classify documents against trained n-gram language models.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Tuple

from ngram_langid.config.settings import ClassifierConfig, validate_policy
from ngram_langid.data.corpus import iter_lines, iter_text_lines
from ngram_langid.errors import (
    DocumentReadError,
    NoModelsAvailableError,
    UndefinedSimilarityError,
)
from ngram_langid.features.ngrams import text_histogram
from ngram_langid.models.model_store import ModelStore
from ngram_langid.models.similarity import cosine_similarity

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RankedLanguage:
    label: str
    score: float


@dataclass(frozen=True)
class Prediction:
    """Winning label plus the full ranking it was chosen from."""

    label: str
    display_label: str
    score: float
    ranked: Tuple[RankedLanguage, ...]
    excluded: Tuple[str, ...] = ()

    def top(self, k: int) -> Tuple[RankedLanguage, ...]:
        return self.ranked[:k]


def display_label(label: str, suffix: str = ClassifierConfig.label_suffix) -> str:
    """
    Strip the corpus folder suffix from ``label`` (``englishTxt`` -> ``english``).

    Labels that do not end with ``suffix``, or consist only of it, are
    returned unchanged.
    """
    if suffix and label.endswith(suffix) and len(label) > len(suffix):
        return label[: -len(suffix)]
    return label


def rank_languages(
    query: dict,
    store: ModelStore,
    empty_model_policy: str = ClassifierConfig.empty_model_policy,
) -> Tuple[List[RankedLanguage], List[str]]:
    """
    Score ``query`` against every model, best first.

    Ties are ordered by label so the ranking is reproducible.
    """
    validate_policy(empty_model_policy)
    if not store:
        raise NoModelsAvailableError("no trained language models available")
    if not query:
        raise UndefinedSimilarityError(
            "The query document produced no n-grams; similarity is undefined."
        )

    ranked: List[RankedLanguage] = []
    excluded: List[str] = []
    for label, model in store.items():
        try:
            score = cosine_similarity(query, model.histogram)
        except UndefinedSimilarityError:
            if empty_model_policy == "zero":
                score = 0.0
            else:
                logger.debug("Excluding empty model %s from ranking", label)
                excluded.append(label)
                continue
        ranked.append(RankedLanguage(label, score))

    ranked.sort(key=lambda item: (-item.score, item.label))
    return ranked, sorted(excluded)


def classify(
    lines: Iterable[str],
    store: ModelStore,
    *,
    empty_model_policy: str = ClassifierConfig.empty_model_policy,
    label_suffix: str = ClassifierConfig.label_suffix,
) -> Prediction:
    """
    Predict the language of a document given as an iterable of lines.
    """
    query = text_histogram(lines, store.n)
    ranked, excluded = rank_languages(query, store, empty_model_policy)
    if not ranked:
        raise NoModelsAvailableError(
            "no trained language models with n-gram data available"
        )
    best = ranked[0]
    return Prediction(
        label=best.label,
        display_label=display_label(best.label, label_suffix),
        score=best.score,
        ranked=tuple(ranked),
        excluded=tuple(excluded),
    )


def classify_text(text: str, store: ModelStore, **kwargs) -> Prediction:
    return classify(iter_text_lines(text), store, **kwargs)


def classify_file(path: Path, store: ModelStore, **kwargs) -> Prediction:
    """
    Read a UTF-8 document and classify it.
    """
    try:
        return classify(iter_lines(path), store, **kwargs)
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentReadError(path, str(exc)) from exc


__all__ = [
    "RankedLanguage",
    "Prediction",
    "display_label",
    "rank_languages",
    "classify",
    "classify_text",
    "classify_file",
]
