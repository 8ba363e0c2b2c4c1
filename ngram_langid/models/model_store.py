"""
Build one n-gram histogram per language from a directory of training corpora.
"""
from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from joblib import Parallel, delayed

from ngram_langid.config.settings import ClassifierConfig, validate_n
from ngram_langid.data.corpus import (
    iter_lines,
    iter_text_lines,
    language_dirs,
    language_documents,
)
from ngram_langid.errors import NoModelsAvailableError
from ngram_langid.features.ngrams import Histogram, merge_histograms, text_histogram

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SkippedDocument:
    path: Path
    reason: str


@dataclass(frozen=True)
class LanguageModel:
    """Aggregated n-gram histogram for one language label."""

    label: str
    histogram: Mapping[str, int] = field(hash=False)
    documents: int = 0

    @classmethod
    def from_histogram(cls, label: str, histogram: Histogram, documents: int = 0):
        return cls(label, MappingProxyType(dict(histogram)), documents)

    @property
    def is_empty(self) -> bool:
        return not self.histogram


@dataclass(frozen=True)
class TrainingReport:
    skipped: Tuple[SkippedDocument, ...] = ()
    documents: Mapping[str, int] = field(default_factory=dict)

    @property
    def total_documents(self) -> int:
        return sum(self.documents.values())


class ModelStore(Mapping[str, LanguageModel]):
    """
    Read-only mapping of label to LanguageModel, built for a fixed ``n``.
    """

    def __init__(
        self,
        models: Iterable[LanguageModel],
        n: int,
        report: Optional[TrainingReport] = None,
    ):
        self.n = validate_n(n)
        self._models: Dict[str, LanguageModel] = {m.label: m for m in models}
        self.report = report or TrainingReport(
            documents={label: m.documents for label, m in self._models.items()}
        )

    def __getitem__(self, label: str) -> LanguageModel:
        return self._models[label]

    def __iter__(self) -> Iterator[str]:
        return iter(self._models)

    def __len__(self) -> int:
        return len(self._models)

    def __repr__(self) -> str:
        return f"ModelStore(n={self.n}, labels={sorted(self._models)!r})"


def _document_histogram(path: Path, n: int) -> Tuple[Optional[Histogram], Optional[str]]:
    # A document only contributes once it has been read to the end.
    try:
        return text_histogram(iter_lines(path), n), None
    except (OSError, UnicodeDecodeError) as exc:
        return None, f"{type(exc).__name__}: {exc}"


def _language_histogram(
    language_dir: Path,
    n: int,
    suffix: str,
) -> Tuple[Histogram, int, List[SkippedDocument]]:
    # Returns plain picklable values so joblib workers can run it.
    histograms: List[Histogram] = []
    skipped: List[SkippedDocument] = []
    for path in language_documents(language_dir, suffix):
        histogram, reason = _document_histogram(path, n)
        if histogram is None:
            logger.warning("Skipping unreadable document %s (%s)", path, reason)
            skipped.append(SkippedDocument(path, reason))
            continue
        histograms.append(histogram)
    return merge_histograms(histograms), len(histograms), skipped


def build_language_model(
    language_dir: Path,
    n: int,
    suffix: str = ".txt",
) -> Tuple[LanguageModel, List[SkippedDocument]]:
    """
    Aggregate every readable document in ``language_dir`` into one model.
    """
    histogram, documents, skipped = _language_histogram(language_dir, n, suffix)
    return _wrap_model(Path(language_dir).name, histogram, documents), skipped


def _wrap_model(label: str, histogram: Histogram, documents: int) -> LanguageModel:
    model = LanguageModel.from_histogram(label, histogram, documents)
    logger.debug(
        "Built model %s from %d documents (%d distinct n-grams)",
        label,
        model.documents,
        len(model.histogram),
    )
    return model


def build_model_store(
    corpus_root: Path,
    n: int = ClassifierConfig.n,
    *,
    suffix: str = ClassifierConfig.document_suffix,
    n_jobs: int = ClassifierConfig.n_jobs,
) -> ModelStore:
    """
    Train one language model per subdirectory of ``corpus_root``.

    Unreadable documents are skipped and listed in ``store.report.skipped``.
    """
    validate_n(n)
    dirs = language_dirs(Path(corpus_root))
    if not dirs:
        raise NoModelsAvailableError(
            f"No language subdirectories found under {corpus_root}."
        )

    if n_jobs == 1:
        results = [_language_histogram(d, n, suffix) for d in dirs]
    else:
        results = Parallel(n_jobs=n_jobs)(
            delayed(_language_histogram)(d, n, suffix) for d in dirs
        )

    models = [
        _wrap_model(d.name, histogram, documents)
        for d, (histogram, documents, _) in zip(dirs, results)
    ]
    skipped = tuple(doc for _, _, docs in results for doc in docs)
    report = TrainingReport(
        skipped=skipped,
        documents={model.label: model.documents for model in models},
    )
    logger.info(
        "Trained %d language models from %d documents (%d skipped)",
        len(models),
        report.total_documents,
        len(skipped),
    )
    return ModelStore(models, n, report)


def build_model_store_from_texts(
    corpora: Mapping[str, Iterable[str]],
    n: int = ClassifierConfig.n,
) -> ModelStore:
    """
    Train models from in-memory documents, ``{label: [document_text, ...]}``.
    """
    validate_n(n)
    models = []
    for label, texts in corpora.items():
        histogram: Histogram = Counter()
        documents = 0
        for text in texts:
            histogram.update(text_histogram(iter_text_lines(text), n))
            documents += 1
        models.append(LanguageModel.from_histogram(label, histogram, documents))
    return ModelStore(models, n)


__all__ = [
    "SkippedDocument",
    "LanguageModel",
    "TrainingReport",
    "ModelStore",
    "build_language_model",
    "build_model_store",
    "build_model_store_from_texts",
]
