"""
Evaluation helpers for the n-gram language identifier.
"""
from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
import pandas as pd
from sklearn.metrics import accuracy_score, classification_report, confusion_matrix

from ngram_langid.config.settings import ClassifierConfig
from ngram_langid.data.corpus import language_dirs, language_documents
from ngram_langid.errors import LanguageIdError
from ngram_langid.models.inference import classify_file
from ngram_langid.models.model_store import ModelStore

logger = logging.getLogger(__name__)

PREDICTION_COLUMNS = ["path", "language", "predicted", "score", "error"]


def evaluate_directory(
    store: ModelStore,
    test_root: Path,
    suffix: str = ClassifierConfig.document_suffix,
    empty_model_policy: str = ClassifierConfig.empty_model_policy,
) -> pd.DataFrame:
    """
    Classify every document under ``test_root/<label>/``.

    Documents that cannot be classified keep a row with ``predicted`` unset
    and the failure in ``error``.
    """
    rows = []
    for language_dir in language_dirs(Path(test_root)):
        for path in language_documents(language_dir, suffix):
            row = {
                "path": str(path),
                "language": language_dir.name,
                "predicted": None,
                "score": np.nan,
                "error": None,
            }
            try:
                prediction = classify_file(
                    path, store, empty_model_policy=empty_model_policy
                )
            except LanguageIdError as exc:
                logger.warning("Could not classify %s: %s", path, exc)
                row["error"] = str(exc)
            else:
                row["predicted"] = prediction.label
                row["score"] = prediction.score
            rows.append(row)
    return pd.DataFrame(rows, columns=PREDICTION_COLUMNS)


def classified_rows(predictions: pd.DataFrame) -> pd.DataFrame:
    return predictions[predictions["predicted"].notna()]


def classification_summary(y_true, y_pred) -> dict:
    payload = classification_report(
        y_true, y_pred, output_dict=True, zero_division=0
    )
    payload["accuracy"] = accuracy_score(y_true, y_pred)
    return payload


def compute_confusion(y_true, y_pred, labels) -> np.ndarray:
    return confusion_matrix(y_true, y_pred, labels=labels)


__all__ = [
    "PREDICTION_COLUMNS",
    "evaluate_directory",
    "classified_rows",
    "classification_summary",
    "compute_confusion",
]
