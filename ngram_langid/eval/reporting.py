"""
Persist evaluation artifacts such as JSON metrics, predictions and confusion matrices.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import List

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pandas as pd  # noqa: E402
import seaborn as sns  # noqa: E402


def save_metrics_json(path: Path, payload: dict) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2, default=float), encoding="utf-8")
    return path


def save_predictions_csv(path: Path, predictions: pd.DataFrame) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    predictions.to_csv(path, index=False)
    return path


def confusion_title(n: int, accuracy: float | None = None) -> str:
    title = f"Character {n}-gram cosine classification"
    if accuracy is not None:
        title += f" (accuracy {accuracy:.1%})"
    return title


def save_confusion_plot(
    matrix,
    labels: List[str],
    path: Path,
    n: int,
    accuracy: float | None = None,
) -> Path:
    """
    Heatmap of true vs. predicted corpus labels for one n-gram length.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    size = max(4.0, 0.8 * len(labels) + 2)
    fig, ax = plt.subplots(figsize=(size + 1, size))
    sns.heatmap(
        matrix,
        annot=True,
        fmt="d",
        cmap="Greens",
        xticklabels=labels,
        yticklabels=labels,
        ax=ax,
    )
    ax.set_xlabel("Predicted language")
    ax.set_ylabel("Corpus folder")
    ax.set_title(confusion_title(n, accuracy))
    fig.tight_layout()
    fig.savefig(path)
    plt.close(fig)
    return path


__all__ = [
    "save_metrics_json",
    "save_predictions_csv",
    "confusion_title",
    "save_confusion_plot",
]
