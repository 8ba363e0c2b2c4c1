"""
Command-line entry point: train per-language n-gram models and classify text.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich import print as rprint
from rich.table import Table

from ngram_langid.config.log_setup import configure_logging
from ngram_langid.config.settings import ARTIFACTS_DIR, ClassifierConfig, validate_policy
from ngram_langid.errors import LanguageIdError
from ngram_langid.eval.metrics import (
    classification_summary,
    classified_rows,
    compute_confusion,
    evaluate_directory,
)
from ngram_langid.eval.reporting import (
    save_confusion_plot,
    save_metrics_json,
    save_predictions_csv,
)
from ngram_langid.models.inference import classify_file, display_label
from ngram_langid.models.model_store import ModelStore, build_model_store

app = typer.Typer(help="Identify the language of a document with character n-gram profiles.")


def _fail(message: str) -> None:
    rprint(f"[bold red]Error:[/bold red] {message}")
    raise typer.Exit(code=1)


def _check_policy(value: str) -> str:
    try:
        return validate_policy(value)
    except ValueError as exc:
        raise typer.BadParameter(str(exc))


def _train(corpus_root: Path, n: int, suffix: str, jobs: int) -> ModelStore:
    store = build_model_store(corpus_root, n, suffix=suffix, n_jobs=jobs)
    for skipped in store.report.skipped:
        rprint(f"[yellow]Skipped {skipped.path}: {skipped.reason}")
    return store


@app.command()
def classify(
    corpus_root: Path = typer.Argument(
        ..., help="Directory with one subdirectory of training documents per language."
    ),
    n: int = typer.Argument(ClassifierConfig.n, min=1, help="N-gram length."),
    query: Optional[Path] = typer.Option(
        None,
        "--query",
        "-q",
        help=f"Document to classify (default: CORPUS_ROOT/{ClassifierConfig.query_name}).",
    ),
    suffix: str = typer.Option(
        ClassifierConfig.document_suffix, help="File suffix of training documents."
    ),
    label_suffix: str = typer.Option(
        ClassifierConfig.label_suffix, help="Folder-name suffix dropped from the printed label."
    ),
    policy: str = typer.Option(
        ClassifierConfig.empty_model_policy,
        callback=_check_policy,
        help="How to rank languages without n-grams: exclude or zero.",
    ),
    jobs: int = typer.Option(
        ClassifierConfig.n_jobs, "--jobs", "-j", help="Parallel jobs for training."
    ),
    top_k: int = typer.Option(ClassifierConfig.top_k, help="Number of ranked scores to show."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """
    Train on CORPUS_ROOT and print the predicted language of the query document.
    """
    configure_logging(verbose)
    query_path = query or corpus_root / ClassifierConfig.query_name
    try:
        store = _train(corpus_root, n, suffix, jobs)
        prediction = classify_file(
            query_path,
            store,
            empty_model_policy=policy,
            label_suffix=label_suffix,
        )
    except LanguageIdError as exc:
        _fail(str(exc))
        return

    table = Table(title=f"Top {top_k} languages ({n}-grams)")
    table.add_column("Language")
    table.add_column("Cosine similarity", justify="right")
    for entry in prediction.top(top_k):
        table.add_row(display_label(entry.label, label_suffix), f"{entry.score:.4f}")
    rprint(table)
    for label in prediction.excluded:
        rprint(f"[yellow]{label} has no n-grams and was not ranked.")
    rprint(f"[bold green]The mystery text is written in {prediction.display_label}.")


@app.command()
def profile(
    corpus_root: Path = typer.Argument(..., help="Training corpus root."),
    n: int = typer.Argument(ClassifierConfig.n, min=1, help="N-gram length."),
    suffix: str = typer.Option(
        ClassifierConfig.document_suffix, help="File suffix of training documents."
    ),
    most_common: int = typer.Option(5, help="Frequent n-grams to list per language."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """
    Summarize the trained histogram of every language.
    """
    configure_logging(verbose)
    try:
        store = _train(corpus_root, n, suffix, ClassifierConfig.n_jobs)
    except LanguageIdError as exc:
        _fail(str(exc))
        return

    table = Table(title=f"Language profiles ({n}-grams)")
    table.add_column("Language")
    table.add_column("Documents", justify="right")
    table.add_column("Distinct n-grams", justify="right")
    table.add_column("Most frequent")
    for label, model in store.items():
        top = sorted(model.histogram.items(), key=lambda item: (-item[1], item[0]))
        table.add_row(
            label,
            str(model.documents),
            str(len(model.histogram)),
            ", ".join(f"{ngram}:{count}" for ngram, count in top[:most_common]),
        )
    rprint(table)


@app.command()
def evaluate(
    corpus_root: Path = typer.Argument(..., help="Training corpus root."),
    test_root: Path = typer.Argument(
        ..., help="Held-out documents, one subdirectory per language."
    ),
    n: int = typer.Argument(ClassifierConfig.n, min=1, help="N-gram length."),
    output_dir: Path = typer.Option(ARTIFACTS_DIR, help="Where to write evaluation artifacts."),
    suffix: str = typer.Option(
        ClassifierConfig.document_suffix, help="File suffix of documents."
    ),
    policy: str = typer.Option(
        ClassifierConfig.empty_model_policy,
        callback=_check_policy,
        help="How to rank languages without n-grams: exclude or zero.",
    ),
    jobs: int = typer.Option(
        ClassifierConfig.n_jobs, "--jobs", "-j", help="Parallel jobs for training."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """
    Classify every held-out document and report accuracy and a confusion matrix.
    """
    configure_logging(verbose)
    try:
        store = _train(corpus_root, n, suffix, jobs)
        predictions = evaluate_directory(store, test_root, suffix, policy)
    except LanguageIdError as exc:
        _fail(str(exc))
        return

    scored = classified_rows(predictions)
    if scored.empty:
        _fail(f"No documents under {test_root} could be classified.")
        return

    labels = sorted(set(scored["language"]) | set(scored["predicted"]))
    metrics = {
        "n": n,
        "documents": len(predictions),
        "unclassified": int(len(predictions) - len(scored)),
        "summary": classification_summary(scored["language"], scored["predicted"]),
    }
    predictions_path = save_predictions_csv(output_dir / f"predictions_n{n}.csv", predictions)
    metrics_path = save_metrics_json(output_dir / f"metrics_n{n}.json", metrics)
    conf_path = save_confusion_plot(
        compute_confusion(scored["language"], scored["predicted"], labels=labels),
        labels=labels,
        path=output_dir / f"confusion_n{n}.png",
        n=n,
        accuracy=metrics["summary"]["accuracy"],
    )
    rprint(f"[bold green]Accuracy: {metrics['summary']['accuracy']:.3f}")
    rprint(f"[cyan]Predictions CSV → {predictions_path}")
    rprint(f"[cyan]Metrics JSON → {metrics_path}")
    rprint(f"[cyan]Confusion matrix → {conf_path}")


if __name__ == "__main__":
    app()
