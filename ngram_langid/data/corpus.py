"""
File-system access for per-language training corpora.

A corpus root holds one subdirectory per language; each subdirectory holds
plain-text documents.
"""
from __future__ import annotations

import io
from pathlib import Path
from typing import Iterator, List

from ngram_langid.errors import CorpusLayoutError


def language_dirs(corpus_root: Path) -> List[Path]:
    """
    Return the language subdirectories of ``corpus_root`` sorted by name.
    """
    root = Path(corpus_root)
    if not root.is_dir():
        raise CorpusLayoutError(
            f"Corpus root {root} does not exist or is not a directory."
        )
    return sorted((p for p in root.iterdir() if p.is_dir()), key=lambda p: p.name)


def language_documents(language_dir: Path, suffix: str = ".txt") -> List[Path]:
    """
    Return the documents directly inside ``language_dir`` whose name ends with ``suffix``.
    """
    return sorted(
        p for p in Path(language_dir).iterdir()
        if p.is_file() and p.name.endswith(suffix)
    )


def iter_lines(path: Path) -> Iterator[str]:
    """Lazily yield the lines of a UTF-8 text document."""
    with Path(path).open("r", encoding="utf-8") as f:
        yield from f


def iter_text_lines(text: str) -> Iterator[str]:
    """Split in-memory text into lines the same way ``iter_lines`` reads files."""
    yield from io.StringIO(text, newline=None)


__all__ = ["language_dirs", "language_documents", "iter_lines", "iter_text_lines"]
