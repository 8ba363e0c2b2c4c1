"""
Whitespace tokenization and ASCII-letter normalization of raw text.
"""
from __future__ import annotations

import re
from typing import Iterable, Iterator

_WHITESPACE = re.compile(r"\s+", re.ASCII)
_NON_LETTER = re.compile(r"[^a-zA-Z]")
_ASCII_WHITESPACE = " \t\n\r\f\v"


def normalize_token(token: str) -> str:
    """
    Drop every character outside ``a-z``/``A-Z`` and lowercase the rest.

    Tokens made only of punctuation or digits normalize to ``""``.
    """
    return _NON_LETTER.sub("", token).lower()


def split_line(line: str) -> list[str]:
    # A leading whitespace run, or a blank line, yields one "" token, which
    # produces no n-grams downstream.
    return _WHITESPACE.split(line.rstrip(_ASCII_WHITESPACE))


def iter_tokens(lines: Iterable[str]) -> Iterator[str]:
    """
    Lazily yield normalized word tokens for every line.

    Empty tokens are passed through unchanged so callers see exactly one
    token per whitespace-separated field.
    """
    for line in lines:
        for token in split_line(line):
            yield normalize_token(token)


__all__ = ["normalize_token", "split_line", "iter_tokens"]
