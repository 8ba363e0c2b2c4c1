"""
Global configuration for the n-gram language identifier.
"""
import os
from pathlib import Path

import yaml

PROJECT_ROOT = Path(__file__).resolve().parents[2]
DATA_DIR = PROJECT_ROOT / "data"
CORPUS_DIR = DATA_DIR / "corpus"
ARTIFACTS_DIR = PROJECT_ROOT / "artifacts"

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / "defaults.yaml"
CONFIG_PATH = Path(os.environ.get("NGRAM_LANGID_CONFIG", DEFAULT_CONFIG_PATH))
with CONFIG_PATH.open("r", encoding="utf-8") as f:
    _payload = yaml.safe_load(f) or {}

EMPTY_MODEL_POLICIES = ("exclude", "zero")


def _section(name: str) -> dict:
    return _payload.get(name) or {}


def validate_n(n: int) -> int:
    if n < 1:
        raise ValueError(f"n-gram length must be a positive integer, got {n}.")
    return n


def validate_policy(policy: str) -> str:
    if policy not in EMPTY_MODEL_POLICIES:
        raise ValueError(
            f"Unknown empty model policy {policy!r}; "
            f"expected one of {', '.join(EMPTY_MODEL_POLICIES)}."
        )
    return policy


class ClassifierConfig:
    """Defaults used for training and classification."""

    n = validate_n(int(_section("ngram").get("n", 2)))
    document_suffix = _section("corpus").get("document_suffix", ".txt")
    query_name = _section("corpus").get("query_name", "mysteryGr.txt")
    label_suffix = _section("corpus").get("label_suffix", "") or ""
    empty_model_policy = validate_policy(
        _section("classification").get("empty_model_policy", "exclude")
    )
    top_k = int(_section("classification").get("top_k", 3))
    n_jobs = int(_section("training").get("n_jobs", 1))


__all__ = [
    "PROJECT_ROOT",
    "DATA_DIR",
    "CORPUS_DIR",
    "ARTIFACTS_DIR",
    "DEFAULT_CONFIG_PATH",
    "CONFIG_PATH",
    "EMPTY_MODEL_POLICIES",
    "validate_n",
    "validate_policy",
    "ClassifierConfig",
]
