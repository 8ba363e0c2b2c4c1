from pathlib import Path

import pytest


def write_corpus(root: Path, documents: dict) -> Path:
    """Create ``root/<label>/<name>`` files from ``{label: {name: text}}``."""
    for label, files in documents.items():
        language_dir = root / label
        language_dir.mkdir(parents=True, exist_ok=True)
        for name, text in files.items():
            path = language_dir / name
            if isinstance(text, bytes):
                path.write_bytes(text)
            else:
                path.write_text(text, encoding="utf-8")
    return root


@pytest.fixture
def sample_corpus(tmp_path):
    root = write_corpus(
        tmp_path / "corpus",
        {
            "englishTxt": {"a.txt": "the cat sat\n", "b.txt": "The cat sat!\n"},
            "frenchTxt": {"a.txt": "le chat\n"},
        },
    )
    (root / "mysteryGr.txt").write_text("the dog sat\n", encoding="utf-8")
    return root
