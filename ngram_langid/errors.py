"""
Exception classes for the n-gram language identifier.
"""


class LanguageIdError(Exception):
    """Base exception for language identification errors."""
    pass


class CorpusLayoutError(LanguageIdError):
    """Raised when the training corpus root is missing or not a directory."""
    pass


class NoModelsAvailableError(LanguageIdError):
    """Raised when there is no trained language model to compare against."""
    pass


class UndefinedSimilarityError(LanguageIdError):
    """Raised when cosine similarity involves a histogram with no n-grams."""
    pass


class DocumentReadError(LanguageIdError):
    """Raised when a document to classify cannot be read."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not read {path}: {reason}")
