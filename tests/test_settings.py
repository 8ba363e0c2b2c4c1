import pytest

from ngram_langid.config.settings import ClassifierConfig, validate_n, validate_policy


def test_default_configuration():
    assert ClassifierConfig.n == 2
    assert ClassifierConfig.document_suffix == ".txt"
    assert ClassifierConfig.query_name == "mysteryGr.txt"
    assert ClassifierConfig.empty_model_policy == "exclude"


def test_validate_n_rejects_non_positive():
    assert validate_n(3) == 3
    with pytest.raises(ValueError):
        validate_n(0)


def test_validate_policy():
    assert validate_policy("zero") == "zero"
    with pytest.raises(ValueError):
        validate_policy("nan")
