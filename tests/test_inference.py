import pytest

from ngram_langid.errors import (
    DocumentReadError,
    NoModelsAvailableError,
    UndefinedSimilarityError,
)
from ngram_langid.models.inference import (
    classify,
    classify_file,
    classify_text,
    display_label,
)
from ngram_langid.models.model_store import (
    ModelStore,
    build_model_store,
    build_model_store_from_texts,
)


def test_classify_file_prefers_english(sample_corpus):
    store = build_model_store(sample_corpus, 2)
    prediction = classify_file(sample_corpus / "mysteryGr.txt", store, label_suffix="Txt")
    assert prediction.label == "englishTxt"
    assert prediction.display_label == "english"
    scores = {entry.label: entry.score for entry in prediction.ranked}
    assert scores["englishTxt"] > scores["frenchTxt"]
    assert prediction.score == scores["englishTxt"]


def test_ranking_is_best_first():
    store = build_model_store_from_texts(
        {"english": ["the cat sat on the mat"], "french": ["le chat est sur le tapis"]}, 2
    )
    prediction = classify_text("the mat", store)
    assert [entry.label for entry in prediction.ranked] == ["english", "french"]
    assert prediction.top(1)[0].label == "english"


def test_ties_are_broken_by_label():
    store = build_model_store_from_texts({"zulu": ["abc"], "alpha": ["abc"], "mid": ["abc"]}, 2)
    labels = {classify_text("abc", store).label for _ in range(5)}
    assert labels == {"alpha"}


def test_empty_store_raises():
    with pytest.raises(NoModelsAvailableError, match="no trained language models"):
        classify(["the cat"], ModelStore([], 2))


def test_empty_query_is_undefined():
    store = build_model_store_from_texts({"english": ["the cat"]}, 2)
    with pytest.raises(UndefinedSimilarityError):
        classify(["1 2 3 a"], store)


def test_empty_model_is_excluded_by_default():
    store = build_model_store_from_texts({"english": ["xyz"], "empty": []}, 2)
    prediction = classify_text("abc", store)
    assert prediction.label == "english"
    assert prediction.score == 0.0
    assert prediction.excluded == ("empty",)
    assert [entry.label for entry in prediction.ranked] == ["english"]


def test_empty_model_scores_zero_under_zero_policy():
    store = build_model_store_from_texts({"english": ["xyz"], "empty": []}, 2)
    prediction = classify_text("abc", store, empty_model_policy="zero")
    # Both score 0.0; "empty" sorts first.
    assert prediction.label == "empty"
    assert prediction.excluded == ()


def test_only_empty_models_raises():
    store = build_model_store_from_texts({"empty": []}, 2)
    with pytest.raises(NoModelsAvailableError):
        classify_text("abc", store)


def test_unknown_policy_is_rejected():
    store = build_model_store_from_texts({"english": ["abc"]}, 2)
    with pytest.raises(ValueError):
        classify_text("abc", store, empty_model_policy="ignore")


def test_classify_missing_file_raises(tmp_path):
    store = build_model_store_from_texts({"english": ["abc"]}, 2)
    with pytest.raises(DocumentReadError):
        classify_file(tmp_path / "missing.txt", store)


def test_classify_uses_store_n():
    store = build_model_store_from_texts({"english": ["cat"]}, 3)
    prediction = classify_text("cat", store)
    assert prediction.score == pytest.approx(1.0)


@pytest.mark.parametrize(
    "label, suffix, expected",
    [
        ("englishTxt", "Txt", "english"),
        ("english", "Txt", "english"),
        ("Txt", "Txt", "Txt"),
        ("greekTxt", "", "greekTxt"),
    ],
)
def test_display_label(label, suffix, expected):
    assert display_label(label, suffix) == expected


def test_classify_text_splits_lines_like_files(tmp_path):
    store = build_model_store_from_texts({"english": ["abcdef"], "other": ["ab cd"]}, 2)
    text = "ab\x1ccd ef"
    query = tmp_path / "query.txt"
    query.write_text(text, encoding="utf-8")
    from_text = classify_text(text, store)
    from_file = classify_file(query, store)
    assert from_text.ranked == from_file.ranked
    assert from_text.label == "english"


def test_default_label_suffix_comes_from_config():
    store = build_model_store_from_texts({"englishTxt": ["the cat"]}, 2)
    assert classify_text("the cat", store).display_label == "english"
    assert classify_text("the cat", store, label_suffix="").display_label == "englishTxt"
