from ngram_langid.eval.reporting import confusion_title, save_confusion_plot


def test_confusion_title_names_ngram_length():
    assert confusion_title(3) == "Character 3-gram cosine classification"
    assert confusion_title(2, 0.5) == "Character 2-gram cosine classification (accuracy 50.0%)"


def test_save_confusion_plot_writes_png(tmp_path):
    path = save_confusion_plot([[1, 0], [0, 1]], ["en", "fr"], tmp_path / "out" / "c.png", n=2)
    assert path.exists()
