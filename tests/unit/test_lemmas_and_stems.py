import pytest

from nlptour.nlp import lemmatization
from nlptour.nlp.lemmatization import lemmatize, wn_pos
from nlptour.nlp.stemming import stem_words


@pytest.mark.parametrize("tag,expected", [
    ("JJ", "a"), ("JJS", "a"),
    ("NNS", "n"), ("NNP", "n"),
    ("VBP", "v"), ("VBD", "v"),
    ("RB", "r"),
    ("IN", "n"), ("PRP", "n"), ("", "n"),
])
def test_wn_pos(tag, expected):
    assert wn_pos(tag) == expected


class _RecordingLemmatizer:
    def __init__(self):
        self.calls = []

    def lemmatize(self, word, pos="n"):
        self.calls.append((word, pos))
        return {"are": "be", "methods": "method"}.get(word, word)


def test_lemmatize_lowercases_and_maps_tags(monkeypatch):
    fake = _RecordingLemmatizer()
    monkeypatch.setattr(lemmatization, "_WORDNET_LEM", fake)

    out = lemmatize(["How", "are", "methods"], ["WRB", "VBP", "NNS"])

    assert out == ["how", "be", "method"]
    assert fake.calls == [("how", "n"), ("are", "v"), ("methods", "n")]


def test_lemmatize_rejects_length_mismatch():
    with pytest.raises(ValueError):
        lemmatize(["Cats", "like"], ["NNS"])


def test_porter_stems():
    assert stem_words(["methods", "Processing", "provide", "Language"]) == [
        "method", "process", "provid", "languag",
    ]


def test_stem_words_keeps_length():
    words = ["Hi", "How", "are", "you"]
    assert len(stem_words(words)) == len(words)
