"""
POS tagging and sentence splitting wrap data-backed NLTK calls; these tests
patch the NLTK entry points and check the wrapping only.
"""

from nlptour.nlp import sentences, tagging


def test_pos_tags_returns_tags_only(monkeypatch):
    seen = []

    def fake_pos_tag(tokens):
        seen.append(tokens)
        return [(t, "NN") for t in tokens]

    monkeypatch.setattr(tagging, "pos_tag", fake_pos_tag)
    assert tagging.pos_tags(("Cats", "like", "milk")) == ["NN", "NN", "NN"]
    assert seen == [["Cats", "like", "milk"]]


def test_pos_tags_empty_sentence_skips_tagger(monkeypatch):
    def boom(tokens):
        raise AssertionError("tagger should not be called")

    monkeypatch.setattr(tagging, "pos_tag", boom)
    assert tagging.pos_tags([]) == []


def test_split_sentences_strips_and_drops_empty(monkeypatch):
    calls = {}

    def fake_sent_tokenize(text, language="english"):
        calls["language"] = language
        return [" Hi. ", "", "How are you? ", "   "]

    monkeypatch.setattr(sentences, "sent_tokenize", fake_sent_tokenize)
    assert sentences.split_sentences("Hi. How are you?", language="german") == ["Hi.", "How are you?"]
    assert calls["language"] == "german"
