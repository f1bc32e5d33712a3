# usage: sentence boundaries with the Punkt model
from nltk.tokenize import sent_tokenize


def split_sentences(text: str, language: str = "english"):
    return [s.strip() for s in sent_tokenize(text, language=language) if s.strip()]
