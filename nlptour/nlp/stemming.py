# usage: Porter stemming (algorithmic, no model file)
from nltk.stem import PorterStemmer

_PORTER = PorterStemmer()


def stem_words(words):
    return [_PORTER.stem(w) for w in words]
