# usage: Penn Treebank POS tags from NLTK's averaged perceptron tagger
from nltk import pos_tag


def pos_tags(tokens):
    """
    Tag an already tokenized sentence.
    Returns one tag per input token, in order.
    """
    tokens = list(tokens)
    if not tokens:
        return []
    return [tag for _, tag in pos_tag(tokens)]
