# usage: WordNet lemmas, guided by Penn Treebank tags
from nltk.stem import WordNetLemmatizer

_WORDNET_LEM = WordNetLemmatizer()


def wn_pos(treebank_tag: str):
    tag = treebank_tag[:1].upper()
    return {'J': 'a', 'N': 'n', 'V': 'v', 'R': 'r'}.get(tag, 'n')


def lemmatize(tokens, tags):
    """
    Reduce each token to its dictionary form.

    Tokens are lower-cased first since WordNet entries are lower case; the tag
    picks the WordNet part of speech (nouns when the tag has no counterpart).
    """
    tokens, tags = list(tokens), list(tags)
    if len(tokens) != len(tags):
        raise ValueError(f"Got {len(tokens)} tokens but {len(tags)} tags")
    return [_WORDNET_LEM.lemmatize(t.lower(), wn_pos(p)) for t, p in zip(tokens, tags)]
