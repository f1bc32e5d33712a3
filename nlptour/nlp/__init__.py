# Expose the wrapped model calls for easier imports when using this package.

from .langid import detect_language              # langdetect ranking
from .tokenization import tokenize               # spaCy tokenizer pass
from .sentences import split_sentences           # Punkt sentence splitting
from .tagging import pos_tags                    # perceptron POS tagger
from .lemmatization import lemmatize, wn_pos     # WordNet lemmatizer
from .stemming import stem_words                 # Porter stemmer
from .chunking import chunk_tags                 # regexp chunker
from .names import find_names                    # spaCy NER, PERSON spans
from .resources import ModelLoadError, ensure_nltk_resources, load_spacy

__all__ = [
    "detect_language",
    "tokenize",
    "split_sentences",
    "pos_tags",
    "lemmatize",
    "wn_pos",
    "stem_words",
    "chunk_tags",
    "find_names",
    "ModelLoadError",
    "ensure_nltk_resources",
    "load_spacy",
]
