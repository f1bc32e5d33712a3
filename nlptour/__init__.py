"""
A guided tour of pre-trained NLP models: language detection, tokenization,
sentence splitting, POS tagging, lemmatization, stemming, chunking and
name finding over fixed example texts.
"""

# Package version identifier
__version__ = "0.1.0"
