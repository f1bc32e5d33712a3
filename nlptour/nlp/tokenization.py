# usage: tokenizer-only pass over a spaCy pipeline

def tokenize(nlp, text: str):
    """Split text into word/punctuation tokens without running the rest of the pipeline."""
    return [t.text for t in nlp.make_doc(text) if not t.is_space]
