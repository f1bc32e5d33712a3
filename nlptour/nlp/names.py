# usage: person-name spans from a spaCy NER pipeline

def find_names(nlp, text: str, labels=("PERSON",)):
    """Return (text, start_char, end_char) for each entity whose label is in `labels`."""
    doc = nlp(text)
    return [(ent.text, ent.start_char, ent.end_char) for ent in doc.ents if ent.label_ in labels]
