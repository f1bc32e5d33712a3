# usage: language identification with langdetect's bundled profiles
from langdetect import DetectorFactory, detect_langs


def detect_language(text: str, seed: int = 0):
    """
    Rank candidate languages for `text`.

    Returns a list of (iso_code, probability) pairs, most likely first.
    langdetect is randomized; fixing the seed makes repeated runs agree.
    Raises langdetect.LangDetectException when the text has no usable features.
    """
    DetectorFactory.seed = seed
    return [(lang.lang, float(lang.prob)) for lang in detect_langs(text)]
