# usage: locate/download NLTK data and load spaCy pipelines
from functools import lru_cache
from pathlib import Path
import logging

import nltk
import spacy

logger = logging.getLogger(__name__)


class ModelLoadError(RuntimeError):
    """A required model or data package is not available."""


# NLTK package name -> locator passed to nltk.data.find
NLTK_RESOURCES = {
    "punkt_tab": "tokenizers/punkt_tab",
    "averaged_perceptron_tagger_eng": "taggers/averaged_perceptron_tagger_eng",
    "wordnet": "corpora/wordnet",
    "omw-1.4": "corpora/omw-1.4",
}

# Which NLTK packages each routine needs
ROUTINE_RESOURCES = {
    "sentences": ("punkt_tab",),
    "pos": ("averaged_perceptron_tagger_eng",),
    "lemmatize": ("averaged_perceptron_tagger_eng", "wordnet", "omw-1.4"),
}


def use_data_dir(data_dir: Path) -> None:
    """Put data_dir first on NLTK's search path."""
    d = str(Path(data_dir).resolve())
    if d not in nltk.data.path:
        nltk.data.path.insert(0, d)


def ensure_nltk_resources(names, data_dir: Path, download: bool = True) -> None:
    """
    Make sure every NLTK package in `names` can be found.

    Missing packages are downloaded quietly into data_dir when `download` is set.

    Raises:
        ModelLoadError: a package is missing and cannot be downloaded.
    """
    use_data_dir(data_dir)
    for pkg in names:
        locator = NLTK_RESOURCES.get(pkg, pkg)
        try:
            nltk.data.find(locator)
            continue
        except LookupError:
            if not download:
                raise ModelLoadError(
                    f"NLTK resource '{pkg}' not found. Run `python -m nltk.downloader -d {data_dir} {pkg}`."
                ) from None

        logger.info("Downloading NLTK resource %s into %s", pkg, data_dir)
        Path(data_dir).mkdir(parents=True, exist_ok=True)
        if not nltk.download(pkg, download_dir=str(data_dir), quiet=True):
            raise ModelLoadError(f"Could not download NLTK resource '{pkg}'.")


@lru_cache(maxsize=None)
def load_spacy(name: str):
    """
    Load a spaCy pipeline by package name or path, once per process.

    Raises:
        ModelLoadError: the package is not installed / the path has no pipeline.
    """
    logger.info("Loading spaCy pipeline %s", name)
    try:
        return spacy.load(name)
    except OSError as e:
        raise ModelLoadError(
            f"spaCy model '{name}' is not available. Install it with `python -m spacy download {name}`."
        ) from e
