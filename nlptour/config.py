"""
Runtime configuration for the model tour.

Defaults mirror the models the demo was written against; a YAML file or CLI
flags can point at other spaCy packages or another NLTK data directory.
"""

from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Optional, Tuple
import logging

import yaml

logger = logging.getLogger(__name__)

CORE_ROUTINES = ("langdetect", "tokenize", "sentences", "pos", "lemmatize", "stem")
EXTRA_ROUTINES = ("chunk", "names")
ALL_ROUTINES = CORE_ROUTINES + EXTRA_ROUTINES

DEFAULT_NLTK_DATA = Path("resources/nltk_data")


@dataclass
class DemoConfig:
    """Which routines run and where their models come from."""

    routines: Tuple[str, ...] = CORE_ROUTINES
    nltk_data_dir: Path = DEFAULT_NLTK_DATA
    download_missing: bool = True

    # spaCy packages (or paths to pipeline directories)
    english_tokenizer_model: str = "en_core_web_sm"
    german_tokenizer_model: str = "de_core_news_sm"
    ner_model: str = "en_core_web_sm"

    sentence_language: str = "english"  # Punkt model language
    langdetect_seed: int = 0
    outdir: Optional[Path] = None

    tokenizer_models: Tuple[str, ...] = field(init=False, repr=False)

    def __post_init__(self):
        self.routines = parse_routines(self.routines)
        self.nltk_data_dir = Path(self.nltk_data_dir)
        if self.outdir is not None:
            self.outdir = Path(self.outdir)
        self.tokenizer_models = (self.english_tokenizer_model, self.german_tokenizer_model)


def parse_routines(value) -> Tuple[str, ...]:
    """
    Normalize a routine selection.

    Accepts a comma list ("pos,stem"), "all", or any iterable of names.
    Order follows the canonical order, not the order given.
    """
    if isinstance(value, str):
        names = [v.strip() for v in value.split(",") if v.strip()]
    else:
        names = list(value)
    if names == ["all"]:
        return ALL_ROUTINES
    unknown = [n for n in names if n not in ALL_ROUTINES]
    if unknown:
        raise ValueError(f"Unknown routine(s): {', '.join(unknown)}. Choose from: {', '.join(ALL_ROUTINES)}")
    if not names:
        raise ValueError("No routines selected.")
    return tuple(n for n in ALL_ROUTINES if n in names)


def load_config(path: Path, **overrides) -> DemoConfig:
    """
    Build a DemoConfig from a YAML mapping, then apply keyword overrides.

    Raises:
        ValueError: for unknown keys or a non-mapping document.
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config {path} must contain a mapping, got {type(data).__name__}")

    allowed = {f.name for f in fields(DemoConfig) if f.init}
    unknown = sorted(set(data) - allowed)
    if unknown:
        raise ValueError(f"Unknown config key(s) in {path}: {', '.join(unknown)}")
    # outdir is the only field where null means something (no export)
    missing = sorted(k for k, v in data.items() if v is None and k != "outdir")
    if missing:
        raise ValueError(f"Config key(s) in {path} need a value: {', '.join(missing)}")

    logger.debug("Loaded config from %s", path)
    cfg = DemoConfig(**data)
    return with_overrides(cfg, **overrides)


def with_overrides(cfg: DemoConfig, **overrides) -> DemoConfig:
    """Return a copy of cfg with every non-None override applied."""
    changes = {k: v for k, v in overrides.items() if v is not None}
    return replace(cfg, **changes) if changes else cfg
