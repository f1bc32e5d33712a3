# Command-line driver that walks through each pre-trained model in turn.
# Every routine prints its sample inputs and outputs, and returns a table that
# can optionally be exported to CSV/JSON.

import argparse
import logging
from pathlib import Path

import pandas as pd

from nlptour import samples
from nlptour.config import ALL_ROUTINES, DemoConfig, load_config, parse_routines, with_overrides
from nlptour.nlp import (
    ModelLoadError,
    chunk_tags,
    detect_language,
    ensure_nltk_resources,
    find_names,
    lemmatize,
    load_spacy,
    pos_tags,
    split_sentences,
    stem_words,
    tokenize,
)
from nlptour.nlp.resources import ROUTINE_RESOURCES
from nlptour.shared import bracket_join, setup_logging, write_summary, write_table

logger = logging.getLogger(__name__)


def _nltk_ready(cfg: DemoConfig, routine: str):
    ensure_nltk_resources(ROUTINE_RESOURCES[routine], cfg.nltk_data_dir, download=cfg.download_missing)


def language_detection(cfg: DemoConfig) -> pd.DataFrame:
    print("Language detection")
    rows = []
    for text in samples.LANGUAGE_TEXTS:
        print(text)
        ranked = detect_language(text, seed=cfg.langdetect_seed)
        lang, prob = ranked[0]
        print(f"Language: {lang}, {prob:.2f}")
        rows.append({
            "text": text,
            "language": lang,
            "confidence": prob,
            "candidates": bracket_join(f"{code}:{p:.4f}" for code, p in ranked),
        })
    return pd.DataFrame(rows)


def tokenization(cfg: DemoConfig) -> pd.DataFrame:
    # One pass per tokenizer model (English, then German) over the same texts
    frames = [tokenize_by_model(name) for name in cfg.tokenizer_models]
    return pd.concat(frames, ignore_index=True)


def tokenize_by_model(model_name: str) -> pd.DataFrame:
    print(f"Tokenization {model_name}")
    nlp = load_spacy(model_name)
    rows = []
    for text in samples.TOKENIZATION_TEXTS:
        print(text)
        tokens = tokenize(nlp, text)
        print(bracket_join(tokens))
        rows.append({"model": model_name, "text": text, "token_count": len(tokens), "tokens": bracket_join(tokens)})
    return pd.DataFrame(rows)


def sentence_detection(cfg: DemoConfig) -> pd.DataFrame:
    print("Sentence detection")
    _nltk_ready(cfg, "sentences")
    rows = []
    for i, text in enumerate(samples.SENTENCE_TEXTS):
        print(text)
        sentences = split_sentences(text, language=cfg.sentence_language)
        print(bracket_join(sentences))
        rows.extend({"text_id": i, "sentence_id": j, "sentence": s} for j, s in enumerate(sentences))
    return pd.DataFrame(rows, columns=["text_id", "sentence_id", "sentence"])


def part_of_speech_tagging(cfg: DemoConfig) -> pd.DataFrame:
    print("Part of speech tagging")
    _nltk_ready(cfg, "pos")
    rows = []
    for i, sentence in enumerate(samples.POS_SENTENCES):
        print(bracket_join(sentence))
        tags = pos_tags(sentence)
        print(bracket_join(tags))
        rows.extend({"sentence_id": i, "token": t, "pos": p} for t, p in zip(sentence, tags))
    return pd.DataFrame(rows, columns=["sentence_id", "token", "pos"])


def lemmatization(cfg: DemoConfig) -> pd.DataFrame:
    print("Lemmatizer")
    _nltk_ready(cfg, "lemmatize")
    sentence = samples.GREETING_SENTENCE
    tags = pos_tags(sentence)
    lemmas = lemmatize(sentence, tags)
    print(bracket_join(sentence))
    print(bracket_join(lemmas))
    return pd.DataFrame({"token": sentence, "pos": tags, "lemma": lemmas})


def stemming(cfg: DemoConfig) -> pd.DataFrame:
    print("Stemmer")
    sentence = samples.GREETING_SENTENCE
    stems = stem_words(sentence)
    print(bracket_join(sentence))
    print(bracket_join(stems))
    return pd.DataFrame({"token": sentence, "stem": stems})


def chunking(cfg: DemoConfig) -> pd.DataFrame:
    print("Chunker")
    tags = chunk_tags(samples.CHUNK_SENTENCE, samples.CHUNK_TAGS)
    print(bracket_join(samples.CHUNK_SENTENCE))
    print(bracket_join(tags))
    return pd.DataFrame({"token": samples.CHUNK_SENTENCE, "pos": samples.CHUNK_TAGS, "chunk": tags})


def name_finding(cfg: DemoConfig) -> pd.DataFrame:
    print(f"Name finder {cfg.ner_model}")
    nlp = load_spacy(cfg.ner_model)
    print(samples.NAME_TEXT)
    names = find_names(nlp, samples.NAME_TEXT)
    print(bracket_join(f"{name} [{start}..{end})" for name, start, end in names))
    return pd.DataFrame(names, columns=["name", "start", "end"])


ROUTINES = {
    "langdetect": language_detection,
    "tokenize": tokenization,
    "sentences": sentence_detection,
    "pos": part_of_speech_tagging,
    "lemmatize": lemmatization,
    "stem": stemming,
    "chunk": chunking,
    "names": name_finding,
}


def _models_used(cfg: DemoConfig) -> dict:
    models = {}
    for name in cfg.routines:
        if name == "tokenize":
            models[name] = list(cfg.tokenizer_models)
        elif name == "names":
            models[name] = [cfg.ner_model]
        elif name in ROUTINE_RESOURCES:
            models[name] = list(ROUTINE_RESOURCES[name])
    return models


def run(cfg: DemoConfig) -> dict:
    """
    Run the configured routines in order and return {routine: DataFrame}.
    Any failure propagates; there is no partial-run recovery.
    """
    results = {}
    for name in cfg.routines:
        logger.info("Running %s", name)
        results[name] = ROUTINES[name](cfg)

    if cfg.outdir is not None:
        for name, df in results.items():
            write_table(df, cfg.outdir, name)
        write_summary({
            "routines": list(results),
            "rows": {name: len(df) for name, df in results.items()},
            "models": _models_used(cfg),
            "nltk_data_dir": str(cfg.nltk_data_dir),
        }, cfg.outdir)
    return results


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Run pre-trained NLP models over built-in example texts.")
    ap.add_argument("--routines", default=None,
                    help=f"Comma list from {','.join(ALL_ROUTINES)} or 'all' (default: core routines).")
    ap.add_argument("--config", default=None, help="YAML file with DemoConfig fields.")
    ap.add_argument("--nltk-data", default=None, help="Directory for NLTK data (searched first, downloads go here).")
    ap.add_argument("--no-download", action="store_true", help="Fail instead of downloading missing NLTK data.")
    ap.add_argument("--outdir", default=None, help="Also write per-routine CSV tables and a summary JSON here.")
    ap.add_argument("--log-level", default="WARNING", type=str.upper,
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Diagnostic verbosity (stderr).")
    return ap


def main(argv=None):
    """
    CLI entrypoint: parses arguments, builds the config and runs the tour.
    """
    ap = build_parser()
    args = ap.parse_args(argv)
    setup_logging(args.log_level)

    try:
        routines = parse_routines(args.routines) if args.routines else None
    except ValueError as e:
        ap.error(str(e))

    overrides = dict(
        routines=routines,
        nltk_data_dir=Path(args.nltk_data) if args.nltk_data else None,
        download_missing=False if args.no_download else None,
        outdir=Path(args.outdir) if args.outdir else None,
    )
    if args.config:
        try:
            cfg = load_config(Path(args.config), **overrides)
        except (OSError, ValueError) as e:
            raise SystemExit(f"Bad config: {e}")
    else:
        cfg = with_overrides(DemoConfig(), **overrides)

    try:
        run(cfg)
    except ModelLoadError as e:
        raise SystemExit(str(e))


if __name__ == "__main__":
    main()
