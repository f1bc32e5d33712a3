# usage: helpers for console formatting and result export
from pathlib import Path
import json
import logging
import re

import pandas as pd

logger = logging.getLogger(__name__)


def safe_filename(name: str, maxlen: int = 180) -> str:
    """
    Sanitize a string for use as a filename.

    Steps:
    - Replace invalid characters (anything not alphanumeric, underscore, dash, dot, or space) with "_".
    - Replace whitespace with "_".
    - Collapse multiple underscores.
    - Strip trailing/leading dots, spaces, or underscores.
    - Truncate result to `maxlen` (default 180 chars).
    - If nothing remains, return "untitled".
    """
    s = re.sub(r"[^\w\-. ]+", "_", name)
    s = re.sub(r"\s+", "_", s)
    s = re.sub(r"_+", "_", s).strip(" ._")
    return s[:maxlen] if s else "untitled"


def bracket_join(items) -> str:
    """Render a sequence as `[a, b, c]`."""
    return "[" + ", ".join(str(x) for x in items) + "]"


def write_table(df: pd.DataFrame, outdir: Path, name: str) -> Path:
    outdir.mkdir(parents=True, exist_ok=True)
    path = outdir / f"{safe_filename(name)}.csv"
    df.to_csv(path, index=False)
    logger.info("Wrote %s (%d rows)", path, len(df))
    return path


def write_summary(summary: dict, outdir: Path, name: str = "summary") -> Path:
    """Dump a JSON summary next to the exported tables."""
    outdir.mkdir(parents=True, exist_ok=True)
    path = outdir / f"{safe_filename(name)}.json"
    path.write_text(json.dumps(summary, indent=2, default=str), encoding="utf-8")
    logger.info("Wrote %s", path)
    return path
