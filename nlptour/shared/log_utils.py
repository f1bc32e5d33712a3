# usage: one-time logging setup for the CLI
import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "WARNING") -> None:
    """
    Send diagnostics (downloads, model loads, exported files) to stderr so they
    never mix with the demo output printed on stdout.

    `level` is a level name such as "INFO". Does nothing if the root logger
    already has handlers.
    """
    logging.basicConfig(
        level=level.upper(),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )
