"""Console logging shared by the CLI and the HTTP app."""

from __future__ import annotations

import logging
import sys
from typing import Literal

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# Third-party loggers that report every request at INFO.
NOISY_LOGGERS = ("httpx", "chromadb", "urllib3")


def setup_logging(level: LogLevel = "INFO") -> None:
    """Send every ``web_rag`` logger to stdout at *level*.

    Replaces any handlers installed earlier; the third-party loggers in
    :data:`NOISY_LOGGERS` never go below WARNING.
    """
    numeric = getattr(logging, level)
    logging.basicConfig(
        level=numeric,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(logging.WARNING, numeric))
