# ticklist/logging_setup.py

from __future__ import annotations

import logging
import sys

from . import config


class _ConsoleNoiseFilter(logging.Filter):
    """
    Keep the console readable:
    - allow ticklist logs at the configured level
    - suppress third-party noise (prompt_toolkit, asyncio) unless ERROR+
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == "ticklist" or record.name.startswith("ticklist."):
            return True
        return record.levelno >= logging.ERROR


def setup_logging(*, console_level: int | None = None) -> None:
    """
    Configure a single stderr handler for the process.

    Level comes from $TICKLIST_LOG_LEVEL unless given explicitly.
    Call once, early, from the entry point. Safe to call again: previous
    handlers are replaced.
    """
    if console_level is None:
        console_level = config.get_log_level()

    root = logging.getLogger()
    root.setLevel(console_level)

    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    logging.captureWarnings(True)
