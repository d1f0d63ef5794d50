"""Logging configuration for taskman.

The menu owns stdout, so diagnostics go to stderr through rich and,
optionally, to a log file with full detail.
"""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(
    *,
    level: int | str = logging.WARNING,
    log_file: str | Path | None = None,
) -> None:
    """Configure the taskman logger.

    Call this once, before the first log call. Calling it again replaces
    the handlers installed by the previous call.
    """
    logger = logging.getLogger("taskman")
    logger.setLevel(logging.DEBUG)

    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    ch = RichHandler(console=Console(stderr=True), show_path=False)
    ch.setLevel(level)
    logger.addHandler(ch)

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_file), encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(fh)

