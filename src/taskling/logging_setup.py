# src/taskling/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def console_filter(record: logging.LogRecord) -> bool:
    """Our records pass (handler level applies); third-party ones need ERROR+."""
    if record.name == "taskling" or record.name.startswith("taskling."):
        return True
    return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_file: str | Path,
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> None:
    """
    Route logs to stderr (quiet, responses go to stdout) and to log_file (everything).

    Call this ONCE, before the first log line.
    """
    log_file = Path(log_file)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(min(console_level, file_level))
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    handlers: list[tuple[logging.Handler, int]] = [
        (logging.StreamHandler(sys.stderr), console_level),
        (logging.FileHandler(str(log_file), encoding="utf-8"), file_level),
    ]
    for handler, level in handlers:
        handler.setLevel(level)
        handler.setFormatter(fmt)
        root.addHandler(handler)
    handlers[0][0].addFilter(console_filter)

    logging.captureWarnings(True)
