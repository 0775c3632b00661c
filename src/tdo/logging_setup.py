# src/tdo/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FILE_NAME = "tdo.log"

LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


class _ConsoleNoiseFilter(logging.Filter):
    """
    Keep the terminal clean while pickers own it:
    - allow tdo logs (subject to the handler level)
    - everything else, captured warnings included, only at ERROR+
    """

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name
        if name == "tdo" or name.startswith("tdo."):
            return True
        return record.levelno >= logging.ERROR


def _reset_root_handlers(root: logging.Logger) -> None:
    # main() may be re-entered (tests, `python -m tdo` from the preview pane of
    # another tdo); handlers from an earlier call must not write twice.
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()


def setup_logging(
    *,
    log_dir: str | Path = "~/.local/state/tdo",
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Route tdo's logs to `<log_dir>/tdo.log` and, sparingly, to stderr.

    fzf draws on the terminal and `view` prints to stdout (also captured as the
    preview pane), so the console handler writes to stderr and defaults to
    WARNING. The log file gets every record from file_level up: each file read
    and write, command run and picker call.

    Returns the log file path.
    """
    log_dir = Path(log_dir).expanduser()
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    root = logging.getLogger()
    root.setLevel(min(console_level, file_level))
    _reset_root_handlers(root)

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(fmt)
    console.addFilter(_ConsoleNoiseFilter())
    root.addHandler(console)

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(file_level)
    file_handler.setFormatter(fmt)
    root.addHandler(file_handler)

    # warnings.warn(...) lands in the log file as 'py.warnings'
    logging.captureWarnings(True)

    return log_file
