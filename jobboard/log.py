"""
Logging for the job board.

Everything logs under the ``jobboard`` logger. Streamlit re-executes
app.py on every widget event and re-imports edited modules while it
runs, so handlers carry a marker and are attached once per process no
matter how often this module is loaded. LOG_LEVEL comes from the
environment, falling back to the project's .env.
"""
from __future__ import annotations

import logging
import os
import sys
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv

PACKAGE_LOGGER = "jobboard"
ENV_PATH: Path = Path(__file__).resolve().parent.parent / ".env"
LOG_DIR: Path = Path(__file__).resolve().parent.parent / "logs"

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_DATE_FMT = "%Y-%m-%d %H:%M:%S"
_MARKER = "_jobboard_handler"


def get_logger(name: str) -> logging.Logger:
    """Logger under ``jobboard``; ``get_logger("app")`` is ``jobboard.app``."""
    package = logging.getLogger(PACKAGE_LOGGER)
    if not _own_handlers(package):
        configure()
    if name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + "."):
        return logging.getLogger(name)
    return package.getChild(name)


def configure(env_path: Path = ENV_PATH, log_dir: Path = LOG_DIR) -> logging.Logger:
    """(Re)attach the console and daily-file handlers to the package logger."""
    # .env must be read before LOG_LEVEL; a real environment variable still wins.
    load_dotenv(env_path)
    level_name = os.environ.get("LOG_LEVEL", "").strip().upper() or "INFO"
    level = logging.getLevelName(level_name)
    unknown_level = not isinstance(level, int)
    if unknown_level:
        level = logging.INFO

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    for handler in _own_handlers(logger):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(_FORMAT, datefmt=_DATE_FMT)
    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(formatter)
    _attach(logger, console)

    file_error: OSError | None = None
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / f"jobboard_{datetime.now().strftime('%Y-%m-%d')}.log"
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setFormatter(formatter)
        _attach(logger, fh)
    except OSError as exc:
        file_error = exc

    if unknown_level:
        logger.warning("Unknown LOG_LEVEL %r, using INFO", level_name)
    if file_error is not None:
        logger.warning("File logging disabled: %s", file_error)
    return logger


def _attach(logger: logging.Logger, handler: logging.Handler) -> None:
    setattr(handler, _MARKER, True)
    logger.addHandler(handler)


def _own_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [h for h in logger.handlers if getattr(h, _MARKER, False)]
