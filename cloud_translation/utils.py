"""Utility helpers for logging and character classification."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

try:
    import colorlog
except ImportError:  # pragma: no cover - optional dependency
    colorlog = None  # type: ignore[assignment]

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

CJK_UNIFIED_START = 0x4E00
CJK_UNIFIED_END = 0x9FFF


class _MaxLevelFilter(logging.Filter):
    """Filter that only allows records up to a specific level."""

    def __init__(self, max_level: int) -> None:
        super().__init__()
        self._max_level = max_level

    def filter(self, record: logging.LogRecord) -> bool:  # pragma: no cover - logging helper
        return record.levelno <= self._max_level


def setup_logger(name: str, level: str | None = None) -> logging.Logger:
    """Configure a color console logger, optionally mirrored to a file.

    INFO and below go to stdout, WARNING and above to stderr. Set
    ``CLOUD_TRANSLATION_LOG_FILE`` to also write every record to that file.
    """
    if level is None:
        level = os.getenv("LOG_LEVEL", "INFO")

    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if logger.handlers:
        return logger

    if colorlog is not None:
        console_formatter: logging.Formatter = colorlog.ColoredFormatter(
            "%(log_color)s" + LOG_FORMAT,
            datefmt=LOG_DATEFMT,
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "red,bg_white",
            },
        )
        console_handler = colorlog.StreamHandler(stream=sys.stdout)
    else:
        console_formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)
        console_handler = logging.StreamHandler(stream=sys.stdout)
    console_handler.setLevel(logging.DEBUG)
    console_handler.addFilter(_MaxLevelFilter(logging.INFO))
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    stderr_handler = logging.StreamHandler(stream=sys.stderr)
    stderr_handler.setLevel(logging.WARNING)
    stderr_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
    logger.addHandler(stderr_handler)

    log_file = os.getenv("CLOUD_TRANSLATION_LOG_FILE", "").strip()
    if log_file:
        path = Path(log_file).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
        logger.addHandler(file_handler)

    return logger


def is_chinese_character(char: str) -> bool:
    """Return True if the first code point of *char* is a CJK unified ideograph."""
    if not char:
        return False
    return CJK_UNIFIED_START <= ord(char[0]) <= CJK_UNIFIED_END
