"""Logging setup for the motd-markup command line."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from .constants import LOG_FILE, LOG_TIMESTAMP_FORMAT

TRACE = 5
OFF = logging.CRITICAL + 10

logging.addLevelName(TRACE, "TRACE")
logging.addLevelName(OFF, "OFF")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def rotate_log(log_dir: Path) -> Path | None:
    """Rename an existing latest log after its modification time.

    Args:
        log_dir: Directory holding the log files.

    Returns:
        Path | None: New path of the rotated file, or None when there was no
            latest log.
    """
    latest = log_dir / LOG_FILE
    if not latest.exists():
        return None

    modified = datetime.fromtimestamp(latest.stat().st_mtime)
    rotated = log_dir / f"{modified.strftime(LOG_TIMESTAMP_FORMAT)}.log"
    latest.rename(rotated)
    return rotated


def init_logging(
    level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    log_dir: Path | None = None,
) -> logging.Logger:
    """Configure the ``motd_markup`` logger.

    Console output goes to stderr at `level`. When `log_dir` is given, the
    previous ``latest.log`` is rotated and a new one receives records at
    `file_level`.

    Args:
        level: Console threshold; ``OFF`` silences the console.
        file_level: File threshold; ``OFF`` disables the file.
        log_dir: Directory for log files, created when missing.

    Returns:
        logging.Logger: The configured package logger.

    Examples:
        init_logging(logging.DEBUG, log_dir=Path("logs"))
    """
    logger = logging.getLogger("motd_markup")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)
    thresholds = [level]

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(formatter)
    logger.addHandler(console)

    if log_dir is not None and file_level < OFF:
        log_dir.mkdir(parents=True, exist_ok=True)
        rotate_log(log_dir)
        file_handler = logging.FileHandler(log_dir / LOG_FILE, encoding="utf-8")
        file_handler.setLevel(file_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
        thresholds.append(file_level)

    logger.setLevel(min(thresholds))
    logger.propagate = False
    return logger
