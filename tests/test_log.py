from __future__ import annotations

import logging
import os
from pathlib import Path

from motd_markup.log import OFF, TRACE, init_logging, rotate_log


def test_trace_level_is_registered():
    assert logging.getLevelName(TRACE) == "TRACE"
    assert TRACE < logging.DEBUG


def test_rotate_log_without_latest(tmp_path: Path):
    assert rotate_log(tmp_path) is None


def test_rotate_log_renames_latest_after_mtime(tmp_path: Path):
    latest = tmp_path / "latest.log"
    latest.write_text("old run\n", encoding="utf-8")
    os.utime(latest, (1_700_000_000, 1_700_000_000))

    rotated = rotate_log(tmp_path)

    assert rotated is not None
    assert not latest.exists()
    assert rotated.read_text(encoding="utf-8") == "old run\n"
    assert rotated.name.endswith(".log")
    assert rotated.name.count("-") == 5


def test_init_logging_writes_file(tmp_path: Path):
    log_dir = tmp_path / "logs"

    logger = init_logging(level=OFF, file_level=TRACE, log_dir=log_dir)
    logging.getLogger("motd_markup.test").log(TRACE, "traced")
    logging.getLogger("motd_markup.test").info("informed")

    contents = (log_dir / "latest.log").read_text(encoding="utf-8")
    assert "[TRACE] motd_markup.test: traced" in contents
    assert "[INFO] motd_markup.test: informed" in contents
    assert logger.level == TRACE


def test_init_logging_without_directory_has_console_only(tmp_path: Path):
    logger = init_logging(level=logging.WARNING, log_dir=None)

    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING


def test_init_logging_file_off(tmp_path: Path):
    log_dir = tmp_path / "logs"

    logger = init_logging(level=logging.INFO, file_level=OFF, log_dir=log_dir)

    assert len(logger.handlers) == 1
    assert not (log_dir / "latest.log").exists()


def test_init_logging_replaces_previous_handlers(tmp_path: Path):
    init_logging(log_dir=tmp_path)
    logger = init_logging(log_dir=tmp_path)

    assert len(logger.handlers) == 2
    assert len(list(tmp_path.glob("*.log"))) == 2
