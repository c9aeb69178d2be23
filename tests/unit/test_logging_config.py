"""Unit tests for logging setup."""

from __future__ import annotations

import logging

import pytest

from termpalette.logging_config import setup_logging


@pytest.fixture
def restore_termpalette_logger():
    logger = logging.getLogger("termpalette")
    saved = (list(logger.handlers), logger.level, logger.propagate)
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:] = saved[0]
    logger.setLevel(saved[1])
    logger.propagate = saved[2]


@pytest.mark.unit
def test_setup_logging_writes_to_log_file(tmp_path, monkeypatch, restore_termpalette_logger) -> None:
    log_file = tmp_path / "termpalette.log"
    monkeypatch.setenv("TERMPALETTE_LOG_FILE", str(log_file))
    monkeypatch.delenv("TERMPALETTE_LOG_LEVEL", raising=False)

    setup_logging("debug")
    logging.getLogger("termpalette.pairs").debug("allocated %d pairs", 63)

    assert restore_termpalette_logger.level == logging.DEBUG
    assert "allocated 63 pairs" in log_file.read_text(encoding="utf-8")


@pytest.mark.unit
def test_setup_logging_unknown_level_falls_back_to_warning(monkeypatch, restore_termpalette_logger) -> None:
    monkeypatch.delenv("TERMPALETTE_LOG_FILE", raising=False)
    monkeypatch.setenv("TERMPALETTE_LOG_LEVEL", "chatty")

    setup_logging()

    assert restore_termpalette_logger.level == logging.WARNING
    assert len(restore_termpalette_logger.handlers) == 1
