"""Tests for root logger setup."""

import logging

import pytest

from catalog.infrastructure.config import Settings
from catalog.infrastructure.logging_config import LOG_FORMAT, setup_logging


def _ours(root: logging.Logger) -> list[logging.Handler]:
    return [h for h in root.handlers if getattr(h, "_catalog_handler", False)]


@pytest.fixture
def root():
    """Give each test a root logger without our handlers, then restore it."""
    root = logging.getLogger()
    saved_level, saved_handlers = root.level, list(root.handlers)
    for handler in _ours(root):
        root.removeHandler(handler)
    yield root
    for handler in _ours(root):
        root.removeHandler(handler)
        handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


def test_console_handler_and_level(root):
    setup_logging(Settings(log_level="debug", log_file=None))

    handlers = _ours(root)
    assert root.level == logging.DEBUG
    assert len(handlers) == 1
    assert handlers[0].formatter._fmt == LOG_FORMAT


def test_file_handler_writes_messages(root, tmp_path):
    log_file = tmp_path / "catalog.log"
    setup_logging(Settings(log_level="INFO", log_file=str(log_file)))

    logging.getLogger("catalog.test").info("hello file")
    for handler in _ours(root):
        handler.flush()

    assert "[INFO] catalog.test: hello file" in log_file.read_text(encoding="utf-8")


def test_repeated_setup_does_not_duplicate_handlers(root):
    setup_logging(Settings(log_level="INFO", log_file=None))
    setup_logging(Settings(log_level="WARNING", log_file=None))

    assert len(_ours(root)) == 1
    assert root.level == logging.WARNING


def test_unknown_level_falls_back_to_info(root):
    setup_logging(Settings(log_level="chatty", log_file=None))
    assert root.level == logging.INFO
