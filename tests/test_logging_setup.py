"""Tests for logging configuration."""

import logging

from tictactoe.logging_setup import setup_logging


def test_setup_logging_reads_level_from_environment(monkeypatch):
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    monkeypatch.setenv("TICTACTOE_LOG_LEVEL", "debug")
    try:
        setup_logging()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], logging.StreamHandler)
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
