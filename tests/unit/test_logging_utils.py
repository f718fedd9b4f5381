"""Unit tests for console logging setup."""

from __future__ import annotations

import logging

from web_rag.logging_utils import NOISY_LOGGERS, setup_logging


def test_setup_logging_sets_root_level() -> None:
    setup_logging("DEBUG")
    assert logging.getLogger().level == logging.DEBUG
    setup_logging("INFO")
    assert logging.getLogger().level == logging.INFO


def test_noisy_loggers_stay_at_warning_or_above() -> None:
    setup_logging("DEBUG")
    assert all(logging.getLogger(name).level == logging.WARNING for name in NOISY_LOGGERS)
    setup_logging("ERROR")
    assert all(logging.getLogger(name).level == logging.ERROR for name in NOISY_LOGGERS)
