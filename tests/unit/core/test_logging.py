"""Tests for examine.core.logging."""

from __future__ import annotations

import logging

from examine.core.logging import ROOT_LOGGER_NAME, configure_logging, get_logger


class TestGetLogger:
    """Tests for get_logger."""

    def test_module_names_are_namespaced(self) -> None:
        assert get_logger("examine.detection").name == "examine.detection"
        assert get_logger("tests.helper").name == "examine.tests.helper"

    def test_root(self) -> None:
        assert get_logger().name == ROOT_LOGGER_NAME
        assert get_logger("examine").name == ROOT_LOGGER_NAME


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_default_level_is_warning(self) -> None:
        configure_logging()
        assert logging.getLogger(ROOT_LOGGER_NAME).level == logging.WARNING

    def test_debug_wins(self) -> None:
        configure_logging(debug=True, verbose=True, quiet=True)
        assert logging.getLogger(ROOT_LOGGER_NAME).level == logging.DEBUG

    def test_verbose_and_quiet(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger(ROOT_LOGGER_NAME).level == logging.INFO
        configure_logging(quiet=True)
        assert logging.getLogger(ROOT_LOGGER_NAME).level == logging.ERROR

    def test_repeated_calls_keep_single_handler(self) -> None:
        configure_logging()
        configure_logging(debug=True)
        assert len(logging.getLogger(ROOT_LOGGER_NAME).handlers) == 1
