# File: tests/unit/test_logger.py
"""
Unit tests for logger setup.
"""

import logging

from zentribe.utils.logger import PACKAGE_LOGGER, setup_logger


class TestSetupLogger:
    """Tests for setup_logger()."""

    def test_module_loggers_share_package_handlers(self):
        first = setup_logger("zentribe.tests.first")
        second = setup_logger("zentribe.tests.second")

        package = logging.getLogger(PACKAGE_LOGGER)
        assert package.handlers
        assert first.handlers == [] and second.handlers == []
        assert first.propagate is True

    def test_repeated_setup_adds_no_handlers(self):
        setup_logger("zentribe.tests.repeat")
        count = len(logging.getLogger(PACKAGE_LOGGER).handlers)

        setup_logger("zentribe.tests.repeat")

        assert len(logging.getLogger(PACKAGE_LOGGER).handlers) == count

    def test_outside_logger_gets_own_handlers(self):
        script_logger = setup_logger("zentribe_test_script")

        assert any(isinstance(h, logging.StreamHandler) for h in script_logger.handlers)

    def test_console_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("ZENTRIBE_LOG_LEVEL", "warning")

        logger = setup_logger("zentribe_test_quiet")

        console = next(h for h in logger.handlers if not isinstance(h, logging.FileHandler))
        assert console.level == logging.WARNING
