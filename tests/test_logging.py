"""Tests for the juliancal logging helpers."""

import logging
import os
import unittest
from unittest.mock import patch

from juliancal.logging import (
    DEFAULT_LOG_LEVEL,
    LOG_LEVEL_ENV_VAR,
    _get_log_level,
    get_logger,
    set_log_level,
)


class TestLogging(unittest.TestCase):
    """Test cases for logger configuration."""

    def tearDown(self):
        set_log_level(DEFAULT_LOG_LEVEL)

    def test_env_var_level(self):
        with patch.dict(os.environ, {LOG_LEVEL_ENV_VAR: "debug"}):
            self.assertEqual(_get_log_level(), logging.DEBUG)
        with patch.dict(os.environ, {LOG_LEVEL_ENV_VAR: "ERROR"}):
            self.assertEqual(_get_log_level(), logging.ERROR)

    def test_env_var_default(self):
        with patch.dict(os.environ, {LOG_LEVEL_ENV_VAR: "bogus"}):
            self.assertEqual(_get_log_level(), DEFAULT_LOG_LEVEL)

    def test_get_logger_adds_single_handler(self):
        logger = get_logger("juliancal.tests.single_handler")
        same = get_logger("juliancal.tests.single_handler")
        self.assertIs(logger, same)
        self.assertEqual(len(logger.handlers), 1)

    def test_set_log_level_updates_module_loggers(self):
        logger = get_logger("juliancal.tests.level")
        set_log_level(logging.DEBUG)
        self.assertEqual(logging.getLogger("juliancal").level, logging.DEBUG)
        self.assertEqual(logger.level, logging.DEBUG)
        for handler in logger.handlers:
            self.assertEqual(handler.level, logging.DEBUG)


if __name__ == "__main__":
    unittest.main()
