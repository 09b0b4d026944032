"""Unit tests for logger setup and the step timer."""

import logging
from unittest.mock import patch

import pytest

from openfn_tools.utils.logging import configure_logging, logger, step_timer


class TestStepTimer:
    def test_logs_start_and_completion(self, caplog):
        with caplog.at_level(logging.INFO, logger="openfn_tools"):
            with step_timer("lookup"):
                pass
        assert "lookup — started" in caplog.text
        assert "lookup — completed" in caplog.text

    def test_logs_failure_and_reraises(self, caplog):
        with caplog.at_level(logging.INFO, logger="openfn_tools"):
            with pytest.raises(RuntimeError):
                with step_timer("upload"):
                    raise RuntimeError("boom")
        assert "upload — failed" in caplog.text
        assert "upload — completed" not in caplog.text


class TestConfigureLogging:
    def test_debug_flag(self):
        configure_logging(debug=True)
        assert logger.level == logging.DEBUG
        configure_logging()
        assert logger.level == logging.INFO

    def test_unknown_level_falls_back_to_info(self):
        with patch.dict("os.environ", {"LOG_LEVEL": "bogus"}):
            configure_logging()
        assert logger.level == logging.INFO

    def test_level_from_environment(self):
        with patch.dict("os.environ", {"LOG_LEVEL": "warning"}):
            configure_logging()
        assert logger.level == logging.WARNING
        configure_logging()
