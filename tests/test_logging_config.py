"""Tests for the centralized logging configuration."""

import json
import logging

from montyhall.core.logging_config import (
    ContextLogger,
    JSONFormatter,
    get_logger,
    setup_logging,
)


class TestJSONFormatter:
    """Tests for JSONFormatter."""

    def test_formats_record_as_json(self):
        record = logging.LogRecord(
            name="montyhall.test",
            level=logging.INFO,
            pathname=__file__,
            lineno=10,
            msg="played %d games",
            args=(5,),
            exc_info=None,
        )
        data = json.loads(JSONFormatter().format(record))

        assert data["level"] == "INFO"
        assert data["logger"] == "montyhall.test"
        assert data["message"] == "played 5 games"
        assert "timestamp" in data

    def test_includes_extra_data(self):
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
        record.extra_data = {"n_games": 10}

        data = json.loads(JSONFormatter().format(record))
        assert data["extra"] == {"n_games": 10}


class TestContextLogger:
    """Tests for get_logger and ContextLogger."""

    def test_get_logger_returns_adapter(self):
        logger = get_logger("montyhall.test", run="abc")

        assert isinstance(logger, ContextLogger)
        assert logger.extra == {"run": "abc"}

    def test_context_merged_into_extra(self):
        logger = get_logger("montyhall.test", run="abc")

        _, kwargs = logger.process("msg", {"extra": {"extra_data": {"n_games": 3}}})
        assert kwargs["extra"]["extra_data"] == {"run": "abc", "n_games": 3}


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_sets_level_and_console_handler(self, restore_root_logger):
        setup_logging(log_level="warning")

        assert restore_root_logger.level == logging.WARNING
        assert len(restore_root_logger.handlers) == 1

    def test_file_handler_writes_json(self, restore_root_logger, tmp_path):
        setup_logging(log_level="INFO", enable_console=False, enable_file=True, log_dir=tmp_path)

        get_logger("montyhall.test").info("hello", extra={"extra_data": {"k": 1}})
        for handler in restore_root_logger.handlers:
            handler.flush()

        line = (tmp_path / "montyhall.log").read_text().strip().splitlines()[-1]
        assert json.loads(line)["message"] == "hello"
