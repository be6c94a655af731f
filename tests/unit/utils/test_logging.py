"""Tests for logging configuration utilities."""

from io import StringIO
import json
import logging
import sys

from controlmap.core.utils.logging import (
    StructuredJSONFormatter,
    configure_logging,
    get_logger,
)


def make_record(level: int = logging.INFO, msg: str = "Test message", exc_info=None):
    record = logging.LogRecord(
        name="controlmap.codec",
        level=level,
        pathname="/path/to/channel_codec.py",
        lineno=42,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )
    record.funcName = "load_channel"
    record.module = "channel_codec"
    return record


class TestStructuredJSONFormatter:
    """Test suite for StructuredJSONFormatter."""

    def test_basic_log_format(self):
        data = json.loads(StructuredJSONFormatter().format(make_record()))

        assert data["level"] == "INFO"
        assert data["message"] == "Test message"
        assert "timestamp" in data
        assert data["context"]["logger_name"] == "controlmap.codec"
        assert data["context"]["module"] == "channel_codec"
        assert data["context"]["function"] == "load_channel"
        assert data["context"]["line"] == 42

    def test_log_with_extra_fields(self):
        record = make_record(level=logging.WARNING)
        record.profile = "Behringer BCF2000"
        record.channel_number = 65

        data = json.loads(StructuredJSONFormatter().format(record))

        assert data["context"]["profile"] == "Behringer BCF2000"
        assert data["context"]["channel_number"] == 65

    def test_log_with_exception(self):
        try:
            raise ValueError("Channel node not found")
        except ValueError:
            exc_info = sys.exc_info()

        record = make_record(level=logging.ERROR, msg="Load failed", exc_info=exc_info)
        data = json.loads(StructuredJSONFormatter().format(record))

        assert data["level"] == "ERROR"
        assert data["context"]["error_type"] == "ValueError"
        assert data["context"]["error_message"] == "Channel node not found"
        assert "ValueError: Channel node not found" in data["context"]["stack_trace"]


class TestConfigureLogging:
    """Test suite for configure_logging function."""

    def test_configure_standard_logging(self, capsys):
        configure_logging(level="INFO", structured=False)

        logging.getLogger("test.standard").info("Test message")

        captured = capsys.readouterr()
        assert "Test message" in captured.out
        assert "test.standard" in captured.out
        assert "INFO" in captured.out

    def test_level_is_case_insensitive(self, capsys):
        configure_logging(level="warning")

        logging.getLogger("test.level").info("hidden")
        logging.getLogger("test.level").warning("shown")

        captured = capsys.readouterr()
        assert "hidden" not in captured.out
        assert "shown" in captured.out

    def test_configure_structured_logging_to_file(self, tmp_path):
        log_file = tmp_path / "controlmap.jsonl"
        configure_logging(level="DEBUG", structured=True, filename=str(log_file))

        logger = logging.getLogger("test.file")
        logger.debug("Debug message")
        logger.warning("Warning message")
        for handler in logging.getLogger().handlers:
            handler.flush()

        lines = [json.loads(line) for line in log_file.read_text().splitlines() if line]

        assert [line["level"] for line in lines[-2:]] == ["DEBUG", "WARNING"]
        assert all("logger_name" in line["context"] for line in lines)

        # Release the file handler before tmp_path cleanup
        configure_logging(level="INFO")

    def test_configure_custom_format_string(self, capsys):
        configure_logging(level="INFO", format_string="%(levelname)s | %(message)s")

        logging.getLogger("test.custom").info("Custom format test")

        assert "INFO | Custom format test" in capsys.readouterr().out


class TestGetLogger:
    """Test suite for get_logger function."""

    def test_get_logger_without_context(self):
        logger = get_logger("test.plain")

        assert isinstance(logger, logging.Logger)
        assert logger.name == "test.plain"

    def test_get_logger_with_context(self):
        logger = get_logger("test.context", profile="nanoKONTROL2", channel_number=3)

        assert isinstance(logger, logging.LoggerAdapter)
        assert logger.logger.name == "test.context"
        assert logger.extra == {"profile": "nanoKONTROL2", "channel_number": 3}

    def test_logger_adapter_includes_context_in_structured_logs(self):
        stream = StringIO()
        handler = logging.StreamHandler(stream)
        handler.setFormatter(StructuredJSONFormatter())

        logger = get_logger("test.adapter", profile="BCF2000")
        logger.logger.addHandler(handler)
        logger.logger.setLevel(logging.INFO)
        try:
            logger.info("Message with context")
        finally:
            logger.logger.removeHandler(handler)

        data = json.loads(stream.getvalue().strip())
        assert data["message"] == "Message with context"
        assert data["context"]["profile"] == "BCF2000"
