"""Tests for observability/logger.py"""
import io
import json
import logging
import sys


class TestStructuredFormatter:
    def _get_record(self, msg, level=logging.INFO, exc_info=None, extra_fields=None):
        record = logging.LogRecord(
            name="test",
            level=level,
            pathname="",
            lineno=0,
            msg=msg,
            args=(),
            exc_info=exc_info,
        )
        if extra_fields is not None:
            record.extra_fields = extra_fields
        return record

    def test_basic_format(self):
        from mdadf.observability.logger import StructuredFormatter

        result = json.loads(StructuredFormatter().format(self._get_record("hello")))
        assert result["message"] == "hello"
        assert result["level"] == "INFO"
        assert result["logger"] == "test"
        assert "ts" in result

    def test_extra_fields_merged(self):
        from mdadf.observability.logger import StructuredFormatter

        record = self._get_record("converted", extra_fields={"blocks": 3, "path": "markdown"})
        result = json.loads(StructuredFormatter().format(record))
        assert result["blocks"] == 3
        assert result["path"] == "markdown"

    def test_exception_info_included(self):
        from mdadf.observability.logger import StructuredFormatter

        try:
            raise ValueError("boom")
        except ValueError:
            exc_info = sys.exc_info()
        result = json.loads(StructuredFormatter().format(self._get_record("err", exc_info=exc_info)))
        assert "ValueError" in result["exception"]

    def test_non_ascii_kept(self):
        from mdadf.observability.logger import StructuredFormatter

        line = StructuredFormatter().format(self._get_record("héllo ✓"))
        assert "héllo ✓" in line

    def test_single_line(self):
        from mdadf.observability.logger import StructuredFormatter

        line = StructuredFormatter().format(self._get_record("a\nb"))
        assert "\n" not in line


class TestGetLogger:
    def test_writes_json_to_stream(self):
        from mdadf.observability.logger import get_logger

        buf = io.StringIO()
        log = get_logger("mdadf.test.stream", level="INFO", stream=buf)
        log.info("hi", extra={"extra_fields": {"k": 1}})
        entry = json.loads(buf.getvalue())
        assert entry["message"] == "hi"
        assert entry["k"] == 1

    def test_idempotent_handlers(self):
        from mdadf.observability.logger import get_logger

        first = get_logger("mdadf.test.idem")
        second = get_logger("mdadf.test.idem")
        assert first is second
        assert len(first.handlers) == 1
        assert first.propagate is False

    def test_level_string_and_int(self):
        from mdadf.observability.logger import get_logger

        assert get_logger("mdadf.test.level.str", level="error").level == logging.ERROR
        assert get_logger("mdadf.test.level.int", level=logging.INFO).level == logging.INFO

    def test_level_only_applied_on_first_call(self):
        from mdadf.observability.logger import get_logger

        log = get_logger("mdadf.test.level.once", level="debug")
        get_logger("mdadf.test.level.once", level=logging.ERROR)
        assert log.level == logging.DEBUG

    def test_default_level_is_debug(self):
        from mdadf.observability.logger import get_logger

        assert get_logger("mdadf.test.default").level == logging.DEBUG
