"""Tests for observability/logger.py and observability/metrics.py"""
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
        from mdnotion.observability.logger import StructuredFormatter

        result = json.loads(StructuredFormatter().format(self._get_record("hello")))
        assert result["message"] == "hello"
        assert result["level"] == "INFO"
        assert result["logger"] == "test"
        assert "ts" in result

    def test_extra_fields_merged(self):
        from mdnotion.observability.logger import StructuredFormatter

        record = self._get_record("msg", extra_fields={"op": "segment", "line": 3})
        result = json.loads(StructuredFormatter().format(record))
        assert result["op"] == "segment"
        assert result["line"] == 3

    def test_exception_info_included(self):
        from mdnotion.observability.logger import StructuredFormatter

        try:
            raise ValueError("boom")
        except ValueError:
            exc_info = sys.exc_info()
        result = json.loads(StructuredFormatter().format(self._get_record("err", exc_info=exc_info)))
        assert "ValueError" in result["exception"]


class TestGetLogger:
    def test_defaults_to_warning(self):
        from mdnotion.observability.logger import get_logger

        logger = get_logger("test.mdnotion.default_level")
        assert logger.level == logging.WARNING
        assert logger.propagate is False

    def test_string_level(self):
        from mdnotion.observability.logger import get_logger

        logger = get_logger("test.mdnotion.string_level", level="debug")
        assert logger.level == logging.DEBUG

    def test_level_applied_on_later_call(self):
        from mdnotion.observability.logger import get_logger

        name = "test.mdnotion.later_level"
        get_logger(name)
        assert get_logger(name, level=logging.ERROR).level == logging.ERROR

    def test_idempotent_no_duplicate_handlers(self):
        from mdnotion.observability.logger import get_logger

        name = "test.mdnotion.idempotent"
        count = len(get_logger(name).handlers)
        assert len(get_logger(name).handlers) == count == 1

    def test_custom_stream_receives_json(self):
        from mdnotion.observability.logger import get_logger

        stream = io.StringIO()
        logger = get_logger("test.mdnotion.stream", stream=stream)
        logger.warning("careful", extra={"extra_fields": {"key": "val"}})
        entry = json.loads(stream.getvalue())
        assert entry["message"] == "careful"
        assert entry["key"] == "val"


class TestUnterminatedFenceLogging:
    def _capture(self, source, level):
        from mdnotion.converter.segmenter import log, segment
        from mdnotion.observability.logger import StructuredFormatter

        stream = io.StringIO()
        handler = logging.StreamHandler(stream)
        handler.setFormatter(StructuredFormatter())
        previous = log.level
        log.setLevel(level)
        log.addHandler(handler)
        try:
            segment(source)
        finally:
            log.removeHandler(handler)
            log.setLevel(previous)
        return stream.getvalue()

    def test_debug_record_when_enabled(self):
        entry = json.loads(self._capture("```\nno end", logging.DEBUG))
        assert entry["level"] == "DEBUG"
        assert entry["fence"] == "code"
        assert entry["line"] == 1

    def test_silent_at_default_level(self):
        assert self._capture("```\nno end", logging.WARNING) == ""


class TestMetricsHook:
    def test_noop_satisfies_protocol(self):
        from mdnotion.observability.metrics import MetricsHook, NoopMetricsHook

        assert isinstance(NoopMetricsHook(), MetricsHook)

    def test_noop_returns_none(self):
        from mdnotion.observability.metrics import NoopMetricsHook

        hook = NoopMetricsHook()
        assert hook.increment("mdnotion.conversions_total") is None
        assert hook.timing("mdnotion.conversion_duration_ms", 1.5) is None
        assert hook.gauge("g", 2.0, tags={"env": "test"}) is None

    def test_incomplete_class_is_not_hook(self):
        from mdnotion.observability.metrics import MetricsHook

        class OnlyIncrement:
            def increment(self, name, value=1, tags=None):
                pass

        assert not isinstance(OnlyIncrement(), MetricsHook)
