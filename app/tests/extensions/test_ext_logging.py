import logging
from logging.handlers import RotatingFileHandler

from configs import RestClientConfig, restclient_config
from extensions.ext_logging import TraceIdFilter, TraceIdFormatter, init_logging, trace_id_var


class TestInitLogging:
    def test_console_handler(self, monkeypatch, restore_root_logging):
        monkeypatch.setattr(restclient_config, "LOG_FILE", None)
        monkeypatch.setattr(restclient_config, "LOG_LEVEL", "DEBUG")

        init_logging()

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert root.handlers
        assert all(isinstance(h.formatter, TraceIdFormatter) for h in root.handlers)
        assert logging.getLogger("httpx").level == logging.WARNING

    def test_file_handler(self, monkeypatch, tmp_path, restore_root_logging):
        log_file = tmp_path / "logs" / "restclient.log"
        monkeypatch.setattr(restclient_config, "LOG_FILE", str(log_file))

        init_logging()

        handlers = logging.getLogger().handlers
        assert any(isinstance(h, RotatingFileHandler) for h in handlers)
        assert log_file.parent.is_dir()

    def test_explicit_config(self, restore_root_logging):
        config = RestClientConfig(
            _env_file=None, LOG_LEVEL="WARNING", LOG_FORMAT="%(trace_id)s %(message)s", LOG_TZ=None
        )

        init_logging(config)

        root = logging.getLogger()
        assert root.level == logging.WARNING
        record = logging.LogRecord("test", logging.WARNING, __file__, 1, "msg", None, None)
        token = trace_id_var.set("abc123")
        try:
            for handler in root.handlers:
                handler.filter(record)
        finally:
            trace_id_var.reset(token)
        assert root.handlers[0].format(record) == "abc123 msg"


class TestTraceIdFilter:
    def test_adds_trace_id(self):
        record = logging.LogRecord("test", logging.INFO, __file__, 1, "msg", None, None)
        token = trace_id_var.set("abc123")
        try:
            assert TraceIdFilter().filter(record) is True
        finally:
            trace_id_var.reset(token)
        assert record.trace_id == "abc123"

    def test_formatter_without_filter(self):
        record = logging.LogRecord("test", logging.INFO, __file__, 1, "msg", None, None)
        formatter = TraceIdFormatter("%(trace_id)s|%(message)s")
        assert formatter.format(record) == "|msg"
