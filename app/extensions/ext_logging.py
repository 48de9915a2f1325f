import logging
import os
import sys
import uuid
from contextvars import ContextVar
from logging.handlers import RotatingFileHandler

from configs import RestClientConfig, restclient_config

# bound by RestClient.do for the duration of one exchange
trace_id_var: ContextVar[str | None] = ContextVar("trace_id", default=None)


def trace_id_generator() -> str:
    return uuid.uuid4().hex


def init_logging(config: RestClientConfig | None = None) -> None:
    config = config or restclient_config
    log_handlers: list[logging.Handler] = []
    log_file = config.LOG_FILE
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        log_handlers.append(
            RotatingFileHandler(
                filename=log_file,
                maxBytes=config.LOG_FILE_MAX_SIZE * 1024 * 1024,
                backupCount=config.LOG_FILE_BACKUP_COUNT,
            )
        )

    # Always add StreamHandler to log to console
    sh = logging.StreamHandler(sys.stdout)
    log_handlers.append(sh)

    for handler in log_handlers:
        handler.addFilter(TraceIdFilter())

    logging.basicConfig(
        level=config.LOG_LEVEL,
        format=config.LOG_FORMAT,
        datefmt=config.LOG_DATEFORMAT,
        handlers=log_handlers,
        force=True,
    )

    apply_trace_id_formatter(config)

    # httpx logs every request at INFO, which duplicates the client's own lines
    logging.getLogger("httpx").setLevel(logging.WARNING)
    log_tz = config.LOG_TZ
    if log_tz:
        from datetime import datetime

        import pytz

        timezone = pytz.timezone(log_tz)

        def time_converter(seconds):
            return datetime.fromtimestamp(seconds, tz=timezone).timetuple()

        for handler in logging.root.handlers:
            if handler.formatter:
                handler.formatter.converter = time_converter


class TraceIdFilter(logging.Filter):
    # Exposes the trace id of the current exchange to the log format. Records
    # emitted outside of a call get None.
    def filter(self, record):
        record.trace_id = trace_id_var.get()
        return True


class TraceIdFormatter(logging.Formatter):
    def format(self, record):
        if not hasattr(record, "trace_id"):
            record.trace_id = ""
        return super().format(record)


def apply_trace_id_formatter(config: RestClientConfig) -> None:
    for handler in logging.root.handlers:
        if handler.formatter:
            handler.formatter = TraceIdFormatter(config.LOG_FORMAT, config.LOG_DATEFORMAT)
