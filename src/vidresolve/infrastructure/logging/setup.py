"""structlog + stdlib logging wiring.

Every record, whether a structlog event or a foreign record from uvicorn
or httpx, goes into one in-process queue attached to the root logger.  A
``QueueListener`` thread drains it and renders with a single
``ProcessorFormatter``, so the event loop never blocks on stream writes.
DEBUG..WARNING go to stdout, ERROR and above to stderr.

uvicorn must be started with ``log_config=None``; otherwise it installs
its own handlers over the queue.
"""

from __future__ import annotations

import atexit
import copy
import logging
import queue
import sys
from datetime import datetime, timezone
from logging.handlers import QueueHandler, QueueListener
from typing import Any, Optional

import structlog

from vidresolve.infrastructure.config.schema import AppConfig

log = structlog.get_logger(__name__)

_listener: Optional[QueueListener] = None


def _drop_color_message(_: Any, __: Any, event_dict: dict[str, Any]) -> dict[str, Any]:
    # uvicorn duplicates every message as "color_message"
    event_dict.pop("color_message", None)
    return event_dict


def _stamp_foreign_record(
    _: Any, __: Any, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Timestamp a foreign record from ``LogRecord.created`` (UTC, ISO-8601)."""
    record = event_dict.get("_record")
    if isinstance(record, logging.LogRecord):
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        event_dict["timestamp"] = created.isoformat().replace("+00:00", "Z")
    return event_dict


def build_formatter(config: AppConfig) -> structlog.stdlib.ProcessorFormatter:
    """The one formatter both output streams use; JSON or console per config."""
    renderer: structlog.typing.Processor = (
        structlog.processors.JSONRenderer()
        if config.log_format == "json"
        else structlog.dev.ConsoleRenderer()
    )
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            _drop_color_message,
            structlog.contextvars.merge_contextvars,
            _stamp_foreign_record,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )


class _LevelRangeFilter(logging.Filter):
    """Passes records whose level lies in ``[min_level, max_level]``."""

    def __init__(
        self, min_level: int = logging.NOTSET, max_level: int = logging.CRITICAL
    ) -> None:
        super().__init__()
        self._min = min_level
        self._max = max_level

    def filter(self, record: logging.LogRecord) -> bool:
        return self._min <= record.levelno <= self._max


class _StructlogQueueHandler(QueueHandler):
    """QueueHandler that leaves structlog's dict ``record.msg`` intact."""

    def prepare(self, record: logging.LogRecord) -> logging.LogRecord:
        # QueueHandler.prepare() would format and stringify record.msg.
        return copy.copy(record)


def _stream_handler(
    stream: Any, formatter: logging.Formatter, level_filter: logging.Filter
) -> logging.Handler:
    handler = logging.StreamHandler(stream=stream)
    handler.setFormatter(formatter)
    handler.addFilter(level_filter)
    return handler


def stop_listener() -> None:
    """Flush and stop the background listener, if one is running."""
    global _listener
    if _listener is None:
        return
    try:
        _listener.stop()
    finally:
        _listener = None


def install_queue_logging(config: AppConfig) -> QueueListener:
    """Point every stdlib logger at the queue and start the listener thread.

    Handlers already present on the root or on named loggers are removed,
    and named loggers propagate into root.  Calling again replaces the
    previous listener.
    """
    global _listener
    stop_listener()

    formatter = build_formatter(config)
    records: queue.Queue[logging.LogRecord] = queue.Queue()

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(_StructlogQueueHandler(records))
    root.setLevel(config.log_level)

    for name in list(logging.root.manager.loggerDict):
        named = logging.getLogger(name)
        named.handlers.clear()
        named.propagate = True
        named.setLevel(config.log_level)

    _listener = QueueListener(
        records,
        _stream_handler(
            sys.stdout, formatter, _LevelRangeFilter(max_level=logging.WARNING)
        ),
        _stream_handler(
            sys.stderr, formatter, _LevelRangeFilter(min_level=logging.ERROR)
        ),
        respect_handler_level=True,
    )
    _listener.start()
    return _listener


def configure_logging(config: AppConfig) -> None:
    """Configure structlog to emit through stdlib and install the queue."""
    structlog.configure(
        processors=[
            _drop_color_message,
            structlog.contextvars.merge_contextvars,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    install_queue_logging(config)
    atexit.register(stop_listener)

    log.info(
        "logging_configured", log_format=config.log_format, log_level=config.log_level
    )
