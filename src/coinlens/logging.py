"""Structured logging for the dashboard backend, built on structlog.

Route handlers call :func:`bind_request_context` with the coin id and
lookback days; the market-data client, indicator pipeline and catalog then
log plain snake_case events and the request fields ride along through
``structlog.contextvars``.
"""

import logging
import os

import structlog

#: Third-party loggers that are too chatty at INFO (one line per HTTP call).
_NOISY_LOGGERS = ("httpx", "httpcore", "uvicorn.access")

_SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
]


def _renderer(log_format: str) -> structlog.types.Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def setup_logging(log_level: str = "INFO") -> None:
    """Send structlog events and stdlib records (uvicorn, httpx) to stderr.

    Both paths share one processor chain, so a CoinGecko failure logged by
    httpx and a ``history_request_failed`` event from a route carry the
    same timestamp format and request fields. ``LOG_FORMAT=json`` switches
    the renderer for log shipping; the default is the console renderer.
    """
    renderer = _renderer(os.environ.get("LOG_FORMAT", "console").lower())

    structlog.configure(
        processors=[
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_SHARED_PROCESSORS,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def bind_request_context(**fields: object) -> None:
    """Replace the request fields attached to every event in this context.

    Fields from a previous request handled on the same task are dropped.
    """
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(**fields)
