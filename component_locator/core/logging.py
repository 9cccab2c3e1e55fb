"""Structured logging for the CLI — structlog rendered through one stdlib handler."""

from __future__ import annotations

import logging
import logging.config
import os

import structlog


def _renderer(log_format: str) -> structlog.types.Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=False)


def setup_logging(level: str | None = None, stream: str = "ext://sys.stderr") -> None:
    """Route structlog events to *stream* (stderr by default).

    Environment:
        COMPONENT_LOCATOR_LOG_LEVEL  — log level (default: INFO), overridden by *level*
        COMPONENT_LOCATOR_LOG_FORMAT — console | json (default: console)

    stdout is left to workflow commands and ``--json`` results.
    """
    log_level = (level or os.environ.get("COMPONENT_LOCATOR_LOG_LEVEL", "INFO")).upper()
    log_format = os.environ.get("COMPONENT_LOCATOR_LOG_FORMAT", "console").lower()

    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]

    structlog.configure(
        processors=pre_chain + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "structlog": {
                    "()": structlog.stdlib.ProcessorFormatter,
                    "foreign_pre_chain": pre_chain,
                    "processors": [
                        structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                        _renderer(log_format),
                    ],
                },
            },
            "handlers": {
                "stderr": {
                    "class": "logging.StreamHandler",
                    "stream": stream,
                    "formatter": "structlog",
                },
            },
            "loggers": {
                "component_locator": {
                    "handlers": ["stderr"],
                    "level": log_level,
                    "propagate": False,
                },
            },
        }
    )
