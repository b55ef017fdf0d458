"""CLI logging: structlog rendering on top of stdlib logging, written to stderr."""

from __future__ import annotations

import logging
import logging.config
import os

import structlog


def setup_logging(level: str | None = None) -> None:
    """Route ``locc`` loggers (stdlib and structlog) to stderr.

    ``level`` wins over ``LOCC_LOG_LEVEL`` (default WARNING). ``LOCC_LOG_FORMAT=json``
    emits one JSON object per line with a timestamp; otherwise lines are
    rendered for a terminal. Report output on stdout is never touched.
    """
    log_level = (level or os.environ.get("LOCC_LOG_LEVEL", "WARNING")).upper()
    as_json = os.environ.get("LOCC_LOG_FORMAT", "console").lower() == "json"

    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
    ]
    if as_json:
        pre_chain.append(structlog.processors.TimeStamper(fmt="iso", utc=True))
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)
    # ConsoleRenderer formats exceptions itself
    post_chain = [structlog.processors.format_exc_info, renderer] if as_json else [renderer]

    structlog.configure(
        processors=pre_chain + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "locc": {
                    "()": structlog.stdlib.ProcessorFormatter,
                    "foreign_pre_chain": pre_chain,
                    "processors": [
                        structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                        *post_chain,
                    ],
                },
            },
            "handlers": {
                "stderr": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stderr",
                    "formatter": "locc",
                },
            },
            "loggers": {
                "locc": {"handlers": ["stderr"], "level": log_level, "propagate": False},
            },
        }
    )
