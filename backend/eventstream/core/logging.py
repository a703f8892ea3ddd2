from __future__ import annotations

import logging
import logging.config
import sys
from contextvars import ContextVar
from typing import Any

request_id_ctx: ContextVar[str | None] = ContextVar("request_id", default=None)

CODEC_LOGGER = "eventstream.sse"


class RequestIdFilter(logging.Filter):
    """Stamp every record with the id of the request being served ("-" outside one)."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        record.request_id = request_id_ctx.get() or "-"
        return True


def configure_logging(level: str = "INFO", *, codec_level: str | None = None) -> None:
    """
    Route all logging to stdout with the request id in every line.

    The codec logs one debug line per encoded/decoded batch, so its level can
    be set apart from the root level (defaults to the root level).
    """
    level = level.upper()
    logging_config: dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {"request_id": {"()": RequestIdFilter}},
        "formatters": {
            "default": {
                "format": "%(asctime)s %(levelname)s [%(name)s] [req=%(request_id)s] %(message)s"
            }
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "stream": sys.stdout,
                "formatter": "default",
                "filters": ["request_id"],
            }
        },
        "loggers": {CODEC_LOGGER: {"level": (codec_level or level).upper()}},
        "root": {"handlers": ["console"], "level": level},
    }
    logging.config.dictConfig(logging_config)
