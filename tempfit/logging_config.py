from __future__ import annotations

import logging
from logging.config import dictConfig
from typing import Iterable, Sequence

_DEFAULT_EXTRA_KEYS = (
    "path",
    "channel",
    "line_number",
    "reading_count",
    "segment_count",
    "reason",
)


class ContextualFormatter(logging.Formatter):

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        style: str = "%",
        extra_keys: Iterable[str] | None = None,
    ) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt, style=style)
        self._extra_keys: Sequence[str] = tuple(extra_keys or _DEFAULT_EXTRA_KEYS)

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        context_parts: list[str] = []
        for key in self._extra_keys:
            value = getattr(record, key, None)
            if value is None:
                continue
            context_parts.append(f"{key}={value}")
        if context_parts:
            return f"{message} | {' '.join(context_parts)}"
        return message


def configure_logging(level: str | int = "INFO") -> None:
    """Send tempfit diagnostics to stderr with contextual formatting."""
    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "contextual": {
                    "()": "tempfit.logging_config.ContextualFormatter",
                    "fmt": "%(levelname)s | %(name)s | %(message)s",
                    "style": "%",
                    "extra_keys": list(_DEFAULT_EXTRA_KEYS),
                }
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stderr",
                    "level": level,
                    "formatter": "contextual",
                }
            },
            "loggers": {
                "tempfit": {"handlers": ["default"], "level": level, "propagate": True},
            },
        }
    )
