"""Logging helpers shared across javadoc link resolution components."""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import IO, Optional, Union

from JavadocLinks.settings import LinkResolverSettings, LogFormat, LogLevel, load_settings

__all__ = ["JSONFormatter", "PACKAGE_LOGGER", "setup_logging"]

PACKAGE_LOGGER = "JavadocLinks"

_EXTRA_FIELDS = ("coordinate", "url", "rule")


class JSONFormatter(logging.Formatter):
    """Formatter emitting one JSON object per log record."""

    def format(self, record: logging.LogRecord) -> str:
        """Render ``record`` as a JSON string with link-resolution fields."""

        now = datetime.now(timezone.utc)
        payload = {
            "timestamp": now.isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for field in _EXTRA_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                payload[field] = str(value)
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def setup_logging(
    settings: Optional[LinkResolverSettings] = None,
    *,
    level: Optional[Union[str, LogLevel]] = None,
    fmt: Optional[Union[str, LogFormat]] = None,
    stream: Optional[IO[str]] = None,
    propagate: bool = False,
) -> logging.Logger:
    """Configure the ``JavadocLinks`` logger with a single managed stream handler.

    Calling this again replaces the previously installed handler.

    Args:
        settings: Source of ``log_level`` and ``log_format``. When omitted they
            are read from the environment (``JAVADOC_LINKS_LOG_LEVEL``,
            ``JAVADOC_LINKS_LOG_FORMAT``).
        level: Explicit level, wins over ``settings``.
        fmt: Explicit output format, wins over ``settings``.
        stream: Destination stream; ``sys.stderr`` by default.
        propagate: Whether records also reach the root logger.

    Returns:
        logging.Logger: The configured package logger.
    """

    if level is None or fmt is None:
        settings = settings or load_settings()
        level = level if level is not None else settings.log_level
        fmt = fmt if fmt is not None else settings.log_format

    level_name = level.value if isinstance(level, LogLevel) else str(level).upper()
    log_format = fmt if isinstance(fmt, LogFormat) else LogFormat(str(fmt).lower())

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, level_name, logging.INFO))

    for handler in list(logger.handlers):
        if getattr(handler, "_javadoc_links_managed", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    if log_format is LogFormat.JSON:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    handler._javadoc_links_managed = True  # type: ignore[attr-defined]
    logger.addHandler(handler)

    logger.propagate = propagate
    return logger
