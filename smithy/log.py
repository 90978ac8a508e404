"""Logging setup for the smithy namespace.

Library modules only call ``logging.getLogger(__name__)``; handlers are
installed once, by the CLI, through ``configure_logging``.
"""

import json
import logging

TEXT_FORMAT = "[%(levelname)s] %(name)s - %(message)s"

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


class JsonFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def configure_logging(level: str = "info", fmt: str = "text", stream=None) -> logging.Logger:
    """Attach a single stream handler to the ``smithy`` logger.

    Writes to stderr unless ``stream`` is given. Safe to call repeatedly:
    the previous handler is replaced, not duplicated.
    """
    logger = logging.getLogger("smithy")
    for handler in list(logger.handlers):
        if getattr(handler, "_smithy", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(JsonFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT))
    handler._smithy = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(_LEVELS.get(level, logging.INFO))
    return logger
