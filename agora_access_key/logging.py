"""Logging helpers for access key issuance."""

from __future__ import annotations

import logging
from typing import IO, Optional

PACKAGE_LOGGER = "agora_access_key"

JSON_FORMAT = (
    '{"timestamp": "%(asctime)s", "level": "%(levelname)s", '
    '"component": "%(name)s", "message": "%(message)s"}'
)


class _StructuredHandler(logging.StreamHandler):
    """Marker type so repeated setup replaces rather than stacks handlers."""


def setup_structured_logging(level: int = logging.INFO, stream: Optional[IO[str]] = None) -> logging.Logger:
    """Attach a JSON-formatted handler to the package logger and return it.

    Only ``agora_access_key.*`` records are affected; the root logger is left
    to the host application.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler, _StructuredHandler):
            logger.removeHandler(handler)

    handler = _StructuredHandler(stream)
    handler.setFormatter(logging.Formatter(JSON_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
