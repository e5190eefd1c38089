"""Centralized logging configuration for the ``kmyjournal`` package.

- ``configure_logging(...)`` attaches a single ``StreamHandler`` to the
  package root logger. It is called once by the CLI at startup.
- ``get_logger(name)`` returns a logger, attaching a ``NullHandler`` to the
  package root logger until configuration has run.

Library modules never attach their own handlers.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO

_PKG_LOGGER_NAME = "kmyjournal"
_CONFIGURED = False

LOG_LEVEL_ENVVAR = "KMYJOURNAL_LOG_LEVEL"


class _StderrHandler(logging.StreamHandler):
    """StreamHandler that always writes to the current ``sys.stderr``."""

    def __init__(self):
        logging.Handler.__init__(self)

    @property
    def stream(self):
        return sys.stderr


def _level_from(value: int | str | None) -> int | None:
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        # Accept numeric strings or standard level names (INFO/DEBUG/etc.).
        value = value.strip().upper()
        if value.isdigit():
            return int(value)
        numeric = getattr(logging, value, None)
        if isinstance(numeric, int):
            return numeric
    return None


def _parse_level(level: int | str | None) -> int:
    numeric = _level_from(level)
    if numeric is None:
        numeric = _level_from(os.getenv(LOG_LEVEL_ENVVAR))
    return logging.WARNING if numeric is None else numeric


def configure_logging(
    level: int | str | None = None,
    *,
    fmt: str | None = None,
    stream: IO[str] | None = None,
) -> None:
    """Configure the package root logger exactly once.

    Parameters
    ----------
    level:
        Logging level as ``int`` or level-name string (e.g., ``"INFO"``). If
        ``None``, defaults to ``KMYJOURNAL_LOG_LEVEL`` when set, otherwise
        ``logging.WARNING``.
    fmt:
        Optional logging format string. Defaults to
        ``"%(asctime)s %(name)s %(levelname)s %(message)s"``.
    stream:
        The output stream for the handler (defaults to ``sys.stderr``).
    """

    global _CONFIGURED
    if _CONFIGURED:
        return

    logger = logging.getLogger(_PKG_LOGGER_NAME)

    # Remove any existing NullHandlers to avoid swallowing logs after config.
    for h in list(logger.handlers):
        if isinstance(h, logging.NullHandler):
            logger.removeHandler(h)

    numeric_level = _parse_level(level)
    handler = logging.StreamHandler(stream) if stream is not None else _StderrHandler()
    handler.setLevel(numeric_level)
    handler.setFormatter(
        logging.Formatter(fmt or "%(asctime)s %(name)s %(levelname)s %(message)s")
    )

    logger.setLevel(numeric_level)
    logger.addHandler(handler)
    logger.propagate = False

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger by name, ensuring safe defaults for library use."""

    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if not _CONFIGURED and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)
