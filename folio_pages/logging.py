"""Logging utilities for folio_pages loaders, renderer, and CLI commands."""

from __future__ import annotations

import logging

_LOGGER_NAME = "folio_pages"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the folio_pages hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(*, verbose: bool = False) -> logging.Logger:
    """Configure the folio_pages logger with a single console handler.

    Parameters
    ----------
    verbose : bool, optional
        Emit DEBUG records (every loaded slug and template) when ``True``;
        defaults to INFO.

    Returns
    -------
    logging.Logger
        The configured package logger.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)

    # Reset handlers so repeated CLI invocations do not duplicate output.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(level)
    stream_handler.setFormatter(logging.Formatter("[folio] %(levelname)s %(message)s"))
    logger.addHandler(stream_handler)
    return logger


__all__ = ["configure_logging", "get_logger"]
