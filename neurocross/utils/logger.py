"""Logging setup shared by the generator, the word bank loader and the CLI."""

from __future__ import annotations

import logging
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
LOG_TIME_FORMAT = "%H:%M:%S"


def resolve_level(level: Union[int, str]) -> int:
    """Map ``"debug"``/``"INFO"``/``20`` style levels to an int, defaulting to INFO."""

    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: Union[int, str] = logging.INFO) -> None:
    """Install one stderr handler on the root logger.

    Each placement trial is reported at DEBUG and the chosen layout at INFO,
    so the default level prints one or two lines per generated puzzle.
    """

    numeric = resolve_level(level)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_TIME_FORMAT))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(numeric)
    # urllib3 logs every connection requests opens.
    logging.getLogger("urllib3").setLevel(max(numeric, logging.WARNING))


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a namespaced logger, configuring defaults if needed."""

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or "neurocross")
