# SPDX-License-Identifier: MIT
"""Configuration management for assetio.

This module handles:
- Logger setup for the ``assetio`` package logger
- Default search directories read from the environment
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from functools import lru_cache

from pydantic import BaseModel, field_validator

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")

# ---------- Logging configuration ----------
# Handlers are left to the host application.
logger = logging.getLogger("assetio")
logger.addHandler(logging.NullHandler())


# ---------- Settings ----------
class IOSettings(BaseModel, frozen=True):
    """Environment-derived defaults for the file I/O system.

    ``search_paths`` accepts either a sequence or a single ``os.pathsep``
    separated string. Blank entries are dropped; whether a directory exists is
    checked later, when the paths are handed to a resolver.
    """

    search_paths: tuple[str, ...] = ()
    log_level: str = "WARNING"

    @field_validator("search_paths", mode="before")
    @classmethod
    def _split_search_paths(cls, v: object) -> tuple[str, ...]:
        if v is None:
            return ()
        if isinstance(v, str):
            v = v.split(os.pathsep)
        if not isinstance(v, Iterable):
            raise ValueError(f"Invalid search paths: {v!r}")
        return tuple(str(p).strip() for p in v if p is not None and str(p).strip())

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v!r}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> IOSettings:
    """Read assetio settings from the environment (cached).

    Environment variables::

        ASSETIO_SEARCH_PATHS   Directories searched for bare file names,
                               separated by ``os.pathsep``
        ASSETIO_LOG_LEVEL      Level for the ``assetio`` logger (default WARNING)

    Returns:
        Validated settings

    Raises:
        pydantic.ValidationError: If ``ASSETIO_LOG_LEVEL`` is not a known level
    """
    return IOSettings(
        search_paths=os.getenv("ASSETIO_SEARCH_PATHS", ""),
        log_level=os.getenv("ASSETIO_LOG_LEVEL", "WARNING"),
    )


def configure_logging(settings: IOSettings) -> None:
    """Apply ``settings.log_level`` to the ``assetio`` logger."""
    logger.setLevel(settings.log_level)
