# SPDX-License-Identifier: MIT
"""I/O system factory.

Builds the process-wide :class:`FileIOSystem` from ``ASSETIO_SEARCH_PATHS``.
"""

from __future__ import annotations

import atexit
import logging
from functools import lru_cache

from ..config import configure_logging, get_settings
from .local import FileIOSystem

logger = logging.getLogger("assetio")


@lru_cache(maxsize=1)
def get_io_system() -> FileIOSystem:
    """Return the configured :class:`FileIOSystem` (cached singleton).

    Streams still open at process exit are closed automatically via
    :func:`atexit`.

    Configuration
    -------------
    ``ASSETIO_SEARCH_PATHS``
        Directories searched for bare file names, separated by ``os.pathsep``.
        Entries that do not exist are ignored.
    ``ASSETIO_LOG_LEVEL``
        Level applied to the ``assetio`` logger. An unknown level raises
        :class:`pydantic.ValidationError`.
    """
    settings = get_settings()
    configure_logging(settings)
    io_system = FileIOSystem(*settings.search_paths)
    logger.debug("Created file I/O system with search directories %s", io_system.get_search_directories())
    _register_cleanup(io_system)
    return io_system


def _register_cleanup(io_system: FileIOSystem) -> None:
    """Register an atexit handler that closes any streams left open."""
    atexit.register(io_system.close_all_files)
