# SPDX-License-Identifier: MIT
"""Ordered search directories for locating bare file names."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable

logger = logging.getLogger("assetio")

StrPath = str | os.PathLike[str]


class SearchPathResolver:
    """Ordered set of existing directories searched for a file name.

    Resolution rule: directories are tried in the order they were supplied
    and the first one containing a regular file with the requested name wins.
    Nothing is cached, so files added or removed between calls are seen.
    """

    def __init__(self, paths: Iterable[StrPath | None] | None = None) -> None:
        self._directories: list[str] = []
        self.set_directories(paths)

    def set_directories(self, paths: Iterable[StrPath | None] | None) -> None:
        """Replace the directory set.

        Entries that are empty or do not currently exist as directories are
        skipped. ``None`` or an empty iterable clears the set.
        """
        directories: list[str] = []
        for path in paths or ():
            if not path:
                continue
            if not os.path.isdir(path):
                logger.debug("Dropping search directory that does not exist: %s", path)
                continue
            directories.append(os.path.abspath(os.fspath(path)))
        self._directories = directories

    def get_directories(self) -> list[str]:
        """Return the retained absolute directory paths in precedence order."""
        return list(self._directories)

    def resolve(self, file_name: str) -> str | None:
        """Find the first directory holding *file_name*.

        Args:
            file_name: Bare file name (plus extension); callers strip any
                directory part beforehand.

        Returns:
            Full path of the first match, or ``None`` if nothing matches.
        """
        if not file_name or not self._directories:
            return None

        for directory in self._directories:
            candidate = os.path.join(directory, file_name)
            if os.path.isfile(candidate):
                logger.debug("Resolved %s to %s", file_name, candidate)
                return candidate

        return None

    def __len__(self) -> int:
        return len(self._directories)
