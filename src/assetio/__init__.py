# SPDX-License-Identifier: MIT
"""assetio: host-side virtual file I/O for 3D asset importers."""

from .exceptions import AssetIOError, StreamAccessError
from .search_paths import SearchPathResolver
from .storage import (
    FileIOMode,
    FileIOStream,
    FileIOSystem,
    FileLookup,
    IOStream,
    IOSystem,
    Origin,
    ReturnCode,
    get_io_system,
)

__all__ = [
    "AssetIOError",
    "FileIOMode",
    "FileIOStream",
    "FileIOSystem",
    "FileLookup",
    "IOStream",
    "IOSystem",
    "Origin",
    "ReturnCode",
    "SearchPathResolver",
    "StreamAccessError",
    "get_io_system",
]
