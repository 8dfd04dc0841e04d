# SPDX-License-Identifier: MIT
"""Pluggable file access for asset importers.

An importer engine is configured with an :class:`IOSystem` and calls
``open_file`` whenever it needs a resource, so the host decides where files
come from.

Usage::

    from assetio.storage import FileIOMode, Origin, get_io_system

    io_system = get_io_system()
    with io_system.open_file("ship.obj", FileIOMode.READ) as stream:
        if stream.is_valid:
            data = bytearray(stream.get_file_size())
            stream.read(data, len(data))
"""

from .factory import get_io_system
from .local import FileIOStream, FileIOSystem
from .protocol import FileIOMode, FileLookup, IOStream, IOSystem, Origin, ReturnCode

__all__ = [
    "FileIOMode",
    "FileIOStream",
    "FileIOSystem",
    "FileLookup",
    "IOStream",
    "IOSystem",
    "Origin",
    "ReturnCode",
    "get_io_system",
]
