# SPDX-License-Identifier: MIT
"""I/O system protocols and shared types.

Defines the interface an importer engine talks to when it needs a file: an
:class:`IOSystem` that opens named resources, and the :class:`IOStream`
handles it hands back.
"""

from __future__ import annotations

import enum
from typing import NamedTuple, Protocol, runtime_checkable


class FileIOMode(enum.Enum):
    """Requested access mode for a stream.

    The binary and text variants exist because engines ask for them; they
    behave exactly like the plain mode of the same direction.
    """

    READ = "r"
    READ_BINARY = "rb"
    READ_TEXT = "rt"
    WRITE = "w"
    WRITE_BINARY = "wb"
    WRITE_TEXT = "wt"

    @property
    def is_read(self) -> bool:
        return self in _READ_MODES

    @property
    def is_write(self) -> bool:
        return self in _WRITE_MODES


_READ_MODES = frozenset({FileIOMode.READ, FileIOMode.READ_BINARY, FileIOMode.READ_TEXT})
_WRITE_MODES = frozenset({FileIOMode.WRITE, FileIOMode.WRITE_BINARY, FileIOMode.WRITE_TEXT})


class Origin(enum.Enum):
    """Reference point for :meth:`IOStream.seek`."""

    SET = 0
    CURRENT = 1
    END = 2


class ReturnCode(enum.Enum):
    """Status codes reported back to the engine."""

    SUCCESS = 0
    FAILURE = -1
    OUT_OF_MEMORY = -3


class FileLookup(NamedTuple):
    """Result of a search-directory lookup."""

    found: bool
    path: str | None


@runtime_checkable
class IOStream(Protocol):
    """Protocol for a single opened resource.

    A stream is valid while it holds an open storage primitive. Operations
    on an invalid stream either raise (read/write/seek) or return a fixed
    value (``get_position`` -> -1, ``get_file_size`` -> 0, ``flush`` no-op).
    """

    @property
    def path_to_file(self) -> str:
        """Path the stream was requested with."""
        ...

    @property
    def file_mode(self) -> FileIOMode:
        """Mode the stream was requested with."""
        ...

    @property
    def is_valid(self) -> bool:
        """Whether the stream holds an open storage primitive."""
        ...

    # ------------------------------------------------------------------
    # Byte-level I/O
    # ------------------------------------------------------------------

    def read(self, buffer: bytearray | memoryview, count: int) -> int:
        """Read *count* bytes into the start of *buffer*.

        Raises:
            ValueError: If buffer is None or count does not fit in it.
            StreamAccessError: If the stream is invalid or not readable.
        """
        ...

    def write(self, buffer: bytes | bytearray | memoryview, count: int) -> int:
        """Write the first *count* bytes of *buffer*.

        Raises:
            ValueError: If buffer is None or count exceeds its length.
            StreamAccessError: If the stream is invalid or not writable.
        """
        ...

    def seek(self, offset: int, origin: Origin) -> ReturnCode:
        """Move the stream position relative to *origin*."""
        ...

    def get_position(self) -> int: ...

    def get_file_size(self) -> int: ...

    def flush(self) -> None: ...

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        """Release the storage primitive. Safe to call more than once."""
        ...


@runtime_checkable
class IOSystem(Protocol):
    """Protocol for the object an engine asks to open files."""

    def open_file(self, path_to_file: str, file_mode: FileIOMode) -> IOStream:
        """Open a stream. Storage failures yield an invalid stream, not an error."""
        ...

    def close_file(self, stream: IOStream) -> None:
        """Release a stream previously returned by :meth:`open_file`."""
        ...
