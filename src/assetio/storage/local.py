# SPDX-License-Identifier: MIT
"""Local filesystem I/O system.

:class:`FileIOSystem` looks files up in a list of search directories before
falling back to the path the engine asked for, so a model can pull in
textures and materials spread across several directories besides its own.
"""

from __future__ import annotations

import io
import logging
import os

from ..exceptions import StreamAccessError
from ..search_paths import SearchPathResolver, StrPath
from .protocol import FileIOMode, FileLookup, IOStream, Origin, ReturnCode

logger = logging.getLogger("assetio")

_ORIGIN_TO_WHENCE: dict[Origin, int] = {
    Origin.SET: os.SEEK_SET,
    Origin.CURRENT: os.SEEK_CUR,
    Origin.END: os.SEEK_END,
}

# Open-or-create without truncation.
_WRITE_FLAGS = os.O_WRONLY | os.O_CREAT | getattr(os, "O_BINARY", 0)


class FileIOSystem:
    """I/O system that opens files on local disk.

    Args:
        *search_paths: Directories searched, in order, for the file name of
            every path opened for reading. Missing directories are ignored.

    Usage::

        with FileIOSystem("textures", "materials") as io_system:
            stream = io_system.open_file("models/ship.obj", FileIOMode.READ)
            if stream.is_valid:
                ...
    """

    def __init__(self, *search_paths: StrPath | None) -> None:
        self._resolver = SearchPathResolver()
        self._streams: list[FileIOStream] = []
        self.set_search_directories(*search_paths)

    # ------------------------------------------------------------------
    # Search directories
    # ------------------------------------------------------------------

    def set_search_directories(self, *search_paths: StrPath | None) -> None:
        """Replace the search directories. Call with no arguments to clear them."""
        self._resolver.set_directories(search_paths)

    def get_search_directories(self) -> list[str]:
        """Return the absolute search directories in precedence order."""
        return self._resolver.get_directories()

    def resolve(self, file_name: str) -> str | None:
        """Return the first search-directory path holding *file_name*, or ``None``."""
        return self._resolver.resolve(file_name)

    def find_file(self, file_name: str) -> FileLookup:
        """Look up *file_name* (name plus extension) in the search directories."""
        path = self.resolve(file_name)
        return FileLookup(found=path is not None, path=path)

    # ------------------------------------------------------------------
    # Streams
    # ------------------------------------------------------------------

    def open_file(self, path_to_file: StrPath, file_mode: FileIOMode) -> FileIOStream:
        """Open a stream to a file.

        Never raises for a missing or unopenable file; check
        :attr:`FileIOStream.is_valid` on the result instead. Only valid
        streams are tracked.
        """
        stream = FileIOStream(self, path_to_file, file_mode)
        if stream.is_valid:
            self._streams.append(stream)
        return stream

    def close_file(self, stream: IOStream) -> None:
        """Release *stream* and stop tracking it."""
        stream.close()
        self.untrack(stream)

    def close_all_files(self) -> None:
        """Release every stream this system opened that is still tracked."""
        streams, self._streams = self._streams, []
        for stream in streams:
            stream.close()
        if streams:
            logger.debug("Closed %d stream(s)", len(streams))

    @property
    def open_streams(self) -> list[FileIOStream]:
        """Streams opened by this system and not yet released."""
        return list(self._streams)

    def exists(self, path_to_file: StrPath) -> bool:
        """Whether *path_to_file* could be opened for reading."""
        stream = self.open_file(path_to_file, FileIOMode.READ)
        try:
            return stream.is_valid
        finally:
            self.close_file(stream)

    def untrack(self, stream: IOStream) -> None:
        """Stop tracking *stream* without closing it."""
        if stream in self._streams:
            self._streams.remove(stream)  # type: ignore[arg-type]

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def __enter__(self) -> FileIOSystem:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close_all_files()


class FileIOStream:
    """Stream over a local file, opened through a :class:`FileIOSystem`.

    The stream is valid while it holds an open file object. Read modes
    consult the parent's search directories first; write modes open the
    given path directly, creating the file if needed and leaving existing
    content in place.
    """

    def __init__(self, parent: FileIOSystem, path_to_file: StrPath, file_mode: FileIOMode) -> None:
        self._parent = parent
        self._path_to_file = os.fspath(path_to_file)
        self._file_mode = file_mode
        self._file: io.BufferedIOBase | None = None
        self._resolved_path: str | None = None
        self._closed = False

        if isinstance(file_mode, FileIOMode):
            if file_mode.is_read:
                self._open_read(self._path_to_file)
            elif file_mode.is_write:
                self._open_write(self._path_to_file)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def path_to_file(self) -> str:
        return self._path_to_file

    @property
    def file_mode(self) -> FileIOMode:
        return self._file_mode

    @property
    def resolved_path(self) -> str | None:
        """Path actually backing the stream, or ``None`` if nothing was opened."""
        return self._resolved_path

    @property
    def is_valid(self) -> bool:
        return self._file is not None

    @property
    def is_closed(self) -> bool:
        return self._closed

    # ------------------------------------------------------------------
    # Byte-level I/O
    # ------------------------------------------------------------------

    def write(self, buffer: bytes | bytearray | memoryview, count: int) -> int:
        if buffer is None:
            raise ValueError("Data to write cannot be None.")
        view = memoryview(buffer).cast("B")
        if count < 0 or count > view.nbytes:
            raise ValueError("Number of bytes to write is greater than data size.")
        if self._file is None or not self._file.writable():
            raise StreamAccessError("Stream is not writable.")

        self._file.write(view[:count])
        return count

    def read(self, buffer: bytearray | memoryview, count: int) -> int:
        """Fill ``buffer[:count]`` from the current position.

        Returns *count* even if the file ends early; callers size *count*
        from :meth:`get_file_size` and :meth:`get_position`.
        """
        if buffer is None:
            raise ValueError("Buffer to read into cannot be None.")
        view = memoryview(buffer).cast("B")
        if count < 0 or count > view.nbytes:
            raise ValueError("Number of bytes to read is greater than buffer size.")
        if self._file is None or not self._file.readable():
            raise StreamAccessError("Stream is not readable.")

        self._file.readinto(view[:count])
        return count

    def seek(self, offset: int, origin: Origin) -> ReturnCode:
        if self._file is None or not self._file.seekable():
            raise StreamAccessError("Stream does not support seeking.")

        try:
            whence = _ORIGIN_TO_WHENCE[origin]
        except KeyError:
            raise ValueError(f"Unknown seek origin: {origin!r}") from None

        self._file.seek(offset, whence)
        return ReturnCode.SUCCESS

    def get_position(self) -> int:
        if self._file is None:
            return -1
        return self._file.tell()

    def get_file_size(self) -> int:
        if self._file is None:
            return 0
        position = self._file.tell()
        size = self._file.seek(0, os.SEEK_END)
        self._file.seek(position)
        return size

    def flush(self) -> None:
        if self._file is None:
            return
        self._file.flush()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True

        file, self._file = self._file, None
        if file is not None:
            file.close()
            logger.debug("Closed stream %s", self._resolved_path)
        self._parent.untrack(self)

    def __enter__(self) -> FileIOStream:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "valid" if self.is_valid else "invalid"
        return f"<FileIOStream {self._path_to_file!r} {self._file_mode} {state}>"

    # ------------------------------------------------------------------
    # Opening
    # ------------------------------------------------------------------

    def _open_read(self, path_to_file: str) -> None:
        found = self._parent.resolve(os.path.basename(path_to_file))
        if found is not None:
            path_to_file = found

        if not os.path.isfile(path_to_file):
            logger.debug("File not found for reading: %s", path_to_file)
            return

        try:
            self._file = open(path_to_file, "rb")  # noqa: SIM115
        except OSError as e:
            logger.warning("Failed to open %s for reading: %s", path_to_file, e)
            return
        self._resolved_path = path_to_file

    def _open_write(self, path_to_file: str) -> None:
        try:
            fd = os.open(path_to_file, _WRITE_FLAGS, 0o666)
        except OSError as e:
            logger.warning("Failed to open %s for writing: %s", path_to_file, e)
            return
        self._file = os.fdopen(fd, "wb")
        self._resolved_path = path_to_file
