# SPDX-License-Identifier: MIT
"""Exception types raised by the assetio I/O layer."""


class AssetIOError(OSError):
    """Base exception for assetio I/O failures."""


class StreamAccessError(AssetIOError):
    """Raised when a stream is used in a way its state does not allow.

    Covers reads or writes on a released or never-opened stream, reads on a
    write stream (and vice versa), and seeks on a non-seekable stream.
    """
