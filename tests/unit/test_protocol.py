# SPDX-License-Identifier: MIT
"""Unit tests for shared I/O types."""

import pytest

from assetio.storage.protocol import FileIOMode, Origin


@pytest.mark.unit
@pytest.mark.parametrize("mode", [FileIOMode.READ, FileIOMode.READ_BINARY, FileIOMode.READ_TEXT])
def test_read_family(mode):
    assert mode.is_read
    assert not mode.is_write


@pytest.mark.unit
@pytest.mark.parametrize("mode", [FileIOMode.WRITE, FileIOMode.WRITE_BINARY, FileIOMode.WRITE_TEXT])
def test_write_family(mode):
    assert mode.is_write
    assert not mode.is_read


@pytest.mark.unit
def test_origin_has_three_members():
    assert [o.name for o in Origin] == ["SET", "CURRENT", "END"]
