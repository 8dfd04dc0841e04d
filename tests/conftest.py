# SPDX-License-Identifier: MIT
"""Shared pytest fixtures for assetio tests."""

import logging
import pathlib

import pytest

from assetio.config import get_settings
from assetio.storage.factory import get_io_system
from assetio.storage.local import FileIOSystem


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Clear cached settings and the I/O system singleton around each test."""
    get_settings.cache_clear()
    get_io_system.cache_clear()
    yield
    get_settings.cache_clear()
    get_io_system.cache_clear()


@pytest.fixture(autouse=True)
def restore_logger_level():
    """Restore the ``assetio`` logger level changed by configure_logging()."""
    package_logger = logging.getLogger("assetio")
    level = package_logger.level
    yield
    package_logger.setLevel(level)


@pytest.fixture
def dir_a(tmp_path: pathlib.Path) -> pathlib.Path:
    """Create the first search directory."""
    path = tmp_path / "a"
    path.mkdir()
    return path


@pytest.fixture
def dir_b(tmp_path: pathlib.Path) -> pathlib.Path:
    """Create the second search directory."""
    path = tmp_path / "b"
    path.mkdir()
    return path


@pytest.fixture
def sample_model(dir_b: pathlib.Path) -> pathlib.Path:
    """Write a small OBJ file into the second search directory."""
    model = dir_b / "model.obj"
    model.write_bytes(b"v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1 2 3\n")
    return model


@pytest.fixture
def io_system(dir_a: pathlib.Path, dir_b: pathlib.Path):
    """FileIOSystem searching ``a`` then ``b``; closes leftover streams on teardown."""
    with FileIOSystem(str(dir_a), str(dir_b)) as system:
        yield system
