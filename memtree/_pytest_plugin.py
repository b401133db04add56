"""pytest fixture plugin.

Installed packages register this module through the ``pytest11`` entry
point, so the fixtures are available without any conftest changes::

    def test_something(memtree_fs):
        memtree_fs.write_file("a/b.txt", "hello")
        assert memtree_fs.read_file("a/b.txt") == "hello"
"""

import pytest

from ._fs import FileSystem


@pytest.fixture
def memtree_fs() -> FileSystem:
    """A permissive :class:`FileSystem`; missing ancestors are auto-created.

    Provides an independent instance per test (function scope).
    """
    return FileSystem()


@pytest.fixture
def memtree_strict_fs() -> FileSystem:
    """A restrictive :class:`FileSystem`; ancestors must already exist."""
    return FileSystem(disable_auto_create=True)
