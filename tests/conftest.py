import pytest
from memtree import FileSystem


@pytest.fixture
def fs() -> FileSystem:
    """Permissive filesystem (missing ancestors are auto-created)."""
    return FileSystem()


@pytest.fixture
def strict_fs() -> FileSystem:
    """Restrictive filesystem (ancestors must already exist)."""
    return FileSystem(disable_auto_create=True)
