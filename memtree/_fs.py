from __future__ import annotations

import json
import logging

from ._exceptions import (
    MTAlreadyExistsError,
    MTInvalidPathError,
    MTPathNotFoundError,
    MTSerializationError,
)
from ._node import Dir, File, Node
from ._options import FileSystemOptions
from ._path import split_path
from ._typing import TreeStats

logger = logging.getLogger(__name__)


class FileSystem:
    """Path-string facade over an in-memory tree of :class:`Dir` and :class:`File`.

    Paths are split on ``/`` with no normalization: ``"a//b"`` has an empty
    middle segment, and ``"/a"`` starts with a directory named ``""``.

    By default missing ancestors are created by :meth:`mkdir` and
    :meth:`write_file`.  With ``disable_auto_create=True`` they must already
    exist, otherwise :class:`MTPathNotFoundError` is raised.

    .. warning::
        Thread Safety (Weak Consistency):
        Single child-map operations are thread-safe, but a path is resolved
        one segment at a time without holding any lock across segments.
    """

    def __init__(
        self,
        disable_auto_create: bool = False,
        atomic_create: bool = False,
    ) -> None:
        self._options = FileSystemOptions(
            disable_auto_create=disable_auto_create,
            atomic_create=atomic_create,
        )
        self._root = Dir("", self._options)

    @property
    def options(self) -> FileSystemOptions:
        return self._options

    @property
    def root(self) -> Dir:
        return self._root

    # -- path helpers --

    def _resolve_parent(self, segments: list[str], path: str) -> Dir:
        if self._options.disable_auto_create:
            parent = self._root.find(segments)
        else:
            parent = self._root.create_path(segments)
        if not isinstance(parent, Dir):
            raise MTInvalidPathError(path)
        return parent

    # -- public API --

    def mkdir(self, path: str) -> None:
        segments = split_path(path)
        if not self._options.disable_auto_create:
            self._root.create_path(segments)
            return
        parent = self._resolve_parent(segments[:-1], path)
        parent.create_dir(segments[-1])

    def read_file(self, path: str) -> str:
        node = self._root.find(split_path(path))
        if not isinstance(node, File):
            raise MTInvalidPathError(path, "error reading non-file")
        return node.data()

    def write_file(self, path: str, data: str) -> None:
        """Create the file at ``path`` with ``data``, or append if it exists."""
        segments = split_path(path)
        parent = self._resolve_parent(segments[:-1], path)
        name = segments[-1]
        try:
            child = parent.get_child(name)
        except MTPathNotFoundError:
            try:
                parent.create_file(name, data)
                return
            except MTAlreadyExistsError:
                # Another thread created it between lookup and insert.
                child = parent.get_child(name)
        if not isinstance(child, File):
            raise MTInvalidPathError(path, "error writing to non-file")
        logger.debug("appending %d chars to %r", len(data), path)
        child.append(data)

    def find(self, path: str) -> Node:
        return self._root.find(split_path(path))

    def exists(self, path: str) -> bool:
        try:
            self.find(path)
        except (MTPathNotFoundError, MTInvalidPathError):
            return False
        return True

    def is_dir(self, path: str) -> bool:
        try:
            return isinstance(self.find(path), Dir)
        except (MTPathNotFoundError, MTInvalidPathError):
            return False

    def is_file(self, path: str) -> bool:
        try:
            return isinstance(self.find(path), File)
        except (MTPathNotFoundError, MTInvalidPathError):
            return False

    def pretty_print(self, indent: int = 2) -> str:
        snapshot = self._root.pretty_print()
        try:
            return json.dumps(snapshot, indent=indent, sort_keys=True, ensure_ascii=False)
        except (TypeError, ValueError, RecursionError) as exc:
            raise MTSerializationError(f"cannot serialize tree: {exc}") from exc

    def stats(self) -> TreeStats:
        stats: TreeStats = {"file_count": 0, "dir_count": 0, "total_chars": 0}
        stack: list[Node] = [self._root]
        while stack:
            node = stack.pop()
            if isinstance(node, File):
                stats["file_count"] += 1
                stats["total_chars"] += node.size
            elif isinstance(node, Dir):
                stats["dir_count"] += 1
                stack.extend(child for _, child in node.entries())
        return stats

    def __repr__(self) -> str:
        mode = "restrictive" if self._options.disable_auto_create else "permissive"
        return f"FileSystem(mode={mode!r}, atomic_create={self._options.atomic_create})"
