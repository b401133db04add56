from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod

from ._exceptions import MTAlreadyExistsError, MTInvalidPathError, MTPathNotFoundError
from ._map import ConcurrentMap
from ._options import FileSystemOptions
from ._path import join_path
from ._typing import TreeSnapshot

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
#  Node Layer
# ---------------------------------------------------------------------------


class Node(ABC):
    __slots__ = ()

    @property
    @abstractmethod
    def name(self) -> str: ...


class File(Node):
    """Leaf node holding appendable text.

    Appended pieces are kept as chunks and joined lazily on read.
    """

    __slots__ = ("_name", "_chunks", "_size", "_lock")

    def __init__(self, name: str, data: str = "") -> None:
        self._name: str = name
        self._chunks: list[str] = [data] if data else []
        self._size: int = len(data)
        self._lock: threading.Lock = threading.Lock()

    @property
    def name(self) -> str:
        return self._name

    @property
    def size(self) -> int:
        return self._size

    def append(self, data: str) -> None:
        if not data:
            return
        with self._lock:
            self._chunks.append(data)
            self._size += len(data)

    def data(self) -> str:
        with self._lock:
            if len(self._chunks) > 1:
                self._chunks = ["".join(self._chunks)]
            return self._chunks[0] if self._chunks else ""

    def __repr__(self) -> str:
        return f"File(name={self._name!r}, size={self._size})"


class Dir(Node):
    """Container node mapping child names to files and subdirectories.

    Each single lookup or insert on the child map is thread-safe.  Unless
    ``options.atomic_create`` is set, ``create_dir``/``create_file`` check
    for the name and then store it in two separate steps, so two threads
    creating the same name can both succeed and the later store wins.
    """

    __slots__ = ("_name", "_children", "_options")

    def __init__(self, name: str, options: FileSystemOptions) -> None:
        self._name: str = name
        self._children: ConcurrentMap[str, Node] = ConcurrentMap()
        self._options: FileSystemOptions = options

    @property
    def name(self) -> str:
        return self._name

    @property
    def options(self) -> FileSystemOptions:
        return self._options

    # -- single-level access --

    def has_child(self, name: str) -> bool:
        return self._children.contains(name)

    def get_child(self, name: str) -> Node:
        child = self._children.get(name)
        if child is None:
            raise MTPathNotFoundError([name])
        return child

    def list_children(self) -> list[str]:
        return self._children.keys()

    def entries(self) -> list[tuple[str, Node]]:
        return self._children.items()

    def create_dir(self, name: str) -> Dir:
        child = Dir(name, self._options)
        self._insert(name, child, "dir")
        logger.debug("created dir %r under %r", name, self._name)
        return child

    def create_file(self, name: str, data: str) -> None:
        self._insert(name, File(name, data), "file")
        logger.debug("created file %r under %r", name, self._name)

    def _insert(self, name: str, node: Node, kind: str) -> None:
        if self._options.atomic_create:
            _, loaded = self._children.set_default(name, node)
            if loaded:
                raise MTAlreadyExistsError(name, kind)
            return
        if self.has_child(name):
            raise MTAlreadyExistsError(name, kind)
        self._children.set(name, node)

    # -- path resolution --

    def create_path(self, segments: list[str]) -> Dir:
        """Walk ``segments`` from this directory, creating missing directories.

        Existing directories are reused, so repeated calls return the same
        terminal :class:`Dir`.  Raises :class:`MTInvalidPathError` if a file
        sits where a directory is needed.
        """
        current = self
        for name in segments:
            child = current._children.get(name)
            if child is None:
                try:
                    child = current.create_dir(name)
                except MTAlreadyExistsError:
                    # Another thread created it between lookup and insert.
                    child = current.get_child(name)
            if not isinstance(child, Dir):
                raise MTInvalidPathError(
                    join_path(segments), f"'{name}' is not a directory"
                )
            current = child
        return current

    def find(self, segments: list[str]) -> Node:
        """Resolve ``segments`` by exact lookup without creating anything.

        Raises :class:`MTPathNotFoundError` (carrying ``segments``) when a
        segment is missing and :class:`MTInvalidPathError` when a non-final
        segment is a file.
        """
        current: Node = self
        parent_name = self._name
        for name in segments:
            if not isinstance(current, Dir):
                raise MTInvalidPathError(
                    join_path(segments), f"'{parent_name}' is not a directory"
                )
            child = current._children.get(name)
            if child is None:
                raise MTPathNotFoundError(segments)
            current = child
            parent_name = name
        return current

    # -- export --

    def pretty_print(self) -> TreeSnapshot:
        # Explicit stack: trees built by create_path can be deeper than the
        # interpreter recursion limit.
        snapshot: TreeSnapshot = {}
        stack: list[tuple[Dir, TreeSnapshot]] = [(self, snapshot)]
        while stack:
            node, out = stack.pop()
            for name, child in node._children.items():
                if isinstance(child, Dir):
                    nested: TreeSnapshot = {}
                    out[name] = nested
                    stack.append((child, nested))
                elif isinstance(child, File):
                    out[name] = child.data()
        return snapshot

    def __repr__(self) -> str:
        return f"Dir(name={self._name!r}, children={len(self._children)})"
