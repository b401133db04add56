import logging

from ._exceptions import (
    MTAlreadyExistsError,
    MTInvalidPathError,
    MTPathNotFoundError,
    MTSerializationError,
)
from ._fs import FileSystem
from ._node import Dir, File, Node
from ._options import FileSystemOptions
from ._typing import TreeSnapshot, TreeStats

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "FileSystem",
    "FileSystemOptions",
    "Node",
    "Dir",
    "File",
    "MTPathNotFoundError",
    "MTAlreadyExistsError",
    "MTInvalidPathError",
    "MTSerializationError",
    "TreeSnapshot",
    "TreeStats",
]
__version__ = "0.1.0"
