from ._path import join_path


class MTPathNotFoundError(FileNotFoundError):
    """Raised when a path segment does not exist. Subclass of FileNotFoundError.

    Carries the attempted segments so callers can report the full path.
    """
    def __init__(self, segments: list[str]) -> None:
        self.segments = list(segments)
        self.path = join_path(self.segments)
        super().__init__(f"path '{self.path}' does not exist")


class MTAlreadyExistsError(FileExistsError):
    """Raised when a child name is already taken by a file or directory."""
    def __init__(self, name: str, kind: str = "node") -> None:
        self.name = name
        super().__init__(f"{kind} already exists: '{name}'")


class MTInvalidPathError(OSError):
    """Raised when a path runs through a file or names the wrong node kind."""
    def __init__(self, path: str, reason: str = "path is invalid") -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{reason}: '{path}'")


class MTSerializationError(ValueError):
    """Raised when a tree snapshot cannot be encoded as text."""
