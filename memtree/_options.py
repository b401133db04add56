from dataclasses import dataclass


@dataclass(frozen=True)
class FileSystemOptions:
    """Configuration fixed when a :class:`FileSystem` is built.

    One instance is shared by reference with every directory of the tree.

    ``disable_auto_create``
        Restrictive mode.  ``mkdir`` and ``write_file`` fail with
        :class:`MTPathNotFoundError` instead of creating missing ancestors.
    ``atomic_create``
        Check and insert under the child map's lock in one step in
        ``create_dir``/``create_file``, so that exactly one of several
        concurrent creators of a name succeeds.
    """

    disable_auto_create: bool = False
    atomic_create: bool = False

    def __post_init__(self) -> None:
        for field_name in ("disable_auto_create", "atomic_create"):
            value = getattr(self, field_name)
            if not isinstance(value, bool):
                raise TypeError(
                    f"Invalid {field_name} value: {value!r}. Expected a bool."
                )
