SEPARATOR = "/"


def split_path(path: str) -> list[str]:
    # No normalization: empty segments from leading, trailing or doubled
    # separators are kept as literal names.
    return path.split(SEPARATOR)


def join_path(segments: list[str]) -> str:
    return SEPARATOR.join(segments)
