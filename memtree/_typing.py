from typing import TypedDict, Union

# name -> file content, or name -> nested snapshot for a subdirectory
TreeSnapshot = dict[str, Union[str, "TreeSnapshot"]]


class TreeStats(TypedDict):
    file_count: int
    dir_count: int
    total_chars: int
