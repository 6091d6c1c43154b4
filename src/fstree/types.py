from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class FileType(str, Enum):
    """Enumeration of the kinds of entry a tree node can represent.

    Declaration order is significant: it is the order used when comparing
    node kinds.

    Attributes:
        REGULAR_FILE: Regular file
        DIRECTORY: Directory, the only kind that carries children
        SYMLINK: Symbolic link
        OTHER: Anything else (block/character devices, FIFOs, sockets)
    """

    REGULAR_FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    OTHER = "other"
