"""File identifier for recognizing directories by device and inode."""

import os
from typing import Any, Optional

from fstree.types import PathType


class FileIdentifier:
    """Device and inode pair that uniquely names a directory on a host.

    Used while building a tree with symlinks followed: a directory whose identifier
    already appears among its own ancestors was reached through a symlink loop.

    Attributes:
        device_id (int): The device ID from stat information.
        inode_number (int): The inode number from stat information.
    """

    __slots__ = ("device_id", "inode_number")

    def __init__(self, device_id: int, inode_number: int):
        self.device_id = device_id
        self.inode_number = inode_number

    @classmethod
    def from_path(cls, path: PathType) -> Optional["FileIdentifier"]:
        """Identify the entry at ``path``, following symlinks.

        Returns:
            The identifier, or None if the path cannot be stat'ed.
        """
        try:
            stat_info = os.stat(path)
        except OSError:
            return None
        return cls(stat_info.st_dev, stat_info.st_ino)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, FileIdentifier):
            return False
        return self.device_id == other.device_id and self.inode_number == other.inode_number

    def __hash__(self) -> int:
        return hash((self.device_id, self.inode_number))

    def __repr__(self) -> str:
        return f"FileIdentifier(device_id={self.device_id}, inode_number={self.inode_number})"
