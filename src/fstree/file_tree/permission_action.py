"""Permission action enum for handling access errors while building a tree."""

from enum import Enum


class PermissionAction(str, Enum):
    """Action to take when an entry cannot be read while building a tree from disk.

    Values:
        IGNORE: Keep unreadable directories as empty and drop entries that cannot be
            classified (default behavior)
        RAISE: Raise immediately when access is denied or classification fails
    """

    IGNORE = "ignore"
    RAISE = "raise"
