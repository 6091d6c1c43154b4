"""Building node trees from real directories.

This module provides the FileSystemTree class, which reads a directory from disk
into a ``Node`` tree, with support for exclusion rules, permission handling and
symlink loop detection. The node model itself never touches the disk beyond a
single classification; everything recursive happens here.
"""

import os
from pathlib import Path
from typing import Any, FrozenSet, Iterator, List, Optional, Tuple

from fstree.exceptions import ClassificationError
from fstree.exclusion_rules.base_rules import BaseExclusionRules
from fstree.file_tree.file_identifier import FileIdentifier
from fstree.file_tree.node import Node
from fstree.file_tree.node_kind import NodeKind
from fstree.file_tree.permission_action import PermissionAction
from fstree.render import stream_tree_representation
from fstree.types import FileType, PathType

# A directory still to be read: its node, location on disk, path relative to the
# root, and the identifiers of the directories above it
_PendingDirectory = Tuple[Node[Any], Path, str, FrozenSet[FileIdentifier]]


class FileSystemTree:
    """A node tree read from a directory on disk.

    The tree is built lazily on first access and cached until ``refresh()``.
    Entries are inserted sorted by name, so traversal order is stable across runs.

    Symbolic Link Behavior:
        By default symlinks become ``SYMLINK`` leaves. With ``follow_symlinks=True``
        they take the kind of their target and linked directories are read. A
        linked directory that is already one of its own ancestors is kept as a
        ``SYMLINK`` leaf instead of being read again.

    Permission Handling:
        - IGNORE (default): unreadable directories stay in the tree with no
          children; entries that cannot be classified are dropped
        - RAISE: ``PermissionError`` for an unreadable directory,
          ``ClassificationError`` for an entry that cannot be classified

    Attributes:
        root_path (Path): The directory (or file) to read.
        exclusion_rules (Optional[BaseExclusionRules]): Rules for leaving entries out.
        permission_action (PermissionAction): How to handle access errors.
        follow_symlinks (bool): Whether to follow symbolic links.

    Example:
        >>> tree = FileSystemTree("src")  # doctest: +SKIP
        >>> print(tree.get_tree_representation())  # doctest: +SKIP
        src/
        ├── main.py
        └── utils/
            └── helpers.py
    """

    def __init__(
        self,
        root_path: PathType,
        exclusion_rules: Optional[BaseExclusionRules] = None,
        permission_action: PermissionAction = PermissionAction.IGNORE,
        follow_symlinks: bool = False,
    ) -> None:
        self.root_path = Path(root_path)
        self.exclusion_rules = exclusion_rules
        self.permission_action = permission_action
        self.follow_symlinks = follow_symlinks
        self._tree: Optional[Node[Any]] = None

    def get_tree(self) -> Node[Any]:
        """Get the root node, reading the directory on first access.

        Raises:
            ClassificationError: If the root path cannot be classified.
            PermissionError: If a directory cannot be listed and permission_action
                is RAISE.
        """
        if self._tree is None:
            self._tree = self._build_tree()
        return self._tree

    def refresh(self) -> None:
        """Discard the cached tree and read the directory again."""
        self._tree = None
        self._tree = self._build_tree()

    def _build_tree(self) -> Node[Any]:
        root = Node.from_path(self.root_path, self.follow_symlinks)
        if root.path in (".", ".."):
            # Show the real directory name rather than a relative marker
            resolved_path = self.root_path.resolve()
            root.path = resolved_path.name or resolved_path.anchor
        if not root.kind.is_dir:
            return root

        root_id = FileIdentifier.from_path(self.root_path)
        ancestors = frozenset([root_id]) if root_id is not None else frozenset()
        stack: List[_PendingDirectory] = [(root, self.root_path, "", ancestors)]

        while stack:
            node, path, relative_path, ancestors = stack.pop()
            children = node.children
            if children is None:
                continue

            for name in self._list_directory(path):
                child_path = path / name
                child_relative_path = f"{relative_path}/{name}" if relative_path else name
                child = self._create_node(child_path)
                if child is None or self._is_excluded(child, child_relative_path):
                    continue

                if child.kind.is_dir:
                    child_id = FileIdentifier.from_path(child_path)
                    if child_id is not None and child_id in ancestors:
                        # Loop through a followed symlink
                        child.kind = NodeKind.symlink()
                    else:
                        child_ancestors = ancestors | {child_id} if child_id is not None else ancestors
                        stack.append((child, child_path, child_relative_path, child_ancestors))

                children.append(child)

        return root

    def _list_directory(self, path: Path) -> List[str]:
        try:
            return sorted(os.listdir(path))
        except PermissionError as e:
            if self.permission_action == PermissionAction.RAISE:
                raise PermissionError(f"Access denied to {path}: {e}")
            return []
        except OSError as e:
            if self.permission_action == PermissionAction.RAISE:
                raise PermissionError(f"Error accessing {path}: {e}")
            return []

    def _create_node(self, path: Path) -> Optional[Node[Any]]:
        try:
            return Node.from_path(path, self.follow_symlinks)
        except ClassificationError:
            if self.permission_action == PermissionAction.RAISE:
                raise
            return None

    def _is_excluded(self, node: Node[Any], relative_path: str) -> bool:
        if self.exclusion_rules is None:
            return False
        if self.exclusion_rules.exclude(relative_path):
            return True
        # Let directory-only patterns such as "build/" match the directory itself
        return node.kind.is_dir and self.exclusion_rules.exclude(relative_path + "/")

    def _count(self, file_type: FileType) -> int:
        return sum(1 for node in self.get_tree().nodes() if node.kind.file_type is file_type)

    def get_file_count(self) -> int:
        """Number of regular files in the tree."""
        return self._count(FileType.REGULAR_FILE)

    def get_directory_count(self) -> int:
        """Number of directories in the tree, not counting the root."""
        count = self._count(FileType.DIRECTORY)
        return count - 1 if self.get_tree().kind.is_dir else count

    def get_symlink_count(self) -> int:
        """Number of symlinks in the tree, including links kept because of a loop."""
        return self._count(FileType.SYMLINK)

    def get_other_count(self) -> int:
        """Number of entries that are neither files, directories nor symlinks."""
        return self._count(FileType.OTHER)

    def stream_tree_representation(self, max_depth: Optional[int] = None) -> Iterator[str]:
        """Generate the tree representation one line at a time.

        Example:
            >>> tree = FileSystemTree("src")  # doctest: +SKIP
            >>> for line in tree.stream_tree_representation():  # doctest: +SKIP
            ...     print(line)
            src/
            ├── main.py
            └── utils/
                └── helpers.py
        """
        return stream_tree_representation(self.get_tree(), max_depth)

    def get_tree_representation(self, max_depth: Optional[int] = None) -> str:
        """Get the complete tree representation as a string."""
        return "\n".join(self.stream_tree_representation(max_depth))
