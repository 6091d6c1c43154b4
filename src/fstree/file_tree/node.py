"""Node representation for filesystem entries in the tree."""

import os
from functools import total_ordering
from pathlib import PurePath
from typing import Any, Generic, List, Optional, Tuple, TypeVar

from fstree.exceptions import InvalidPathSegmentError
from fstree.file_tree.classifier import classify
from fstree.file_tree.iterators import PathIterator, TreeIterator
from fstree.file_tree.node_kind import NodeKind
from fstree.types import PathType

T = TypeVar("T")

_SEPARATORS = tuple(sep for sep in (os.sep, os.altsep) if sep)


def _is_single_component(segment: str) -> bool:
    # A bare anchor such as "/" is the root component and counts as one
    if segment and segment == PurePath(segment).anchor:
        return True
    return not any(sep in segment for sep in _SEPARATORS)


@total_ordering
class Node(Generic[T]):
    """A single vertex of a filesystem tree: a file, directory, symlink or other entry.

    Each node holds one path segment (just the basename, never a full path), a kind,
    and optional caller-supplied metadata. Directory kinds own an ordered list of
    child nodes; that list is the only source of branching, so a tree built through
    this API has no back-references and no cycles.

    Children keep their insertion order; the node never sorts them. Nodes compare
    equal when path, kind (including all descendants) and extra are equal, and order
    lexicographically over the same fields. Nodes are mutable and therefore not
    hashable.

    Attributes:
        path (str): The single path segment this node represents.
        kind (NodeKind): What the entry is; directories carry the children.
        extra (Optional[T]): Caller metadata. None until the caller sets it.

    Example:
        >>> root = Node("root", NodeKind.directory())
        >>> root.children.append(Node("b", NodeKind.regular_file()))
        >>> root.children.append(Node("a", NodeKind.regular_file()))
        >>> list(root.paths())
        ['root', 'b', 'a']
    """

    __slots__ = ("path", "kind", "extra")

    def __init__(self, path: PathType, kind: NodeKind[T]) -> None:
        """Initialize a Node with no extra data.

        Args:
            path: A single path segment, e.g. ``"src"`` or ``"main.py"``.
            kind: The kind of entry.

        Raises:
            InvalidPathSegmentError: If ``path`` has more than one component. This
                signals a bug in the caller; validate paths before building nodes.

        Example:
            >>> Node("a/b", NodeKind.regular_file())
            Traceback (most recent call last):
                ...
            fstree.exceptions.InvalidPathSegmentError: Node path must be a single path component, got 'a/b'
        """
        segment = os.fspath(path)
        if not _is_single_component(segment):
            raise InvalidPathSegmentError(segment)
        self.path = segment
        self.kind = kind
        self.extra: Optional[T] = None

    @classmethod
    def from_path(cls, path: PathType, follow_symlinks: bool = False) -> "Node[T]":
        """Create a Node by inspecting a real filesystem path.

        The kind comes from a single classification call. The node keeps only the
        final component of ``path``. Directories are not read: the returned node has
        an empty child list that the caller fills in separately.

        Args:
            path: Path to an existing filesystem entry.
            follow_symlinks: Whether a symlink is classified as its target's kind.

        Returns:
            A new node with ``extra`` set to None.

        Raises:
            ClassificationError: If the path cannot be accessed or classified.
        """
        file_type = classify(path, follow_symlinks)
        pure = PurePath(path)
        return cls(pure.name or pure.anchor or str(pure), NodeKind(file_type))

    @classmethod
    def default(cls) -> "Node[T]":
        """Placeholder node with an empty path, the default kind and no extra data."""
        return cls("", NodeKind.default())

    @property
    def children(self) -> Optional[List["Node[T]"]]:
        """Child nodes if this is a directory, otherwise None."""
        return self.kind.children

    def nodes(self) -> TreeIterator[T]:
        """Iterate over every node of the subtree rooted here, this node first.

        The tree must not be modified while the returned iterator is in use.
        """
        return TreeIterator(self)

    def paths(self) -> PathIterator[T]:
        """Shorthand for ``self.nodes().paths()``."""
        return self.nodes().paths()

    def _sort_key(self) -> Tuple[str, NodeKind[T], Tuple[Any, ...]]:
        extra_key: Tuple[Any, ...] = () if self.extra is None else (self.extra,)
        return (self.path, self.kind, extra_key)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self.path == other.path and self.kind == other.kind and self.extra == other.extra

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Node(path={self.path!r}, kind={self.kind!r}, extra={self.extra!r})"
