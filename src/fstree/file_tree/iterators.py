"""Lazy depth-first iterators over a node tree.

``TreeIterator`` walks a subtree in pre-order using an explicit work stack, so
deep trees never grow the interpreter call stack. ``PathIterator`` is a plain
projection of it that yields each node's path segment.

Both iterators hold references into a tree they do not own. The tree must not be
structurally modified (children added, removed or reordered) while an iterator
over it is in use; abandoning an iterator part-way is always safe.
"""

from pathlib import PurePath
from typing import TYPE_CHECKING, Generic, Iterator, List, Optional, Set, Tuple, TypeVar

from fstree.types import FileType

if TYPE_CHECKING:
    from fstree.file_tree.node import Node

T = TypeVar("T")


class TreeIterator(Generic[T]):
    """Pre-order iterator over every node of a subtree, starting with its root.

    A node is always yielded before its descendants and siblings are yielded in
    their stored order. The iterator is single-pass: call ``Node.nodes()`` again
    to start over.

    Filters can be chained before iteration starts. Skipping a kind only hides
    nodes of that kind from the output; their descendants are still visited.
    ``max_depth`` prunes the walk itself.

    Example:
        >>> from fstree.file_tree.node import Node
        >>> from fstree.file_tree.node_kind import NodeKind
        >>> root = Node("root", NodeKind.directory())
        >>> sub = Node("sub", NodeKind.directory())
        >>> sub.children.append(Node("deep.txt", NodeKind.regular_file()))
        >>> root.children.extend([sub, Node("top.txt", NodeKind.regular_file())])
        >>> [node.path for node in root.nodes()]
        ['root', 'sub', 'deep.txt', 'top.txt']
        >>> [node.path for node in root.nodes().skip_dirs().max_depth(1)]
        ['top.txt']
    """

    def __init__(self, root: "Node[T]") -> None:
        # Pending nodes with their depth; the top of the stack is the next to yield
        self._stack: List[Tuple["Node[T]", int]] = [(root, 0)]
        # Segments of the last yielded node and its ancestors, root first
        self._segments: List[str] = []
        self._skipped: Set[FileType] = set()
        self._min_depth = 0
        self._max_depth: Optional[int] = None
        self._depth = 0
        self._started = False

    def __iter__(self) -> Iterator["Node[T]"]:
        return self

    def __next__(self) -> "Node[T]":
        self._started = True
        while self._stack:
            node, depth = self._stack.pop()

            del self._segments[depth:]
            self._segments.append(node.path)

            children = node.kind.children
            if children and (self._max_depth is None or depth < self._max_depth):
                for child in reversed(children):
                    self._stack.append((child, depth + 1))

            if depth < self._min_depth or node.kind.file_type in self._skipped:
                continue

            self._depth = depth
            return node
        raise StopIteration

    @property
    def depth(self) -> int:
        """Depth of the most recently yielded node; the root is at depth 0."""
        return self._depth

    @property
    def current_path(self) -> PurePath:
        """Path of the most recently yielded node relative to the traversal root.

        The root's own segment is not part of it; for the root this is ``PurePath(".")``.
        """
        return PurePath(*self._segments[1 : self._depth + 1])

    def paths(self) -> "PathIterator[T]":
        """Project this iterator onto node paths."""
        return PathIterator(self)

    def skip_regular_files(self) -> "TreeIterator[T]":
        return self._skip(FileType.REGULAR_FILE)

    def skip_dirs(self) -> "TreeIterator[T]":
        return self._skip(FileType.DIRECTORY)

    def skip_symlinks(self) -> "TreeIterator[T]":
        return self._skip(FileType.SYMLINK)

    def skip_others(self) -> "TreeIterator[T]":
        return self._skip(FileType.OTHER)

    def min_depth(self, depth: int) -> "TreeIterator[T]":
        """Do not yield nodes shallower than ``depth``. They are still descended into."""
        self._check_configurable(depth)
        self._min_depth = depth
        return self

    def max_depth(self, depth: int) -> "TreeIterator[T]":
        """Do not visit nodes deeper than ``depth``. ``max_depth(0)`` yields only the root."""
        self._check_configurable(depth)
        self._max_depth = depth
        return self

    def _skip(self, file_type: FileType) -> "TreeIterator[T]":
        self._check_configurable()
        self._skipped.add(file_type)
        return self

    def _check_configurable(self, depth: int = 0) -> None:
        if self._started:
            raise RuntimeError("Filters must be configured before iteration starts")
        if depth < 0:
            raise ValueError(f"Depth must be non-negative, got {depth}")


class PathIterator(Generic[T]):
    """Yields the path segment of every node produced by a ``TreeIterator``.

    Same order and same termination as the wrapped iterator; it adds nothing but the
    projection.
    """

    def __init__(self, nodes: TreeIterator[T]) -> None:
        self._nodes = nodes

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        return next(self._nodes).path
