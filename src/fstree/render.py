"""Text rendering of node trees in the style of the Unix ``tree`` command."""

from typing import Any, Iterator, List, Optional, Tuple

from anytree.render import AbstractStyle, ContStyle

from fstree.file_tree.node import Node
from fstree.types import FileType

_SUFFIXES = {
    FileType.REGULAR_FILE: "",
    FileType.DIRECTORY: "/",
    FileType.SYMLINK: " [symlink]",
    FileType.OTHER: " [other]",
}


def node_label(node: Node[Any]) -> str:
    """Return the display label of a node: its path plus a kind marker.

    Example:
        >>> from fstree.file_tree.node_kind import NodeKind
        >>> node_label(Node("src", NodeKind.directory()))
        'src/'
        >>> node_label(Node("latest", NodeKind.symlink()))
        'latest [symlink]'
    """
    return f"{node.path}{_SUFFIXES[node.kind.file_type]}"


def stream_tree_representation(
    root: Node[Any], max_depth: Optional[int] = None, style: Optional[AbstractStyle] = None
) -> Iterator[str]:
    """Generate a tree representation one line at a time.

    Children appear in their stored order; nothing is sorted here. Lines are produced
    from an explicit stack, so arbitrarily deep trees render without recursion.

    Args:
        root: The node to render. Its label is the first line.
        max_depth: If given, nodes deeper than this are left out.
        style: anytree render style supplying the connector glyphs. Defaults to
            ``ContStyle`` (``├──``, ``└──``, ``│``).

    Yields:
        Lines of the representation, without trailing newlines.

    Example:
        >>> from fstree.file_tree.node_kind import NodeKind
        >>> root = Node("project", NodeKind.directory())
        >>> src = Node("src", NodeKind.directory())
        >>> src.children.append(Node("main.py", NodeKind.regular_file()))
        >>> root.children.extend([src, Node("README.md", NodeKind.regular_file())])
        >>> for line in stream_tree_representation(root):
        ...     print(line)
        project/
        ├── src/
        │   └── main.py
        └── README.md
    """
    if style is None:
        style = ContStyle()

    yield node_label(root)

    # Pending nodes: (node, indent inherited from ancestors, is last sibling, depth)
    stack: List[Tuple[Node[Any], str, bool, int]] = []

    def push_children(node: Node[Any], indent: str, depth: int) -> None:
        children = node.children
        if not children or (max_depth is not None and depth > max_depth):
            return
        last = len(children) - 1
        for index in range(last, -1, -1):
            stack.append((children[index], indent, index == last, depth))

    push_children(root, "", 1)
    while stack:
        node, indent, is_last, depth = stack.pop()
        yield f"{indent}{style.end if is_last else style.cont}{node_label(node)}"
        push_children(node, indent + (style.empty if is_last else style.vertical), depth + 1)


def get_tree_representation(root: Node[Any], max_depth: Optional[int] = None) -> str:
    """Get the complete tree representation as a single string."""
    return "\n".join(stream_tree_representation(root, max_depth))
