"""Unit tests for the NodeKind class."""

import pytest

from fstree.file_tree.node import Node
from fstree.file_tree.node_kind import NodeKind
from fstree.types import FileType


@pytest.mark.parametrize(
    "kind,file_type",
    [
        (NodeKind.regular_file(), FileType.REGULAR_FILE),
        (NodeKind.directory(), FileType.DIRECTORY),
        (NodeKind.symlink(), FileType.SYMLINK),
        (NodeKind.other(), FileType.OTHER),
    ],
)
def test_node_kind_factories(kind, file_type):
    assert kind.file_type is file_type
    assert kind.is_regular_file == (file_type is FileType.REGULAR_FILE)
    assert kind.is_dir == (file_type is FileType.DIRECTORY)
    assert kind.is_symlink == (file_type is FileType.SYMLINK)
    assert kind.is_other == (file_type is FileType.OTHER)


def test_node_kind_directory_children():
    assert NodeKind.directory().children == []
    child = Node("child", NodeKind.regular_file())
    assert NodeKind.directory([child]).children == [child]


def test_node_kind_directories_do_not_share_lists():
    first = NodeKind.directory()
    second = NodeKind.directory()
    first.children.append(Node("a", NodeKind.regular_file()))
    assert second.children == []


def test_node_kind_from_string_tag():
    assert NodeKind("symlink").file_type is FileType.SYMLINK


def test_node_kind_rejects_children_on_leaves():
    with pytest.raises(ValueError, match="Only directories can have children"):
        NodeKind(FileType.REGULAR_FILE, [Node("a", NodeKind.regular_file())])


def test_node_kind_default():
    assert NodeKind.default() == NodeKind.regular_file()


def test_node_kind_equality():
    assert NodeKind.symlink() == NodeKind.symlink()
    assert NodeKind.symlink() != NodeKind.other()
    assert NodeKind.directory() != NodeKind.directory([Node("a", NodeKind.regular_file())])


def test_node_kind_ordering_follows_declaration():
    kinds = [NodeKind.other(), NodeKind.directory(), NodeKind.symlink(), NodeKind.regular_file()]
    assert [kind.file_type for kind in sorted(kinds)] == list(FileType)


def test_node_kind_directory_ordering_by_children():
    smaller = NodeKind.directory([Node("a", NodeKind.regular_file())])
    larger = NodeKind.directory([Node("b", NodeKind.regular_file())])
    assert smaller < larger
    assert larger > smaller
    assert NodeKind.directory() < smaller
    assert smaller <= smaller
    assert larger >= smaller


def test_node_kind_repr():
    assert repr(NodeKind.regular_file()) == "NodeKind.regular_file()"
    assert repr(NodeKind.directory()) == "NodeKind.directory([])"
