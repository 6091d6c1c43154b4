"""Test configuration and fixtures for fstree."""

import pytest

from fstree.file_tree.node import Node
from fstree.file_tree.node_kind import NodeKind


def make_dir(path, *children):
    return Node(path, NodeKind.directory(list(children)))


def make_file(path, extra=None):
    node = Node(path, NodeKind.regular_file())
    node.extra = extra
    return node


@pytest.fixture
def sample_tree():
    """A small tree exercising every kind.

    root/
    ├── src/
    │   ├── main.py
    │   └── utils/
    │       └── helpers.py
    ├── empty/
    ├── latest [symlink]
    ├── socket [other]
    └── README.md
    """
    return make_dir(
        "root",
        make_dir("src", make_file("main.py"), make_dir("utils", make_file("helpers.py"))),
        make_dir("empty"),
        Node("latest", NodeKind.symlink()),
        Node("socket", NodeKind.other()),
        make_file("README.md"),
    )
