"""Tests for the tree rendering module."""

from fstree.file_tree.node import Node
from fstree.file_tree.node_kind import NodeKind
from fstree.render import get_tree_representation, node_label, stream_tree_representation


def test_node_label():
    assert node_label(Node("main.py", NodeKind.regular_file())) == "main.py"
    assert node_label(Node("src", NodeKind.directory())) == "src/"
    assert node_label(Node("latest", NodeKind.symlink())) == "latest [symlink]"
    assert node_label(Node("socket", NodeKind.other())) == "socket [other]"


def test_stream_tree_representation(sample_tree):
    assert list(stream_tree_representation(sample_tree)) == [
        "root/",
        "├── src/",
        "│   ├── main.py",
        "│   └── utils/",
        "│       └── helpers.py",
        "├── empty/",
        "├── latest [symlink]",
        "├── socket [other]",
        "└── README.md",
    ]


def test_stream_tree_representation_keeps_insertion_order():
    root = Node("root", NodeKind.directory())
    root.children.extend(Node(name, NodeKind.regular_file()) for name in ["b", "a", "c"])
    assert list(stream_tree_representation(root)) == ["root/", "├── b", "├── a", "└── c"]


def test_stream_tree_representation_max_depth(sample_tree):
    lines = list(stream_tree_representation(sample_tree, max_depth=0))
    assert lines == ["root/"]


def test_stream_tree_representation_single_leaf():
    assert list(stream_tree_representation(Node("file.txt", NodeKind.regular_file()))) == ["file.txt"]


def test_get_tree_representation(sample_tree):
    text = get_tree_representation(sample_tree, max_depth=1)
    assert text == "\n".join(
        [
            "root/",
            "├── src/",
            "├── empty/",
            "├── latest [symlink]",
            "├── socket [other]",
            "└── README.md",
        ]
    )


def test_stream_tree_representation_deep_tree():
    """Test a tree far deeper than the interpreter recursion limit."""
    depth = 3000
    root = Node("level0", NodeKind.directory())
    current = root
    for level in range(1, depth):
        child = Node(f"level{level}", NodeKind.directory())
        current.children.append(child)
        current = child

    lines = list(stream_tree_representation(root))
    assert len(lines) == depth
    assert lines[0] == "level0/"
    assert lines[1] == "└── level1/"
    assert lines[-1] == "    " * (depth - 2) + f"└── level{depth - 1}/"
    assert get_tree_representation(root).count("\n") == depth - 1
