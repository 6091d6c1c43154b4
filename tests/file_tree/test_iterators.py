"""Unit tests for TreeIterator and PathIterator."""

from pathlib import PurePath

import pytest

from fstree.file_tree.iterators import PathIterator, TreeIterator
from fstree.file_tree.node import Node
from fstree.file_tree.node_kind import NodeKind


def count_all_nodes(node):
    return 1 + sum(count_all_nodes(child) for child in node.children or [])


def test_tree_iterator_visits_every_node_once(sample_tree):
    nodes = list(sample_tree.nodes())
    assert len(nodes) == count_all_nodes(sample_tree) == 9
    assert len({id(node) for node in nodes}) == len(nodes)


def test_tree_iterator_root_first(sample_tree):
    first = next(sample_tree.nodes())
    assert first is sample_tree
    assert first.path == "root"


def test_tree_iterator_pre_order(sample_tree):
    """Test that parents precede children and subtrees precede later siblings."""
    assert list(sample_tree.paths()) == [
        "root",
        "src",
        "main.py",
        "utils",
        "helpers.py",
        "empty",
        "latest",
        "socket",
        "README.md",
    ]


def test_tree_iterator_pre_order_positions(sample_tree):
    order = {id(node): index for index, node in enumerate(sample_tree.nodes())}

    def check(node):
        children = node.children or []
        for index, child in enumerate(children):
            assert order[id(child)] > order[id(node)]
            if index + 1 < len(children):
                later_sibling = children[index + 1]
                for descendant in child.nodes():
                    assert order[id(descendant)] < order[id(later_sibling)]
            check(child)

    check(sample_tree)


def test_tree_iterator_empty_directory():
    """Test that an empty directory yields only itself."""
    empty = Node("empty", NodeKind.directory())
    iterator = empty.nodes()
    assert next(iterator) is empty
    with pytest.raises(StopIteration):
        next(iterator)


def test_tree_iterator_single_leaf():
    leaf = Node("file.txt", NodeKind.regular_file())
    assert list(leaf.nodes()) == [leaf]


def test_tree_iterator_is_single_pass(sample_tree):
    iterator = sample_tree.nodes()
    assert iter(iterator) is iterator
    assert len(list(iterator)) == 9
    assert list(iterator) == []
    # A new iterator starts over
    assert len(list(sample_tree.nodes())) == 9


def test_tree_iterator_abandoned_midway(sample_tree):
    iterator = sample_tree.nodes()
    next(iterator)
    next(iterator)
    del iterator
    assert len(list(sample_tree.nodes())) == 9


def test_tree_iterator_deep_tree_does_not_recurse():
    """Test a tree far deeper than the interpreter recursion limit."""
    depth = 5000
    root = Node("level0", NodeKind.directory())
    current = root
    for level in range(1, depth):
        child = Node(f"level{level}", NodeKind.directory())
        current.children.append(child)
        current = child

    paths = list(root.paths())
    assert len(paths) == depth
    assert paths[0] == "level0"
    assert paths[-1] == f"level{depth - 1}"


def test_tree_iterator_depth(sample_tree):
    iterator = sample_tree.nodes()
    depths = {node.path: iterator.depth for node in iterator}
    assert depths["root"] == 0
    assert depths["src"] == 1
    assert depths["utils"] == 2
    assert depths["helpers.py"] == 3
    assert depths["README.md"] == 1


def test_tree_iterator_current_path(sample_tree):
    iterator = sample_tree.nodes()
    paths = [iterator.current_path for _ in iterator]
    assert paths == [
        PurePath("."),
        PurePath("src"),
        PurePath("src/main.py"),
        PurePath("src/utils"),
        PurePath("src/utils/helpers.py"),
        PurePath("empty"),
        PurePath("latest"),
        PurePath("socket"),
        PurePath("README.md"),
    ]


def test_tree_iterator_skip_kinds(sample_tree):
    """Test that skipped kinds are hidden but their contents are still visited."""
    assert list(sample_tree.nodes().skip_dirs().paths()) == [
        "main.py",
        "helpers.py",
        "latest",
        "socket",
        "README.md",
    ]
    assert list(sample_tree.nodes().skip_regular_files().skip_symlinks().skip_others().paths()) == [
        "root",
        "src",
        "utils",
        "empty",
    ]


def test_tree_iterator_current_path_with_skipped_dirs(sample_tree):
    iterator = sample_tree.nodes().skip_dirs()
    paths = [iterator.current_path.as_posix() for _ in iterator]
    assert paths[:2] == ["src/main.py", "src/utils/helpers.py"]


def test_tree_iterator_min_depth(sample_tree):
    assert list(sample_tree.nodes().min_depth(2).paths()) == ["main.py", "utils", "helpers.py"]


def test_tree_iterator_max_depth(sample_tree):
    assert list(sample_tree.nodes().max_depth(0).paths()) == ["root"]
    assert list(sample_tree.nodes().max_depth(1).paths()) == [
        "root",
        "src",
        "empty",
        "latest",
        "socket",
        "README.md",
    ]


def test_tree_iterator_depth_window(sample_tree):
    assert list(sample_tree.nodes().min_depth(2).max_depth(2).paths()) == ["main.py", "utils"]


def test_tree_iterator_filters_after_start_rejected(sample_tree):
    iterator = sample_tree.nodes()
    next(iterator)
    with pytest.raises(RuntimeError):
        iterator.skip_dirs()
    with pytest.raises(RuntimeError):
        iterator.max_depth(1)


def test_tree_iterator_negative_depth_rejected(sample_tree):
    with pytest.raises(ValueError):
        sample_tree.nodes().min_depth(-1)
    with pytest.raises(ValueError):
        sample_tree.nodes().max_depth(-1)


def test_path_iterator_projection(sample_tree):
    """Test that the path iterator follows the node iterator exactly."""
    paths = sample_tree.nodes().paths()
    assert isinstance(paths, PathIterator)
    assert list(paths) == [node.path for node in sample_tree.nodes()]


def test_path_iterator_flat_tree():
    root = Node("root", NodeKind.directory())
    root.children.extend(Node(name, NodeKind.regular_file()) for name in ["b", "a", "c"])
    assert list(root.nodes().paths()) == ["root", "b", "a", "c"]
    assert len(list(root.paths())) == len(list(root.nodes()))


def test_path_iterator_terminates_with_inner():
    leaf = Node("only", NodeKind.symlink())
    paths = PathIterator(TreeIterator(leaf))
    assert iter(paths) is paths
    assert next(paths) == "only"
    with pytest.raises(StopIteration):
        next(paths)
