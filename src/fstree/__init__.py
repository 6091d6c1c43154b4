"""Filesystem entries modeled as an in-memory tree.

This package provides a small tree data model for files, directories, symlinks
and other filesystem entries, with lazy depth-first traversal over the tree.
"""

from importlib.metadata import PackageNotFoundError, version

from fstree.exceptions import ClassificationError, InvalidPathSegmentError
from fstree.file_tree.iterators import PathIterator, TreeIterator
from fstree.file_tree.node import Node
from fstree.file_tree.node_kind import NodeKind
from fstree.types import FileType

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("fstree")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "ClassificationError",
    "FileType",
    "InvalidPathSegmentError",
    "Node",
    "NodeKind",
    "PathIterator",
    "TreeIterator",
]
