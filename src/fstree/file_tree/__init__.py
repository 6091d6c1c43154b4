"""Filesystem tree data model and traversal.

This module provides the node model for files, directories, symlinks and other
entries, the iterators that walk it, and a builder that populates a tree from a
real directory.
"""
