"""Command-line interface for fstree.

Reads a directory into a node tree and prints it, either as a `tree`-style drawing
or as a depth-first list of relative paths.

Exit Codes:
    0: Successful completion
    1: Runtime error during execution
    2: Command-line syntax error
    126: Permission denied (with -P fail)
    141: Broken pipe (output closed early)

Example:
    # Print the tree of a directory
    $ fstree /path/to/dir

    # List paths, skipping what .gitignore excludes, warning on permission errors
    $ fstree -l -e .gitignore -P warn /path/to/dir
"""

import io
import os
import sys
from collections.abc import Mapping
from typing import Any, Iterator, Optional

from fstree.cli.argparser import create_parser, validate_args
from fstree.exceptions import ClassificationError
from fstree.exclusion_rules.git_rules import GitIgnoreExclusionRules
from fstree.file_tree.file_system_tree import FileSystemTree
from fstree.file_tree.node import Node
from fstree.file_tree.permission_action import PermissionAction


def format_counts(counts: Mapping[str, int]) -> str:
    """Format the entry counts into a human-readable string.

    Example:
        >>> print(format_counts({"directories": 2, "files": 5, "symlinks": 1, "others": 0}))
        Directories: 2
        Files: 5
        Symlinks: 1
        Others: 0
    """
    return "\n".join(
        [
            f"Directories: {counts['directories']}",
            f"Files: {counts['files']}",
            f"Symlinks: {counts['symlinks']}",
            f"Others: {counts['others']}",
        ]
    )


def stream_path_list(root: Node[Any], max_depth: Optional[int] = None) -> Iterator[str]:
    """Yield the path of every node relative to ``root``, with ``.`` for the root itself."""
    nodes = root.nodes()
    if max_depth is not None:
        nodes.max_depth(max_depth)
    for _ in nodes:
        yield nodes.current_path.as_posix()


def main() -> None:
    """Main entry point for the fstree command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        126: Permission denied (with -P fail)
        141: Broken pipe (output closed early)
    """
    try:
        exclusion_rules = GitIgnoreExclusionRules()
        parser = create_parser(exclusion_rules)
        args = parser.parse_args()

        validate_args(args)

        perm_action = {
            "ignore": PermissionAction.IGNORE,
            "warn": PermissionAction.RAISE,
            "fail": PermissionAction.RAISE,
        }[args.permission_action]

        fs_tree = FileSystemTree(
            args.directory,
            exclusion_rules=exclusion_rules,
            permission_action=perm_action,
            follow_symlinks=args.follow_symlinks,
        )

        try:
            root = fs_tree.get_tree()
        except (PermissionError, ClassificationError) as e:
            if isinstance(e, ClassificationError) and e.filename == str(args.directory):
                # The directory itself is unusable whatever the permission policy
                raise
            if args.permission_action == "warn":
                print(f"Warning: {str(e)}", file=sys.stderr)
                return
            print(f"Error: {str(e)}", file=sys.stderr)
            sys.exit(126)

        if args.list:
            lines = stream_path_list(root, args.max_depth)
        else:
            lines = fs_tree.stream_tree_representation(args.max_depth)

        if isinstance(sys.stdout, io.TextIOWrapper):
            # Entry names that are not valid in the output encoding go out as their raw bytes
            sys.stdout.reconfigure(errors="surrogateescape")

        try:
            for line in lines:
                print(line)
            sys.stdout.flush()
        except BrokenPipeError:
            # Output was cut short, e.g. piped into `head`; silence the final flush
            devnull = os.open(os.devnull, os.O_WRONLY)
            os.dup2(devnull, sys.stdout.fileno())
            sys.exit(141)

        if args.summary:
            counts = {
                "directories": fs_tree.get_directory_count(),
                "files": fs_tree.get_file_count(),
                "symlinks": fs_tree.get_symlink_count(),
                "others": fs_tree.get_other_count(),
            }
            print(format_counts(counts), file=sys.stderr)

    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
