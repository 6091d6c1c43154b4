"""Command-line argument parsing for fstree.

This module defines the command-line interface for fstree,
handling argument parsing and validation.
"""

import argparse
import os
from pathlib import Path
from typing import Any, List, Optional, Sequence, Type, Union

from fstree import __version__
from fstree.exclusion_rules.base_rules import BaseExclusionRules


def create_exclusion_action(exclusion_rules: BaseExclusionRules) -> Type[argparse.Action]:
    """Create an action class that feeds exclusions into ``exclusion_rules`` while parsing.

    Rules files (-e) and single patterns (-i) are applied in the exact order they appear
    on the command line, so a later negation can override an earlier exclusion.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        A custom action class for use with argparse.
    """

    class ExclusionRulesAction(argparse.Action):
        def __init__(self, option_strings: List[str], dest: str, **kwargs: Any) -> None:
            super().__init__(option_strings, dest, **kwargs)

        def __call__(
            self,
            parser: argparse.ArgumentParser,
            namespace: argparse.Namespace,
            values: Union[str, Sequence[Any], None],
            option_string: Optional[str] = None,
        ) -> None:
            if values is None:
                return

            if option_string in ("-e", "--exclude"):
                rules_file = values if isinstance(values, (str, os.PathLike)) else Path(str(values))
                try:
                    exclusion_rules.load_rules(rules_file)
                except FileNotFoundError as e:
                    parser.error(str(e))
            else:  # -i/--ignore
                exclusion_rules.add_rule(str(values))

            collected = getattr(namespace, self.dest, None) or []
            collected.append(values)
            setattr(namespace, self.dest, collected)

    return ExclusionRulesAction


def create_parser(exclusion_rules: BaseExclusionRules) -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        An ArgumentParser instance configured with fstree's options.
    """
    description = """
    fstree: read a directory into a tree of files, directories, symlinks and other entries.

    The tree is printed like the Unix `tree` command, or as a flat list of paths
    relative to the directory in depth-first order (each directory before its contents).
    Entries are sorted by name within each directory.
    """

    epilog = """
    Examples:
      # Print the tree of a directory
      fstree /path/to/project

      # List every entry as a path, directories first
      fstree -l /path/to/project

      # Follow symbolic links (symlink loops are shown as symlinks)
      fstree -L /path/to/project

      # Exclude entries using .gitignore files and single patterns, in order
      fstree -e .gitignore -i "*.log" -i "!important.log" /path/to/project

      # Only show two levels below the root
      fstree -d 2 /path/to/project

      # Print entry counts to stderr
      fstree -s /path/to/project

      # Process with different permission handling
      fstree -P warn /path/to/project    # Continue with a warning
      fstree -P fail /path/to/project    # Stop on permission errors
      fstree -P ignore /path/to/project  # Skip silently (default)
    """

    parser = argparse.ArgumentParser(
        prog="fstree",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"fstree {__version__}", help="Show the version and exit"
    )

    ExclusionAction = create_exclusion_action(exclusion_rules)

    parser.add_argument(
        "directory",
        type=Path,
        help="The directory to read. Listed paths are relative to it.",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        type=Path,
        metavar="FILE",
        action=ExclusionAction,
        help="Path to a .gitignore-style exclusion file (can be specified multiple times).",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        type=str,
        metavar="PATTERN",
        action=ExclusionAction,
        help=(
            "Individual gitignore-style pattern to exclude (can be specified multiple times). "
            "Patterns are processed in the order they appear, mixed with -e/--exclude options."
        ),
    )
    parser.add_argument(
        "-l",
        "--list",
        action="store_true",
        help="Print one relative path per entry instead of the tree drawing.",
    )
    parser.add_argument(
        "-d",
        "--max-depth",
        type=int,
        metavar="N",
        help="Do not show entries more than N levels below the root.",
    )
    parser.add_argument(
        "-L",
        "--follow-symlinks",
        action="store_true",
        help="Follow symbolic links. By default, symlinks are shown as symlinks without following.",
    )
    parser.add_argument(
        "-s",
        "--summary",
        action="store_true",
        help="Print directory, file, symlink and other counts to stderr.",
    )
    parser.add_argument(
        "-P",
        "--permission-action",
        choices=["ignore", "warn", "fail"],
        default="ignore",
        help="How to handle permission errors (default: ignore).",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments beyond what argparse checks.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.max_depth is not None and args.max_depth < 0:
        raise ValueError("--max-depth must be a non-negative integer")
