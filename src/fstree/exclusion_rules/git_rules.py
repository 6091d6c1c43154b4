"""Exclusion rules using .gitignore pattern syntax."""

from os import PathLike
from pathlib import Path
from typing import List, Optional, Sequence, Union

from pathspec import PathSpec

from fstree.types import PathType

from .base_rules import BaseExclusionRules


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Exclusion rules written in .gitignore syntax, matched with pathspec.

    Supports everything Git does: globs, ``**``, directory-only patterns ending in
    ``/``, negations starting with ``!`` and comments. Patterns from files and from
    ``add_rule()`` are kept in the order they were given, so a later negation can
    re-include something an earlier pattern excluded.

    Attributes:
        spec (PathSpec): The compiled matcher for all patterns added so far.

    Example:
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule("*.log")
        >>> rules.add_rule("!keep.log")
        >>> rules.exclude("debug.log"), rules.exclude("keep.log")
        (True, False)

    Note:
        Paths passed to exclude() must use forward slashes, even on Windows.
    """

    def __init__(self, rules_files: Optional[Union[PathType, Sequence[PathType]]] = None):
        """Initialize the rules, optionally loading patterns from files.

        Args:
            rules_files: A path-like object or a sequence of them, each naming a
                file of .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self._lines: List[str] = []
        self.spec = PathSpec.from_lines("gitwildmatch", self._lines)

        if rules_files is not None:
            self.load_rules(rules_files)

    def exclude(self, path: str) -> bool:
        """Check a relative path against the patterns, without normalizing it."""
        return self.spec.match_file(path)

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Append the patterns found in one or more .gitignore-style files.

        Raises:
            FileNotFoundError: If any rules file does not exist. No patterns from the
                call are added in that case.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        new_lines: List[str] = []
        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")
            new_lines.extend(path.read_text().splitlines())

        self._extend(new_lines)

    def add_rule(self, rule: str) -> None:
        """Append a single .gitignore pattern, e.g. ``"build/"`` or ``"!important.txt"``."""
        self._extend([rule])

    def _extend(self, lines: Sequence[str]) -> None:
        self._lines.extend(lines)
        self.spec = PathSpec.from_lines("gitwildmatch", self._lines)
