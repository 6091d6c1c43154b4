from abc import ABC, abstractmethod
from typing import Sequence, Union

from fstree.types import PathType


class BaseExclusionRules(ABC):
    """
    Abstract base class for rules that decide which entries are left out of a tree.

    ``FileSystemTree`` asks the rules about every entry it finds, passing the entry's
    path relative to the tree root with ``/`` separators. Directories are asked about
    twice, once with a trailing ``/``, so directory-only patterns can match them.
    Loading rules from files and adding single rules are optional capabilities.

    Example:
        >>> from fstree.exclusion_rules.git_rules import GitIgnoreExclusionRules
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule("__pycache__/")
        >>> rules.exclude("pkg/__pycache__/")
        True
        >>> rules.exclude("pkg/module.py")
        False
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if a path should be left out of the tree.

        Args:
            path (str): Path relative to the tree root, using ``/`` separators.

        Returns:
            bool: True if the entry should be excluded, False if it should be kept.
        """
        pass

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load rules from one or more files.

        Args:
            rules_files: A path-like object or a sequence of them.

        Raises:
            NotImplementedError: If this rule type doesn't support loading from files.
            FileNotFoundError: If a rules file does not exist (for file-supporting rule types).
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support loading rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Add a single rule.

        Args:
            rule (str): The rule to add; its syntax depends on the implementation.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")
