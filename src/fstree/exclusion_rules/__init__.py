"""Exclusion rules for filtering entries while building a tree from disk."""

from .base_rules import BaseExclusionRules
from .git_rules import GitIgnoreExclusionRules

__all__ = [
    "BaseExclusionRules",
    "GitIgnoreExclusionRules",
]
