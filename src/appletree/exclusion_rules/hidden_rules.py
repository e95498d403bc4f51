"""Exclusion of dot-entries (the ``-e .`` sentinel)."""

from typing import Optional

from .base_rules import BaseExclusionRules, basename


class HiddenEntryRules(BaseExclusionRules):
    """Excludes every entry whose name starts with a dot.

    Only the entry's own name is inspected, so this rule never needs the
    entry to be resolvable. A hidden directory is excluded together with its
    whole subtree because the walker never descends into it.

    Example:
        >>> rules = HiddenEntryRules()
        >>> rules.exclude(".git")
        True
        >>> rules.exclude("src/.env")
        True
        >>> rules.exclude("src/main.cpp")
        False
        >>> rules.exclude("src/config", name=".config")
        True
    """

    def exclude(self, path: str, name: Optional[str] = None) -> bool:
        if name is None:
            name = basename(path)
        return name.startswith(".")
