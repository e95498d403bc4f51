"""Exclusion by exact bare name or root-relative path."""

from typing import Iterable, Optional, Set

from .base_rules import BaseExclusionRules, basename


class PatternExclusionRules(BaseExclusionRules):
    """Exclusion rules matching exact names and root-relative paths.

    Two pattern shapes are supported:

    - A **bare name** (no ``/``) excludes every entry with that basename, at any
      depth. ``node_modules`` hides all ``node_modules`` directories.
    - A **relative path** (contains ``/``) excludes that exact path and its whole
      subtree. ``src/main.cpp`` hides only that file; ``build/out`` hides the
      directory and everything below it.

    Matching is case-sensitive string equality. There is no globbing.

    Attributes:
        path_patterns (Set[str]): Patterns matched against the relative path.
        name_patterns (Set[str]): Patterns matched against the entry name.

    Example:
        >>> rules = PatternExclusionRules(["node_modules", "build/out"])
        >>> rules.exclude("node_modules")
        True
        >>> rules.exclude("web/node_modules")
        True
        >>> rules.exclude("build/out/app.o")
        True
        >>> rules.exclude("build/output")
        False
    """

    def __init__(self, patterns: Iterable[str] = ()):
        """Initialize the rules with an optional collection of patterns.

        Args:
            patterns: Bare names and/or relative paths. The hidden-entry sentinel
                ``.`` is not accepted here; use HiddenEntryRules instead.

        Raises:
            ValueError: If the sentinel ``.`` is among the patterns.
        """
        self.path_patterns: Set[str] = set()
        self.name_patterns: Set[str] = set()
        for pattern in patterns:
            self.add_rule(pattern)

    def add_rule(self, rule: str) -> None:
        """Add a single bare name or relative path.

        Raises:
            ValueError: If the rule is empty or the hidden-entry sentinel.
        """
        if not rule or rule == ".":
            raise ValueError(f"'{rule}' is not a name or relative path pattern")
        if "/" in rule:
            self.path_patterns.add(rule)
        else:
            self.name_patterns.add(rule)

    def exclude(self, path: str, name: Optional[str] = None) -> bool:
        if name is None:
            name = basename(path)
        if name in self.name_patterns:
            return True
        return any(path == pattern or path.startswith(pattern + "/") for pattern in self.path_patterns)

    def has_rules(self) -> bool:
        return bool(self.path_patterns or self.name_patterns)
