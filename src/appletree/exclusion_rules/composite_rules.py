"""Composite exclusion rules for combining multiple rule types."""

from typing import List, Optional, Sequence

from .base_rules import BaseExclusionRules


class CompositeExclusionRules(BaseExclusionRules):
    """Composite exclusion rules that combine multiple rule types.

    A path is excluded if ANY of the constituent rules determines it should be
    excluded. Because an allow-list is itself expressed as an exclusion rule
    (OnlyPatternRules excludes whatever it does not allow), this logical OR is
    exactly what makes exclude patterns win over only patterns: an entry matched
    by both is excluded by the former regardless of the latter.

    Attributes:
        rules (List[BaseExclusionRules]): List of constituent exclusion rules.

    Example:
        >>> from appletree.exclusion_rules.only_rules import OnlyPatternRules
        >>> from appletree.exclusion_rules.pattern_rules import PatternExclusionRules
        >>> composite = CompositeExclusionRules([
        ...     PatternExclusionRules(["src/generated"]),
        ...     OnlyPatternRules(["src"]),
        ... ])
        >>> composite.exclude("src/main.cpp")
        False
        >>> composite.exclude("src/generated")
        True
        >>> composite.exclude("docs")
        True
    """

    def __init__(self, rules: Sequence[BaseExclusionRules]):
        """Initialize composite exclusion rules.

        Args:
            rules: Sequence of exclusion rules to combine. Rules are evaluated in
                order and evaluation stops at the first rule that excludes.

        Raises:
            ValueError: If rules list is empty.
            TypeError: If any rule doesn't implement BaseExclusionRules.
        """
        if not rules:
            raise ValueError("At least one exclusion rule must be provided")

        for i, rule in enumerate(rules):
            if not isinstance(rule, BaseExclusionRules):
                raise TypeError(f"Rule at index {i} must implement BaseExclusionRules, got {type(rule)}")

        self.rules: List[BaseExclusionRules] = list(rules)

    def exclude(self, path: str, name: Optional[str] = None) -> bool:
        return any(rule.exclude(path, name) for rule in self.rules)

