from abc import ABC, abstractmethod
from typing import Optional


def basename(path: str) -> str:
    """Return the final segment of a ``/``-separated relative path."""
    return path.rsplit("/", 1)[-1]


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for entry exclusion rules.

    Rules are evaluated against an entry's path relative to the traversal root,
    always ``/``-separated and without a leading slash. Some rules also need the
    entry's own name, which may differ from the last segment of the relative path
    when the entry is a symlink (the relative path is computed from the link's
    canonical target). All implementations must provide logic for checking if a
    given path should be excluded; individual rule addition is optional.

    Example:
        >>> from appletree.exclusion_rules.pattern_rules import PatternExclusionRules
        >>> rules = PatternExclusionRules(["node_modules"])
        >>> rules.add_rule("src/main.cpp")
        >>> rules.exclude("web/node_modules")
        True
        >>> rules.exclude("src/main.cpp")
        True
        >>> rules.exclude("src/util.cpp")
        False
    """

    @abstractmethod
    def exclude(self, path: str, name: Optional[str] = None) -> bool:
        """
        Determine if an entry should be excluded.

        Args:
            path (str): The entry's path relative to the traversal root, using
                forward slashes.
            name (Optional[str]): The entry's own basename. Defaults to the last
                segment of ``path``.

        Returns:
            bool: True if the entry should be hidden, False otherwise.
        """
        pass

    def add_rule(self, rule: str) -> None:
        """
        Add a single pattern directly.

        This method may be overridden by subclasses that support programmatic rule
        addition. Rule types without patterns use the default implementation which
        raises NotImplementedError.

        Args:
            rule (str): The pattern to add.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")

    def has_rules(self) -> bool:
        """
        Check whether this rule set can exclude anything at all.

        Returns:
            True by default. Pattern-based subclasses return False when empty.
        """
        return True
