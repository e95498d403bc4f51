"""Visibility decisions for entries encountered during the tree walk.

The filter combines the configured exclusion rules into one decision per entry:

1. the hidden-entry sentinel (``-e .``) is checked on the entry name alone;
2. the entry is resolved to its canonical path; unresolvable entries (broken
   symlinks, permission failures) are hidden;
3. the canonical path, made relative to the root, is checked against the
   exclude patterns and then the only patterns.
"""

import logging
import os
from pathlib import Path, PurePath
from typing import AbstractSet, List, Optional

from appletree.config import HIDDEN_SENTINEL, TreeConfig
from appletree.exclusion_rules.base_rules import BaseExclusionRules
from appletree.exclusion_rules.composite_rules import CompositeExclusionRules
from appletree.exclusion_rules.hidden_rules import HiddenEntryRules
from appletree.exclusion_rules.only_rules import OnlyPatternRules
from appletree.exclusion_rules.pattern_rules import PatternExclusionRules
from appletree.types import PathType

logger = logging.getLogger(__name__)


def relative_path(root: PathType, entry_path: PathType) -> Optional[str]:
    """Compute an entry's canonical path relative to the root.

    Args:
        root: Canonical traversal root.
        entry_path: Absolute path of the entry.

    Returns:
        The ``/``-separated relative path of the entry's canonical form, or None
        if the entry cannot be resolved.
    """
    try:
        canonical = Path(entry_path).resolve(strict=True)
        return PurePath(os.path.relpath(canonical, root)).as_posix()
    except (OSError, RuntimeError, ValueError) as e:
        logger.debug("Cannot resolve %s, hiding it: %s", entry_path, e)
        return None


class PathFilter:
    """Decides whether an entry is shown, for one root and one set of patterns.

    Exclude patterns always win over only patterns: an entry matched by both is
    hidden. Matching is always done on the root-relative path of the entry's
    canonical form, never on absolute paths.

    Attributes:
        root (Path): Canonical traversal root.
        hidden_rules (Optional[HiddenEntryRules]): Set when ``.`` is excluded.
        rules (Optional[BaseExclusionRules]): Exclude and only rules combined.

    Example:
        >>> path_filter = PathFilter("/project", exclude_patterns={"node_modules"})  # doctest: +SKIP
        >>> path_filter.is_visible("/project/web/node_modules")  # doctest: +SKIP
        False
    """

    def __init__(
        self,
        root: PathType,
        exclude_patterns: AbstractSet[str] = frozenset(),
        only_patterns: AbstractSet[str] = frozenset(),
    ) -> None:
        self.root = Path(root)
        self.hidden_rules = HiddenEntryRules() if HIDDEN_SENTINEL in exclude_patterns else None

        rules: List[BaseExclusionRules] = []
        exclusion_rules = PatternExclusionRules(p for p in exclude_patterns if p != HIDDEN_SENTINEL)
        if exclusion_rules.has_rules():
            rules.append(exclusion_rules)

        # Entries hidden by name or by exclude pattern never lead to an only match
        hiding_rules: List[BaseExclusionRules] = [
            r for r in (self.hidden_rules, exclusion_rules) if r is not None and r.has_rules()
        ]
        hidden_by = CompositeExclusionRules(hiding_rules) if hiding_rules else None
        only_rules = OnlyPatternRules(only_patterns, root=self.root, hidden_by=hidden_by)
        if only_rules.has_rules():
            rules.append(only_rules)
        self.rules: Optional[BaseExclusionRules] = CompositeExclusionRules(rules) if rules else None

    @classmethod
    def from_config(cls, config: TreeConfig) -> "PathFilter":
        """Build the filter for a configuration."""
        return cls(config.root, config.exclude_patterns, config.only_patterns)

    def is_visible(self, entry_path: PathType) -> bool:
        """Decide whether an entry is shown.

        Args:
            entry_path: Absolute path of the entry as found in its parent directory.

        Returns:
            True if the entry should be rendered.
        """
        name = Path(entry_path).name
        if self.hidden_rules is not None and self.hidden_rules.exclude(name, name):
            return False

        rel = relative_path(self.root, entry_path)
        if rel is None:
            return False

        if self.rules is not None and self.rules.exclude(rel, name):
            return False
        return True


def is_visible(
    root: PathType,
    entry_path: PathType,
    exclude_patterns: AbstractSet[str],
    only_patterns: AbstractSet[str],
) -> bool:
    """Decide whether a single entry is shown.

    Convenience wrapper around PathFilter for one-off checks. The walker builds
    one PathFilter per walk instead.

    Args:
        root: Canonical traversal root.
        entry_path: Absolute path of the entry.
        exclude_patterns: Bare names or relative paths to hide; ``.`` hides dot-entries.
        only_patterns: Bare names or relative paths to show exclusively; empty
            means no restriction.

    Returns:
        True if the entry is visible.
    """
    return PathFilter(root, exclude_patterns, only_patterns).is_visible(entry_path)
