"""Allow-list rules: show only matching entries, their subtrees and their ancestors."""

import logging
import os
from pathlib import Path, PurePath
from typing import Dict, Iterable, Optional, Set

from appletree.types import PathType

from .base_rules import BaseExclusionRules

logger = logging.getLogger(__name__)


class OnlyPatternRules(BaseExclusionRules):
    """Inverted exclusion rules that restrict the tree to an allow-list.

    An entry is kept when it is allowed by at least one pattern; everything else
    is excluded. With no patterns configured nothing is excluded.

    Relative path patterns (containing ``/``) allow an entry when:

    - the entry's path equals the pattern,
    - the entry lies inside the pattern's subtree, or
    - the entry is an ancestor of the pattern, so the directories leading to a
      deep match stay visible.

    Bare name patterns (no ``/``) follow the same name-based reading as the
    exclusion rules: an entry is allowed when its own name, or the name of any
    directory above it, equals the pattern. To keep the directories leading to
    a deep match visible, a directory is also allowed when its subtree contains
    an entry with that name. That look-ahead needs the filesystem, so it only
    happens when the rules were given the traversal ``root``. Entries that
    ``hidden_by`` excludes are skipped during the look-ahead, so a directory is
    not kept just because a hidden or excluded entry below it matches.

    Attributes:
        path_patterns (Set[str]): Relative path patterns.
        name_patterns (Set[str]): Bare name patterns.
        root (Optional[Path]): Canonical traversal root used for look-ahead.
        hidden_by (Optional[BaseExclusionRules]): Rules whose matches the
            look-ahead ignores.

    Example:
        >>> rules = OnlyPatternRules(["src/util/log.h"])
        >>> rules.exclude("src")
        False
        >>> rules.exclude("src/util")
        False
        >>> rules.exclude("src/util/log.h")
        False
        >>> rules.exclude("src/other.h")
        True
        >>> rules.exclude("docs")
        True
    """

    def __init__(
        self,
        patterns: Iterable[str] = (),
        root: Optional[PathType] = None,
        hidden_by: Optional[BaseExclusionRules] = None,
    ):
        """Initialize the allow-list.

        Args:
            patterns: Bare names and/or relative paths to allow.
            root: Canonical traversal root. When given, bare-name patterns also
                allow directories whose subtree contains a matching entry.
            hidden_by: Rules excluding entries the walk will never show.
        """
        self.path_patterns: Set[str] = set()
        self.name_patterns: Set[str] = set()
        self.root = Path(root) if root is not None else None
        self.hidden_by = hidden_by
        self._lookahead_cache: Dict[str, bool] = {}
        for pattern in patterns:
            self.add_rule(pattern)

    def add_rule(self, rule: str) -> None:
        """Add a single bare name or relative path to the allow-list.

        Raises:
            ValueError: If the rule is empty.
        """
        if not rule:
            raise ValueError("Empty pattern")
        if "/" in rule:
            self.path_patterns.add(rule)
        else:
            self.name_patterns.add(rule)
        self._lookahead_cache.clear()

    def has_rules(self) -> bool:
        return bool(self.path_patterns or self.name_patterns)

    def allows(self, path: str) -> bool:
        """Check whether an entry is allowed by any pattern.

        Args:
            path: The entry's path relative to the traversal root.

        Returns:
            True if the entry matches, lies below a match, or leads to a match.
        """
        if not self.has_rules():
            return True

        for allowed in self.path_patterns:
            if path == allowed or path.startswith(allowed + "/") or allowed.startswith(path + "/"):
                return True

        if self.name_patterns:
            if not self.name_patterns.isdisjoint(path.split("/")):
                return True
            if self.root is not None:
                return self._subtree_contains_name(self.root, path)

        return False

    def exclude(self, path: str, name: Optional[str] = None) -> bool:
        return not self.allows(path)

    def _is_hidden(self, path: str, name: str) -> bool:
        return self.hidden_by is not None and self.hidden_by.exclude(path, name)

    def _subtree_contains_name(self, root: Path, path: str) -> bool:
        """Look below a directory for an entry named like a bare-name pattern.

        Results are cached per relative path. Symlinked directories are not
        followed during the look-ahead.
        """
        if path in self._lookahead_cache:
            return self._lookahead_cache[path]

        directory = os.path.normpath(root / path)
        found = False
        if os.path.isdir(directory):
            for dirpath, dirnames, filenames in os.walk(directory, onerror=self._log_walk_error):
                rel_dir = PurePath(os.path.relpath(dirpath, root)).as_posix()
                dirnames[:] = [d for d in dirnames if not self._is_hidden(f"{rel_dir}/{d}", d)]
                visible_files = [f for f in filenames if not self._is_hidden(f"{rel_dir}/{f}", f)]
                if not self.name_patterns.isdisjoint(dirnames) or not self.name_patterns.isdisjoint(visible_files):
                    found = True
                    break

        self._lookahead_cache[path] = found
        return found

    @staticmethod
    def _log_walk_error(error: OSError) -> None:
        logger.debug("Skipping unreadable directory during look-ahead: %s", error)
