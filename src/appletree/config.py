"""Immutable configuration consumed by the tree walker, path filter and renderer."""

from dataclasses import dataclass
from pathlib import Path
from typing import FrozenSet, Iterable, Optional, Union

from appletree.exceptions import ConfigurationError, RootNotFoundError
from appletree.types import PathType, Theme

# Pattern that hides every entry whose name starts with a dot
HIDDEN_SENTINEL = "."


def normalize_pattern(pattern: str) -> str:
    """Normalize a single exclude/only pattern.

    A leading ``./`` and trailing slashes are dropped so that ``./src/``,
    ``src/`` and ``src`` are the same pattern. The hidden-entry sentinel ``.``
    is returned unchanged.

    Args:
        pattern: The pattern as given by the user.

    Returns:
        The normalized pattern.

    Raises:
        ConfigurationError: If the pattern is empty after normalization.

    Example:
        >>> normalize_pattern("node_modules/")
        'node_modules'
        >>> normalize_pattern("src/util/log.h")
        'src/util/log.h'
        >>> normalize_pattern("./src/util/log.h")
        'src/util/log.h'
        >>> normalize_pattern(".")
        '.'
    """
    if pattern == HIDDEN_SENTINEL:
        return pattern
    normalized = pattern
    while normalized.startswith("./"):
        normalized = normalized[2:]
    normalized = normalized.rstrip("/")
    if not normalized:
        raise ConfigurationError(f"Invalid pattern '{pattern}'. Specify a file or folder name or a relative path.")
    return normalized


def parse_theme(theme: Union[str, Theme]) -> Theme:
    """Convert a theme name to a Theme value.

    Raises:
        ConfigurationError: If the name is not a known theme.
    """
    if isinstance(theme, Theme):
        return theme
    try:
        return Theme(theme)
    except ValueError:
        raise ConfigurationError(f"Unknown theme '{theme}'. Use 'classic' or 'round'.")


@dataclass(frozen=True)
class TreeConfig:
    """Validated settings for a single tree rendering.

    Instances are built once, before the walk starts, and are never mutated.
    Use :meth:`create` to build one from user input; the constructor itself
    performs no validation.

    Attributes:
        root: Canonical absolute path of the traversal origin.
        exclude_patterns: Bare names or root-relative paths to hide. The
            sentinel ``.`` hides every dot-entry.
        only_patterns: Bare names or root-relative paths to show exclusively.
            Empty means no restriction.
        max_depth: Maximum number of levels below the root to render, or None
            for no limit. 0 renders the root line only.
        show_sizes: Whether to annotate entries with their (recursive) size.
        theme: Connector glyph theme.
        follow_symlinks: Whether symlinks to directories are descended into.

    Example:
        >>> config = TreeConfig.create(".", exclude=["node_modules", "."], max_depth=2)  # doctest: +SKIP
        >>> config.max_depth  # doctest: +SKIP
        2
    """

    root: Path
    exclude_patterns: FrozenSet[str] = frozenset()
    only_patterns: FrozenSet[str] = frozenset()
    max_depth: Optional[int] = None
    show_sizes: bool = False
    theme: Theme = Theme.CLASSIC
    follow_symlinks: bool = True

    @classmethod
    def create(
        cls,
        root: PathType,
        *,
        exclude: Iterable[str] = (),
        only: Iterable[str] = (),
        max_depth: Optional[int] = None,
        show_sizes: bool = False,
        theme: Union[str, Theme] = Theme.CLASSIC,
        follow_symlinks: bool = True,
    ) -> "TreeConfig":
        """Validate user input and build a configuration.

        Args:
            root: Directory (or file) to render. Resolved to its canonical form.
            exclude: Patterns to exclude.
            only: Patterns to restrict the output to.
            max_depth: Non-negative depth limit or None.
            show_sizes: Whether to show sizes.
            theme: Theme name or value.
            follow_symlinks: Whether to descend into symlinked directories.

        Returns:
            A new TreeConfig.

        Raises:
            RootNotFoundError: If root does not exist or cannot be canonicalized.
            ConfigurationError: If the depth, theme or any pattern is invalid.
        """
        try:
            resolved_root = Path(root).resolve(strict=True)
        except (OSError, RuntimeError):
            raise RootNotFoundError(str(root))

        if max_depth is not None:
            if isinstance(max_depth, bool) or not isinstance(max_depth, int) or max_depth < 0:
                raise ConfigurationError(f"Depth must be a non-negative integer (got '{max_depth}').")

        return cls(
            root=resolved_root,
            exclude_patterns=frozenset(normalize_pattern(p) for p in exclude),
            only_patterns=frozenset(normalize_pattern(p) for p in only),
            max_depth=max_depth,
            show_sizes=show_sizes,
            theme=parse_theme(theme),
            follow_symlinks=follow_symlinks,
        )
