"""Depth-first traversal producing one event per visible entry.

The walker lists a directory, drops the entries the path filter hides, sorts
the survivors by name and emits them in order, descending into each directory
before moving on to its next sibling. Traversal uses an explicit stack, so
deeply nested trees never run into the interpreter's recursion limit.
"""

import logging
import os
from pathlib import Path
from typing import Callable, Iterator, List, NamedTuple, Optional

from appletree.config import TreeConfig
from appletree.path_filter import PathFilter
from appletree.renderer import continuation
from appletree.types import PathType

logger = logging.getLogger(__name__)


class TreeEntry(NamedTuple):
    """A visible entry, in the order it is rendered.

    Attributes:
        path: Absolute path of the entry (not resolved).
        name: The entry's basename.
        is_dir: Whether the entry is rendered, and descended into, as a directory.
        is_last: Whether the entry is the last visible sibling in its directory.
        prefix: Continuation glyphs inherited from the entry's ancestors.
        depth: Level below the root; the root's children are at depth 1.
    """

    path: Path
    name: str
    is_dir: bool
    is_last: bool
    prefix: str
    depth: int


def _is_dir(entry: "os.DirEntry[str]", follow_symlinks: bool) -> bool:
    try:
        return entry.is_dir(follow_symlinks=follow_symlinks)
    except OSError:
        return False


def list_level(
    config: TreeConfig,
    directory: PathType,
    prefix: str,
    depth: int,
    path_filter: PathFilter,
) -> List[TreeEntry]:
    """List the visible children of one directory, sorted by name.

    Args:
        config: Tree configuration.
        directory: Directory to list.
        prefix: Prefix the children are drawn with.
        depth: Depth of ``directory`` itself (0 for the root).
        path_filter: Filter deciding visibility.

    Returns:
        The visible children, with ``is_last`` set on the final one. Empty when
        the depth limit is reached or the directory cannot be listed.
    """
    if config.max_depth is not None and depth >= config.max_depth:
        return []

    try:
        with os.scandir(directory) as it:
            children = [
                (entry.name, Path(entry.path), _is_dir(entry, config.follow_symlinks))
                for entry in it
                if path_filter.is_visible(entry.path)
            ]
    except OSError as e:
        logger.debug("Cannot list %s: %s", directory, e)
        return []

    children.sort(key=lambda child: child[0])
    last_index = len(children) - 1
    return [
        TreeEntry(path=path, name=name, is_dir=is_dir, is_last=i == last_index, prefix=prefix, depth=depth + 1)
        for i, (name, path, is_dir) in enumerate(children)
    ]


def iter_tree(
    config: TreeConfig,
    directory: PathType,
    prefix: str,
    depth: int,
    path_filter: Optional[PathFilter] = None,
) -> Iterator[TreeEntry]:
    """Walk a directory depth-first, yielding every visible entry.

    Args:
        config: Tree configuration.
        directory: Directory to start from, usually ``config.root``.
        prefix: Prefix for the entries directly inside ``directory``.
        depth: Depth of ``directory`` (0 for the root).
        path_filter: Filter to use. Built from ``config`` when omitted.

    Yields:
        TreeEntry objects in rendering order.

    Example:
        >>> config = TreeConfig.create("project", max_depth=1)  # doctest: +SKIP
        >>> [e.name for e in iter_tree(config, config.root, "", 0)]  # doctest: +SKIP
        ['README.md', 'src']
    """
    if path_filter is None:
        path_filter = PathFilter.from_config(config)

    stack: List[Iterator[TreeEntry]] = [iter(list_level(config, directory, prefix, depth, path_filter))]
    while stack:
        entry = next(stack[-1], None)
        if entry is None:
            stack.pop()
            continue

        yield entry

        if entry.is_dir:
            child_prefix = entry.prefix + continuation(entry.is_last, config.theme)
            stack.append(iter(list_level(config, entry.path, child_prefix, entry.depth, path_filter)))


def walk(
    config: TreeConfig,
    directory: PathType,
    prefix: str,
    depth: int,
    visit: Callable[[TreeEntry], None],
) -> None:
    """Walk a directory depth-first and call ``visit`` for every visible entry.

    Args:
        config: Tree configuration.
        directory: Directory to start from, usually ``config.root``.
        prefix: Prefix for the entries directly inside ``directory``.
        depth: Depth of ``directory`` (0 for the root).
        visit: Callback receiving each TreeEntry in rendering order.
    """
    for entry in iter_tree(config, directory, prefix, depth):
        visit(entry)
