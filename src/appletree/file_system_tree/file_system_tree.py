"""Tree model of the visible entries below a root directory."""

from typing import Any, Dict, Iterable, Iterator, Optional, Tuple

from anytree.exporter import DictExporter

from appletree.config import TreeConfig
from appletree.file_system_tree.file_system_node import FileSystemNode
from appletree.size_aggregator import dir_size, file_size
from appletree.tree_walker import iter_tree
from appletree.types import FileType


def root_display_name(config: TreeConfig) -> str:
    """Name shown for the root: its basename, or the full path for ``/``."""
    return config.root.name or str(config.root)


def _export_attributes(attributes: Iterable[Tuple[str, Any]]) -> Iterator[Tuple[str, Any]]:
    values = dict(attributes)
    yield "type", (FileType.DIRECTORY if values.get("is_dir") else FileType.FILE).value
    yield "name", values["name"]
    if values.get("size") is not None:
        yield "size", values["size"]


class FileSystemTree:
    """A tree of the entries a configuration makes visible.

    The tree is built lazily on first access from the same walk that drives the
    text output, so filtering, ordering and depth limiting are identical.

    Attributes:
        config (TreeConfig): The configuration the tree is built for.

    Example:
        >>> tree = FileSystemTree(TreeConfig.create("src"))  # doctest: +SKIP
        >>> tree.get_file_count()  # doctest: +SKIP
        42
    """

    def __init__(self, config: TreeConfig) -> None:
        self.config = config
        self._tree: Optional[FileSystemNode] = None
        self._file_count: int = 0
        self._directory_count: int = 0

    def get_tree(self) -> FileSystemNode:
        """Get the root node, building the tree on first access."""
        if self._tree is None:
            self._tree = self._build_tree()
        return self._tree

    def _size(self, path: Any, is_dir: bool) -> Optional[int]:
        if not self.config.show_sizes:
            return None
        return dir_size(path) if is_dir else file_size(path)

    def _build_tree(self) -> FileSystemNode:
        """Build the tree from a fresh walk and count its entries.

        The walk is depth-first, so the most recent node seen at the level just
        above an entry is always that entry's parent.
        """
        root_path = self.config.root
        root_is_dir = root_path.is_dir()
        root = FileSystemNode(
            root_display_name(self.config), is_dir=root_is_dir, size=self._size(root_path, root_is_dir)
        )
        self._file_count = 0
        self._directory_count = 0

        last_node_at_depth: Dict[int, FileSystemNode] = {0: root}
        for entry in iter_tree(self.config, root_path, "", 0):
            node = FileSystemNode(
                entry.name,
                parent=last_node_at_depth[entry.depth - 1],
                is_dir=entry.is_dir,
                size=self._size(entry.path, entry.is_dir),
            )
            last_node_at_depth[entry.depth] = node
            if entry.is_dir:
                self._directory_count += 1
            else:
                self._file_count += 1

        return root

    def get_file_count(self) -> int:
        """Number of visible non-directory entries."""
        self.get_tree()
        return self._file_count

    def get_directory_count(self) -> int:
        """Number of visible directories, excluding the root."""
        self.get_tree()
        return self._directory_count

    def to_dict(self) -> Dict[str, Any]:
        """Export the tree as nested dictionaries.

        Every node becomes ``{"type", "name", "size"?, "children"?}``; ``size``
        is present only when sizes are shown and available, ``children`` only
        for non-empty directories.
        """
        exporter = DictExporter(attriter=_export_attributes)
        result: Dict[str, Any] = exporter.export(self.get_tree())
        return result

