"""Streaming tree rendering.

This module ties the walker, the size aggregator and the renderer together into
a line-by-line text stream, and offers the same tree as a JSON document.
"""

import json
from typing import Iterator, Optional

from appletree.config import TreeConfig
from appletree.file_system_tree.file_system_tree import FileSystemTree, root_display_name
from appletree.renderer import Colorizer, render_line, render_root_line
from appletree.size_aggregator import size_suffix
from appletree.tree_walker import iter_tree
from appletree.types import PathType


def _plural(count: int, singular: str, plural: str) -> str:
    return f"{count} {singular if count == 1 else plural}"


class StreamingAppleTree:
    """Renders a directory tree one line at a time.

    Streaming properties:
    - Each streaming operation can only be performed once per instance
    - Counts are updated incrementally as lines are produced and are final once
      streaming_complete is True

    Attributes:
        config (TreeConfig): The configuration being rendered.
        colorizer (Colorizer): Terminal emphasis for names and sizes.

    Example:
        >>> analyzer = StreamingAppleTree(TreeConfig.create("project"))  # doctest: +SKIP
        >>> for line in analyzer.stream_tree():  # doctest: +SKIP
        ...     print(line, end='')  # Each line includes newline
        project/
        ├── README.md
        └── src/
            └── main.cpp
        >>> analyzer.format_summary()  # doctest: +SKIP
        '1 directory, 2 files'
    """

    def __init__(self, config: TreeConfig, *, colorizer: Optional[Colorizer] = None) -> None:
        self.config = config
        self.colorizer = colorizer or Colorizer(enabled=False)
        self._directory_count = 0
        self._file_count = 0
        self._streamed = False
        self._streaming_complete = False

    def _size_suffix(self, path: PathType, is_dir: bool) -> str:
        return size_suffix(path, is_dir) if self.config.show_sizes else ""

    def _start_streaming(self) -> None:
        if self._streamed:
            raise RuntimeError("Tree has already been streamed")
        self._streamed = True

    def stream_tree(self) -> Iterator[str]:
        """Generate the tree representation one line at a time.

        The root line comes first, followed by every visible entry in
        depth-first order.

        Yields:
            Lines of the tree, each ending with a newline.

        Raises:
            RuntimeError: If this instance has already streamed its tree.
        """
        self._start_streaming()

        root = self.config.root
        root_is_dir = root.is_dir()
        yield render_root_line(
            root_display_name(self.config), root_is_dir, self._size_suffix(root, root_is_dir), self.colorizer
        ) + "\n"

        for entry in iter_tree(self.config, root, "", 0):
            if entry.is_dir:
                self._directory_count += 1
            else:
                self._file_count += 1
            line = render_line(
                entry.name,
                entry.is_dir,
                entry.is_last,
                entry.prefix,
                self._size_suffix(entry.path, entry.is_dir),
                self.config.theme,
                self.colorizer,
            )
            yield line + "\n"

        self._streaming_complete = True

    def stream_json(self) -> Iterator[str]:
        """Generate the tree as a JSON document.

        The document is a list holding the root node (see
        FileSystemTree.to_dict) followed by a report with the counts, similar to
        ``tree -J``.

        Yields:
            The JSON document, ending with a newline.

        Raises:
            RuntimeError: If this instance has already streamed its tree.
        """
        self._start_streaming()

        fs_tree = FileSystemTree(self.config)
        document = fs_tree.to_dict()
        self._directory_count = fs_tree.get_directory_count()
        self._file_count = fs_tree.get_file_count()
        report = {"type": "report", "directories": self._directory_count, "files": self._file_count}

        yield json.dumps([document, report], indent=2, ensure_ascii=False) + "\n"
        self._streaming_complete = True

    def format_summary(self) -> str:
        """Summarize the visible entries, e.g. ``"3 directories, 1 file"``."""
        return ", ".join(
            [
                _plural(self._directory_count, "directory", "directories"),
                _plural(self._file_count, "file", "files"),
            ]
        )

    @property
    def directory_count(self) -> int:
        """Visible directories rendered so far, excluding the root."""
        return self._directory_count

    @property
    def file_count(self) -> int:
        """Visible non-directory entries rendered so far."""
        return self._file_count

    @property
    def streaming_complete(self) -> bool:
        """Whether the tree has been streamed completely."""
        return self._streaming_complete
