"""Node representation for entries in the rendered tree."""

from typing import Any, Optional

from anytree import Node


class FileSystemNode(Node):  # type: ignore
    """Node class representing a visible file or directory.

    Extends anytree.Node with the attributes needed for structured output.
    Inherits tree traversal and manipulation capabilities from anytree.Node.

    Attributes:
        name (str): The name of the file or directory (just the basename).
        parent (Optional[FileSystemNode]): The parent node in the tree.
        is_dir (bool): True if this node is rendered as a directory.
        size (Optional[int]): Size in bytes (recursive for directories), or None
            when sizes were not requested or are unavailable.
        children (tuple[FileSystemNode]): The child nodes (inherited from anytree.Node).

    Example:
        >>> root = FileSystemNode("root", is_dir=True)
        >>> child = FileSystemNode("file.txt", parent=root, size=12)
        >>> child.parent.name
        'root'
        >>> child.is_dir, child.size
        (False, 12)
    """

    def __init__(
        self,
        name: str,
        parent: Optional["FileSystemNode"] = None,
        is_dir: bool = False,
        size: Optional[int] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(name, parent, **kwargs)
        self.is_dir = is_dir
        self.size = size
