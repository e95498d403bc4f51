from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class Theme(str, Enum):
    """Glyph themes used to draw tree connectors.

    Attributes:
        CLASSIC: Square corners (``└──``), the default.
        ROUND: Rounded corners (``╰──``).
    """

    CLASSIC = "classic"
    ROUND = "round"


class FileType(Enum):
    """Enumeration of entry types reported in structured output.

    Attributes:
        FILE: Anything that is not rendered as a directory
        DIRECTORY: Directory (or followed symlink to a directory)
    """

    FILE = "file"
    DIRECTORY = "directory"
