"""File and directory sizes, and their human-readable form."""

import logging
import os
import stat
from typing import Optional

from appletree.types import PathType

logger = logging.getLogger(__name__)

SIZE_UNITS = ("B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB")


def file_size(path: PathType) -> Optional[int]:
    """Get the size of a regular file.

    Symlinks are followed, so a link to a regular file reports the target's size.

    Args:
        path: Path of the file.

    Returns:
        The size in bytes, or None if the path is not a regular file or cannot be
        inspected.
    """
    try:
        st = os.stat(path)
    except OSError as e:
        logger.debug("Cannot stat %s: %s", path, e)
        return None
    if not stat.S_ISREG(st.st_mode):
        return None
    return st.st_size


def _log_walk_error(error: OSError) -> None:
    logger.debug("Skipping unreadable directory while summing sizes: %s", error)


def dir_size(path: PathType) -> int:
    """Sum the sizes of all regular files below a directory, like ``du -sb``.

    Symlinked directories are not descended into. Files that vanish or cannot be
    inspected contribute zero bytes; unreadable directories are skipped.

    Args:
        path: Path of the directory.

    Returns:
        Total size in bytes.
    """
    total = 0
    for dirpath, _dirnames, filenames in os.walk(path, onerror=_log_walk_error):
        for filename in filenames:
            size = file_size(os.path.join(dirpath, filename))
            if size is not None:
                total += size
    return total


def format_size(num_bytes: int) -> str:
    """Format a byte count using binary (base-1024) units.

    The largest unit that keeps the value below 1024 is used. Values below 10
    in any unit other than bytes keep one decimal place; everything else is
    rounded to a whole number.

    Args:
        num_bytes: Size in bytes.

    Returns:
        The formatted size.

    Raises:
        ValueError: If num_bytes is negative.

    Example:
        >>> format_size(900)
        '900 B'
        >>> format_size(1024)
        '1.0 KiB'
        >>> format_size(1536)
        '1.5 KiB'
        >>> format_size(10240)
        '10 KiB'
        >>> format_size(1048576)
        '1.0 MiB'
    """
    if num_bytes < 0:
        raise ValueError("Size cannot be negative")

    value = float(num_bytes)
    index = 0
    while value >= 1024.0 and index < len(SIZE_UNITS) - 1:
        value /= 1024.0
        index += 1

    if index > 0 and value < 10.0:
        return f"{value:.1f} {SIZE_UNITS[index]}"
    return f"{value:.0f} {SIZE_UNITS[index]}"


def size_suffix(path: PathType, is_dir: bool) -> str:
    """Build the size annotation appended to a rendered entry.

    Args:
        path: Path of the entry.
        is_dir: Whether the entry is rendered as a directory.

    Returns:
        ``" (<size>)"`` or an empty string if the entry has no size (for example
        a broken symlink or a device file).
    """
    if is_dir:
        return f" ({format_size(dir_size(path))})"
    size = file_size(path)
    if size is None:
        return ""
    return f" ({format_size(size)})"
