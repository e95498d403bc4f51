"""Directory tree rendering utilities.

This package renders a filesystem subtree as an indented text diagram in the
style of the classic `tree` utility, with pattern-based filtering, depth
limiting, recursive size aggregation and selectable connector themes.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("appletree")
except PackageNotFoundError:
    __version__ = "unknown"
