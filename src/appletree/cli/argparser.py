"""Command-line argument parsing for appletree.

This module defines the command-line interface for appletree, handling argument
parsing, validation and the conversion of parsed arguments into a TreeConfig.
"""

import argparse
import sys
from pathlib import Path
from typing import NoReturn

from appletree import __version__
from appletree.config import TreeConfig
from appletree.types import Theme


class AppleTreeArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors with exit code 1.

    Every configuration problem (missing pattern, invalid depth, unknown theme)
    ends the program with the same exit code as a missing path.
    """

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"Error: {message}\n")


def non_negative_int(value: str) -> int:
    """Parse a depth limit.

    Only plain decimal digits are accepted, so values like ``-1``, ``+2`` or
    ``1.5`` are rejected.

    Raises:
        argparse.ArgumentTypeError: If value is not a non-negative integer.
    """
    if not value or not value.isascii() or not value.isdigit():
        raise argparse.ArgumentTypeError(f"Depth must be a non-negative integer (got '{value}').")
    return int(value)


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with appletree's options.
    """
    description = """
    appletree: directory tree viewer.

    Renders a directory as an indented tree, like the classic `tree` command,
    with name and path based filtering, depth limiting, recursive sizes and
    selectable connector themes.
    """

    epilog = """
    Patterns:
      A pattern without '/' (e.g. 'node_modules') matches entries with that
      name anywhere in the tree. A pattern with '/' (e.g. 'src/main.cpp') is a
      path relative to the root and matches that entry and its subtree.
      Matching is exact and case-sensitive; there are no wildcards.

    Notes:
      Multiple -e or -o patterns can be given in sequence.
      Excludes take precedence over includes.
      Parent folders of -o matches are shown so deep matches stay reachable.
      Because -e and -o take several patterns, give the path first or
      separate it with '--'.
      The word 'help' anywhere on the command line shows this help.

    Examples:
      appletree                        Show the tree of the current directory
      appletree /path/to/folder        Show the tree of the specified directory
      appletree -e node_modules        Exclude all 'node_modules' folders
      appletree -e src/main.cpp        Exclude only 'src/main.cpp'
      appletree -o src                 Show only the 'src' subtree
      appletree -o src/util/log.h      Show only that single file and its parents
      appletree -e . -d 2              Exclude hidden files and limit depth to 2
      appletree -s                     Show file & folder sizes (like du -sh)
      appletree -t round               Use round corners for the tree
      appletree -J --output tree.json  Write the tree as JSON to a file
    """

    parser = AppleTreeArgumentParser(
        prog="appletree",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"appletree {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "path",
        nargs="?",
        type=Path,
        default=Path("."),
        help="The directory to show (default: the current directory).",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        nargs="+",
        action="extend",
        default=[],
        metavar="PATTERN",
        help="Exclude files or directories by name or relative path. Use '.' to exclude hidden entries.",
    )
    parser.add_argument(
        "-o",
        "--only",
        nargs="+",
        action="extend",
        default=[],
        metavar="PATTERN",
        help="Show only the given files or directories (and their subtrees and parent folders).",
    )
    parser.add_argument(
        "-d",
        "--depth",
        type=non_negative_int,
        metavar="N",
        help="Limit recursion depth: 0 shows only the root, n shows n levels below it.",
    )
    parser.add_argument(
        "-s",
        "--sizes",
        action="store_true",
        help="Show file sizes and recursive directory sizes.",
    )
    parser.add_argument(
        "-t",
        "--theme",
        choices=[theme.value for theme in Theme],
        default=Theme.CLASSIC.value,
        help="Drawing theme of the tree (default: classic).",
    )
    parser.add_argument(
        "--no-follow-symlinks",
        dest="follow_symlinks",
        action="store_false",
        help="Do not descend into symbolic links to directories.",
    )
    parser.add_argument(
        "--color",
        choices=["auto", "always", "never"],
        default="auto",
        help="Highlight directories and sizes (default: auto, only on terminals).",
    )
    parser.add_argument(
        "-J",
        "--json",
        action="store_true",
        help="Print the tree as JSON instead of text.",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print the number of directories and files after the tree.",
    )
    parser.add_argument(
        "--output",
        type=Path,
        metavar="FILE",
        help="Write the output to FILE instead of stdout.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log skipped entries and other diagnostics to stderr.",
    )

    return parser


def build_config(args: argparse.Namespace) -> TreeConfig:
    """Turn parsed arguments into a validated configuration.

    Args:
        args: Parsed command-line arguments.

    Returns:
        The configuration for the tree walk.

    Raises:
        RootNotFoundError: If the path does not exist.
        ConfigurationError: If any other argument is invalid.
    """
    return TreeConfig.create(
        args.path,
        exclude=args.exclude,
        only=args.only,
        max_depth=args.depth,
        show_sizes=args.sizes,
        theme=args.theme,
        follow_symlinks=args.follow_symlinks,
    )
