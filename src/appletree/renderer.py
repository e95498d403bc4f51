"""Line rendering for tree entries.

Each visible entry becomes one line made of the nesting prefix inherited from
its ancestors, a connector glyph, the entry name (directories get a trailing
``/``) and an optional size suffix::

    project/
    ├── src/
    │   ├── main.cpp
    │   └── util/
    └── README.md
"""

from typing import Any, Dict, NamedTuple, Optional

from humanfriendly.terminal import ansi_wrap, terminal_supports_colors

from appletree.types import Theme


class Glyphs(NamedTuple):
    """Connector glyphs for one theme."""

    branch: str
    last_branch: str
    vertical: str
    blank: str


THEME_GLYPHS: Dict[Theme, Glyphs] = {
    Theme.CLASSIC: Glyphs(branch="├── ", last_branch="└── ", vertical="│   ", blank="    "),
    Theme.ROUND: Glyphs(branch="├── ", last_branch="╰── ", vertical="│   ", blank="    "),
}


def connector(is_last: bool, theme: Theme = Theme.CLASSIC) -> str:
    """Glyph drawn in front of an entry name.

    Example:
        >>> connector(False)
        '├── '
        >>> connector(True, Theme.ROUND)
        '╰── '
    """
    glyphs = THEME_GLYPHS[theme]
    return glyphs.last_branch if is_last else glyphs.branch


def continuation(is_last: bool, theme: Theme = Theme.CLASSIC) -> str:
    """Prefix segment handed down to an entry's children.

    Children of a non-last sibling get a vertical bar so the branch keeps
    connecting to the siblings below; children of the last sibling get blank
    indentation.

    Example:
        >>> continuation(False)
        '│   '
        >>> continuation(True)
        '    '
    """
    glyphs = THEME_GLYPHS[theme]
    return glyphs.blank if is_last else glyphs.vertical


class Colorizer:
    """Applies terminal emphasis to rendered names and sizes.

    Directory names are rendered bold and size suffixes in the dimmer white
    foreground. A disabled colorizer returns text unchanged.

    Attributes:
        enabled (bool): Whether ANSI escape sequences are emitted.

    Example:
        >>> Colorizer(enabled=False).directory("src/")
        'src/'
        >>> Colorizer(enabled=True).directory("src/")
        '\\x1b[1msrc/\\x1b[0m'
    """

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled

    @classmethod
    def for_stream(cls, mode: str, stream: Optional[Any]) -> "Colorizer":
        """Create a colorizer for a ``--color`` mode.

        Args:
            mode: One of ``always``, ``never`` or ``auto``.
            stream: Where the output goes (anything with ``isatty()``). ``auto``
                enables colors only when this is a terminal that supports them;
                None disables them.

        Raises:
            ValueError: If mode is unknown.
        """
        if mode == "always":
            return cls(enabled=True)
        if mode == "never":
            return cls(enabled=False)
        if mode == "auto":
            return cls(enabled=stream is not None and terminal_supports_colors(stream))
        raise ValueError(f"Unknown color mode: {mode}")

    def directory(self, text: str) -> str:
        return ansi_wrap(text, bold=True) if self.enabled else text

    def size(self, text: str) -> str:
        if not text or not self.enabled:
            return text
        return ansi_wrap(text, color="white")


_PLAIN = Colorizer(enabled=False)


def _format_name(name: str, is_dir: bool, size_suffix: str, colorizer: Colorizer) -> str:
    label = colorizer.directory(f"{name}/") if is_dir else name
    return label + colorizer.size(size_suffix)


def render_line(
    name: str,
    is_dir: bool,
    is_last: bool,
    prefix: str,
    size_suffix: str = "",
    theme: Theme = Theme.CLASSIC,
    colorizer: Optional[Colorizer] = None,
) -> str:
    """Render one entry line, without a trailing newline.

    Args:
        name: The entry's basename.
        is_dir: Whether the entry is rendered as a directory.
        is_last: Whether the entry is the last visible sibling.
        prefix: Continuation glyphs inherited from the entry's ancestors.
        size_suffix: Optional size annotation, e.g. ``" (1.5 KiB)"``.
        theme: Connector theme.
        colorizer: Optional terminal emphasis.

    Returns:
        The rendered line.

    Example:
        >>> render_line("main.cpp", False, False, "│   ")
        '│   ├── main.cpp'
        >>> render_line("util", True, True, "", " (10 KiB)", Theme.ROUND)
        '╰── util/ (10 KiB)'
    """
    colorizer = colorizer or _PLAIN
    return prefix + connector(is_last, theme) + _format_name(name, is_dir, size_suffix, colorizer)


def render_root_line(name: str, is_dir: bool, size_suffix: str = "", colorizer: Optional[Colorizer] = None) -> str:
    """Render the root line, which has no connector.

    Example:
        >>> render_root_line("project", True, " (2.0 MiB)")
        'project/ (2.0 MiB)'
        >>> render_root_line("/", True)
        '/'
    """
    if is_dir:
        name = name.rstrip("/")
    return _format_name(name, is_dir, size_suffix, colorizer or _PLAIN)
