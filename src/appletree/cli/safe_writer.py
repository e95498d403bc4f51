"""Signal-aware output for the appletree CLI."""

import errno
import os
import types
from pathlib import Path
from typing import Optional, Type, Union

from appletree.cli.signal_handler import signal_handler


class SafeWriter:
    """Writes rendered lines to a file descriptor or a file.

    Writes stop with BrokenPipeError as soon as SIGPIPE or SIGINT has been
    received, or when the reader side of a pipe has gone away, so the caller can
    stop walking the tree instead of rendering lines nobody reads.

    Attributes:
        file: The file descriptor or path given at construction.
        fd: The file descriptor being written to.

    Example:
        >>> with SafeWriter(Path("tree.txt")) as writer:  # doctest: +SKIP
        ...     writer.write("project/\\n")
    """

    def __init__(self, file: Union[int, str, "os.PathLike[str]"]):
        """Initialize the writer.

        Args:
            file: An open file descriptor (e.g. ``sys.stdout.fileno()``), or the
                path of a file to create or truncate.

        Raises:
            TypeError: If file is neither a descriptor nor a path.
        """
        self.file = file
        self._closed = False

        if isinstance(file, int):
            self.fd = file
            self._file_obj = None
        elif isinstance(file, (str, os.PathLike)):
            self._file_obj = Path(file).open("w", encoding="utf-8")
            self.fd = self._file_obj.fileno()
        else:
            raise TypeError(f"Expected int, str, or PathLike, got {type(file).__name__}")

    def isatty(self) -> bool:
        """Whether output goes to a terminal."""
        if self._closed:
            return False
        return os.isatty(self.fd)

    def write(self, data: str) -> None:
        """Write text encoded as UTF-8.

        Raises:
            BrokenPipeError: If a signal was received or the pipe is broken.
            OSError: If another I/O error occurs.
            ValueError: If the writer has been closed.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        if signal_handler.interrupted():
            raise BrokenPipeError()

        payload = data.encode("utf-8")
        try:
            # os.write may write fewer bytes than requested
            while payload:
                written = os.write(self.fd, payload)
                payload = payload[written:]
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError()
            raise

    def close(self) -> None:
        """Close the file if this writer opened it.

        The writer counts as closed even if closing fails with a broken pipe.
        """
        if self._closed:
            return

        if self._file_obj is not None:
            try:
                self._file_obj.close()
            except OSError as e:
                if e.errno != errno.EPIPE:
                    raise

        self._closed = True

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        """Close the writer, letting an exception from the with block take priority
        over one raised while closing."""
        try:
            self.close()
        except OSError:
            if exc_type is None:
                raise
