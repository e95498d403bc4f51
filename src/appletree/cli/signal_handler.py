"""Signal handling for the appletree CLI.

Rendering a large tree into a pipe that closes early (``appletree | head``) or
being interrupted with Ctrl+C must end quietly with the conventional exit code
instead of a traceback. The handlers here only record that a signal arrived;
the writer checks the flags before every write and the CLI turns them into exit
codes once output has stopped.
"""

import atexit
import os
import signal
import sys
from threading import Event
from types import FrameType
from typing import Any, Optional

# SIGPIPE does not exist on Windows
HAS_SIGPIPE = hasattr(signal, "SIGPIPE")


class SignalHandler:
    """Records SIGPIPE and SIGINT so output can stop cleanly.

    Attributes:
        sigpipe_received: Set once the output pipe has been closed by the reader.
        sigint_received: Set once the user has interrupted the program.
        original_sigpipe_handler: SIGPIPE handler in place before installation, or
            None where the platform has no SIGPIPE.
        original_sigint_handler: SIGINT handler in place before installation.
    """

    def __init__(self) -> None:
        self.sigpipe_received = Event()
        self.sigint_received = Event()
        self.original_sigpipe_handler: Any = signal.getsignal(signal.SIGPIPE) if HAS_SIGPIPE else None
        self.original_sigint_handler: Any = signal.getsignal(signal.SIGINT)

    def handle_sigpipe(self, signum: int, frame: Optional[FrameType]) -> None:
        """Flag the closed pipe and restore the previous handler."""
        self.sigpipe_received.set()
        signal.signal(signal.SIGPIPE, self.original_sigpipe_handler)

    def handle_sigint(self, signum: int, frame: Optional[FrameType]) -> None:
        """Flag the interruption and restore the previous handler, so a second
        Ctrl+C terminates immediately."""
        self.sigint_received.set()
        signal.signal(signal.SIGINT, self.original_sigint_handler)

    def interrupted(self) -> bool:
        """Whether either signal has been received."""
        return self.sigpipe_received.is_set() or self.sigint_received.is_set()

    def exit_code(self) -> Optional[int]:
        """Conventional exit code for the received signal, or None.

        Returns:
            141 for SIGPIPE, 130 for SIGINT, None if neither arrived.
        """
        if self.sigpipe_received.is_set():
            return 141
        if self.sigint_received.is_set():
            return 130
        return None


# Create a singleton instance for the application
signal_handler = SignalHandler()


def setup_signal_handling() -> None:
    """Install the SIGPIPE (where available) and SIGINT handlers."""
    if HAS_SIGPIPE:
        signal.signal(signal.SIGPIPE, signal_handler.handle_sigpipe)
    signal.signal(signal.SIGINT, signal_handler.handle_sigint)


def cleanup() -> None:
    """Silence stdout at exit after an interruption.

    Redirecting stdout to the null device keeps the interpreter from reporting
    a broken pipe while it flushes its buffers during shutdown.
    """
    if signal_handler.interrupted():
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())


atexit.register(cleanup)
