"""Unit tests for the SafeWriter class."""

import errno
import os
from unittest.mock import patch

import pytest

from appletree.cli.safe_writer import SafeWriter


@pytest.fixture
def mock_signals():
    """Patch the signal handler seen by the writer."""
    with patch("appletree.cli.safe_writer.signal_handler") as mock:
        mock.interrupted.return_value = False
        yield mock


def test_safe_writer_init_with_fd():
    writer = SafeWriter(3)
    assert writer.file == 3
    assert writer.fd == 3
    assert writer._file_obj is None
    assert not writer._closed


def test_safe_writer_init_with_invalid_type():
    with pytest.raises(TypeError, match="Expected int, str, or PathLike"):
        SafeWriter(1.5)  # type: ignore


def test_safe_writer_writes_utf8_to_path(tmp_path, mock_signals):
    target = tmp_path / "tree.txt"
    with SafeWriter(target) as writer:
        assert not writer.isatty()
        writer.write("project/\n")
        writer.write("└── naïve.txt\n")

    assert writer._closed
    assert target.read_text(encoding="utf-8") == "project/\n└── naïve.txt\n"


def test_safe_writer_accepts_string_path(tmp_path, mock_signals):
    target = tmp_path / "tree.txt"
    with SafeWriter(str(target)) as writer:
        writer.write("x\n")
    assert target.read_text(encoding="utf-8") == "x\n"


def test_safe_writer_handles_partial_writes(mock_signals):
    writes = []

    def partial_write(fd, payload):
        writes.append(bytes(payload))
        return min(len(payload), 2)

    with patch("appletree.cli.safe_writer.os.write", side_effect=partial_write):
        SafeWriter(5).write("abcde")

    assert writes == [b"abcde", b"cde", b"e"]


def test_safe_writer_write_after_close(tmp_path, mock_signals):
    writer = SafeWriter(tmp_path / "tree.txt")
    writer.close()
    writer.close()  # closing twice is harmless
    with pytest.raises(ValueError, match="closed SafeWriter"):
        writer.write("x")


def test_safe_writer_interrupted(mock_signals):
    mock_signals.interrupted.return_value = True
    with patch("appletree.cli.safe_writer.os.write") as mock_write:
        with pytest.raises(BrokenPipeError):
            SafeWriter(5).write("x")
    mock_write.assert_not_called()


def test_safe_writer_epipe_becomes_broken_pipe(mock_signals):
    error = OSError(errno.EPIPE, os.strerror(errno.EPIPE))
    with patch("appletree.cli.safe_writer.os.write", side_effect=error):
        with pytest.raises(BrokenPipeError):
            SafeWriter(5).write("x")


def test_safe_writer_other_errors_propagate(mock_signals):
    error = OSError(errno.ENOSPC, os.strerror(errno.ENOSPC))
    with patch("appletree.cli.safe_writer.os.write", side_effect=error):
        with pytest.raises(OSError) as exc_info:
            SafeWriter(5).write("x")
    assert exc_info.value.errno == errno.ENOSPC


def test_safe_writer_isatty_for_fd():
    with patch("appletree.cli.safe_writer.os.isatty", return_value=True) as mock_isatty:
        assert SafeWriter(7).isatty()
    mock_isatty.assert_called_once_with(7)
