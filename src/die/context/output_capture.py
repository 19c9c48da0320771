"""Capture of stdout/stderr written by test bodies.

Only Python-level writes (print, sys.stdout.write) are captured. Output that
goes straight to file descriptors 1/2 (subprocesses, C extensions) is not.
"""

from __future__ import annotations

import io
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import TextIO


@dataclass
class OutputBuffer:
    """Captured stdout/stderr for a single test body."""

    stdout: io.StringIO = field(default_factory=io.StringIO)
    stderr: io.StringIO = field(default_factory=io.StringIO)

    def readouterr(self) -> tuple[str, str]:
        """Read and clear captured output."""
        out = self.stdout.getvalue()
        err = self.stderr.getvalue()
        for stream in (self.stdout, self.stderr):
            stream.seek(0)
            stream.truncate()
        return out, err


class _StreamTee(io.TextIOBase):
    """Stands in for sys.stdout/sys.stderr while capture is installed."""

    def __init__(self, owner: SysOutputCapture, original: TextIO, is_stdout: bool) -> None:
        self._owner = owner
        self._original = original
        self._is_stdout = is_stdout

    def write(self, s: str) -> int:
        buf = self._owner.active
        if buf is not None:
            (buf.stdout if self._is_stdout else buf.stderr).write(s)
            if self._owner.swallow:
                return len(s)
        self._original.write(s)
        return len(s)

    def flush(self) -> None:
        self._original.flush()

    @property
    def encoding(self) -> str | None:
        return getattr(self._original, "encoding", "utf-8")

    def fileno(self) -> int:
        return self._original.fileno()

    def isatty(self) -> bool:
        return self._original.isatty()


class SysOutputCapture:
    """Swaps sys.stdout/stderr and routes writes to the active buffer.

    Writes made while no buffer is active go to the original streams.
    """

    def __init__(self, swallow: bool = True) -> None:
        self.swallow = swallow
        self.active: OutputBuffer | None = None
        self._original_stdout: TextIO | None = None
        self._original_stderr: TextIO | None = None

    def install(self) -> None:
        self._original_stdout = sys.stdout
        self._original_stderr = sys.stderr
        sys.stdout = _StreamTee(self, self._original_stdout, is_stdout=True)
        sys.stderr = _StreamTee(self, self._original_stderr, is_stdout=False)

    def uninstall(self) -> None:
        if self._original_stdout is not None:
            sys.stdout = self._original_stdout
        if self._original_stderr is not None:
            sys.stderr = self._original_stderr
        self._original_stdout = None
        self._original_stderr = None

    @contextmanager
    def capture(self) -> Iterator[OutputBuffer]:
        """Route output into a fresh buffer for the duration of the block."""
        buf = OutputBuffer()
        previous = self.active
        self.active = buf
        try:
            yield buf
        finally:
            self.active = previous


@contextmanager
def sys_output_capture(swallow: bool = True) -> Iterator[SysOutputCapture]:
    """Install sys-level capture for the duration of the block.

    Args:
        swallow: If True, captured output is kept out of the real streams.
                 If False, it is captured AND passed through.
    """
    capture = SysOutputCapture(swallow=swallow)
    capture.install()
    try:
        yield capture
    finally:
        capture.uninstall()
