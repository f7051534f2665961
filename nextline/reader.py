"""Reading a file descriptor one line at a time with a fixed read size."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Protocol, Union

from nextline.buffer import extract_line, found_new_line, update_remainder

DEFAULT_BUFFER_SIZE = 5
DEFAULT_MAX_FD = 1024


class _HasFileno(Protocol):
    def fileno(self) -> int: ...


Descriptor = Union[int, _HasFileno]


def _as_fd(fd: Descriptor) -> int:
    return fd if isinstance(fd, int) else fd.fileno()


class LineReader:
    """Returns successive lines from file descriptors.

    Each descriptor keeps its own pending bytes, so several can be read
    in turn without their lines mixing.
    """

    def __init__(
        self,
        buffer_size: int = DEFAULT_BUFFER_SIZE,
        max_fd: int = DEFAULT_MAX_FD,
    ) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        if max_fd <= 0:
            raise ValueError(f"max_fd must be positive, got {max_fd}")
        self.buffer_size = buffer_size
        self.max_fd = max_fd
        self._pending: dict[int, bytes] = {}

    def _fill(self, fd: int, remainder: bytes | None) -> bytes | None:
        while not found_new_line(remainder):
            try:
                chunk = os.read(fd, self.buffer_size)
            except OSError:
                break
            if not chunk:
                break
            # A chunk is taken only up to its first NUL byte.
            chunk = chunk.split(b"\0", 1)[0]
            remainder = (remainder or b"") + chunk
        return remainder

    def read_line(self, fd: Descriptor) -> bytes | None:
        """Return the next line from fd, newline included, or None at the end."""
        number = _as_fd(fd)
        if not 0 <= number < self.max_fd:
            raise ValueError(f"file descriptor out of range: {number}")
        remainder = self._fill(number, self._pending.pop(number, None))
        line = extract_line(remainder)
        if line is None:
            return None
        rest = update_remainder(remainder)
        if rest is not None:
            self._pending[number] = rest
        return line

    def lines(self, fd: Descriptor) -> Iterator[bytes]:
        """Yield lines from fd until there are no more."""
        while (line := self.read_line(fd)) is not None:
            yield line


_default_reader = LineReader()


def get_next_line(fd: Descriptor) -> bytes | None:
    """Return the next line from fd using a shared reader, or None at the end."""
    return _default_reader.read_line(fd)