"""Operations on the pending bytes that a line reader keeps between calls."""

from __future__ import annotations

NEWLINE = b"\n"


def found_new_line(remainder: bytes | None) -> bool:
    """Return True if the pending bytes already hold a complete line."""
    return remainder is not None and NEWLINE in remainder


def _line_end(remainder: bytes) -> int:
    """Index just past the first line, newline included if there is one."""
    index = remainder.find(NEWLINE)
    return len(remainder) if index < 0 else index + 1


def extract_line(remainder: bytes | None) -> bytes | None:
    """Return the first line of the pending bytes, or None if there are none.

    The line keeps its trailing newline when it has one.
    """
    if not remainder:
        return None
    return remainder[: _line_end(remainder)]


def update_remainder(remainder: bytes | None) -> bytes | None:
    """Return what is left after the first line, or None if nothing is."""
    if remainder is None:
        return None
    rest = remainder[_line_end(remainder):]
    return rest or None