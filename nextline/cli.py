"""Command that prints one file, or two files with their lines interleaved."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import BinaryIO

from nextline.reader import DEFAULT_BUFFER_SIZE, LineReader


@contextmanager
def _opened(path: str | os.PathLike[str]) -> Iterator[int]:
    fd = os.open(path, os.O_RDONLY)
    try:
        yield fd
    finally:
        os.close(fd)


def _stdout() -> BinaryIO:
    return sys.stdout.buffer


def _print_file(
    path: str | os.PathLike[str],
    out: BinaryIO,
    buffer_size: int,
) -> None:
    with _opened(path) as fd:
        for line in LineReader(buffer_size).lines(fd):
            out.write(line)


def _print_interleaved(
    first: str | os.PathLike[str],
    second: str | os.PathLike[str],
    out: BinaryIO,
    buffer_size: int,
) -> None:
    reader = LineReader(buffer_size)
    with _opened(first) as fd1, _opened(second) as fd2:
        while True:
            line1 = reader.read_line(fd1)
            if line1 is not None:
                out.write(b"file1: " + line1)
            line2 = reader.read_line(fd2)
            if line2 is not None:
                out.write(b"file2: " + line2)
            if line1 is None and line2 is None:
                break


def print_file(
    path: str | os.PathLike[str],
    out: BinaryIO | None = None,
) -> None:
    """Write every line of the file at path to out."""
    _print_file(path, out if out is not None else _stdout(), DEFAULT_BUFFER_SIZE)


def print_interleaved(
    first: str | os.PathLike[str],
    second: str | os.PathLike[str],
    out: BinaryIO | None = None,
) -> None:
    """Write lines of two files alternately, each tagged with its file."""
    _print_interleaved(
        first, second, out if out is not None else _stdout(), DEFAULT_BUFFER_SIZE
    )


def main(argv: list[str] | None = None) -> int:
    """Print one file, or two files interleaved line by line."""
    parser = argparse.ArgumentParser(
        prog="nextline",
        description="Print files line by line.",
    )
    parser.add_argument("files", nargs="*", default=["tester1.txt"])
    parser.add_argument("--buffer-size", type=int, default=DEFAULT_BUFFER_SIZE)
    args = parser.parse_args(argv)
    if len(args.files) > 2:
        parser.error("at most two files may be given")
    if args.buffer_size <= 0:
        parser.error("--buffer-size must be positive")

    out = _stdout()
    try:
        if len(args.files) == 1:
            try:
                _print_file(args.files[0], out, args.buffer_size)
            except OSError:
                return 0
        else:
            try:
                _print_interleaved(
                    args.files[0], args.files[1], out, args.buffer_size
                )
            except OSError:
                out.write(b"Error opening files")
                return 1
        return 0
    finally:
        out.flush()


if __name__ == "__main__":
    sys.exit(main())